"""
环形网格构建
行优先遍历网格，为每个节点生成东向和南向两条候选边（两个方向都环绕），
分类后按创建顺序放入 intra / inter / border 三个桶
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..core.errors import TopologyInvariantError
from ..core.models import AreaTiling, Edge, GridTopology, Node
from ..core.types import EdgeClass
from ..utils.logging import get_logger
from .area import area_id, classify_edge

logger = get_logger(__name__)


def grid_neighbors(node_id: int, rows: int, cols: int) -> Tuple[int, int]:
    """东向和南向邻居（环绕）"""
    row, col = divmod(node_id, cols)
    east = row * cols + (col + 1) % cols
    south = ((row + 1) % rows) * cols + col
    return east, south


def build_grid(rows: int, cols: int, tiling: Optional[AreaTiling] = None) -> GridTopology:
    """构建环形网格并对边分类

    链路ID和接口编号都由本次构建显式计数，相同输入总是得到相同结果。
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"网格尺寸必须为正: {rows}x{cols}")
    if tiling is None:
        tiling = AreaTiling.single_area(rows, cols)

    nodes = [Node(node_id, cols) for node_id in range(rows * cols)]
    topology = GridTopology(rows=rows, cols=cols, tiling=tiling, nodes=nodes)

    next_link_id: Dict[EdgeClass, int] = {cls: 0 for cls in EdgeClass}
    if_counts: List[int] = [0] * len(nodes)
    sequence = 0

    for node in nodes:
        for neighbor in grid_neighbors(node.id, rows, cols):
            edge_class, first, second = classify_edge(tiling, node.id, neighbor, cols)
            ifindex_a = if_counts[first]
            if_counts[first] += 1
            ifindex_b = if_counts[second]
            if_counts[second] += 1
            edge = Edge(
                node_a=first,
                node_b=second,
                edge_class=edge_class,
                link_id=next_link_id[edge_class],
                sequence=sequence,
                ifindex_a=ifindex_a,
                ifindex_b=ifindex_b,
            )
            next_link_id[edge_class] += 1
            sequence += 1
            topology.bucket(edge_class).append(edge)

    logger.debug(
        "grid_built",
        rows=rows,
        cols=cols,
        intra=len(topology.intra_edges),
        inter=len(topology.inter_edges),
        border=len(topology.border_edges),
    )
    return topology


def validate_edge_counts(topology: GridTopology) -> None:
    """校验各桶边数与切分参数的闭式计数一致，不一致时抛出 TopologyInvariantError"""
    expected = topology.tiling.expected_edge_counts()
    actual = topology.edge_counts

    errors = [
        f"{cls.value} 边数量不匹配: 期望{expected[cls]}, 实际{actual[cls]}"
        for cls in EdgeClass
        if expected[cls] != actual[cls]
    ]
    if topology.total_edges != 2 * topology.rows * topology.cols:
        errors.append(f"总边数不等于 2*rows*cols: {topology.total_edges}")

    if errors:
        logger.error("edge_count_mismatch", errors=errors)
        raise TopologyInvariantError("; ".join(errors))

    logger.info(
        "edge_counts_validated",
        intra=actual[EdgeClass.INTRA],
        inter=actual[EdgeClass.INTER],
        border=actual[EdgeClass.BORDER],
    )


def calculate_grid_stats(topology: GridTopology) -> Dict[str, int]:
    """网格统计信息"""
    areas = [area_id(topology.tiling, node.row, node.col) for node in topology.nodes]
    return {
        "total_nodes": len(topology.nodes),
        "total_links": topology.total_edges,
        "intra_links": len(topology.intra_edges),
        "inter_links": len(topology.inter_edges),
        "border_links": len(topology.border_edges),
        "backbone_nodes": areas.count(0),
        "n_area": topology.tiling.n_area,
    }
