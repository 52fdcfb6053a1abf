"""
区域分类
根据切分参数计算节点所属区域，并对相邻节点之间的边分类
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from ..core.errors import AreaAdjacencyError
from ..core.models import AreaTiling
from ..core.types import EdgeClass

BACKBONE_AREA = 0


@lru_cache(maxsize=4096)
def area_id(tiling: AreaTiling, row: int, col: int) -> int:
    """计算 (row, col) 所在区域

    位于骨干条带内返回 0，否则返回 1 开始、按行优先编号的区域号。
    row/col 需由调用方限制在网格范围内。
    """
    ax, axr = divmod(row, tiling.tile_height)
    ay, ayr = divmod(col, tiling.tile_width)
    if axr >= tiling.area_height or ayr >= tiling.area_width:
        return BACKBONE_AREA
    return 1 + ax * tiling.area_cols + ay


def node_area_id(tiling: AreaTiling, node_id: int, cols: int) -> int:
    """按节点ID计算区域（行优先编号）"""
    row, col = divmod(node_id, cols)
    return area_id(tiling, row, col)


def is_backbone(tiling: AreaTiling, row: int, col: int) -> bool:
    return area_id(tiling, row, col) == BACKBONE_AREA


def classify_edge(tiling: AreaTiling, id_a: int, id_b: int, cols: int) -> Tuple[EdgeClass, int, int]:
    """对边分类并返回规范方向 (分类, 第一个端点, 第二个端点)

    - 两端都在叶子区域：Intra
    - 恰有一端为骨干：Border，叶子区域一端在前
    - 两端都是骨干：Inter

    条带宽度大于 0 时不同叶子区域不可能相邻，出现即说明网格尺寸与切分不一致。
    条带宽度为 0 时区域首尾相接，跨区域的边按 Intra 处理。
    """
    area_a = node_area_id(tiling, id_a, cols)
    area_b = node_area_id(tiling, id_b, cols)

    if area_a and area_b:
        if area_a != area_b and tiling.stripe_width > 0:
            raise AreaAdjacencyError(id_a, area_a, id_b, area_b)
        return EdgeClass.INTRA, id_a, id_b
    if area_a:
        return EdgeClass.BORDER, id_a, id_b
    if area_b:
        return EdgeClass.BORDER, id_b, id_a
    return EdgeClass.INTER, id_a, id_b
