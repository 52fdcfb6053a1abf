"""
网格构建测试
验证分桶边数、链路ID顺序、接口编号以及边数校验
"""

import pytest

from quagga_gen.core.errors import AreaAdjacencyError, TopologyInvariantError
from quagga_gen.core.models import AreaTiling
from quagga_gen.core.types import EdgeClass
from quagga_gen.topology.area import node_area_id
from quagga_gen.topology.grid import (
    build_grid, calculate_grid_stats, grid_neighbors, validate_edge_counts,
)


def default_tiling() -> AreaTiling:
    return AreaTiling(area_height=2, area_width=2, stripe_width=1, area_rows=2, area_cols=2)


def test_grid_neighbors_wrap():
    """测试东向和南向邻居都环绕"""
    assert grid_neighbors(0, 6, 6) == (1, 6)
    assert grid_neighbors(5, 6, 6) == (0, 11)
    assert grid_neighbors(35, 6, 6) == (30, 5)


def test_default_tiling_edge_counts():
    """测试 6x6 默认切分的各类边数量"""
    tiling = default_tiling()
    topology = build_grid(6, 6, tiling)

    assert topology.edge_counts == {
        EdgeClass.INTRA: 16,
        EdgeClass.INTER: 24,
        EdgeClass.BORDER: 32,
    }
    assert tiling.expected_edge_counts() == topology.edge_counts
    assert topology.total_edges == 2 * 6 * 6
    validate_edge_counts(topology)


@pytest.mark.parametrize(
    "tiling",
    [
        AreaTiling(area_height=2, area_width=2, stripe_width=1, area_rows=2, area_cols=2),
        AreaTiling(area_height=3, area_width=2, stripe_width=1, area_rows=2, area_cols=3),
        AreaTiling(area_height=2, area_width=3, stripe_width=2, area_rows=1, area_cols=2),
        AreaTiling(area_height=4, area_width=4, stripe_width=1, area_rows=3, area_cols=3),
    ],
)
def test_total_edges_matches_closed_form(tiling):
    """测试各种合法切分下总边数为 2*rows*cols 且各桶与闭式计数一致"""
    topology = build_grid(tiling.rows, tiling.cols, tiling)
    assert topology.total_edges == 2 * tiling.rows * tiling.cols
    assert topology.edge_counts == tiling.expected_edge_counts()
    validate_edge_counts(topology)


def test_stripe_zero_4x4_all_intra():
    """测试 4x4 网格、2x2 区域、条带宽度 0：4 个区域，无骨干节点，所有边都是 Intra"""
    tiling = AreaTiling(area_height=2, area_width=2, stripe_width=0, area_rows=2, area_cols=2)
    topology = build_grid(4, 4, tiling)

    assert tiling.n_area == 4
    assert all(node_area_id(tiling, node.id, 4) != 0 for node in topology.nodes)
    assert len(topology.intra_edges) == 32
    assert len(topology.inter_edges) == 0
    assert len(topology.border_edges) == 0
    validate_edge_counts(topology)


def test_link_ids_follow_creation_order():
    """测试每个桶内链路ID从 0 连续递增，全局序号覆盖所有边"""
    topology = build_grid(6, 6, default_tiling())
    for cls in EdgeClass:
        bucket = topology.bucket(cls)
        assert [edge.link_id for edge in bucket] == list(range(len(bucket)))
        sequences = [edge.sequence for edge in bucket]
        assert sequences == sorted(sequences)
    assert [edge.sequence for edge in topology.edges] == list(range(72))


def test_border_edges_put_area_node_first():
    """测试边界边叶子区域节点在前"""
    tiling = default_tiling()
    topology = build_grid(6, 6, tiling)
    for edge in topology.border_edges:
        assert node_area_id(tiling, edge.node_a, 6) != 0
        assert node_area_id(tiling, edge.node_b, 6) == 0


def test_build_is_deterministic():
    """测试相同输入构建结果一致"""
    first = build_grid(6, 6, default_tiling())
    second = build_grid(6, 6, default_tiling())
    assert [e.model_dump() for e in first.edges] == [e.model_dump() for e in second.edges]


def test_interface_numbering():
    """测试每个节点的接口按边创建顺序编号 sim0..sim3"""
    topology = build_grid(6, 6, default_tiling())

    first, second = topology.edges[0], topology.edges[1]
    assert (first.node_a, first.node_b) == (0, 1)
    assert (first.ifname_a, first.ifname_b) == ("sim0", "sim0")
    assert (second.node_a, second.node_b) == (0, 6)
    assert (second.ifname_a, second.ifname_b) == ("sim1", "sim0")

    ifnames = {node.id: [] for node in topology.nodes}
    for edge in topology.edges:
        ifnames[edge.node_a].append(edge.ifname_a)
        ifnames[edge.node_b].append(edge.ifname_b)
    for node_id, names in ifnames.items():
        assert sorted(names) == ["sim0", "sim1", "sim2", "sim3"], f"节点 {node_id} 接口编号错误"


def test_missing_tiling_is_single_area():
    """测试不指定切分时整个网格为单一区域"""
    topology = build_grid(3, 5)
    assert topology.tiling.n_area == 1
    assert len(topology.intra_edges) == 30
    validate_edge_counts(topology)


def test_validate_detects_mismatch():
    """测试桶大小与闭式计数不一致时校验失败"""
    topology = build_grid(6, 6, default_tiling())
    topology.intra_edges.pop()
    with pytest.raises(TopologyInvariantError):
        validate_edge_counts(topology)


def test_mismatched_grid_dims_raise():
    """测试网格尺寸与切分不一致时不同区域相邻会报错"""
    with pytest.raises(AreaAdjacencyError):
        build_grid(4, 4, default_tiling())


def test_invalid_grid_size():
    """测试非法网格尺寸"""
    with pytest.raises(ValueError):
        build_grid(0, 3)


def test_grid_stats():
    """测试网格统计信息"""
    stats = calculate_grid_stats(build_grid(6, 6, default_tiling()))
    assert stats["total_nodes"] == 36
    assert stats["total_links"] == 72
    assert stats["backbone_nodes"] == 20
    assert stats["n_area"] == 4
