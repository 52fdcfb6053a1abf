"""
拓扑模块初始化
导出区域分类和网格构建函数
"""

from .area import BACKBONE_AREA, area_id, node_area_id, is_backbone, classify_edge
from .grid import build_grid, validate_edge_counts, grid_neighbors, calculate_grid_stats

__all__ = [
    # 区域分类
    'BACKBONE_AREA', 'area_id', 'node_area_id', 'is_backbone', 'classify_edge',

    # 网格构建
    'build_grid', 'validate_edge_counts', 'grid_neighbors', 'calculate_grid_stats',
]
