"""区域切分参数模块"""
from __future__ import annotations

from typing import Dict

from pydantic import Field, computed_field

from .base import BaseConfig
from ..types import EdgeClass


class AreaTiling(BaseConfig):
    """区域切分参数

    网格按 (area_height+stripe_width) x (area_width+stripe_width) 的瓦片重复切分，
    每个瓦片左上角 area_height x area_width 的子块属于叶子区域，其余条带属于骨干。
    """

    area_height: int = Field(ge=1, description="区域行高")
    area_width: int = Field(ge=1, description="区域列宽")
    stripe_width: int = Field(default=1, ge=0, description="骨干条带宽度")
    area_rows: int = Field(default=1, ge=1, description="区域行数")
    area_cols: int = Field(default=1, ge=1, description="区域列数")

    @computed_field
    @property
    def tile_height(self) -> int:
        return self.area_height + self.stripe_width

    @computed_field
    @property
    def tile_width(self) -> int:
        return self.area_width + self.stripe_width

    @computed_field
    @property
    def rows(self) -> int:
        """与切分一致的网格行数"""
        return self.tile_height * self.area_rows

    @computed_field
    @property
    def cols(self) -> int:
        """与切分一致的网格列数"""
        return self.tile_width * self.area_cols

    @computed_field
    @property
    def n_area(self) -> int:
        """叶子区域数量"""
        return self.area_rows * self.area_cols

    @computed_field
    @property
    def area_size(self) -> int:
        return self.area_height * self.area_width

    @property
    def n_nodes(self) -> int:
        return self.rows * self.cols

    @property
    def intra_per_area(self) -> int:
        return 2 * self.area_size - (self.area_height + self.area_width)

    @property
    def border_per_area(self) -> int:
        return 2 * (self.area_height + self.area_width)

    def matches(self, rows: int, cols: int) -> bool:
        """网格尺寸是否与切分一致"""
        return rows == self.rows and cols == self.cols

    def expected_edge_counts(self) -> Dict[EdgeClass, int]:
        """闭式计算各类边数量

        stripe_width 为 0 时不存在骨干节点，区域首尾相接，所有边都是区域内边。
        """
        total = 2 * self.n_nodes
        if self.stripe_width == 0:
            return {EdgeClass.INTRA: total, EdgeClass.INTER: 0, EdgeClass.BORDER: 0}

        intra = self.intra_per_area * self.n_area
        border = self.border_per_area * self.n_area
        return {
            EdgeClass.INTRA: intra,
            EdgeClass.INTER: total - intra - border,
            EdgeClass.BORDER: border,
        }

    @classmethod
    def single_area(cls, rows: int, cols: int) -> AreaTiling:
        """整个网格作为单一区域"""
        return cls(area_height=rows, area_width=cols, stripe_width=0, area_rows=1, area_cols=1)
