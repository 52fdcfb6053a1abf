from __future__ import annotations

from pathlib import Path
from typing import Optional, Set

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import (
    ENABLE_DEFAULT_BGP,
    ENABLE_DEFAULT_OSPF,
    ENABLE_DEFAULT_OSPF6,
    ENABLE_DEFAULT_RIP,
    ENABLE_DEFAULT_RIPNG,
    TILING_DEFAULT_AREA_COLS,
    TILING_DEFAULT_AREA_HEIGHT,
    TILING_DEFAULT_AREA_ROWS,
    TILING_DEFAULT_AREA_WIDTH,
    TILING_DEFAULT_STRIPE_WIDTH,
)
from ..core.models import AreaTiling
from ..core.types import AddressScheme, ProtocolKind


class TilingSettings(BaseSettings):
    """区域切分设置"""

    area_height: int = Field(default=TILING_DEFAULT_AREA_HEIGHT, ge=1)
    area_width: int = Field(default=TILING_DEFAULT_AREA_WIDTH, ge=1)
    stripe_width: int = Field(default=TILING_DEFAULT_STRIPE_WIDTH, ge=0)
    area_rows: int = Field(default=TILING_DEFAULT_AREA_ROWS, ge=1)
    area_cols: int = Field(default=TILING_DEFAULT_AREA_COLS, ge=1)

    def to_tiling(self) -> AreaTiling:
        return AreaTiling(**self.model_dump())


class AppSettings(BaseSettings):
    """全局应用设置（可由环境变量/配置文件覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix="QUAGGA_",
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 全局
    verbose: bool = Field(default=False, description="详细日志输出")
    dry_run: bool = Field(default=False, description="仅构建不写文件")
    output_dir: Optional[Path] = Field(default=None, description="输出目录")

    # 拓扑
    tiling: TilingSettings = Field(default_factory=TilingSettings)
    rows: Optional[int] = Field(default=None, ge=1, description="网格行数（默认由切分推导）")
    cols: Optional[int] = Field(default=None, ge=1, description="网格列数（默认由切分推导）")
    scheme: AddressScheme = Field(default=AddressScheme.AREA, description="地址方案")

    # 协议启用
    enable_ospf: bool = Field(default=ENABLE_DEFAULT_OSPF)
    enable_ospf6: bool = Field(default=ENABLE_DEFAULT_OSPF6)
    enable_bgp: bool = Field(default=ENABLE_DEFAULT_BGP)
    enable_rip: bool = Field(default=ENABLE_DEFAULT_RIP)
    enable_ripng: bool = Field(default=ENABLE_DEFAULT_RIPNG)
    debug_protocols: Set[ProtocolKind] = Field(default_factory=set, description="开启 debug 输出的协议")

    @field_validator("debug_protocols", mode="before")
    @classmethod
    def parse_debug_protocols(cls, value):
        """与命令行一致，接受协议名或守护进程名（如 ospf / ospfd），字符串可逗号分隔"""
        if isinstance(value, str):
            value = value.split(",")
        return {
            item if isinstance(item, ProtocolKind) else ProtocolKind.parse(str(item))
            for item in value
            if isinstance(item, ProtocolKind) or str(item).strip()
        }

    # 配置文件（若 CLI 未提供，可通过环境变量指向）
    config_file: Optional[Path] = Field(default=None, description="配置文件路径，可选")

    def grid_size(self) -> tuple[int, int]:
        """网格尺寸：显式指定优先，否则取切分推导的尺寸"""
        tiling = self.tiling.to_tiling()
        return (self.rows or tiling.rows, self.cols or tiling.cols)

    def enabled_protocols(self) -> Set[ProtocolKind]:
        """场景启用的路由协议（zebra 总是启用）"""
        enabled = {ProtocolKind.ZEBRA}
        flags = {
            ProtocolKind.OSPF: self.enable_ospf,
            ProtocolKind.OSPF6: self.enable_ospf6,
            ProtocolKind.BGP: self.enable_bgp,
            ProtocolKind.RIP: self.enable_rip,
            ProtocolKind.RIPNG: self.enable_ripng,
        }
        enabled.update(kind for kind, on in flags.items() if on)
        return enabled


__all__ = ["AppSettings", "TilingSettings"]
