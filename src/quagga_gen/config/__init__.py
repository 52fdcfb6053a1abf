"""配置模块"""

from .settings import AppSettings, TilingSettings

__all__ = ["AppSettings", "TilingSettings"]
