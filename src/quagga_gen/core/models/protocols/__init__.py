"""协议配置包"""
from .zebra import ZebraConfig
from .ospf import OspfConfig
from .ospf6 import Ospf6Config
from .bgp import BgpConfig
from .rip import RipConfig, RipngConfig

__all__ = [
    "ZebraConfig",
    "OspfConfig",
    "Ospf6Config",
    "BgpConfig",
    "RipConfig",
    "RipngConfig",
]
