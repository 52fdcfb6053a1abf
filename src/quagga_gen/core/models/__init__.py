"""
Models 包 - 数据模型

区域切分参数、协议配置记录、节点存储以及拓扑/生成结果模型。
"""

# 基础
from .base import BaseConfig, RecordConfig
from .tiling import AreaTiling

# 协议配置
from .protocols import (
    ZebraConfig, OspfConfig, Ospf6Config, BgpConfig, RipConfig, RipngConfig,
)

# 节点
from .node import Node, ProtocolConfigStore, ProtocolConfig, RECORD_TYPES

# 拓扑与结果
from .topology import Edge, GridTopology, LinkAssignment, DaemonCommand, GenerationResult

__all__ = [
    "BaseConfig",
    "RecordConfig",
    "AreaTiling",
    "ZebraConfig",
    "OspfConfig",
    "Ospf6Config",
    "BgpConfig",
    "RipConfig",
    "RipngConfig",
    "Node",
    "ProtocolConfigStore",
    "ProtocolConfig",
    "RECORD_TYPES",
    "Edge",
    "GridTopology",
    "LinkAssignment",
    "DaemonCommand",
    "GenerationResult",
]
