"""
核心模块初始化
导出主要的类型和模型
"""

from .types import (
    ProtocolKind, EdgeClass, AddressScheme, Success, Failure, Result,
)
from .errors import TopologyInvariantError, AreaAdjacencyError, AddressSpaceError
from .models import (
    AreaTiling, Node, ProtocolConfigStore, Edge, GridTopology, LinkAssignment,
    ZebraConfig, OspfConfig, Ospf6Config, BgpConfig, RipConfig, RipngConfig,
)

__all__ = [
    # 类型
    'ProtocolKind', 'EdgeClass', 'AddressScheme', 'Success', 'Failure', 'Result',
    # 异常
    'TopologyInvariantError', 'AreaAdjacencyError', 'AddressSpaceError',
    # 模型
    'AreaTiling', 'Node', 'ProtocolConfigStore', 'Edge', 'GridTopology', 'LinkAssignment',
    'ZebraConfig', 'OspfConfig', 'Ospf6Config', 'BgpConfig', 'RipConfig', 'RipngConfig',
]
