"""
Quagga Config Generator Package

Partitions a wrapped grid into OSPF areas, allocates /30 link addresses and
renders per-node Quagga daemon configuration files.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .core.types import ProtocolKind, EdgeClass, AddressScheme
from .core.models import AreaTiling, Node, ProtocolConfigStore

__all__ = [
    "ProtocolKind",
    "EdgeClass",
    "AddressScheme",
    "AreaTiling",
    "Node",
    "ProtocolConfigStore",
]
