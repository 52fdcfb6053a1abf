"""
链路地址分配模块
由链路ID确定性地生成 /30 地址对，并为整个网格生成地址分配方案
"""

from __future__ import annotations

from typing import List, NamedTuple
import ipaddress

from .core.errors import AddressSpaceError
from .core.models import GridTopology, LinkAssignment, Node
from .core.types import AddressScheme
from .topology.area import area_id

# 10.0.0.0/8
BASE_NETWORK = int(ipaddress.IPv4Address("10.0.0.0"))
LINK_PREFIX_LEN = 30

RAW_LINK_LIMIT = 1 << 22  # 24 位主机空间，每条链路占 4 个地址
AREA_LINK_LIMIT = 1 << 14  # 16 位主机空间
AREA_LIMIT = 256


class AddressPair(NamedTuple):
    """同一 /30 网段中的两个主机地址（带前缀长度）"""
    first: str
    second: str

    @property
    def network(self) -> str:
        return str(ipaddress.ip_interface(self.first).network)


def _format(value: int) -> str:
    return f"{ipaddress.IPv4Address(value)}/{LINK_PREFIX_LEN}"


def raw_pair(link_id: int) -> AddressPair:
    """平面编址：10.B2.B1.B0/30，base = link_id*4 + 1"""
    if not 0 <= link_id < RAW_LINK_LIMIT:
        raise AddressSpaceError(f"链路ID超出范围 [0, {RAW_LINK_LIMIT}): {link_id}")
    base = BASE_NETWORK + link_id * 4 + 1
    return AddressPair(_format(base), _format(base + 1))


def area_pair(area: int, link_id: int) -> AddressPair:
    """区域编址：第二字节固定为区域号，10.<area>.B1.B0/30"""
    if not 0 <= area < AREA_LIMIT:
        raise AddressSpaceError(f"区域号超出范围 [0, {AREA_LIMIT}): {area}")
    if not 0 <= link_id < AREA_LINK_LIMIT:
        raise AddressSpaceError(f"链路ID超出范围 [0, {AREA_LINK_LIMIT}): {link_id}")
    base = BASE_NETWORK + (area << 16) + link_id * 4 + 1
    return AddressPair(_format(base), _format(base + 1))


def area_network(area: int) -> str:
    """区域的 /16 汇总网段"""
    if not 0 <= area < AREA_LIMIT:
        raise AddressSpaceError(f"区域号超出范围 [0, {AREA_LIMIT}): {area}")
    return f"10.{area}.0.0/16"


def assign_area_addresses(topology: GridTopology) -> List[LinkAssignment]:
    """区域分层编址

    - Intra 链路 i 使用所在区域：area_pair(area, i)
    - Inter 链路 i 使用骨干：area_pair(0, i)
    - Border 链路 i 接续骨干链路ID：area_pair(0, n_inter + i)
    """
    assignments: List[LinkAssignment] = []
    n_inter = len(topology.inter_edges)

    for edge in topology.intra_edges:
        node = topology.node(edge.node_a)
        area = area_id(topology.tiling, node.row, node.col)
        assignments.append(_assign(edge, AddressScheme.AREA, area, edge.link_id))

    for edge in topology.inter_edges:
        assignments.append(_assign(edge, AddressScheme.AREA, 0, edge.link_id))

    for edge in topology.border_edges:
        assignments.append(_assign(edge, AddressScheme.AREA, 0, n_inter + edge.link_id))

    return assignments


def assign_flat_addresses(topology: GridTopology) -> List[LinkAssignment]:
    """平面编址：按全局创建顺序使用 raw_pair"""
    assignments = [
        _assign(edge, AddressScheme.FLAT, None, edge.sequence)
        for edge in topology.edges
    ]
    return assignments


def assign_addresses(topology: GridTopology, scheme: AddressScheme) -> List[LinkAssignment]:
    """按方案分配地址"""
    if AddressScheme(scheme) == AddressScheme.AREA:
        return assign_area_addresses(topology)
    return assign_flat_addresses(topology)


def _assign(edge, scheme: AddressScheme, area, key: int) -> LinkAssignment:
    pair = area_pair(area, key) if scheme == AddressScheme.AREA else raw_pair(key)
    return LinkAssignment(
        edge=edge,
        scheme=scheme,
        area=area,
        address_key=key,
        address_a=pair.first,
        address_b=pair.second,
    )


def node_links(node: Node, assignments: List[LinkAssignment]) -> List[LinkAssignment]:
    """节点参与的链路，按接口编号排序"""
    links = [a for a in assignments if node.id in a.edge.endpoints]
    return sorted(links, key=lambda a: _ifindex_of(a, node.id))


def _ifindex_of(assignment: LinkAssignment, node_id: int) -> int:
    edge = assignment.edge
    return edge.ifindex_a if node_id == edge.node_a else edge.ifindex_b
