"""BGP协议配置"""
import ipaddress
from typing import Dict, List

from pydantic import Field, computed_field

from ..base import RecordConfig
from ...types import ASNumber, RouterID


class BgpConfig(RecordConfig):
    """BGP配置

    neighbors 保持插入顺序（地址 -> 对端AS号）；peer_links 为需要出向过滤的邻居子集。
    """

    asn: ASNumber = Field(description="AS号")
    router_id: RouterID = Field(description="路由器ID")
    neighbors: Dict[str, int] = Field(default_factory=dict, description="邻居地址 -> 对端AS号")
    peer_links: List[str] = Field(default_factory=list, description="需要 route-map 过滤的邻居")
    networks: List[str] = Field(default_factory=list, description="宣告的网络前缀")
    default_originate: bool = Field(default=False, description="向邻居下发默认路由")

    @classmethod
    def for_node(cls, node_id: int) -> "BgpConfig":
        """AS号为节点ID+1，路由器ID为 192.168.0.<AS号>"""
        asn = node_id + 1
        return cls(asn=asn, router_id=f"192.168.0.{asn}")

    def add_neighbor(self, address: str, asn: int) -> None:
        """添加邻居；同一地址再次添加时更新AS号"""
        self.neighbors[address] = asn

    def add_peer_link(self, address: str) -> None:
        if address not in self.peer_links:
            self.peer_links.append(address)

    def add_network(self, prefix: str) -> None:
        if prefix not in self.networks:
            self.networks.append(prefix)

    def enable_default_originate(self) -> None:
        self.default_originate = True

    @computed_field
    @property
    def access_list_name(self) -> str:
        return f"ALIST-{self.router_id}"

    def route_map_name(self, peer: str) -> str:
        return f"MAP-{self.router_id}-{peer}"

    def ipv4_neighbors(self) -> List[str]:
        """可解析为 IPv4 地址的邻居"""
        return [n for n in self.neighbors if _parses_as(ipaddress.IPv4Address, n)]

    def ipv6_neighbors(self) -> List[str]:
        """可解析为 IPv6 地址的邻居"""
        return [n for n in self.neighbors if _parses_as(ipaddress.IPv6Address, n)]


def _parses_as(address_type, literal: str) -> bool:
    try:
        address_type(literal)
    except ValueError:
        return False
    return True
