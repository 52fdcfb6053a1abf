"""
协议启用接口
在节点集合上批量创建/修改协议配置记录，所有记录都经由节点的 ProtocolConfigStore 获取
"""

from __future__ import annotations

from typing import Iterable, Union

from .core.models import (
    BgpConfig, Node, OspfConfig, Ospf6Config, RipConfig, RipngConfig, ZebraConfig,
)
from .core.types import ProtocolKind

Nodes = Union[Node, Iterable[Node]]


def _as_nodes(nodes: Nodes) -> Iterable[Node]:
    if isinstance(nodes, Node):
        return (nodes,)
    return nodes


class QuaggaHelper:
    """在节点上启用 Quagga 各协议

    安装节点时总会创建 zebra 记录；其余协议在首次启用时按节点ID创建默认记录。
    """

    # 安装
    def install(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            node.get_or_create(ProtocolKind.ZEBRA)

    # Zebra
    def enable_zebra_debug(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._zebra(node).enable_debug()

    def enable_radvd(self, node: Node, ifname: str, prefix: str = "") -> None:
        self._zebra(node).enable_radvd(ifname, prefix)

    def enable_home_agent_flag(self, node: Node, ifname: str) -> None:
        self._zebra(node).enable_home_agent_flag(ifname)

    def use_manual_zebra_config(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._zebra(node).use_manual_config()

    # OSPF
    def enable_ospf(self, nodes: Nodes, network: str) -> None:
        """在骨干区域宣告网络"""
        self.enable_ospf_area(nodes, network, 0)

    def enable_ospf_area(self, nodes: Nodes, network: str, area: int) -> None:
        for node in _as_nodes(nodes):
            self._ospf(node).add_network(network, area)

    def set_area(self, nodes: Nodes, network: str, area: int) -> None:
        for node in _as_nodes(nodes):
            self._ospf(node).set_area(network, area)

    def set_ospf_router_id(self, node: Node, router_id: str) -> None:
        self._ospf(node).set_router_id(router_id)

    def enable_ospf_interface(self, node: Node, ifindex: int) -> None:
        self._ospf(node).enable_interface(ifindex)

    def enable_ospf_debug(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._ospf(node).enable_debug()

    # OSPF6
    def enable_ospf6(self, nodes: Nodes, ifname: str) -> None:
        for node in _as_nodes(nodes):
            self._ospf6(node).enable_interface(ifname)

    def enable_ospf6_debug(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._ospf6(node).enable_debug()

    # RIP / RIPng
    def enable_rip(self, nodes: Nodes, network: str) -> None:
        for node in _as_nodes(nodes):
            self._rip(node).enable_network(network)

    def enable_rip_debug(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._rip(node).enable_debug()

    def enable_ripng(self, nodes: Nodes, network: str) -> None:
        for node in _as_nodes(nodes):
            self._ripng(node).enable_network(network)

    def enable_ripng_debug(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._ripng(node).enable_debug()

    # BGP
    def enable_bgp(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._bgp(node)

    def get_asn(self, node: Node) -> int:
        """节点的 AS 号，未启用 BGP 时返回 0"""
        record = node.configs.get(ProtocolKind.BGP)
        return record.asn if record is not None else 0

    def bgp_add_neighbor(self, node: Node, address: str, asn: int) -> None:
        self._bgp(node).add_neighbor(address, asn)

    def bgp_add_peer_link(self, node: Node, address: str) -> None:
        self._bgp(node).add_peer_link(address)

    def bgp_add_network(self, node: Node, prefix: str) -> None:
        self._bgp(node).add_network(prefix)

    def bgp_default_originate(self, nodes: Nodes) -> None:
        for node in _as_nodes(nodes):
            self._bgp(node).enable_default_originate()

    # 类型化获取
    @staticmethod
    def _zebra(node: Node) -> ZebraConfig:
        return node.configs.zebra

    @staticmethod
    def _ospf(node: Node) -> OspfConfig:
        return node.configs.ospf

    @staticmethod
    def _ospf6(node: Node) -> Ospf6Config:
        return node.configs.ospf6

    @staticmethod
    def _rip(node: Node) -> RipConfig:
        return node.configs.rip

    @staticmethod
    def _ripng(node: Node) -> RipngConfig:
        return node.configs.ripng

    @staticmethod
    def _bgp(node: Node) -> BgpConfig:
        return node.configs.bgp
