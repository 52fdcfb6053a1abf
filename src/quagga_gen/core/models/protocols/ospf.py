"""OSPF协议配置"""
import ipaddress
from typing import Dict, List, Optional, Tuple

from pydantic import Field, computed_field

from ..base import RecordConfig
from ...types import RouterID


class OspfConfig(RecordConfig):
    """OSPF配置

    networks 以前缀为键，保持插入顺序；area_range 至多一条，与 networks 相互独立。
    """

    router_id: Optional[RouterID] = Field(default=None, description="路由器ID")
    debug: bool = Field(default=False, description="启用 debug ospf")
    networks: Dict[str, int] = Field(default_factory=dict, description="网络前缀 -> 区域")
    interfaces: List[int] = Field(default_factory=list, description="启用的设备编号")
    area_range: Optional[Tuple[int, str]] = Field(default=None, description="(区域, 汇总前缀)")

    @classmethod
    def for_node(cls, node_id: int) -> "OspfConfig":
        return cls()

    def add_network(self, prefix: str, area: int = 0) -> None:
        """宣告网络；同一前缀后写覆盖区域"""
        ipaddress.ip_network(prefix, strict=False)
        self.networks[prefix] = area

    def set_area(self, prefix: str, area: int) -> None:
        """设置区域汇总范围；后写覆盖先写"""
        ipaddress.ip_network(prefix, strict=False)
        self.area_range = (area, prefix)

    def set_router_id(self, router_id: str) -> None:
        self.router_id = router_id

    def enable_debug(self) -> None:
        self.debug = True

    def enable_interface(self, ifindex: int) -> None:
        if ifindex not in self.interfaces:
            self.interfaces.append(ifindex)

    @computed_field
    @property
    def areas(self) -> List[int]:
        """已宣告的区域（去重，保持顺序）"""
        return list(dict.fromkeys(self.networks.values()))
