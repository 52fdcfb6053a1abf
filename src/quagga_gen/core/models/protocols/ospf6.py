"""OSPF6协议配置"""
from typing import List

from pydantic import Field, computed_field

from ..base import RecordConfig


class Ospf6Config(RecordConfig):
    """OSPF6配置"""

    router_id: int = Field(default=0, ge=0, description="路由器编号（取自节点ID）")
    debug: bool = Field(default=False, description="启用 debug ospf6")
    interfaces: List[str] = Field(default_factory=list, description="启用的接口")

    @classmethod
    def for_node(cls, node_id: int) -> "Ospf6Config":
        return cls(router_id=node_id)

    def enable_interface(self, ifname: str) -> None:
        if ifname not in self.interfaces:
            self.interfaces.append(ifname)

    def enable_debug(self) -> None:
        self.debug = True

    @computed_field
    @property
    def router_id_address(self) -> str:
        """渲染用的 router-id"""
        return f"255.1.1.{self.router_id % 255}"
