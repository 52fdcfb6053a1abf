"""Zebra 基础配置"""
from typing import Dict, List

from pydantic import Field

from ..base import RecordConfig


class ZebraConfig(RecordConfig):
    """Zebra配置"""

    debug: bool = Field(default=False, description="启用 debug zebra")
    radvd: Dict[str, str] = Field(default_factory=dict, description="接口 -> 路由通告前缀")
    home_agent_interfaces: List[str] = Field(default_factory=list, description="启用 home-agent 标志的接口")
    manual: bool = Field(default=False, description="使用手工维护的 zebra.conf")

    @classmethod
    def for_node(cls, node_id: int) -> "ZebraConfig":
        return cls()

    def enable_debug(self) -> None:
        self.debug = True

    def enable_radvd(self, ifname: str, prefix: str = "") -> None:
        """为接口开启路由通告；同一接口再次开启时覆盖前缀"""
        self.radvd[ifname] = prefix

    def enable_home_agent_flag(self, ifname: str) -> None:
        if ifname not in self.home_agent_interfaces:
            self.home_agent_interfaces.append(ifname)

    def use_manual_config(self) -> None:
        self.manual = True
