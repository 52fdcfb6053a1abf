"""RIP / RIPng 协议配置"""
from typing import List

from pydantic import Field

from ..base import RecordConfig


class RipConfig(RecordConfig):
    """RIP配置"""

    debug: bool = Field(default=False, description="启用 debug rip")
    networks: List[str] = Field(default_factory=list, description="启用的接口或网络")

    @classmethod
    def for_node(cls, node_id: int):
        return cls()

    def enable_network(self, network: str) -> None:
        if network not in self.networks:
            self.networks.append(network)

    def enable_debug(self) -> None:
        self.debug = True


class RipngConfig(RipConfig):
    """RIPng配置"""
