"""
配置渲染器
每种协议一个生成器：配置记录 -> 有序文本行，渲染过程无副作用
"""

from __future__ import annotations

from typing import Dict, List, Protocol

from ..core.models import (
    BgpConfig, Node, OspfConfig, Ospf6Config, ProtocolConfig, RipConfig, RipngConfig, ZebraConfig,
)
from ..core.types import ProtocolKind
from .renderer import render_lines


# 配置生成协议
class ConfigGenerator(Protocol):
    """配置生成器协议"""

    def generate(self, record: ProtocolConfig) -> List[str]:
        """生成配置行"""
        ...


class ZebraConfigGenerator:
    """Zebra配置生成器：头部 -> debug -> 路由通告接口 -> home-agent 接口"""

    @staticmethod
    def generate(record: ZebraConfig) -> List[str]:
        return render_lines(
            "zebra.conf.j2",
            {
                "debug": record.debug,
                "radvd": record.radvd,
                "home_agent_interfaces": record.home_agent_interfaces,
            },
        )


class OspfConfigGenerator:
    """OSPF配置生成器

    networks 按插入顺序输出；area range 与 networks 相互独立，至多一行。
    """

    @staticmethod
    def generate(record: OspfConfig) -> List[str]:
        return render_lines(
            "ospfd.conf.j2",
            {
                "debug": record.debug,
                "interfaces": record.interfaces,
                "networks": record.networks,
                "area_range": record.area_range,
                "router_id": record.router_id,
            },
        )


class Ospf6ConfigGenerator:
    """OSPF6配置生成器

    router-id / redistribute 行按接口重复输出，与守护进程原有行为一致。
    """

    @staticmethod
    def generate(record: Ospf6Config) -> List[str]:
        return render_lines(
            "ospf6d.conf.j2",
            {
                "debug": record.debug,
                "interfaces": record.interfaces,
                "router_id_address": record.router_id_address,
            },
        )


class RipConfigGenerator:
    """RIP配置生成器"""

    daemon = "ripd"
    family = "rip"

    def generate(self, record: RipConfig) -> List[str]:
        return render_lines(
            "rip.conf.j2",
            {
                "daemon": self.daemon,
                "family": self.family,
                "debug": record.debug,
                "networks": record.networks,
            },
        )


class RipngConfigGenerator(RipConfigGenerator):
    """RIPng配置生成器"""

    daemon = "ripngd"
    family = "ripng"


class BgpConfigGenerator:
    """BGP配置生成器

    地址族块只包含能解析为对应地址族的邻居，其余邻居静默跳过。
    """

    @staticmethod
    def generate(record: BgpConfig) -> List[str]:
        return render_lines(
            "bgpd.conf.j2",
            {
                "asn": record.asn,
                "router_id": record.router_id,
                "neighbors": record.neighbors,
                "ipv4_neighbors": record.ipv4_neighbors(),
                "ipv6_neighbors": record.ipv6_neighbors(),
                "peer_links": record.peer_links,
                "networks": record.networks,
                "default_originate": record.default_originate,
                "access_list_name": record.access_list_name,
                "route_maps": {peer: record.route_map_name(peer) for peer in record.peer_links},
            },
        )


# 工厂
class ConfigGeneratorFactory:
    """配置生成器工厂"""

    _generators: Dict[ProtocolKind, type] = {
        ProtocolKind.ZEBRA: ZebraConfigGenerator,
        ProtocolKind.OSPF: OspfConfigGenerator,
        ProtocolKind.OSPF6: Ospf6ConfigGenerator,
        ProtocolKind.BGP: BgpConfigGenerator,
        ProtocolKind.RIP: RipConfigGenerator,
        ProtocolKind.RIPNG: RipngConfigGenerator,
    }

    @classmethod
    def register(cls, kind: ProtocolKind, generator_class: type):
        """注册配置生成器"""
        cls._generators[ProtocolKind(kind)] = generator_class

    @classmethod
    def create(cls, kind: ProtocolKind) -> ConfigGenerator:
        """创建配置生成器"""
        kind = ProtocolKind(kind)
        if kind not in cls._generators:
            raise ValueError(f"未知的配置类型: {kind}")
        return cls._generators[kind]()

    @classmethod
    def get_all_types(cls) -> List[ProtocolKind]:
        """获取所有支持的配置类型"""
        return list(cls._generators.keys())


def render(kind: ProtocolKind, record: ProtocolConfig) -> List[str]:
    """渲染单条配置记录为有序文本行"""
    return ConfigGeneratorFactory.create(kind).generate(record)


def render_text(kind: ProtocolKind, record: ProtocolConfig) -> str:
    """渲染为文件内容（以换行结尾）"""
    return "\n".join(render(kind, record)) + "\n"


def render_node(node: Node) -> Dict[ProtocolKind, List[str]]:
    """渲染节点上已有的全部协议配置，按协议枚举顺序"""
    return {kind: render(kind, node.configs[kind]) for kind in node.configs}
