"""
配置渲染测试
逐行验证各守护进程配置的段落顺序
"""

import pytest

from quagga_gen.core.models import (
    BgpConfig, Node, OspfConfig, Ospf6Config, RipConfig, RipngConfig, ZebraConfig,
)
from quagga_gen.core.types import ProtocolKind
from quagga_gen.generators import ConfigGeneratorFactory, render, render_node, render_text


def test_zebra_minimal():
    """测试默认 zebra 配置只有头部"""
    assert render(ProtocolKind.ZEBRA, ZebraConfig()) == [
        "hostname zebra",
        "password zebra",
        "log stdout",
    ]


def test_zebra_full():
    """测试 zebra：头部 -> debug -> 路由通告 -> home-agent"""
    zebra = ZebraConfig()
    zebra.enable_debug()
    zebra.enable_radvd("sim0", "2001:db8::/64")
    zebra.enable_radvd("sim1")
    zebra.enable_home_agent_flag("sim0")

    assert render(ProtocolKind.ZEBRA, zebra) == [
        "hostname zebra",
        "password zebra",
        "log stdout",
        "debug zebra kernel",
        "debug zebra events",
        "debug zebra packet",
        "interface sim0",
        " ipv6 nd ra-interval 5",
        " ipv6 nd prefix 2001:db8::/64 300 150",
        " no ipv6 nd suppress-ra",
        "!",
        "interface sim1",
        " ipv6 nd ra-interval 5",
        " no ipv6 nd suppress-ra",
        "!",
        "interface sim0",
        " ipv6 nd home-agent-config-flag",
        "!",
    ]


def test_ospf_minimal():
    """测试没有网络时仍输出 router ospf 块"""
    assert render(ProtocolKind.OSPF, OspfConfig()) == [
        "hostname zebra",
        "password zebra",
        "log stdout",
        "router ospf",
        " redistribute connected",
        "!",
    ]


def test_ospf_network_and_area_range_are_separate():
    """测试 network 与 area range 分别输出，不合并"""
    ospf = OspfConfig()
    ospf.add_network("10.0.0.0/16", 0)
    ospf.set_area("10.0.0.0/16", 3)

    lines = render(ProtocolKind.OSPF, ospf)
    assert "  network 10.0.0.0/16 area 0" in lines
    assert "  area 3 range 10.0.0.0/16" in lines
    assert lines.index("  network 10.0.0.0/16 area 0") < lines.index("  area 3 range 10.0.0.0/16")


def test_ospf_full():
    """测试 OSPF 完整段落顺序"""
    ospf = OspfConfig()
    ospf.enable_debug()
    ospf.enable_interface(0)
    ospf.enable_interface(1)
    ospf.add_network("10.1.0.0/16", 1)
    ospf.add_network("10.0.0.0/16", 0)
    ospf.set_area("10.1.0.0/16", 1)
    ospf.set_router_id("1.1.1.1")

    assert render(ProtocolKind.OSPF, ospf) == [
        "hostname zebra",
        "password zebra",
        "log stdout",
        "debug ospf event",
        "debug ospf nsm",
        "debug ospf ism",
        "debug ospf packet all",
        "interface ns3-device0",
        "interface ns3-device1",
        "router ospf",
        "  network 10.1.0.0/16 area 1",
        "  network 10.0.0.0/16 area 0",
        "  area 1 range 10.1.0.0/16",
        " redistribute connected",
        " ospf router-id 1.1.1.1",
        "!",
    ]


def test_ospf6_without_interfaces():
    """测试没有接口时不输出 router ospf6 块"""
    assert render(ProtocolKind.OSPF6, Ospf6Config.for_node(3)) == [
        "hostname ospf6d",
        "password zebra",
        "log stdout",
        "service advanced-vty",
    ]


def test_ospf6_repeats_router_lines_per_interface():
    """测试 router-id / redistribute 行按接口重复"""
    ospf6 = Ospf6Config.for_node(3)
    ospf6.enable_interface("sim0")
    ospf6.enable_interface("sim1")

    assert render(ProtocolKind.OSPF6, ospf6) == [
        "hostname ospf6d",
        "password zebra",
        "log stdout",
        "service advanced-vty",
        "interface sim0",
        " ipv6 ospf6 retransmit-interval 8",
        "!",
        "interface sim1",
        " ipv6 ospf6 retransmit-interval 8",
        "!",
        "router ospf6",
        " router-id 255.1.1.3",
        " interface sim0 area 0.0.0.0",
        " redistribute connected",
        "!",
        " router-id 255.1.1.3",
        " interface sim1 area 0.0.0.0",
        " redistribute connected",
    ]


def test_ospf6_debug():
    """测试 OSPF6 debug 块"""
    ospf6 = Ospf6Config.for_node(1)
    ospf6.enable_debug()
    lines = render(ProtocolKind.OSPF6, ospf6)
    assert lines[4:] == [
        "debug ospf6 neighbor",
        "debug ospf6 message all",
        "debug ospf6 zebra",
        "debug ospf6 interface",
    ]


def test_rip():
    """测试 RIP 配置"""
    rip = RipConfig()
    rip.enable_network("sim0")
    rip.enable_network("sim1")

    assert render(ProtocolKind.RIP, rip) == [
        "hostname ripd",
        "password zebra",
        "log stdout",
        "service advanced-vty",
        "router rip",
        " network sim0",
        " redistribute connected",
        "!",
        " network sim1",
        " redistribute connected",
    ]


def test_ripng_debug_without_networks():
    """测试 RIPng 只有 debug 时不输出 router 块"""
    ripng = RipngConfig()
    ripng.enable_debug()

    assert render(ProtocolKind.RIPNG, ripng) == [
        "hostname ripngd",
        "password zebra",
        "log stdout",
        "service advanced-vty",
        "debug ripng events",
        "debug ripng packet send detail",
        "debug ripng packet recv detail",
        "debug ripng zebra",
    ]


def test_bgp_with_peer_link():
    """测试 BGP：邻居、ipv4 地址族中的 route-map、access-list 和 route-map 块"""
    bgp = BgpConfig.for_node(5)
    bgp.add_neighbor("10.0.0.2", 2)
    bgp.add_peer_link("10.0.0.2")
    bgp.add_network("10.0.0.0/24")

    assert render(ProtocolKind.BGP, bgp) == [
        "hostname bgpd",
        "password zebra",
        "log stdout",
        "debug bgp",
        "debug bgp fsm",
        "debug bgp events",
        "debug bgp updates",
        "router bgp 6",
        "  bgp router-id 192.168.0.6",
        "  neighbor 10.0.0.2 remote-as 2",
        "  neighbor 10.0.0.2 advertisement-interval 5",
        "  redistribute connected",
        "  address-family ipv4 unicast",
        "   neighbor 10.0.0.2 activate",
        "   neighbor 10.0.0.2 next-hop-self",
        "   neighbor 10.0.0.2 route-map MAP-192.168.0.6-10.0.0.2 out",
        "   network 10.0.0.0/24",
        "  exit-address-family",
        "  address-family ipv6 unicast",
        "   network 10.0.0.0/24",
        "   redistribute connected",
        "  exit-address-family",
        "access-list ALIST-192.168.0.6 permit 10.0.0.0/24",
        "route-map MAP-192.168.0.6-10.0.0.2 permit 5",
        " match ip address ALIST-192.168.0.6",
        "!",
        "!",
    ]


def test_bgp_explicit_asn_and_router_id():
    """测试 AS 号与路由器ID可分别指定"""
    bgp = BgpConfig(asn=5, router_id="192.168.0.6")
    bgp.add_neighbor("10.0.0.2", 2)
    lines = render(ProtocolKind.BGP, bgp)
    assert "router bgp 5" in lines
    assert "  bgp router-id 192.168.0.6" in lines


def test_bgp_address_family_filtering():
    """测试 IPv6 邻居只出现在 ipv6 地址族，非法地址不出现在任何地址族"""
    bgp = BgpConfig.for_node(0)
    bgp.add_neighbor("2001:db8::2", 7)
    bgp.add_neighbor("bogus", 8)
    bgp.enable_default_originate()

    lines = render(ProtocolKind.BGP, bgp)
    v4_start = lines.index("  address-family ipv4 unicast")
    v6_start = lines.index("  address-family ipv6 unicast")
    v4_block = lines[v4_start:v6_start]
    v6_block = lines[v6_start:]

    assert "  neighbor bogus remote-as 8" in lines
    assert not any("2001:db8::2" in line for line in v4_block)
    assert v6_block[1:4] == [
        "   neighbor 2001:db8::2 activate",
        "   neighbor 2001:db8::2 next-hop-self",
        "   neighbor 2001:db8::2 default-originate",
    ]
    assert not any("bogus activate" in line for line in lines)
    assert not any(line.startswith("access-list") for line in lines)


def test_rendering_is_deterministic():
    """测试同一记录渲染两次结果相同"""
    bgp = BgpConfig.for_node(2)
    bgp.add_neighbor("10.0.0.9", 4)
    bgp.add_network("10.0.0.8/30")
    assert render_text(ProtocolKind.BGP, bgp) == render_text(ProtocolKind.BGP, bgp)


def test_render_text_ends_with_newline():
    """测试文件内容以换行结尾"""
    text = render_text(ProtocolKind.ZEBRA, ZebraConfig())
    assert text == "hostname zebra\npassword zebra\nlog stdout\n"


def test_render_node():
    """测试按协议顺序渲染节点上的全部记录"""
    node = Node(0, cols=3)
    node.configs.ospf.add_network("10.0.0.0/8")
    node.get_or_create(ProtocolKind.ZEBRA)

    rendered = render_node(node)
    assert list(rendered) == [ProtocolKind.ZEBRA, ProtocolKind.OSPF]
    assert rendered[ProtocolKind.OSPF][4] == "  network 10.0.0.0/8 area 0"


def test_factory():
    """测试生成器工厂"""
    assert set(ConfigGeneratorFactory.get_all_types()) == set(ProtocolKind)
    with pytest.raises(ValueError):
        ConfigGeneratorFactory.create("isis")
