"""
场景生成引擎测试
"""

import anyio
import pytest
import yaml
from pydantic import ValidationError

from quagga_gen.config import AppSettings
from quagga_gen.core.types import AddressScheme, ProtocolKind
from quagga_gen.engine import ScenarioEngine, generate_scenario


def test_settings_defaults(monkeypatch):
    """测试默认设置与环境变量覆盖"""
    settings = AppSettings()
    assert settings.grid_size() == (6, 6)
    assert settings.enabled_protocols() == {ProtocolKind.ZEBRA, ProtocolKind.OSPF}

    monkeypatch.setenv("QUAGGA_SCHEME", "flat")
    monkeypatch.setenv("QUAGGA_ENABLE_BGP", "true")
    settings = AppSettings()
    assert settings.scheme == AddressScheme.FLAT
    assert ProtocolKind.BGP in settings.enabled_protocols()


def test_area_scenario_ospf_setup(tmp_path):
    """测试区域方案：每个节点宣告所有区域网段，并设置本区域汇总"""
    scenario = ScenarioEngine(AppSettings(output_dir=tmp_path)).build()
    nodes = scenario.topology.nodes

    expected_networks = {f"10.{j}.0.0/16": j for j in range(5)}
    for node in nodes:
        assert node.configs.ospf.networks == expected_networks
        assert node.configs.kinds() == [ProtocolKind.ZEBRA, ProtocolKind.OSPF]

    # 节点0在区域1，节点2在骨干条带
    assert nodes[0].configs.ospf.area_range == (1, "10.1.0.0/16")
    assert nodes[2].configs.ospf.area_range == (0, "10.0.0.0/16")
    assert nodes[21].configs.ospf.area_range == (4, "10.4.0.0/16")


def test_flat_scenario_with_bgp(tmp_path):
    """测试平面方案：尺寸与切分不一致时按单一区域处理，BGP 与每个邻居建立对等"""
    settings = AppSettings(rows=3, cols=3, scheme="flat", enable_bgp=True, output_dir=tmp_path)
    scenario = ScenarioEngine(settings).build()
    node0 = scenario.topology.node(0)

    assert scenario.topology.tiling.n_area == 1
    assert len(scenario.topology.intra_edges) == 18
    assert node0.configs.ospf.networks == {"10.0.0.0/8": 0}

    bgp = node0.configs.bgp
    assert bgp.asn == 1
    assert len(bgp.neighbors) == 4
    # 第一条链路 0 -> 1 使用 raw_pair(0)，对端地址为 10.0.0.2
    assert bgp.neighbors["10.0.0.2"] == 2
    assert bgp.networks[0] == "10.0.0.0/30"


def test_optional_protocols_use_sim_interfaces(tmp_path):
    """测试 OSPF6 / RIP / RIPng 在节点所有 sim 接口上启用"""
    settings = AppSettings(
        enable_ospf=False, enable_ospf6=True, enable_rip=True, enable_ripng=True, output_dir=tmp_path,
    )
    node = ScenarioEngine(settings).build().topology.node(7)

    assert ProtocolKind.OSPF not in node.configs
    sims = ["sim0", "sim1", "sim2", "sim3"]
    assert node.configs.ospf6.interfaces == sims
    assert node.configs.rip.networks == sims
    assert node.configs.ripng.networks == sims


def test_debug_protocols(tmp_path):
    """测试只对指定协议开启 debug"""
    settings = AppSettings(debug_protocols={ProtocolKind.OSPF}, output_dir=tmp_path)
    node = ScenarioEngine(settings).build().topology.node(0)
    assert node.configs.ospf.debug
    assert not node.configs.zebra.debug


def test_generate_writes_files_and_plan(tmp_path):
    """测试完整生成写出配置文件与计划文件"""
    result = anyio.run(generate_scenario, AppSettings(output_dir=tmp_path))

    assert result.success, result.message
    assert result.output_dir == tmp_path
    assert result.stats["total_nodes"] == 36
    assert result.stats["config_files"] == 72

    conf = tmp_path / "files-0" / "usr" / "local" / "etc"
    assert (conf / "zebra.conf").read_text().startswith("hostname zebra\n")
    assert "  area 1 range 10.1.0.0/16" in (conf / "ospfd.conf").read_text().splitlines()

    plan = yaml.safe_load((tmp_path / "plan.yaml").read_text())
    assert plan["grid"] == {"rows": 6, "cols": 6, "scheme": "area"}
    assert len(plan["links"]) == 72
    assert len(plan["daemons"]) == 72
    assert plan["nodes"][2]["area"] == 0
    first_link = plan["links"][0]
    assert first_link["class"] == "intra"
    assert first_link["endpoints"][0] == {"node": 0, "ifname": "sim0", "address": "10.1.0.1/30"}


def test_dry_run_writes_nothing(tmp_path):
    """测试干运行不写文件"""
    result = anyio.run(generate_scenario, AppSettings(output_dir=tmp_path, dry_run=True))
    assert result.success
    assert result.output_dir is None
    assert list(tmp_path.iterdir()) == []


def test_mismatched_tiling_fails(tmp_path):
    """测试区域方案下网格尺寸与切分不一致时生成失败"""
    result = anyio.run(generate_scenario, AppSettings(rows=4, cols=4, output_dir=tmp_path))
    assert not result.success
    assert result.error_details
    assert list(tmp_path.iterdir()) == []


def test_bgp_debug_is_accepted(tmp_path):
    """测试对 BGP 开启 debug 不影响生成，bgpd 的 debug 行本来就总是输出"""
    settings = AppSettings(enable_bgp=True, debug_protocols={ProtocolKind.BGP}, output_dir=tmp_path)
    node = ScenarioEngine(settings).build().topology.node(0)
    assert node.configs.bgp.asn == 1

    result = anyio.run(generate_scenario, settings)
    assert result.success, result.message
    bgpd = (tmp_path / "files-0" / "usr" / "local" / "etc" / "bgpd.conf").read_text().splitlines()
    assert "debug bgp" in bgpd


def test_debug_protocols_accept_daemon_names():
    """测试 debug 协议与命令行一致，接受守护进程名和逗号分隔字符串"""
    settings = AppSettings(debug_protocols=["ospfd", "zebra"])
    assert settings.debug_protocols == {ProtocolKind.OSPF, ProtocolKind.ZEBRA}

    settings = AppSettings(debug_protocols="ripngd, ospf6")
    assert settings.debug_protocols == {ProtocolKind.RIPNG, ProtocolKind.OSPF6}

    with pytest.raises(ValidationError):
        AppSettings(debug_protocols=["isis"])
