"""
场景生成引擎
构建网格 -> 校验边数 -> 分配地址 -> 配置协议 -> 渲染并写入文件
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from .addressing import area_network, assign_addresses, node_links
from .config.settings import AppSettings
from .core.models import AreaTiling, GenerationResult, GridTopology, LinkAssignment
from .core.types import AddressScheme, Failure, ProtocolKind
from .filesystem import FileSystemManager, daemon_commands
from .helper import QuaggaHelper
from .topology.area import area_id
from .topology.grid import build_grid, calculate_grid_stats, validate_edge_counts
from .utils.logging import bind_scenario, get_logger

logger = get_logger(__name__)

FLAT_OSPF_NETWORK = "10.0.0.0/8"


@dataclass
class Scenario:
    """已配置好协议的场景"""

    topology: GridTopology
    scheme: AddressScheme
    assignments: List[LinkAssignment]
    output_dir: Path


class ScenarioEngine:
    """场景生成引擎"""

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings()
        self.helper = QuaggaHelper()

    def build(self) -> Scenario:
        """构建拓扑并完成全部协议配置（不写文件）"""
        settings = self.settings
        tiling = settings.tiling.to_tiling()
        rows, cols = settings.grid_size()
        scheme = AddressScheme(settings.scheme)
        bind_scenario(rows=rows, cols=cols, scheme=scheme.value)

        # flat 方案不依赖区域切分，尺寸与切分不一致时按单一区域处理
        if scheme == AddressScheme.FLAT and not tiling.matches(rows, cols):
            tiling = AreaTiling.single_area(rows, cols)

        topology = build_grid(rows, cols, tiling)
        validate_edge_counts(topology)

        assignments = assign_addresses(topology, scheme)
        scenario = Scenario(
            topology=topology,
            scheme=scheme,
            assignments=assignments,
            output_dir=self._get_output_dir(rows, cols, scheme),
        )
        self._configure_protocols(scenario, settings.enabled_protocols())
        return scenario

    def _configure_protocols(self, scenario: Scenario, enabled: Set[ProtocolKind]) -> None:
        helper = self.helper
        topology = scenario.topology
        nodes = topology.nodes

        helper.install(nodes)

        if ProtocolKind.OSPF in enabled:
            self._configure_ospf(scenario)

        for node in nodes:
            links = node_links(node, scenario.assignments)
            for link in links:
                ifname = link.ifname_of(node.id)
                if ProtocolKind.OSPF6 in enabled:
                    helper.enable_ospf6(node, ifname)
                if ProtocolKind.RIP in enabled:
                    helper.enable_rip(node, ifname)
                if ProtocolKind.RIPNG in enabled:
                    helper.enable_ripng(node, ifname)

            if ProtocolKind.BGP in enabled:
                helper.enable_bgp(node)
                for link in links:
                    peer = link.edge.other(node.id)
                    peer_address = link.address_of(peer).split("/")[0]
                    helper.bgp_add_neighbor(node, peer_address, peer + 1)
                    helper.bgp_add_network(node, link.network)

        for kind in self.settings.debug_protocols:
            self._enable_debug(scenario, ProtocolKind(kind))

        logger.info("protocols_configured", protocols=sorted(k.value for k in enabled))

    def _configure_ospf(self, scenario: Scenario) -> None:
        """OSPF：area 方案按区域宣告 /16 网段并设置汇总，flat 方案整体宣告 10.0.0.0/8"""
        helper = self.helper
        topology = scenario.topology
        nodes = topology.nodes

        if scenario.scheme == AddressScheme.FLAT:
            helper.enable_ospf(nodes, FLAT_OSPF_NETWORK)
            return

        tiling = topology.tiling
        for area in range(tiling.n_area + 1):
            helper.enable_ospf_area(nodes, area_network(area), area)
        for node in nodes:
            area = area_id(tiling, node.row, node.col)
            helper.set_area(node, area_network(area), area)

    def _enable_debug(self, scenario: Scenario, kind: ProtocolKind) -> None:
        # bgpd 的 debug 行总是输出，没有开关
        if kind == ProtocolKind.BGP:
            return
        for node in scenario.topology.nodes:
            record = node.configs.get(kind)
            if record is not None:
                record.enable_debug()

    def _get_output_dir(self, rows: int, cols: int, scheme: AddressScheme) -> Path:
        """获取输出目录（优先使用配置中的 output_dir）"""
        if self.settings.output_dir:
            return Path(str(self.settings.output_dir))
        return Path(f"quagga_{scheme.value}_{rows}x{cols}")

    def build_plan(self, scenario: Scenario) -> Dict[str, Any]:
        """生成计划：网格、节点区域、链路地址与守护进程启动参数"""
        topology = scenario.topology
        tiling = topology.tiling
        commands = [
            cmd.model_dump(mode="json")
            for node in topology.nodes
            for cmd in daemon_commands(node, scenario.output_dir)
        ]
        return {
            "grid": {"rows": topology.rows, "cols": topology.cols, "scheme": scenario.scheme.value},
            "tiling": tiling.model_dump(),
            "stats": calculate_grid_stats(topology),
            "nodes": [
                {
                    "id": node.id,
                    "row": node.row,
                    "col": node.col,
                    "area": area_id(tiling, node.row, node.col),
                    "protocols": [kind.value for kind in node.configs],
                }
                for node in topology.nodes
            ],
            "links": [
                {
                    "class": link.edge.edge_class.value,
                    "link_id": link.edge.link_id,
                    "network": link.network,
                    "endpoints": [
                        {"node": node_id, "ifname": link.ifname_of(node_id), "address": link.address_of(node_id)}
                        for node_id in link.edge.endpoints
                    ],
                }
                for link in scenario.assignments
            ],
            "daemons": commands,
        }

    async def generate(self) -> GenerationResult:
        """生成完整场景"""
        try:
            # 1. 构建拓扑并配置协议
            scenario = self.build()
            stats = calculate_grid_stats(scenario.topology)
            stats["scheme"] = scenario.scheme.value

            if self.settings.dry_run:
                logger.info("dry_run_passed", **stats)
                return GenerationResult(success=True, message="验证通过（未写入文件）", stats=stats)

            # 2. 写入配置文件
            fs = FileSystemManager(scenario.output_dir)
            config_result = await fs.write_config_files(scenario.topology.nodes)
            if isinstance(config_result, Failure):
                return GenerationResult(
                    success=False,
                    message=f"配置生成失败: {config_result.error}",
                    error_details=config_result.error,
                )
            stats["config_files"] = config_result.value

            # 3. 写入生成计划
            plan_result = await fs.write_plan(self.build_plan(scenario))
            if isinstance(plan_result, Failure):
                return GenerationResult(
                    success=False,
                    message=f"计划生成失败: {plan_result.error}",
                    error_details=plan_result.error,
                )

            logger.info("generation_succeeded", output_dir=str(scenario.output_dir))
            return GenerationResult(
                success=True,
                message="场景生成成功",
                output_dir=scenario.output_dir,
                stats=stats,
            )

        except Exception as e:
            logger.error("generation_failed", error=str(e))
            return GenerationResult(
                success=False,
                message=f"生成失败: {str(e)}",
                error_details=str(e),
            )


# 便利函数
async def generate_scenario(settings: AppSettings) -> GenerationResult:
    """生成场景的便利函数"""
    engine = ScenarioEngine(settings)
    return await engine.generate()
