"""
文件系统操作模块
使用anyio异步写入各节点的守护进程配置，并生成守护进程启动计划
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List
from pathlib import Path

import yaml
from anyio import Path as AsyncPath

from .config.defaults import (
    BGPD_START_STEP,
    DEFAULT_START_STEP,
    HOST_CONFIG_DIR_TEMPLATE,
    NODE_CONFIG_DIR,
    OSPFD_START_STEP,
    PLAN_FILENAME,
    ROUTING_START_BASE,
    ZEBRA_START_BASE,
    ZEBRA_START_STEP,
)
from .core.models import DaemonCommand, Node
from .core.types import ProtocolKind, Success, Failure, Result
from .generators.config import render_text
from .utils.logging import get_logger

logger = get_logger(__name__)


def host_config_dir(base_dir: Path, node_id: int) -> Path:
    """宿主机上节点的配置目录：files-<id>/usr/local/etc"""
    return Path(base_dir) / HOST_CONFIG_DIR_TEMPLATE.format(node_id=node_id)


def node_config_path(kind: ProtocolKind) -> str:
    """节点内看到的配置文件路径"""
    return f"{NODE_CONFIG_DIR}/{ProtocolKind(kind).filename}"


def start_time(kind: ProtocolKind, node_id: int) -> float:
    """守护进程启动时间（秒），zebra 先于路由协议启动"""
    kind = ProtocolKind(kind)
    if kind == ProtocolKind.ZEBRA:
        return ZEBRA_START_BASE + ZEBRA_START_STEP * node_id
    steps = {
        ProtocolKind.OSPF: OSPFD_START_STEP,
        ProtocolKind.BGP: BGPD_START_STEP,
    }
    return ROUTING_START_BASE + steps.get(kind, DEFAULT_START_STEP) * node_id


def daemon_commands(node: Node, base_dir: Path) -> List[DaemonCommand]:
    """节点上每条协议记录对应的守护进程启动参数"""
    commands = []
    for kind in node.configs:
        commands.append(
            DaemonCommand(
                node_id=node.id,
                binary=kind.daemon,
                args=["-f", node_config_path(kind), "-i", f"{NODE_CONFIG_DIR}/{kind.pid_filename}"],
                start_time=round(start_time(kind, node.id), 6),
                config_path=host_config_dir(base_dir, node.id) / kind.filename,
            )
        )
    return commands


class FileSystemManager:
    """文件系统管理器"""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    async def write_config_files(self, nodes: Iterable[Node]) -> Result:
        """写入所有节点的配置文件"""
        try:
            written = 0
            count = 0
            for node in nodes:
                written += await self._write_node_configs(node)
                count += 1

            return Success(written, f"成功写入 {count} 个节点的 {written} 个配置文件")

        except Exception as e:
            logger.error("config_write_failed", error=str(e))
            return Failure.from_exception(e)

    async def _write_node_configs(self, node: Node) -> int:
        """为单个节点写入配置文件，目录重复创建无副作用"""
        conf_path = AsyncPath(host_config_dir(self.base_dir, node.id))
        await conf_path.mkdir(parents=True, exist_ok=True)

        written = 0
        for kind in node.configs:
            record = node.configs[kind]
            # 手工维护的 zebra.conf 不覆盖
            if kind == ProtocolKind.ZEBRA and record.manual:
                logger.debug("zebra_manual_config_skipped", node=node.id)
                continue

            file_path = conf_path / kind.filename
            async with await file_path.open('w') as f:
                await f.write(render_text(kind, record))
            written += 1

        logger.debug("config_written", node=node.id, files=written)
        return written

    async def write_plan(self, plan: Dict[str, Any]) -> Result:
        """写入 YAML 格式的生成计划"""
        try:
            base_path = AsyncPath(self.base_dir)
            await base_path.mkdir(parents=True, exist_ok=True)

            plan_path = base_path / PLAN_FILENAME
            content = yaml.safe_dump(plan, sort_keys=False, allow_unicode=True)
            async with await plan_path.open('w') as f:
                await f.write(content)

            return Success(Path(str(plan_path)), f"成功生成计划文件: {PLAN_FILENAME}")

        except Exception as e:
            logger.error("plan_write_failed", error=str(e))
            return Failure.from_exception(e)
