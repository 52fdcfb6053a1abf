"""
命令行入口
使用 typer 和 rich 提供命令行界面
"""

from __future__ import annotations

from typing import List, Optional
from pathlib import Path
import anyio

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .config.settings import AppSettings
from .core.models import GenerationResult
from .core.types import AddressScheme, EdgeClass, ProtocolKind
from .engine import generate_scenario
from .topology.area import area_id
from .topology.grid import build_grid
from .utils.logging import configure_logging, get_logger

# 创建应用和控制台
app = typer.Typer(
    name="quagga-gen",
    help="网格拓扑 Quagga 配置生成器",
    add_completion=False,
    rich_markup_mode="rich"
)
console = Console()

logger = get_logger(__name__)


# 全局配置（简单数据容器）
class GlobalConfig:
    verbose: bool = False
    file_data: dict = {}


global_config = GlobalConfig()


def _parse_protocols(values: List[str]) -> List[ProtocolKind]:
    """解析可重复、可逗号分隔的协议参数"""
    kinds: List[ProtocolKind] = []
    for value in values:
        for item in value.split(","):
            item = item.strip()
            if not item:
                continue
            try:
                kind = ProtocolKind.parse(item)
            except ValueError as e:
                raise typer.BadParameter(str(e))
            if kind not in kinds:
                kinds.append(kind)
    return kinds


# 回调函数
def version_callback(value: bool):
    """版本回调"""
    if value:
        console.print(f"quagga-gen v{__version__}")
        raise typer.Exit()


# 全局选项
@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="显示版本信息"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="详细输出"),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="从配置文件加载设置 (YAML/JSON)"
    ),
):
    """网格拓扑 Quagga 配置生成器"""
    configure_logging(verbose)
    logger.info("cli_started", verbose=verbose)
    global_config.verbose = verbose

    # 读取配置文件（若提供），供各命令构造 AppSettings
    global_config.file_data = {}
    if config_file is not None:
        if not config_file.exists():
            console.print(f"[red]配置文件不存在: {config_file}[/red]")
            raise typer.Exit(1)
        try:
            global_config.file_data = yaml.safe_load(config_file.read_text()) or {}
        except yaml.YAMLError as e:
            console.print(f"[red]读取配置文件失败: {e}[/red]")
            raise typer.Exit(1)


def _load_settings(**overrides) -> AppSettings:
    """合并设置：命令行 > 配置文件 > 环境变量 > 默认值"""
    data = dict(global_config.file_data)
    tiling = dict(data.get("tiling") or {})
    for key in ("area_height", "area_width", "stripe_width", "area_rows", "area_cols"):
        value = overrides.pop(key, None)
        if value is not None:
            tiling[key] = value
    if tiling:
        data["tiling"] = tiling
    data.update({k: v for k, v in overrides.items() if v is not None})
    data.setdefault("verbose", global_config.verbose)
    try:
        return AppSettings(**data)
    except ValidationError as e:
        console.print("[red]配置验证失败:[/red]")
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"])
            console.print(f"  • {loc}: {error['msg']}")
        raise typer.Exit(1)


# 显示函数
def display_scenario_info(settings: AppSettings):
    """显示场景信息"""
    tiling = settings.tiling.to_tiling()
    rows, cols = settings.grid_size()

    table = Table(title="场景配置信息")
    table.add_column("属性", style="cyan")
    table.add_column("值", style="green")
    table.add_row("网格大小", f"{rows}x{cols}")
    table.add_row("节点数", str(rows * cols))
    table.add_row("链路数", str(2 * rows * cols))
    table.add_row("区域切分", f"{tiling.area_height}x{tiling.area_width} 条带 {tiling.stripe_width}")
    table.add_row("叶子区域数", str(tiling.n_area))
    table.add_row("地址方案", AddressScheme(settings.scheme).value)
    table.add_row("启用协议", ", ".join(sorted(k.value for k in settings.enabled_protocols())))
    console.print(table)


def display_result(result: GenerationResult):
    """显示生成结果"""
    if not result.success:
        console.print(f"[red]生成失败: {result.message}[/red]")
        logger.error("generation_failed", message=result.message)
        raise typer.Exit(1)

    table = Table(title="生成结果")
    table.add_column("项目", style="cyan")
    table.add_column("数量", style="green")
    for key, value in (result.stats or {}).items():
        table.add_row(key, str(value))
    console.print(table)
    console.print(f"[green]{result.message} ✓[/green]")
    if result.output_dir:
        console.print(f"输出目录: {result.output_dir}")


@app.command("generate")
def generate_command(
    rows: Optional[int] = typer.Option(None, "--rows", help="网格行数（默认由区域切分推导）"),
    cols: Optional[int] = typer.Option(None, "--cols", help="网格列数（默认由区域切分推导）"),
    area_height: Optional[int] = typer.Option(None, "--area-height", help="区域行高"),
    area_width: Optional[int] = typer.Option(None, "--area-width", help="区域列宽"),
    stripe_width: Optional[int] = typer.Option(None, "--stripe-width", help="骨干条带宽度"),
    area_rows: Optional[int] = typer.Option(None, "--area-rows", help="区域行数"),
    area_cols: Optional[int] = typer.Option(None, "--area-cols", help="区域列数"),
    scheme: Optional[AddressScheme] = typer.Option(None, "--scheme", help="地址方案 (area/flat)"),
    protocol: List[str] = typer.Option([], "--protocol", "-p", help="额外启用的协议，可重复或逗号分隔"),
    no_ospf: bool = typer.Option(False, "--no-ospf", help="不启用 OSPF"),
    debug: List[str] = typer.Option([], "--debug", help="开启 debug 输出的协议"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="输出目录"),
    dry_run: bool = typer.Option(False, "--dry-run", help="仅构建和验证，不写文件"),
):
    """生成网格场景的守护进程配置"""
    overrides = dict(
        rows=rows,
        cols=cols,
        area_height=area_height,
        area_width=area_width,
        stripe_width=stripe_width,
        area_rows=area_rows,
        area_cols=area_cols,
        scheme=scheme,
        output_dir=output_dir,
    )
    if dry_run:
        overrides["dry_run"] = True
    if no_ospf:
        overrides["enable_ospf"] = False
    for kind in _parse_protocols(protocol):
        if kind != ProtocolKind.ZEBRA:
            overrides[f"enable_{kind.value}"] = True
    debug_kinds = _parse_protocols(debug)
    if debug_kinds:
        overrides["debug_protocols"] = set(debug_kinds)

    settings = _load_settings(**overrides)
    display_scenario_info(settings)

    if settings.dry_run:
        console.print("[yellow]干运行模式 - 仅验证配置[/yellow]")
        result = anyio.run(generate_scenario, settings)
        display_result(result)
        return

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console
    ) as progress:
        _ = progress.add_task("生成配置文件...", total=None)
        logger.info("generation_started")
        result = anyio.run(generate_scenario, settings)
    display_result(result)


@app.command("inspect")
def inspect_command(
    rows: Optional[int] = typer.Option(None, "--rows", help="网格行数"),
    cols: Optional[int] = typer.Option(None, "--cols", help="网格列数"),
    area_height: Optional[int] = typer.Option(None, "--area-height", help="区域行高"),
    area_width: Optional[int] = typer.Option(None, "--area-width", help="区域列宽"),
    stripe_width: Optional[int] = typer.Option(None, "--stripe-width", help="骨干条带宽度"),
    area_rows: Optional[int] = typer.Option(None, "--area-rows", help="区域行数"),
    area_cols: Optional[int] = typer.Option(None, "--area-cols", help="区域列数"),
):
    """显示区域切分的闭式边数与网格区域图"""
    settings = _load_settings(
        rows=rows,
        cols=cols,
        area_height=area_height,
        area_width=area_width,
        stripe_width=stripe_width,
        area_rows=area_rows,
        area_cols=area_cols,
    )
    tiling = settings.tiling.to_tiling()
    n_rows, n_cols = settings.grid_size()

    expected = tiling.expected_edge_counts()
    table = Table(title=f"区域切分 {n_rows}x{n_cols}")
    table.add_column("边分类", style="cyan")
    table.add_column("期望", style="green")
    table.add_column("实际", style="green")

    try:
        topology = build_grid(n_rows, n_cols, tiling)
    except ValueError as e:
        console.print(f"[red]网格构建失败: {e}[/red]")
        raise typer.Exit(1)

    actual = topology.edge_counts
    for cls in EdgeClass:
        style = "" if expected[cls] == actual[cls] else "[red]"
        table.add_row(cls.value, str(expected[cls]), f"{style}{actual[cls]}")
    console.print(table)

    console.print("区域图 (0 为骨干):")
    for row in range(n_rows):
        console.print(" ".join(f"{area_id(tiling, row, col):>3}" for col in range(n_cols)))

    if expected != actual:
        console.print("[red]边数量与切分参数不一致[/red]")
        raise typer.Exit(1)


# 主入口
if __name__ == "__main__":
    app()
