"""配置生成器模块"""

from .config import (
    ConfigGenerator,
    ConfigGeneratorFactory,
    render,
    render_node,
    render_text,
)
from .renderer import render_lines, render_template

__all__ = [
    "ConfigGenerator",
    "ConfigGeneratorFactory",
    "render",
    "render_node",
    "render_text",
    "render_lines",
    "render_template",
]
