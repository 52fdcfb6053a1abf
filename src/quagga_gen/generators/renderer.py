from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined


def get_templates_dir() -> Path:
    return Path(__file__).parent / "templates"


@lru_cache(maxsize=1)
def create_jinja_env() -> Environment:
    templates_dir = get_templates_dir()
    # 守护进程配置是纯文本，不做 HTML 转义
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return env


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    env = create_jinja_env()
    template = env.get_template(template_name)
    return template.render(**context)


def render_lines(template_name: str, context: Dict[str, Any]) -> List[str]:
    """渲染模板并按行拆分"""
    return render_template(template_name, context).splitlines()
