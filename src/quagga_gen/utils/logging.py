from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(verbose: bool = False, json_output: bool = False) -> None:
    """初始化结构化日志。

    json_output 为 True 时输出 JSON 行，便于批量生成时由外部工具收集。
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(level=log_level, format="%(message)s")

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_scenario(**context: Any) -> None:
    """绑定场景上下文（网格尺寸、编址方案等），之后的日志事件都会携带"""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**context)


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name) if name else structlog.get_logger()
