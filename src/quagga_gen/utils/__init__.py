"""工具模块初始化"""

from .logging import bind_scenario, configure_logging, get_logger

__all__ = ['bind_scenario', 'configure_logging', 'get_logger']
