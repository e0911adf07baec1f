"""
配置模块统一管理

统一导入接口：
    from aaid.config import AaidConfig, get_config
"""

from .config import AaidConfig, ExportConfig, LoggingConfig, get_config, reset_config

__all__ = [
    "AaidConfig",
    "ExportConfig",
    "LoggingConfig",
    "get_config",
    "reset_config",
]
