from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """日志系统配置。"""
    log_to_console: bool = Field(
        default=True,
        description="是否将日志输出到控制台（stderr）",
    )
    level: str = Field(
        default="WARNING",
        description="日志级别：DEBUG, INFO, WARNING, ERROR, CRITICAL。",
    )
    file_path: Optional[str] = Field(
        default=None,
        description="日志文件路径；为空则不写文件。",
    )
    max_bytes: int = Field(
        default=10_485_760,  # 10MB
        ge=1024,
        description="单个日志文件的最大字节数，超过后自动滚动。",
    )
    backup_count: int = Field(default=5, ge=0, description="保留的历史日志文件数量。")
    log_format: str = Field(
        default="%(levelname)-8s [%(filename)s:%(lineno_caller)s] %(levelname)s - %(message)s",
        description="日志消息格式（文件）。",
    )
    date_format: str = Field(default="%Y-%m-%d %H:%M:%S", description="日志时间格式。")


class ExportConfig(BaseModel):
    """`aaid export` 默认行为。"""
    clean: bool = Field(default=True, description="导出前是否清空目标目录（干净重建）。")


class AaidConfig(BaseSettings):
    """
    Config priority (high -> low):
    - init（代码显式传参）
    - environment variables (prefix AAID_)
    - dotenv
    - config file（./.aaid.yaml 等）
    - defaults

    只影响日志与 CLI 默认值，从不影响目录内容。
    """

    model_config = SettingsConfigDict(
        env_prefix="AAID_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(  # type: ignore[override]
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        def yaml_file_settings() -> Dict[str, Any]:
            return _load_config_from_file()

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_file_settings,
            file_secret_settings,
        )

    logging: LoggingConfig = LoggingConfig()
    export: ExportConfig = ExportConfig()


def _find_config_file() -> Optional[Path]:
    """查找配置文件（按优先级顺序）

    搜索顺序：
    1. ./.aaid.yaml   （工作区级）
    2. ./.aaid.yml
    3. ~/.aaid/config.yaml
    """
    search_paths = [
        Path(".aaid.yaml"),
        Path(".aaid.yml"),
        Path.home() / ".aaid" / "config.yaml",
    ]
    for path in search_paths:
        if path.exists() and path.is_file():
            return path
    return None


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"配置文件顶层必须是 mapping: {config_path}")
    return data


def _load_config_from_file() -> Dict[str, Any]:
    """从文件加载配置（如果存在的话）；解析失败时给出告警并使用默认值。"""
    config_file = _find_config_file()
    if config_file:
        try:
            return _load_yaml_config(config_file)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"警告：加载配置文件失败（{config_file}），将使用默认配置: {e}")
    return {}


_config: Optional[AaidConfig] = None


def get_config() -> AaidConfig:
    """全局配置（首次调用时加载）。"""
    global _config
    if _config is None:
        _config = AaidConfig()
    return _config


def reset_config() -> None:
    """丢弃缓存的全局配置（测试用）。"""
    global _config
    _config = None
