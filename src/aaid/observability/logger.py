"""
统一日志系统模块。

- 控制台：Rich 处理器（stderr，消息按纯文本输出，不解析 markup）
- 文件：自动滚动的 RotatingFileHandler
格式：`级别 [文件名:行号] 级别 - 消息`

只记录加载/导出过程信息，从不写出 prompt 正文。
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from aaid.config import AaidConfig


class FileLineRichHandler(RichHandler):
    """控制台处理器：只输出消息内容，文件名/行号挂到 record 上供其他处理器使用。"""

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, "lineno_caller"):
            record.filename = Path(record.pathname).name
            record.lineno_caller = record.lineno
        super().emit(record)


class FileLineFileHandler(RotatingFileHandler):
    """
    文件输出处理器，支持自动滚动。

    格式：级别     [文件名:行号] 级别 - 消息内容
    """

    def __init__(
        self,
        filename: str,
        mode: str = "a",
        encoding: str = "utf-8",
        delay: bool = False,
        maxBytes: int = 10_485_760,  # 10MB
        backupCount: int = 5,
        log_format: Optional[str] = None,
        date_format: Optional[str] = None,
    ):
        super().__init__(filename, mode, maxBytes, backupCount, encoding, delay)
        fmt = log_format or "%(levelname)-8s [%(filename)s:%(lineno_caller)s] %(levelname)s - %(message)s"
        self.setFormatter(logging.Formatter(fmt=fmt, datefmt=date_format or None))

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, "lineno_caller"):
            record.filename = Path(record.pathname).name
            record.lineno_caller = record.lineno
        super().emit(record)


def get_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    log_to_console: bool = False,
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
) -> logging.Logger:
    """
    获取配置好的日志记录器（重复调用不会重复挂处理器）。

    参数:
        name: 日志记录器名称（通常是 "aaid" 或模块名）
        level: 日志级别（int 或 'DEBUG' 之类的字符串）
        log_file: 可选日志文件路径
        log_to_console: 是否输出到控制台（stderr）
        max_bytes / backup_count: 文件滚动参数
        log_format / date_format: 文件格式

    返回:
        Logger 实例
    """
    logger = logging.getLogger(name)

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)

    has_console_handler = any(isinstance(h, FileLineRichHandler) for h in logger.handlers)
    has_file_handler = any(isinstance(h, FileLineFileHandler) for h in logger.handlers)

    if log_to_console:
        if not has_console_handler:
            console_handler = FileLineRichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=True,
                markup=False,
                show_level=True,
            )
            console_handler.setFormatter(logging.Formatter(fmt="%(message)s"))
            logger.addHandler(console_handler)
    else:
        # 不输出到控制台时，阻止消息冒泡到根 logger 的控制台处理器
        logger.propagate = False

    if log_file and not has_file_handler:
        try:
            os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        except OSError:
            # 目录创建失败不阻塞控制台日志
            log_file = None
        if log_file:
            file_handler = FileLineFileHandler(
                log_file,
                encoding="utf-8",
                maxBytes=max_bytes,
                backupCount=backup_count,
                log_format=log_format,
                date_format=date_format,
            )
            file_handler.setLevel(level)
            logger.addHandler(file_handler)

    return logger


def configure_from(cfg: "AaidConfig", level: Optional[str] = None) -> logging.Logger:
    """按 AaidConfig.logging 配置包级 logger（"aaid"）；level 非空时覆盖配置中的级别，不修改 cfg。"""
    log_cfg = cfg.logging
    return get_logger(
        "aaid",
        level=level or log_cfg.level,
        log_file=log_cfg.file_path or None,
        log_to_console=log_cfg.log_to_console,
        max_bytes=log_cfg.max_bytes,
        backup_count=log_cfg.backup_count,
        log_format=log_cfg.log_format,
        date_format=log_cfg.date_format,
    )
