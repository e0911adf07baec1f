"""日志（Rich 控制台 + 滚动文件）。"""

from .logger import FileLineFileHandler, FileLineRichHandler, configure_from, get_logger

__all__ = ["FileLineFileHandler", "FileLineRichHandler", "configure_from", "get_logger"]
