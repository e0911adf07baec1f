"""
资源加载器：读取随包分发的 Markdown / MDC 源文档。

约定：
- 通过 importlib.resources 定位（wheel / sdist / zip 安装均可用）
- 读取字节后按严格 UTF-8 解码，不做任何换行、BOM、空白处理
- 文件缺失或解码失败直接抛异常（导入期致命）
"""

from __future__ import annotations

import hashlib
import logging
from importlib import resources

from .errors import AssetDecodeError, AssetNotFoundError

_logger = logging.getLogger(__name__)

ASSET_SUFFIXES = (".md", ".mdc")


def load_asset(package: str, filename: str) -> str:
    """
    读取 package 内某个源文档的完整文本。

    参数:
        package: 资源所在包（如 "aaid.prompts.tdd"）
        filename: 包内文件名（如 "red-phase.md"）

    返回:
        与文件内容逐字符一致的字符串
    """
    try:
        res = resources.files(package).joinpath(filename)
    except ModuleNotFoundError as e:
        raise AssetNotFoundError(package, filename, f"package not importable: {e}") from e

    if not res.is_file():
        raise AssetNotFoundError(package, filename, "source document not found")

    data = res.read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise AssetDecodeError(package, filename, f"not valid UTF-8: {e}") from e

    _logger.debug(f"[assets] loaded {package}/{filename} ({len(data)} bytes)")
    return text


def list_assets(package: str) -> list[str]:
    """列出包内全部源文档文件名（按名称排序）。"""
    root = resources.files(package)
    names = [
        p.name
        for p in root.iterdir()
        if p.is_file() and p.name.endswith(ASSET_SUFFIXES)
    ]
    return sorted(names)


def asset_digest(text: str) -> str:
    """文本 UTF-8 编码后的 SHA-256（hex）。"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
