"""
异常体系。

资源与目录类错误只会在导入期出现（致命，直接向上抛出让导入失败）；
运行期唯一可能的错误是按名称查找失败（EntryNotFoundError）。
"""

from __future__ import annotations


class AaidError(Exception):
    """aaid 所有异常的基类。"""


class AssetError(AaidError):
    """源文档读取失败。"""

    def __init__(self, package: str, filename: str, message: str) -> None:
        self.package = package
        self.filename = filename
        super().__init__(f"{package}/{filename}: {message}")


class AssetNotFoundError(AssetError, FileNotFoundError):
    """源文档不存在。"""


class AssetDecodeError(AssetError, ValueError):
    """源文档不是合法 UTF-8。"""


class CatalogError(AaidError, ValueError):
    """目录装配违反不变量。"""


class DuplicateEntryError(CatalogError):
    def __init__(self, category: object, name: str) -> None:
        self.category = category
        self.name = name
        super().__init__(f"duplicate entry {name!r} in category {_label(category)!r}")


class UnknownCategoryError(CatalogError):
    def __init__(self, category: object) -> None:
        self.category = category
        super().__init__(f"undeclared category: {_label(category)!r}")


class EmptyCategoryError(CatalogError):
    def __init__(self, category: object) -> None:
        self.category = category
        super().__init__(f"category {_label(category)!r} has no entries")


class EntryNotFoundError(AaidError, KeyError):
    """按 category/name 查找不到 entry。"""

    def __init__(self, category: object, name: str | None = None) -> None:
        self.category = category
        self.name = name
        if name is None:
            super().__init__(f"unknown category {_label(category)!r}")
        else:
            super().__init__(f"no entry {name!r} in category {_label(category)!r}")

    def __str__(self) -> str:
        # KeyError 默认会给消息加引号
        return str(self.args[0])


def _label(category: object) -> str:
    return str(getattr(category, "value", category))


class BundleError(AaidError):
    """导出目录不满足干净重建的前提。"""
