"""
Catalog Builder：把 (category, name, source) 声明绑定为只读文本映射。

执行流程（Flow）：
- 1) entries_for()：为某个分类声明 entry 列表（名称 -> 源文件）
- 2) bind_group()：逐个读取源文档，校验名称在分类内唯一，得到 PromptMap
- 3) assemble_catalog()：把各分类的 PromptMap 组合为 Catalog，
     校验分类集合与声明集合完全一致且没有空分类

注意事项（Notes）：
- 所有绑定都发生在模块导入期；任何错误都会让导入失败，不存在“部分加载”状态
- 文本原样保存，不做模板渲染或规范化
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from .assets import load_asset
from .errors import (
    CatalogError,
    DuplicateEntryError,
    EmptyCategoryError,
    EntryNotFoundError,
    UnknownCategoryError,
)
from .types import Catalog, PromptMap

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    """一条声明：分类 + 名称 + 源文档位置。"""

    category: Enum
    name: str
    package: str
    filename: str

    @property
    def source(self) -> str:
        return f"{self.package}/{self.filename}"

    def load(self) -> str:
        return load_asset(self.package, self.filename)


def entries_for(
    category: Enum,
    package: str,
    sources: Mapping[str, str] | Iterable[tuple[str, str]],
) -> tuple[CatalogEntry, ...]:
    """
    为单个分类声明 entry。

    sources 可以是 {name: filename}，也可以是 [(name, filename), ...]；
    后者允许重复名称出现，由 bind_group 负责拒绝。
    """
    pairs = sources.items() if isinstance(sources, Mapping) else sources
    return tuple(CatalogEntry(category, name, package, filename) for name, filename in pairs)


def bind_group(entries: Iterable[CatalogEntry]) -> PromptMap:
    """
    读取一组 entry 的源文档并按名称绑定。

    同一分类内名称重复 -> DuplicateEntryError；
    源文档缺失/不可读 -> AssetError（来自 load_asset）。
    """
    bound: dict[str, str] = {}
    category: Enum | None = None
    for entry in entries:
        if category is not None and entry.category != category:
            raise CatalogError(
                f"mixed categories in one group: {category.value!r} and {entry.category.value!r}"
            )
        category = entry.category
        if entry.name in bound:
            raise DuplicateEntryError(entry.category, entry.name)
        bound[entry.name] = entry.load()

    if category is not None:
        _logger.debug(f"[catalog] bound {len(bound)} entries for {category.value}")
    return MappingProxyType(bound)


def assemble_catalog(
    groups: Mapping[Enum, Mapping[str, str]],
    categories: Iterable[Enum],
) -> Catalog:
    """
    组合各分类映射为完整 Catalog。

    - groups 中出现未声明分类 -> UnknownCategoryError
    - 声明分类缺失或为空 -> EmptyCategoryError
    """
    declared = list(categories)
    for category in groups:
        if category not in declared:
            raise UnknownCategoryError(category)

    catalog: dict[Enum, Mapping[str, str]] = {}
    for category in declared:
        group = groups.get(category)
        if not group:
            raise EmptyCategoryError(category)
        catalog[category] = group if isinstance(group, MappingProxyType) else MappingProxyType(dict(group))
    return MappingProxyType(catalog)


def build_catalog(entries: Iterable[CatalogEntry], categories: Iterable[Enum]) -> Catalog:
    """一步完成：按分类分组 -> bind_group -> assemble_catalog。"""
    declared = list(categories)
    by_category: dict[Enum, list[CatalogEntry]] = {}
    for entry in entries:
        if entry.category not in declared:
            raise UnknownCategoryError(entry.category)
        by_category.setdefault(entry.category, []).append(entry)

    groups = {category: bind_group(items) for category, items in by_category.items()}
    return assemble_catalog(groups, declared)


def lookup(catalog: Catalog, category: Enum, name: str) -> str:
    """按 category/name 取文本；不存在时抛 EntryNotFoundError。"""
    group = catalog.get(category)
    if group is None:
        raise EntryNotFoundError(category)
    if name not in group:
        raise EntryNotFoundError(category, name)
    return group[name]
