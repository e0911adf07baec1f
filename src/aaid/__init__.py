"""
aaid：AAID（Augmented AI Development）prompt 与规则文档的分发包。

所有文本在导入期一次性加载为只读字符串常量，按分类组织：
- aaid.prompts：PromptCategory -> name -> text
- aaid.rules：RulesCategory -> name -> text

功能：
- get_prompt / get_rule：按分类与名称取原始文本
- PROMPTS / RULES：完整只读目录
"""

from __future__ import annotations

from enum import Enum

from .catalog import CatalogEntry, lookup
from .errors import (
    AaidError,
    AssetDecodeError,
    AssetError,
    AssetNotFoundError,
    BundleError,
    CatalogError,
    DuplicateEntryError,
    EmptyCategoryError,
    EntryNotFoundError,
    UnknownCategoryError,
)
from .prompts import PROMPT_ENTRIES, PROMPTS
from .rules import RULE_ENTRIES, RULES
from .types import (
    PromptCatalog,
    PromptCategory,
    PromptMap,
    RuleCatalog,
    RuleMap,
    RulesCategory,
    parse_category,
)

__version__ = "0.3.0"


def get_prompt(category: PromptCategory | str, name: str) -> str:
    """取 prompt 原文；分类或名称未知时抛 EntryNotFoundError。"""
    return lookup(PROMPTS, _category(category, PromptCategory), name)


def get_rule(category: RulesCategory | str, name: str) -> str:
    """取规则原文；分类或名称未知时抛 EntryNotFoundError。"""
    return lookup(RULES, _category(category, RulesCategory), name)


def _category(value: Enum | str, categories: type[Enum]) -> Enum:
    try:
        return parse_category(value, categories)
    except ValueError:
        raise EntryNotFoundError(value) from None


__all__ = [
    "__version__",
    "PROMPTS",
    "RULES",
    "PROMPT_ENTRIES",
    "RULE_ENTRIES",
    "get_prompt",
    "get_rule",
    "CatalogEntry",
    "PromptCatalog",
    "PromptCategory",
    "PromptMap",
    "RuleCatalog",
    "RuleMap",
    "RulesCategory",
    "AaidError",
    "AssetError",
    "AssetNotFoundError",
    "AssetDecodeError",
    "BundleError",
    "CatalogError",
    "DuplicateEntryError",
    "EmptyCategoryError",
    "EntryNotFoundError",
    "UnknownCategoryError",
]
