"""
类型层：分类枚举与映射形状。

- PromptCategory / RulesCategory 为封闭集合（str Enum），拼写错误在导入期即暴露
- PromptMap / RuleMap：entry 名称 -> 原始文本（只读）
- Catalog：category -> name -> text 两级只读映射
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, TypeVar


class PromptCategory(str, Enum):
    """Prompt 分类（固定集合，构建期确定）。"""

    INVESTIGATION_AND_PROBLEM_SOLVING = "investigation-and-problem-solving"
    MISC = "misc"
    SETUP_AND_PLANNING = "setup-and-planning"
    TDD = "tdd"


class RulesCategory(str, Enum):
    """规则文档分类。"""

    AAID = "aaid"


PromptMap = Mapping[str, str]
RuleMap = Mapping[str, str]

C = TypeVar("C", bound=Enum)

# category -> (name -> text)
Catalog = Mapping[C, Mapping[str, str]]
PromptCatalog = Mapping[PromptCategory, PromptMap]
RuleCatalog = Mapping[RulesCategory, RuleMap]


def parse_category(value: str | Enum, categories: type[C]) -> C:
    """
    把字符串（枚举值或成员名）解析为分类枚举。

    "setup-and-planning" / "SETUP_AND_PLANNING" / "setup_and_planning" 均可。
    未知值抛 ValueError。
    """
    if isinstance(value, categories):
        return value
    raw = str(value.value if isinstance(value, Enum) else value).strip()
    for member in categories:
        if raw == member.value or raw.upper() == member.name:
            return member
    allowed = ", ".join(m.value for m in categories)
    raise ValueError(f"unknown {categories.__name__}: {raw!r} (allowed: {allowed})")
