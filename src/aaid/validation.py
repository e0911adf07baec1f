"""
目录自检：重新读取每个源文档并与导入期绑定的常量比对。

检查项：
- 常量与源文档逐字符一致
- 分类内名称唯一
- 分类集合与枚举完全一致，且无空分类
- 包内存在但未声明的源文档（提示，不算失败）
- 跨分类的同名 entry（提示，不算失败；唯一性只要求在分类内）
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping

from . import PROMPT_ENTRIES, PROMPTS, RULE_ENTRIES, RULES
from .assets import list_assets
from .catalog import CatalogEntry
from .errors import AssetError
from .types import PromptCategory, RulesCategory


@dataclass
class ValidationReport:
    checked: int = 0
    errors: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _check_kind(
    report: ValidationReport,
    kind: str,
    entries: Iterable[CatalogEntry],
    catalog: Mapping[Enum, Mapping[str, str]],
    categories: type[Enum],
) -> None:
    entries = tuple(entries)

    declared = set(categories)
    present = set(catalog.keys())
    for missing in sorted(declared - present, key=lambda c: c.value):
        report.errors.append(f"{kind}: category {missing.value!r} missing from catalog")
    for extra in sorted(present - declared, key=lambda c: str(c)):
        report.errors.append(f"{kind}: undeclared category {extra!r} in catalog")
    for category, group in catalog.items():
        if not group:
            report.errors.append(f"{kind}: category {category.value!r} is empty")

    counts = Counter((e.category, e.name) for e in entries)
    for (category, name), n in counts.items():
        if n > 1:
            report.errors.append(f"{kind}: name {name!r} declared {n} times in {category.value!r}")

    for entry in entries:
        report.checked += 1
        label = f"{kind}/{entry.category.value}/{entry.name}"
        try:
            source = entry.load()
        except AssetError as e:
            report.errors.append(f"{label}: {e}")
            continue
        bound = catalog.get(entry.category, {}).get(entry.name)
        if bound is None:
            report.errors.append(f"{label}: declared but not exported")
        elif bound != source:
            report.errors.append(f"{label}: exported text differs from {entry.source}")

    by_package: dict[str, set[str]] = {}
    for entry in entries:
        by_package.setdefault(entry.package, set()).add(entry.filename)
    for package, filenames in sorted(by_package.items()):
        for name in list_assets(package):
            if name not in filenames:
                report.notes.append(f"{kind}: {package}/{name} is not referenced by any entry")

    names_by_category: dict[str, set[str]] = {}
    for entry in entries:
        names_by_category.setdefault(entry.name, set()).add(entry.category.value)
    for name, cats in sorted(names_by_category.items()):
        if len(cats) > 1:
            report.notes.append(f"{kind}: name {name!r} reused across categories {sorted(cats)}")


def validate_catalog() -> ValidationReport:
    report = ValidationReport()
    _check_kind(report, "prompts", PROMPT_ENTRIES, PROMPTS, PromptCategory)
    _check_kind(report, "rules", RULE_ENTRIES, RULES, RulesCategory)
    return report
