"""AAID 工作流规则（Cursor .mdc 格式，原样分发）。"""

from __future__ import annotations

from aaid.catalog import bind_group, entries_for
from aaid.types import RuleMap, RulesCategory

CATEGORY = RulesCategory.AAID

ENTRIES = entries_for(
    CATEGORY,
    __name__,
    {
        "aaid": "aaid.mdc",
        "aaid_tdd_cycle": "aaid-tdd-cycle.mdc",
    },
)

RULES: RuleMap = bind_group(ENTRIES)

AAID: str = RULES["aaid"]
AAID_TDD_CYCLE: str = RULES["aaid_tdd_cycle"]

__all__ = [
    "CATEGORY",
    "ENTRIES",
    "RULES",
    "AAID",
    "AAID_TDD_CYCLE",
]
