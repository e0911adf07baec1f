"""
TDD 三阶段 prompt。

RED -> GREEN -> REFACTOR，每个阶段结束后都要求模型停下等待 review。
"""

from __future__ import annotations

from aaid.catalog import bind_group, entries_for
from aaid.types import PromptCategory, PromptMap

CATEGORY = PromptCategory.TDD

ENTRIES = entries_for(
    CATEGORY,
    __name__,
    {
        "red_phase": "red-phase.md",
        "green_phase": "green-phase.md",
        "refactor_phase": "refactor-phase.md",
    },
)

PROMPTS: PromptMap = bind_group(ENTRIES)

RED_PHASE: str = PROMPTS["red_phase"]
GREEN_PHASE: str = PROMPTS["green_phase"]
REFACTOR_PHASE: str = PROMPTS["refactor_phase"]

__all__ = [
    "CATEGORY",
    "ENTRIES",
    "PROMPTS",
    "RED_PHASE",
    "GREEN_PHASE",
    "REFACTOR_PHASE",
]
