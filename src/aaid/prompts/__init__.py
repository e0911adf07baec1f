"""
Prompt 目录（按分类组织）。

用法：
    from aaid.prompts import PROMPTS, tdd
    from aaid.types import PromptCategory

    PROMPTS[PromptCategory.TDD]["red_phase"] == tdd.RED_PHASE
"""

from __future__ import annotations

from aaid.catalog import assemble_catalog
from aaid.types import PromptCatalog, PromptCategory

from . import investigation_and_problem_solving, misc, setup_and_planning, tdd

_MODULES = (investigation_and_problem_solving, misc, setup_and_planning, tdd)

PROMPT_ENTRIES = tuple(entry for module in _MODULES for entry in module.ENTRIES)

PROMPTS: PromptCatalog = assemble_catalog(
    {module.CATEGORY: module.PROMPTS for module in _MODULES},
    PromptCategory,
)

__all__ = [
    "PROMPTS",
    "PROMPT_ENTRIES",
    "investigation_and_problem_solving",
    "misc",
    "setup_and_planning",
    "tdd",
]
