"""调查与问题定位类 prompt（只分析、不改代码，完成后停下等待指示）。"""

from __future__ import annotations

from aaid.catalog import bind_group, entries_for
from aaid.types import PromptCategory, PromptMap

CATEGORY = PromptCategory.INVESTIGATION_AND_PROBLEM_SOLVING

ENTRIES = entries_for(
    CATEGORY,
    __name__,
    {
        "analyze_and_stop": "analyze-&-stop.md",
        "analyze_command_and_stop": "analyze-command-&-stop.md",
        "debug_and_stop": "debug-&-stop.md",
        "minimal_fix_and_analyze_and_stop": "minimal-fix-&-analyze-&-stop.md",
        "research_and_stop": "research-&-stop.md",
    },
)

PROMPTS: PromptMap = bind_group(ENTRIES)

ANALYZE_AND_STOP: str = PROMPTS["analyze_and_stop"]
ANALYZE_COMMAND_AND_STOP: str = PROMPTS["analyze_command_and_stop"]
DEBUG_AND_STOP: str = PROMPTS["debug_and_stop"]
MINIMAL_FIX_AND_ANALYZE_AND_STOP: str = PROMPTS["minimal_fix_and_analyze_and_stop"]
RESEARCH_AND_STOP: str = PROMPTS["research_and_stop"]

__all__ = [
    "CATEGORY",
    "ENTRIES",
    "PROMPTS",
    "ANALYZE_AND_STOP",
    "ANALYZE_COMMAND_AND_STOP",
    "DEBUG_AND_STOP",
    "MINIMAL_FIX_AND_ANALYZE_AND_STOP",
    "RESEARCH_AND_STOP",
]
