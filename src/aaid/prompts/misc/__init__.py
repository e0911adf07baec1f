"""其他 prompt。"""

from __future__ import annotations

from aaid.catalog import bind_group, entries_for
from aaid.types import PromptCategory, PromptMap

CATEGORY = PromptCategory.MISC

ENTRIES = entries_for(
    CATEGORY,
    __name__,
    {
        "explain_and_stop": "explain-&-stop.md",
        "generate_commit_message": "generate-commit-message.md",
    },
)

PROMPTS: PromptMap = bind_group(ENTRIES)

EXPLAIN_AND_STOP: str = PROMPTS["explain_and_stop"]
GENERATE_COMMIT_MESSAGE: str = PROMPTS["generate_commit_message"]

__all__ = [
    "CATEGORY",
    "ENTRIES",
    "PROMPTS",
    "EXPLAIN_AND_STOP",
    "GENERATE_COMMIT_MESSAGE",
]
