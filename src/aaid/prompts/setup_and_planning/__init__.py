"""项目准备与规划类 prompt：roadmap 模板与项目上下文。"""

from __future__ import annotations

from aaid.catalog import bind_group, entries_for
from aaid.types import PromptCategory, PromptMap

CATEGORY = PromptCategory.SETUP_AND_PLANNING

ENTRIES = entries_for(
    CATEGORY,
    __name__,
    {
        "ai_presentation_roadmap_template": "ai-presentation-roadmap-template.md",
        "ai_roadmap_template": "ai-roadmap-template.md",
        "ai_technical_roadmap_template": "ai-technical-roadmap-template.md",
        "project_context": "project-context.md",
    },
)

PROMPTS: PromptMap = bind_group(ENTRIES)

AI_PRESENTATION_ROADMAP_TEMPLATE: str = PROMPTS["ai_presentation_roadmap_template"]
AI_ROADMAP_TEMPLATE: str = PROMPTS["ai_roadmap_template"]
AI_TECHNICAL_ROADMAP_TEMPLATE: str = PROMPTS["ai_technical_roadmap_template"]
PROJECT_CONTEXT: str = PROMPTS["project_context"]

__all__ = [
    "CATEGORY",
    "ENTRIES",
    "PROMPTS",
    "AI_PRESENTATION_ROADMAP_TEMPLATE",
    "AI_ROADMAP_TEMPLATE",
    "AI_TECHNICAL_ROADMAP_TEMPLATE",
    "PROJECT_CONTEXT",
]
