"""规则文档目录。"""

from __future__ import annotations

from aaid.catalog import assemble_catalog
from aaid.types import RuleCatalog, RulesCategory

from . import aaid

RULE_ENTRIES = aaid.ENTRIES

RULES: RuleCatalog = assemble_catalog({aaid.CATEGORY: aaid.RULES}, RulesCategory)

__all__ = ["RULES", "RULE_ENTRIES", "aaid"]
