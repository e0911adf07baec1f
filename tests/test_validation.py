"""
目录自检测试（validate_catalog）。

运行方式：
    python -m pytest tests/test_validation.py -v
"""

from aaid import PROMPT_ENTRIES, RULE_ENTRIES
from aaid.catalog import entries_for
from aaid.prompts import tdd
from aaid.types import PromptCategory
from aaid.validation import ValidationReport, _check_kind, validate_catalog


class TestValidateCatalog:

    def test_shipped_catalog_is_valid(self):
        report = validate_catalog()

        assert report.ok, report.errors
        assert report.checked == len(PROMPT_ENTRIES) + len(RULE_ENTRIES)
        assert report.notes == []

    def test_detects_text_mismatch(self):
        entries = entries_for(PromptCategory.TDD, "aaid.prompts.tdd", {"red_phase": "red-phase.md"})
        catalog = {category: {"red_phase": "tampered"} for category in PromptCategory}
        report = ValidationReport()

        _check_kind(report, "prompts", entries, catalog, PromptCategory)

        assert not report.ok
        assert any("differs" in e for e in report.errors)

    def test_detects_missing_source_and_duplicates(self):
        entries = entries_for(
            PromptCategory.TDD,
            "aaid.prompts.tdd",
            [("x", "missing.md"), ("x", "missing.md")],
        )
        catalog = {category: {"x": ""} for category in PromptCategory}
        report = ValidationReport()

        _check_kind(report, "prompts", entries, catalog, PromptCategory)

        assert any("declared 2 times" in e for e in report.errors)
        assert any("missing.md" in e for e in report.errors)

    def test_detects_missing_category_and_unreferenced_files(self):
        entries = entries_for(PromptCategory.TDD, "aaid.prompts.tdd", {"red_phase": "red-phase.md"})
        catalog = {PromptCategory.TDD: {"red_phase": tdd.RED_PHASE}}
        report = ValidationReport()

        _check_kind(report, "prompts", entries, catalog, PromptCategory)

        assert any("'misc' missing" in e for e in report.errors)
        assert any("green-phase.md is not referenced" in n for n in report.notes)
