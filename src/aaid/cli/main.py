from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from aaid import PROMPT_ENTRIES, PROMPTS, RULE_ENTRIES, RULES, __version__
from aaid.assets import asset_digest
from aaid.catalog import lookup
from aaid.config import get_config
from aaid.errors import AaidError, EntryNotFoundError
from aaid.observability import configure_from
from aaid.types import PromptCategory, RulesCategory, parse_category

app = typer.Typer(help="aaid: AAID prompt 与规则目录（查看 / 校验 / 导出）。")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出 DEBUG 级别日志"),
) -> None:
    configure_from(get_config(), level="DEBUG" if verbose else None)


def _select(rules: bool):
    if rules:
        return "rules", RULE_ENTRIES, RULES, RulesCategory
    return "prompts", PROMPT_ENTRIES, PROMPTS, PromptCategory


@app.command()
def version() -> None:
    """Print package version."""
    typer.echo(__version__)


@app.command("list")
def list_entries(
    category: str = typer.Argument("", help="可选：只列出某个分类（如 tdd / setup-and-planning）"),
    rules: bool = typer.Option(False, "--rules", help="列出规则而不是 prompt"),
) -> None:
    """列出分类与 entry（名称、字符数、sha256 前缀）。"""
    kind, entries, catalog, categories = _select(rules)
    selected = None
    if category:
        try:
            selected = parse_category(category, categories)
        except ValueError as e:
            typer.echo(f"ERROR: {e}", err=True)
            raise typer.Exit(code=2)

    table = Table(title=f"aaid {kind}")
    table.add_column("category", style="cyan", no_wrap=True)
    table.add_column("name", style="bold")
    table.add_column("source")
    table.add_column("chars", justify="right")
    table.add_column("sha256", style="dim")
    for entry in entries:
        if selected is not None and entry.category != selected:
            continue
        text = catalog[entry.category][entry.name]
        table.add_row(entry.category.value, entry.name, entry.filename, str(len(text)), asset_digest(text)[:12])
    console.print(table)


@app.command()
def show(
    category: str = typer.Argument(..., help="分类（如 tdd）"),
    name: str = typer.Argument(..., help="entry 名称（如 red_phase）"),
    rules: bool = typer.Option(False, "--rules", help="从规则目录读取"),
) -> None:
    """把 entry 原文写到 stdout（不做任何处理）。"""
    _kind, _entries, catalog, categories = _select(rules)
    try:
        text = lookup(catalog, parse_category(category, categories), name)
    except (ValueError, EntryNotFoundError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    typer.echo(text, nl=False)


@app.command()
def validate() -> None:
    """
    校验目录：
    - 每个常量与源文档逐字符一致
    - 分类内名称唯一、分类集合完整且非空
    """
    from aaid.validation import validate_catalog

    report = validate_catalog()
    for note in report.notes:
        typer.echo(f"NOTE: {note}")
    if not report.ok:
        typer.echo("VALIDATE_FAILED:")
        for err in report.errors:
            typer.echo(f"- {err}")
        raise typer.Exit(code=2)
    typer.echo(f"VALIDATE_OK: {report.checked} entries")


@app.command("export")
def export_cmd(
    out_dir: Path = typer.Argument(..., help="导出目录"),
    clean: Optional[bool] = typer.Option(None, "--clean/--no-clean", help="导出前清空目标目录（默认读取配置 export.clean）"),
) -> None:
    """导出全部 prompt 与规则（含 manifest.json），用于分发或比对。"""
    from aaid.bundle import export_bundle

    do_clean = get_config().export.clean if clean is None else clean
    try:
        result = export_bundle(out_dir, clean=do_clean)
    except AaidError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    typer.echo(f"OK: exported {result.entry_count} entries to {result.out_dir}")


if __name__ == "__main__":
    app()
