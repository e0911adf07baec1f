"""
Bundle 导出：把完整目录写成可分发的文件树 + manifest。

输出结构：
    <out_dir>/
    ├── manifest.json
    ├── prompts/<category>/<源文件名>
    └── rules/<category>/<源文件名>

约定：
- 每个文件的字节与包内源文档完全一致
- manifest 按键排序、不含时间戳；源文档不变时重复导出结果逐字节一致
- clean=True 时先删除旧输出；非 aaid 导出目录（无 manifest.json 且非空）拒绝删除
"""

from __future__ import annotations

import json
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

from . import PROMPT_ENTRIES, PROMPTS, RULE_ENTRIES, RULES, __version__
from .assets import asset_digest
from .catalog import CatalogEntry
from .errors import BundleError

_logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"
MANIFEST_VERSION = "1"


@dataclass(frozen=True)
class BundleResult:
    out_dir: Path
    manifest_path: Path
    entry_count: int


def _iter_kinds() -> Iterable[tuple[str, tuple[CatalogEntry, ...], Mapping[Any, Mapping[str, str]]]]:
    yield "prompts", PROMPT_ENTRIES, PROMPTS
    yield "rules", RULE_ENTRIES, RULES


def _clean(out_dir: Path) -> None:
    if not out_dir.exists():
        return
    if not out_dir.is_dir():
        raise BundleError(f"export target is not a directory: {out_dir}")
    if any(out_dir.iterdir()) and not (out_dir / MANIFEST_NAME).is_file():
        raise BundleError(f"refusing to clean {out_dir}: not an aaid export (missing {MANIFEST_NAME})")
    shutil.rmtree(out_dir)
    _logger.info(f"[bundle] removed previous output: {out_dir}")


def _publish_atomic(payload: dict[str, Any], path: Path) -> None:
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    text = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
    tmp_path.write_bytes(text.encode("utf-8"))
    os.replace(str(tmp_path), str(path))


def export_bundle(out_dir: str | Path, *, clean: bool = True) -> BundleResult:
    """
    导出全部 prompt 与规则到 out_dir。

    参数:
        out_dir: 目标目录
        clean: 是否先清空旧输出（干净重建）

    返回:
        BundleResult
    """
    out = Path(out_dir)
    if clean:
        _clean(out)
    out.mkdir(parents=True, exist_ok=True)

    records: list[dict[str, Any]] = []
    for kind, entries, catalog in _iter_kinds():
        for entry in entries:
            text = catalog[entry.category][entry.name]
            data = text.encode("utf-8")
            rel = Path(kind) / entry.category.value / entry.filename
            target = out / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
            records.append(
                {
                    "kind": kind,
                    "category": entry.category.value,
                    "name": entry.name,
                    "path": rel.as_posix(),
                    "sha256": asset_digest(text),
                    "size": len(data),
                }
            )

    records.sort(key=lambda r: (r["kind"], r["category"], r["name"]))
    manifest = {
        "version": MANIFEST_VERSION,
        "package": "aaid",
        "package_version": __version__,
        "entries": records,
    }
    manifest_path = out / MANIFEST_NAME
    _publish_atomic(manifest, manifest_path)

    _logger.info(f"[bundle] exported {len(records)} entries to {out}")
    return BundleResult(out_dir=out, manifest_path=manifest_path, entry_count=len(records))


def load_manifest(out_dir: str | Path) -> dict[str, Any]:
    """读取已导出目录的 manifest。"""
    path = Path(out_dir) / MANIFEST_NAME
    if not path.is_file():
        raise BundleError(f"manifest not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise BundleError(f"manifest is not valid JSON: {path}") from e
