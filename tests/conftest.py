"""
测试公共 fixture。

- make_asset_package：在 tmp_path 下生成一个临时可导入包，用于验证资源加载细节
- isolated_config：隔离 HOME / 工作目录 / AAID_ 环境变量，避免读到本机配置
"""

import importlib
import os
import sys
import uuid

import pytest

from aaid.config import reset_config


@pytest.fixture
def make_asset_package(tmp_path, monkeypatch):
    created: list[str] = []

    def _make(files: dict[str, bytes]) -> str:
        name = f"aaid_fixture_{uuid.uuid4().hex}"
        pkg_dir = tmp_path / name
        pkg_dir.mkdir()
        (pkg_dir / "__init__.py").write_text("", encoding="utf-8")
        for filename, data in files.items():
            (pkg_dir / filename).write_bytes(data)
        monkeypatch.syspath_prepend(str(tmp_path))
        importlib.invalidate_caches()
        created.append(name)
        return name

    yield _make

    for name in created:
        sys.modules.pop(name, None)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("AAID_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield work
    reset_config()
