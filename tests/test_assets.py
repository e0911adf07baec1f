"""
资源加载器单元测试

验证场景：
1. 原样读取：内容与文件字节逐字符一致（不修剪、不转换换行、保留 BOM）
2. 缺失文件：抛 AssetNotFoundError（同时是 FileNotFoundError）
3. 非 UTF-8：抛 AssetDecodeError
4. list_assets 只列出 .md / .mdc

运行方式：
    python -m pytest tests/test_assets.py -v
"""

import pytest

from aaid.assets import asset_digest, list_assets, load_asset
from aaid.errors import AssetDecodeError, AssetError, AssetNotFoundError


# ---------------------------------------------------------------------------
# 测试 1: 原样读取
# ---------------------------------------------------------------------------
class TestVerbatimLoad:

    def test_roadmap_content_returned_unmodified(self, make_asset_package):
        """`# Roadmap\\nStep 1...` 必须原样返回，首尾不做任何处理。"""
        pkg = make_asset_package({"roadmap.md": b"# Roadmap\nStep 1..."})

        assert load_asset(pkg, "roadmap.md") == "# Roadmap\nStep 1..."

    def test_crlf_and_bom_preserved(self, make_asset_package):
        """CRLF 与 BOM 不被规范化。"""
        raw = "\ufeff# Title\r\n\r\n  body with trailing spaces  \r\n".encode("utf-8")
        pkg = make_asset_package({"doc.md": raw})

        text = load_asset(pkg, "doc.md")

        assert text.encode("utf-8") == raw
        assert text.startswith("\ufeff")
        assert "\r\n" in text

    def test_non_ascii_content(self, make_asset_package):
        raw = "# Überblick\n测试 ✓\n".encode("utf-8")
        pkg = make_asset_package({"doc.mdc": raw})

        assert load_asset(pkg, "doc.mdc") == "# Überblick\n测试 ✓\n"

    def test_empty_file_is_empty_string(self, make_asset_package):
        pkg = make_asset_package({"empty.md": b""})

        assert load_asset(pkg, "empty.md") == ""


# ---------------------------------------------------------------------------
# 测试 2: 错误处理
# ---------------------------------------------------------------------------
class TestLoadErrors:

    def test_missing_file_raises(self, make_asset_package):
        pkg = make_asset_package({})

        with pytest.raises(AssetNotFoundError) as exc_info:
            load_asset(pkg, "nope.md")

        assert isinstance(exc_info.value, FileNotFoundError)
        assert "nope.md" in str(exc_info.value)

    def test_missing_package_raises(self):
        with pytest.raises(AssetNotFoundError):
            load_asset("aaid_no_such_package_xyz", "a.md")

    def test_invalid_utf8_raises(self, make_asset_package):
        pkg = make_asset_package({"bad.md": b"\xff\xfe\x00broken"})

        with pytest.raises(AssetDecodeError) as exc_info:
            load_asset(pkg, "bad.md")

        assert isinstance(exc_info.value, AssetError)
        assert exc_info.value.filename == "bad.md"


# ---------------------------------------------------------------------------
# 测试 3: 辅助函数
# ---------------------------------------------------------------------------
class TestHelpers:

    def test_list_assets_filters_by_suffix(self, make_asset_package):
        pkg = make_asset_package({"b.md": b"b", "a.mdc": b"a", "notes.txt": b"x"})

        assert list_assets(pkg) == ["a.mdc", "b.md"]

    def test_digest_is_sha256_of_utf8(self):
        assert asset_digest("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert asset_digest("é") != asset_digest("e")
