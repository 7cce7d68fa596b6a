from pathlib import Path

import pytest

from mdpress.assets import AssetCopier
from mdpress.errors import SiteIOError

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe"


def test_copy_is_byte_identical(tmp_path):
    source = tmp_path / "logo.png"
    source.write_bytes(PNG_BYTES)
    copier = AssetCopier(tmp_path / "out")
    dest = copier.copy(source, Path("img/logo.png"))
    assert dest == tmp_path / "out" / "img" / "logo.png"
    assert dest.read_bytes() == PNG_BYTES


def test_copy_missing_source(tmp_path):
    copier = AssetCopier(tmp_path / "out")
    with pytest.raises(SiteIOError) as excinfo:
        copier.copy(tmp_path / "missing.css", Path("missing.css"))
    assert excinfo.value.source_path == tmp_path / "missing.css"


def test_copy_tree_mirrors_directory(tmp_path):
    static = tmp_path / "static"
    (static / "css").mkdir(parents=True)
    (static / "css" / "site.css").write_text("body{}", encoding="utf-8")
    (static / "robots.txt").write_text("User-agent: *", encoding="utf-8")
    out = tmp_path / "out"
    written = AssetCopier(out).copy_tree(static)
    assert written == [out / "css" / "site.css", out / "robots.txt"]
    assert (out / "css" / "site.css").read_text(encoding="utf-8") == "body{}"


def test_copy_tree_missing_directory(tmp_path):
    out = tmp_path / "out"
    assert AssetCopier(out).copy_tree(tmp_path / "static") == []
    assert not out.exists()
