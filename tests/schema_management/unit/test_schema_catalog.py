"""Schema store listing tests."""

from __future__ import annotations

from pathlib import Path

from tokenscript_schemas.schema_management.schema_catalog import list_schemas


def test_lists_sorted_schema_directories(tmp_path: Path) -> None:
    for relative in ("types/rgb-color", "types/hex-color", "functions/invert"):
        (tmp_path / relative).mkdir(parents=True)
    (tmp_path / "types" / "README.md").write_text("not a schema", encoding="utf-8")

    listing = list_schemas(tmp_path)

    assert listing.types == ("hex-color", "rgb-color")
    assert listing.functions == ("invert",)


def test_missing_category_directory_yields_empty_listing(tmp_path: Path, caplog) -> None:
    (tmp_path / "types" / "hex-color").mkdir(parents=True)

    with caplog.at_level("WARNING"):
        listing = list_schemas(tmp_path)

    assert listing.types == ("hex-color",)
    assert listing.functions == ()
    assert "Could not read functions directory" in caplog.text


def test_category_filter_skips_unrequested_kind(tmp_path: Path) -> None:
    (tmp_path / "types" / "hex-color").mkdir(parents=True)
    (tmp_path / "functions" / "invert").mkdir(parents=True)

    listing = list_schemas(tmp_path, types=False)

    assert listing.types == ()
    assert listing.functions == ("invert",)
