"""CLI error-handling tests."""

from __future__ import annotations

import json
from pathlib import Path

from tokenscript_schemas.cli import main


def test_bundle_without_schemas_returns_clean_error(capsys) -> None:
    exit_code = main(["bundle"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "No schemas specified" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["bundle", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--bogus" in captured.err


def test_missing_config_file_is_reported(tmp_path: Path, capsys) -> None:
    exit_code = main(["bundle", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Config file not found" in captured.err


def test_unknown_schema_is_reported(tmp_path: Path, capsys) -> None:
    (tmp_path / "types").mkdir()
    (tmp_path / "functions").mkdir()

    exit_code = main(["bundle", "nonexistent", "--schemas-dir", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema 'nonexistent' not found" in captured.err


def test_build_missing_directory_is_reported(tmp_path: Path, capsys) -> None:
    exit_code = main(["build", str(tmp_path / "nope")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Directory not found" in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    target = tmp_path / "tokenscript-schemas.yaml"
    target.write_text("schemas: []\n", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(target)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert target.read_text(encoding="utf-8") == "schemas: []\n"


def _write_function_schema(schemas_dir: Path, slug: str, requirements: list[str]) -> Path:
    schema_dir = schemas_dir / "functions" / slug
    schema_dir.mkdir(parents=True)
    descriptor = {
        "name": slug,
        "type": "function",
        "keyword": slug,
        "script": {"type": "/api/v1/core/tokenscript/0/", "script": "./script.tokenscript"},
        "requirements": requirements,
    }
    (schema_dir / "schema.json").write_text(json.dumps(descriptor), encoding="utf-8")
    (schema_dir / "script.tokenscript").write_text("return {input};", encoding="utf-8")
    return schema_dir


def test_bundle_skips_malformed_requirement_uri(tmp_path: Path, capsys) -> None:
    schemas_dir = tmp_path / "schemas"
    (schemas_dir / "types").mkdir(parents=True)
    _write_function_schema(schemas_dir, "fn", ["http://[::1/api/v1/core/rgb-color/0/"])

    exit_code = main(
        [
            "bundle",
            "function:fn",
            "--schemas-dir",
            str(schemas_dir),
            "--output",
            str(tmp_path / "bundle.json"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Traceback" not in captured.err
    assert (tmp_path / "bundle.json").is_file()


def test_build_reports_undecodable_script_file(tmp_path: Path, capsys) -> None:
    schema_dir = _write_function_schema(tmp_path / "schemas", "fn", [])
    (schema_dir / "script.tokenscript").write_bytes(b"\xff\xfe bad")

    exit_code = main(["build", str(schema_dir)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid script file" in captured.err
    assert "Traceback" not in captured.err
