"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from tokenscript_schemas.cli import cli

SAMPLE_SCHEMAS_DIR = Path(__file__).resolve().parents[3] / "samples" / "schemas"
CUSTOM_BASE_URL = "https://custom.example.com"


def test_bundle_command_writes_bundle_file(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "bundle.json"

    result = runner.invoke(
        cli,
        [
            "bundle",
            "function:invert",
            "--schemas-dir",
            str(SAMPLE_SCHEMAS_DIR),
            "--output",
            str(output_path),
            "--base-url",
            CUSTOM_BASE_URL,
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Dependency tree:" in result.output
    assert "└── function:invert" in result.output
    assert "✓ Bundled 3 schemas" in result.output
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert [entry["uri"] for entry in payload["schemas"]][-1] == (
        f"{CUSTOM_BASE_URL}/api/v1/function/invert/0/"
    )
    assert payload["metadata"]["generatedBy"] == "tokenscript-schemas bundle function:invert"


def test_bundle_dry_run_does_not_write(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "bundle.json"

    result = runner.invoke(
        cli,
        [
            "bundle",
            "lighten",
            "--dry-run",
            "--schemas-dir",
            str(SAMPLE_SCHEMAS_DIR),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Bundle preview:" in result.output
    assert "Requested schemas: lighten" in result.output
    assert "  - hsl-color" in result.output
    assert not output_path.exists()


def test_bundle_command_reads_config_file(tmp_path: Path) -> None:
    config_path = tmp_path / "bundle.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "schemas": ["type:hex-color"],
                "output": "dist/colors.json",
                "schemas_dir": str(SAMPLE_SCHEMAS_DIR),
                "base_url": CUSTOM_BASE_URL,
            }
        ),
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["bundle", "ignored-slug", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    payload = json.loads((tmp_path / "dist" / "colors.json").read_text(encoding="utf-8"))
    assert payload["metadata"]["requestedSchemas"] == ["type:hex-color"]
    assert payload["schemas"][0]["uri"] == f"{CUSTOM_BASE_URL}/api/v1/core/hex-color/0/"


def test_build_command_prints_inlined_schema() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["build", str(SAMPLE_SCHEMAS_DIR / "types" / "hex-color")])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["name"] == "Hex"
    assert not payload["initializers"][0]["script"]["script"].startswith("./")


def test_build_command_writes_output_file(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "invert.json"

    result = runner.invoke(
        cli,
        [
            "build",
            str(SAMPLE_SCHEMAS_DIR / "functions" / "invert"),
            "--output",
            str(output_path),
            "--pretty",
        ],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(output_path.read_text(encoding="utf-8"))["keyword"] == "invert"


def test_build_registry_command_writes_artifacts(tmp_path: Path) -> None:
    runner = CliRunner()
    output_dir = tmp_path / "bundled"

    result = runner.invoke(
        cli,
        [
            "build-registry",
            "--schemas-dir",
            str(SAMPLE_SCHEMAS_DIR),
            "--output-dir",
            str(output_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Types: 3" in result.output
    assert "Functions: 3" in result.output
    assert "Total: 6" in result.output
    assert (output_dir / "registry.json").is_file()
    assert (output_dir / "types" / "rgb-color.json").is_file()
    assert (output_dir / "functions" / "lighten.json").is_file()


def test_list_command_filters_by_category() -> None:
    runner = CliRunner()

    everything = runner.invoke(cli, ["list", "--schemas-dir", str(SAMPLE_SCHEMAS_DIR)])
    functions = runner.invoke(
        cli, ["list", "--functions", "--schemas-dir", str(SAMPLE_SCHEMAS_DIR)]
    )

    assert everything.exit_code == 0
    assert "Types:" in everything.output
    assert "  function:invert" in everything.output
    assert functions.exit_code == 0
    assert "Types:" not in functions.output
    assert "  function:lighten" in functions.output


def test_presets_command_lists_presets() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["presets"])

    assert result.exit_code == 0
    assert "preset:css" in result.output
    assert "preset:ts" in result.output


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "tokenscript-schemas.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    assert yaml.safe_load(output_path.read_text(encoding="utf-8"))["schemas"] == [
        "preset:css",
        "type:hex-color",
    ]
