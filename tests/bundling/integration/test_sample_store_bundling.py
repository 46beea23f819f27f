"""Bundling against the sample schema store shipped with the repository."""

from __future__ import annotations

import json
from pathlib import Path

from tokenscript_schemas.bundling import (
    SelectiveBundleRequest,
    bundle_all_schemas,
    bundle_selective_schemas,
    write_bundle_file,
)
from tokenscript_schemas.dependency_resolution import SchemaSeed, collect_required_schemas
from tokenscript_schemas.schema_management import DEFAULT_REGISTRY_URL
from tokenscript_schemas.schema_management.schema_models import SchemaKind

SAMPLE_SCHEMAS_DIR = Path(__file__).resolve().parents[3] / "samples" / "schemas"


def test_hex_color_bundle_has_exactly_one_entry() -> None:
    result = bundle_selective_schemas(
        SelectiveBundleRequest(
            schemas=("hex-color",), schemas_dir=SAMPLE_SCHEMAS_DIR, base_url=DEFAULT_REGISTRY_URL
        )
    )

    assert [entry.uri for entry in result.schemas] == [
        f"{DEFAULT_REGISTRY_URL}/api/v1/core/hex-color/0/"
    ]


def test_invert_requires_rgb_and_its_conversion_partner() -> None:
    resolved = collect_required_schemas(
        [SchemaSeed("invert", SchemaKind.FUNCTION)],
        SAMPLE_SCHEMAS_DIR,
        include_color_type_dependencies=True,
    )

    assert set(resolved.types) >= {"rgb-color", "hex-color"}
    assert resolved.functions == ()


def test_lighten_without_closure_needs_only_hsl() -> None:
    resolved = collect_required_schemas(
        [SchemaSeed("lighten", SchemaKind.FUNCTION)], SAMPLE_SCHEMAS_DIR
    )

    assert resolved.types == ("hsl-color",)


def test_bundle_file_contains_inlined_scripts(tmp_path: Path) -> None:
    result = bundle_selective_schemas(
        SelectiveBundleRequest(
            schemas=("function:auto_text_color", "lighten"),
            schemas_dir=SAMPLE_SCHEMAS_DIR,
            base_url=DEFAULT_REGISTRY_URL,
            cli_args=("function:auto_text_color", "lighten"),
        )
    )

    written = write_bundle_file(result, tmp_path / "out" / "bundle.json")

    payload = json.loads(written.read_text(encoding="utf-8"))
    assert set(payload["metadata"]["resolvedDependencies"]) == {
        "auto_text_color",
        "lighten",
        "invert",
        "hsl-color",
        "rgb-color",
        "hex-color",
    }
    for entry in payload["schemas"]:
        schema = entry["schema"]
        blocks = [schema["script"]] if schema["type"] == "function" else [
            item["script"] for item in (*schema["initializers"], *schema["conversions"])
        ]
        assert all(not block["script"].startswith("./") for block in blocks)
        assert entry["uri"].startswith(f"{DEFAULT_REGISTRY_URL}/api/v1/")


def test_sample_registry_builds_without_failures(tmp_path: Path) -> None:
    outcome = bundle_all_schemas(SAMPLE_SCHEMAS_DIR, tmp_path, base_url=DEFAULT_REGISTRY_URL)

    assert outcome.failed == ()
    assert [item.slug for item in outcome.registry.types] == [
        "hex-color",
        "hsl-color",
        "rgb-color",
    ]
    assert [item.slug for item in outcome.registry.functions] == [
        "auto_text_color",
        "invert",
        "lighten",
    ]
    assert (tmp_path / "registry.json").is_file()
