"""Terminal rendering tests for bundle results."""

from __future__ import annotations

from tokenscript_schemas.bundling import BundlePreset
from tokenscript_schemas.dependency_resolution import DependencyNode
from tokenscript_schemas.results_writing import (
    format_dependency_tree,
    format_dry_run_output,
    format_list_output,
    format_preset_info,
)
from tokenscript_schemas.schema_management import SchemaListing
from tokenscript_schemas.schema_management.schema_models import SchemaKind


def _tree() -> dict[str, DependencyNode]:
    return {
        "function:a": DependencyNode("a", SchemaKind.FUNCTION, ("type:b", "type:c")),
        "type:b": DependencyNode("b", SchemaKind.TYPE, ("type:c",)),
        "type:c": DependencyNode("c", SchemaKind.TYPE, ()),
    }


def test_dependency_tree_marks_repeated_nodes() -> None:
    rendered = format_dependency_tree(_tree(), ["function:a"])

    assert rendered.splitlines() == [
        "Dependency tree:",
        "",
        "└── function:a",
        "    ├── type:b",
        "    │   └── type:c",
        "    └── type:c (already visited)",
    ]


def test_dependency_tree_accepts_bare_slugs() -> None:
    rendered = format_dependency_tree(_tree(), ["b", "a"])

    lines = rendered.splitlines()
    assert lines[2] == "├── type:b"
    assert lines[4] == "└── function:a"


def test_dry_run_output_sorts_schemas() -> None:
    rendered = format_dry_run_output(["function:invert"], ["rgb-color", "invert", "hex-color"])

    assert rendered.splitlines() == [
        "Bundle preview:",
        "",
        "Requested schemas: function:invert",
        "Total schemas (with dependencies): 3",
        "",
        "Schemas to be bundled:",
        "  - hex-color",
        "  - invert",
        "  - rgb-color",
    ]


def test_list_output_prefixes_functions() -> None:
    listing = SchemaListing(types=("hex-color",), functions=("invert",))

    assert format_list_output(listing).splitlines() == [
        "Types:",
        "  hex-color",
        "",
        "Functions:",
        "  function:invert",
    ]
    assert format_list_output(listing, types=False) == "Functions:\n  function:invert"
    assert format_list_output(SchemaListing(types=(), functions=())) == "No schemas found."


def test_preset_info_lists_members_and_usage() -> None:
    presets = {"mini": BundlePreset("Mini", "Minimal set", types=("hex-color",), functions=())}

    rendered = format_preset_info(presets)

    assert "preset:mini" in rendered
    assert "  Minimal set" in rendered
    assert "  Types (1):" in rendered
    assert "    - hex-color" in rendered
    assert "  Functions (0):" in rendered
    assert "tokenscript-schemas bundle preset:css" in rendered


def test_dependency_tree_accepts_registry_uris() -> None:
    rendered = format_dependency_tree(_tree(), ["/api/v1/function/a/0/"])

    assert rendered.splitlines()[2] == "└── function:a"
    assert "    ├── type:b" in rendered
