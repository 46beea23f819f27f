"""Text rendering of bundle results for terminal output."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from tokenscript_schemas.bundling.bundle_presets import BundlePreset
from tokenscript_schemas.dependency_resolution.dependency_models import DependencyNode
from tokenscript_schemas.schema_management.schema_catalog import SchemaListing
from tokenscript_schemas.schema_management.schema_models import SchemaKind, schema_key
from tokenscript_schemas.schema_management.schema_uri import parse_schema_uri

_BRANCH = "├── "
_LAST_BRANCH = "└── "
_PIPE = "│   "
_SPACE = "    "
_RULE = "=" * 60


def format_dependency_tree(
    tree: Mapping[str, DependencyNode], requested_schemas: Sequence[str]
) -> str:
    """Render the direct-dependency tree rooted at the requested schemas."""
    lines = ["Dependency tree:", ""]
    visited: set[str] = set()

    def render(key: str, indent: str, is_last: bool) -> None:
        if key in visited:
            return
        visited.add(key)
        node = tree.get(key)
        if node is None:
            return
        lines.append(f"{indent}{_LAST_BRANCH if is_last else _BRANCH}{node.key}")
        child_indent = indent + (_SPACE if is_last else _PIPE)
        for index, child_key in enumerate(node.dependencies):
            is_last_child = index == len(node.dependencies) - 1
            if child_key in visited:
                branch = _LAST_BRANCH if is_last_child else _BRANCH
                lines.append(f"{child_indent}{branch}{child_key} (already visited)")
            else:
                render(child_key, child_indent, is_last_child)

    for index, requested in enumerate(requested_schemas):
        render(_tree_key(tree, requested), "", index == len(requested_schemas) - 1)

    return "\n".join(lines)


def format_dry_run_output(
    requested_schemas: Sequence[str], resolved_dependencies: Sequence[str]
) -> str:
    lines = [
        "Bundle preview:",
        "",
        f"Requested schemas: {', '.join(requested_schemas)}",
        f"Total schemas (with dependencies): {len(resolved_dependencies)}",
        "",
        "Schemas to be bundled:",
    ]
    lines.extend(f"  - {slug}" for slug in sorted(resolved_dependencies))
    return "\n".join(lines)


def format_list_output(
    listing: SchemaListing, *, types: bool = True, functions: bool = True
) -> str:
    lines: list[str] = []
    if types and listing.types:
        lines.append("Types:")
        lines.extend(f"  {slug}" for slug in listing.types)
    if functions and listing.functions:
        if lines:
            lines.append("")
        lines.append("Functions:")
        lines.extend(f"  function:{slug}" for slug in listing.functions)
    if not lines:
        lines.append("No schemas found.")
    return "\n".join(lines)


def format_preset_info(presets: Mapping[str, BundlePreset]) -> str:
    lines = [_RULE, "Available Bundle Presets", _RULE]
    for key, preset in presets.items():
        lines.extend(["", f"preset:{key}", f"  {preset.description}"])
        lines.extend(["", f"  Types ({len(preset.types)}):"])
        lines.extend(f"    - {slug}" for slug in preset.types)
        lines.extend(["", f"  Functions ({len(preset.functions)}):"])
        lines.extend(f"    - {slug}" for slug in preset.functions)
    lines.extend(
        [
            "",
            _RULE,
            "Usage Examples:",
            _RULE,
            "tokenscript-schemas bundle preset:css",
            "tokenscript-schemas bundle preset:css type:oklab-color",
            "tokenscript-schemas bundle type:hex-color function:lighten",
            "",
            "Note: You can combine multiple presets and specific schemas!",
        ]
    )
    return "\n".join(lines)


def _tree_key(tree: Mapping[str, DependencyNode], requested: str) -> str:
    if requested in tree:
        return requested
    components = parse_schema_uri(requested)
    if components is not None:
        kind = SchemaKind.FUNCTION if components.category == "function" else SchemaKind.TYPE
        return schema_key(kind, components.name)
    for kind in SchemaKind:
        key = schema_key(kind, requested)
        if key in tree:
            return key
    return requested
