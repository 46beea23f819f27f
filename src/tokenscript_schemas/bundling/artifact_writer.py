"""JSON artifact writer service."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .bundle_models import BundledRegistry, SelectiveBundleResult

REGISTRY_FILENAME = "registry.json"
TYPES_FILENAME = "types.json"
FUNCTIONS_FILENAME = "functions.json"


def render_json(payload: Any, *, pretty: bool = True) -> str:
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, ensure_ascii=False)


def write_json_artifact(path: Path | str, payload: Any, *, pretty: bool = True) -> Path:
    """Write ``payload`` as JSON, creating parent directories, and return the resolved path."""
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_json(payload, pretty=pretty), encoding="utf-8")
    return destination.resolve()


def write_bundle_file(
    result: SelectiveBundleResult, output_path: Path | str, *, pretty: bool = True
) -> Path:
    """Write a selective bundle as ``{schemas: [{uri, schema}], metadata}``."""
    return write_json_artifact(output_path, result.to_dict(), pretty=pretty)


def write_registry_artifacts(registry: BundledRegistry, output_dir: Path | str) -> list[Path]:
    """Write the complete registry, the category bundles and one file per schema."""
    destination = Path(output_dir)
    written = [
        write_json_artifact(destination / REGISTRY_FILENAME, registry.to_dict()),
        write_json_artifact(
            destination / TYPES_FILENAME,
            {"version": registry.version, "types": [item.to_dict() for item in registry.types]},
        ),
        write_json_artifact(
            destination / FUNCTIONS_FILENAME,
            {
                "version": registry.version,
                "functions": [item.to_dict() for item in registry.functions],
            },
        ),
    ]
    for document in (*registry.types, *registry.functions):
        written.append(
            write_json_artifact(
                destination / document.kind.directory_name / f"{document.slug}.json",
                document.to_dict(),
            )
        )
    return written
