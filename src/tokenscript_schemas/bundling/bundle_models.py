"""Bundling entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from tokenscript_schemas.dependency_resolution.dependency_models import DependencyNode
from tokenscript_schemas.schema_management.schema_models import (
    ColorSpecification,
    FunctionSpecification,
    SchemaDocument,
)

GENERATED_BY_COMMAND = "tokenscript-schemas bundle"


@dataclass(frozen=True)
class SelectiveBundleRequest:
    """Input contract for bundling a selection of schemas."""

    schemas: tuple[str, ...]
    schemas_dir: Path
    base_url: str
    cli_args: tuple[str, ...] = ()


@dataclass(frozen=True)
class BundledSchemaEntry:
    """One inlined schema with its canonical registry URI."""

    uri: str
    schema: SchemaDocument

    def to_dict(self) -> dict[str, Any]:
        return {"uri": self.uri, "schema": self.schema.to_dict()}


@dataclass(frozen=True)
class BundleMetadata:
    """Provenance of a selective bundle."""

    requested_schemas: tuple[str, ...]
    resolved_dependencies: tuple[str, ...]
    generated_at: datetime
    generated_by: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "requestedSchemas": list(self.requested_schemas),
            "resolvedDependencies": list(self.resolved_dependencies),
            "generatedAt": format_timestamp(self.generated_at),
        }
        if self.generated_by is not None:
            payload["generatedBy"] = self.generated_by
        return payload


@dataclass(frozen=True)
class SelectiveBundleResult:
    """Output contract of the selective bundler."""

    schemas: tuple[BundledSchemaEntry, ...]
    metadata: BundleMetadata
    dependency_tree: Mapping[str, DependencyNode] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schemas": [entry.to_dict() for entry in self.schemas],
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class BundledRegistry:
    """Every schema of a schema store, inlined."""

    version: str
    types: tuple[ColorSpecification, ...]
    functions: tuple[FunctionSpecification, ...]
    generated_at: datetime
    generated_by: str

    @property
    def total_schemas(self) -> int:
        return len(self.types) + len(self.functions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "types": [item.to_dict() for item in self.types],
            "functions": [item.to_dict() for item in self.functions],
            "metadata": {
                "generatedAt": format_timestamp(self.generated_at),
                "totalSchemas": self.total_schemas,
                "generatedBy": self.generated_by,
            },
        }


def build_generated_by(cli_args: Sequence[str]) -> str | None:
    """Render the command that produced a bundle, when CLI arguments are known."""
    if not cli_args:
        return None
    return f"{GENERATED_BY_COMMAND} {' '.join(cli_args)}"


def format_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
