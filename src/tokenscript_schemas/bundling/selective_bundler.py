"""Selective schema bundling use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from tokenscript_schemas.dependency_resolution import (
    DependencyCollector,
    RequirementOptions,
    SchemaSeed,
)
from tokenscript_schemas.schema_management.schema_models import SchemaKind
from tokenscript_schemas.schema_management.schema_uri import (
    SemanticVersion,
    build_schema_uri,
    parse_schema_uri,
)
from tokenscript_schemas.schema_management.script_inliner import (
    SchemaError,
    load_schema_directory,
)

from .bundle_models import (
    BundledSchemaEntry,
    BundleMetadata,
    SelectiveBundleRequest,
    SelectiveBundleResult,
    build_generated_by,
)

logger = logging.getLogger(__name__)

BUNDLED_SCHEMA_VERSION = SemanticVersion(0)
_KIND_PREFIXES = {f"{kind.value}:": kind for kind in SchemaKind}


class BundleError(Exception):
    """Raised when a bundle request cannot be fulfilled."""


def detect_schema_kind(slug: str, schemas_dir: Path | str) -> SchemaKind | None:
    """Return the kind whose store directory contains ``slug``, types first."""
    for kind in (SchemaKind.TYPE, SchemaKind.FUNCTION):
        if (Path(schemas_dir) / kind.directory_name / slug).is_dir():
            return kind
    return None


def parse_schema_identifier(identifier: str, schemas_dir: Path | str) -> SchemaSeed:
    """Turn a requested identifier into a seed.

    Accepts ``type:slug`` / ``function:slug``, a registry URI, or a bare slug whose
    kind is detected from the schema store.

    Raises:
      BundleError: If a bare slug exists in neither category directory.
    """
    for prefix, kind in _KIND_PREFIXES.items():
        if identifier.startswith(prefix):
            return SchemaSeed(slug=identifier[len(prefix) :], kind=kind)

    components = parse_schema_uri(identifier)
    if components is not None:
        kind = SchemaKind.FUNCTION if components.category == "function" else SchemaKind.TYPE
        return SchemaSeed(slug=components.name, kind=kind)

    detected = detect_schema_kind(identifier, schemas_dir)
    if detected is None:
        raise BundleError(
            f"Schema '{identifier}' not found in types or functions directories. "
            f"Use 'function:{identifier}' or 'type:{identifier}' prefix to be explicit."
        )
    return SchemaSeed(slug=identifier, kind=detected)


def bundled_schema_uri(seed: SchemaSeed, base_url: str) -> str:
    """Canonical registry URI of a bundled schema."""
    return build_schema_uri(
        seed.kind.registry_category, seed.slug, version=BUNDLED_SCHEMA_VERSION, base_url=base_url
    )


def bundle_selective_schemas(request: SelectiveBundleRequest) -> SelectiveBundleResult:
    """Bundle the requested schemas together with everything they need at runtime."""
    seeds = [
        parse_schema_identifier(identifier, request.schemas_dir) for identifier in request.schemas
    ]

    collector = DependencyCollector(
        request.schemas_dir,
        RequirementOptions(include_color_type_dependencies=True),
        base_url=request.base_url,
    )
    resolved = collector.collect_with_seeds(seeds)
    dependency_tree = collector.collect_dependency_tree(resolved.seeds())
    logger.info(
        "Resolved %d schemas for request %s", len(resolved.all_slugs()), list(request.schemas)
    )

    entries = tuple(_bundle_entry(seed, request) for seed in resolved.seeds())
    return SelectiveBundleResult(
        schemas=entries,
        metadata=BundleMetadata(
            requested_schemas=tuple(request.schemas),
            resolved_dependencies=resolved.all_slugs(),
            generated_at=datetime.now(UTC),
            generated_by=build_generated_by(request.cli_args),
        ),
        dependency_tree=dependency_tree,
    )


def _bundle_entry(seed: SchemaSeed, request: SelectiveBundleRequest) -> BundledSchemaEntry:
    schema_dir = Path(request.schemas_dir) / seed.kind.directory_name / seed.slug
    try:
        document = load_schema_directory(schema_dir, base_url=request.base_url)
    except (SchemaError, OSError, ValueError) as exc:
        raise BundleError(f"Failed to bundle {seed.key}: {exc}") from exc
    if document.kind is not seed.kind:
        raise BundleError(
            f"Schema {seed.key} is a {document.kind.value} schema, not a {seed.kind.value} schema."
        )
    return BundledSchemaEntry(uri=bundled_schema_uri(seed, request.base_url), schema=document)
