"""Full schema registry build service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from pathlib import Path

from tokenscript_schemas.schema_management.schema_catalog import list_schema_slugs
from tokenscript_schemas.schema_management.schema_models import (
    ColorSpecification,
    FunctionSpecification,
    SchemaDocument,
    SchemaKind,
)
from tokenscript_schemas.schema_management.script_inliner import (
    SchemaError,
    load_schema_directory,
)

from .artifact_writer import write_registry_artifacts
from .bundle_models import GENERATED_BY_COMMAND, BundledRegistry, build_generated_by
from .selective_bundler import BundleError

logger = logging.getLogger(__name__)

REGISTRY_VERSION = "0.1.0"


@dataclass(frozen=True)
class RegistryBuildOutcome:
    """Registry together with the schemas that failed to build."""

    registry: BundledRegistry
    failed: tuple[str, ...]


def build_registry(
    schemas_dir: Path | str,
    *,
    base_url: str,
    version: str = REGISTRY_VERSION,
    cli_args: Sequence[str] = (),
) -> RegistryBuildOutcome:
    """Inline every type and function schema of the store.

    A schema that fails to build is logged and excluded; the rest of the build continues.

    Raises:
      BundleError: If a category directory cannot be read.
    """
    failed: list[str] = []
    types = _bundle_category(schemas_dir, SchemaKind.TYPE, base_url, failed)
    functions = _bundle_category(schemas_dir, SchemaKind.FUNCTION, base_url, failed)
    registry = BundledRegistry(
        version=version,
        types=tuple(item for item in types if isinstance(item, ColorSpecification)),
        functions=tuple(item for item in functions if isinstance(item, FunctionSpecification)),
        generated_at=datetime.now(UTC),
        generated_by=build_generated_by(cli_args) or GENERATED_BY_COMMAND,
    )
    return RegistryBuildOutcome(registry=registry, failed=tuple(failed))


def bundle_all_schemas(
    schemas_dir: Path | str,
    output_dir: Path | str,
    *,
    base_url: str,
    version: str = REGISTRY_VERSION,
    cli_args: Sequence[str] = (),
) -> RegistryBuildOutcome:
    """Build the full registry and write every registry artifact to ``output_dir``."""
    outcome = build_registry(schemas_dir, base_url=base_url, version=version, cli_args=cli_args)
    written = write_registry_artifacts(outcome.registry, output_dir)
    logger.info("Wrote %d registry artifacts to %s", len(written), Path(output_dir).resolve())
    return outcome


def _bundle_category(
    schemas_dir: Path | str, kind: SchemaKind, base_url: str, failed: list[str]
) -> list[SchemaDocument]:
    try:
        slugs = list_schema_slugs(schemas_dir, kind)
    except OSError as exc:
        raise BundleError(f"Cannot read {kind.directory_name} directory: {exc}") from exc

    documents: list[SchemaDocument] = []
    for slug in slugs:
        schema_dir = Path(schemas_dir) / kind.directory_name / slug
        logger.info("Bundling %s...", slug)
        try:
            document = load_schema_directory(schema_dir, base_url=base_url)
        except (SchemaError, OSError, ValueError) as exc:
            logger.error("Failed to bundle %s: %s", slug, exc)
            failed.append(f"{kind.value}:{slug}")
            continue
        if document.kind is not kind:
            logger.warning(
                "Skipping %s: %s schema found in %s directory",
                slug,
                document.kind.value,
                kind.directory_name,
            )
            continue
        documents.append(replace(document, slug=slug))
    logger.info("Bundled %d %s schemas", len(documents), kind.value)
    return documents
