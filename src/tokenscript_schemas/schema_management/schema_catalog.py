"""Schema store listing service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .schema_models import SchemaKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaListing:
    """Schema slugs available in a schema store."""

    types: tuple[str, ...]
    functions: tuple[str, ...]


def list_schema_slugs(schemas_dir: Path | str, kind: SchemaKind) -> tuple[str, ...]:
    """Return sorted schema directory names of one kind.

    Raises:
      OSError: If the category directory cannot be read.
    """
    category_dir = Path(schemas_dir) / kind.directory_name
    return tuple(sorted(entry.name for entry in category_dir.iterdir() if entry.is_dir()))


def list_schemas(
    schemas_dir: Path | str, *, types: bool = True, functions: bool = True
) -> SchemaListing:
    """List available schemas; an unreadable category yields an empty list."""
    return SchemaListing(
        types=_list_or_empty(schemas_dir, SchemaKind.TYPE) if types else (),
        functions=_list_or_empty(schemas_dir, SchemaKind.FUNCTION) if functions else (),
    )


def _list_or_empty(schemas_dir: Path | str, kind: SchemaKind) -> tuple[str, ...]:
    try:
        return list_schema_slugs(schemas_dir, kind)
    except OSError as exc:
        logger.warning("Could not read %s directory: %s", kind.directory_name, exc)
        return ()
