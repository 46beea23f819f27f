"""Dependency resolution entities."""

from __future__ import annotations

from dataclasses import dataclass

from tokenscript_schemas.schema_management.schema_models import SchemaKind, schema_key


@dataclass(frozen=True)
class RequirementOptions:
    """Options shared by every requirement extraction of one resolution pass."""

    include_color_type_dependencies: bool = False


@dataclass(frozen=True)
class SchemaSeed:
    """Schema identified by slug and kind."""

    slug: str
    kind: SchemaKind

    @property
    def key(self) -> str:
        return schema_key(self.kind, self.slug)


@dataclass(frozen=True)
class ResolvedDependencies:
    """Deduplicated schema slugs split by kind, in discovery order."""

    types: tuple[str, ...]
    functions: tuple[str, ...]

    def all_slugs(self) -> tuple[str, ...]:
        """Types then functions, without repeating a slug present in both."""
        return tuple(dict.fromkeys((*self.types, *self.functions)))

    def seeds(self) -> tuple[SchemaSeed, ...]:
        return tuple(SchemaSeed(slug, SchemaKind.TYPE) for slug in self.types) + tuple(
            SchemaSeed(slug, SchemaKind.FUNCTION) for slug in self.functions
        )


@dataclass(frozen=True)
class DependencyNode:
    """Direct dependencies of one schema as ``kind:slug`` keys."""

    slug: str
    kind: SchemaKind
    dependencies: tuple[str, ...]

    @property
    def key(self) -> str:
        return schema_key(self.kind, self.slug)
