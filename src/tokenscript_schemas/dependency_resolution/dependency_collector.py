"""Transitive schema dependency collection service."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from pathlib import Path

from tokenscript_schemas.schema_management.schema_models import SchemaDocument, SchemaKind
from tokenscript_schemas.schema_management.schema_uri import resolve_schema_reference
from tokenscript_schemas.schema_management.script_inliner import (
    SchemaError,
    load_schema_directory,
)

from .dependency_models import (
    DependencyNode,
    RequirementOptions,
    ResolvedDependencies,
    SchemaSeed,
)
from .requirement_extraction import extract_requirements

logger = logging.getLogger(__name__)

SeedLike = SchemaSeed | str


class DependencyCollector:
    """Walks schema requirements inside one schema store.

    The requirement options are fixed for the lifetime of the collector so that
    every extraction in a walk applies the same rules. Loading failures of
    individual schemas are logged and skipped; the returned sets are best effort.
    """

    def __init__(
        self,
        schemas_dir: Path | str,
        options: RequirementOptions | None = None,
        *,
        base_url: str | None = None,
    ) -> None:
        self._schemas_dir = Path(schemas_dir)
        self._options = options or RequirementOptions()
        self._base_url = base_url

    @property
    def options(self) -> RequirementOptions:
        return self._options

    def schema_dir(self, seed: SchemaSeed) -> Path:
        return self._schemas_dir / seed.kind.directory_name / seed.slug

    def collect(self, seeds: Iterable[SeedLike]) -> ResolvedDependencies:
        """Return every schema transitively required by ``seeds``.

        Seeds are only part of the result when another visited schema requires them.
        """
        types: dict[str, None] = {}
        functions: dict[str, None] = {}
        documents: dict[str, SchemaDocument | None] = {}
        visited: set[str] = set()
        worklist = deque(self._normalize_seeds(seeds))

        while worklist:
            current = worklist.popleft()
            if current.key in visited:
                continue
            visited.add(current.key)

            document = self._load_cached(current, documents)
            if document is None:
                continue

            for requirement in extract_requirements(document, self._options):
                dependency = self._resolve(requirement)
                if dependency is None:
                    continue
                if self._load_cached(dependency, documents) is None:
                    continue
                target = functions if dependency.kind is SchemaKind.FUNCTION else types
                target[dependency.slug] = None
                if dependency.key not in visited:
                    worklist.append(dependency)

        return ResolvedDependencies(types=tuple(types), functions=tuple(functions))

    def collect_with_seeds(self, seeds: Iterable[SeedLike]) -> ResolvedDependencies:
        """Return the seeds in request order followed by their transitive dependencies."""
        normalized = self._normalize_seeds(seeds)
        dependencies = self.collect(normalized)
        types = [seed.slug for seed in normalized if seed.kind is SchemaKind.TYPE]
        functions = [seed.slug for seed in normalized if seed.kind is SchemaKind.FUNCTION]
        return ResolvedDependencies(
            types=tuple(dict.fromkeys((*types, *dependencies.types))),
            functions=tuple(dict.fromkeys((*functions, *dependencies.functions))),
        )

    def collect_dependency_tree(self, seeds: Iterable[SeedLike]) -> dict[str, DependencyNode]:
        """Return the direct (non-transitive) dependencies of each seed keyed by ``kind:slug``."""
        tree: dict[str, DependencyNode] = {}
        for seed in self._normalize_seeds(seeds):
            document = self._load(seed)
            if document is None:
                continue
            dependency_keys = []
            for requirement in extract_requirements(document, self._options):
                reference = resolve_schema_reference(requirement)
                dependency_keys.append(reference.key if reference else requirement)
            tree[seed.key] = DependencyNode(
                slug=seed.slug, kind=seed.kind, dependencies=tuple(dependency_keys)
            )
        return tree

    def _normalize_seeds(self, seeds: Iterable[SeedLike]) -> list[SchemaSeed]:
        normalized: list[SchemaSeed] = []
        for seed in seeds:
            resolved = seed if isinstance(seed, SchemaSeed) else self._resolve(seed)
            if resolved is not None:
                normalized.append(resolved)
        return normalized

    def _resolve(self, identifier: str) -> SchemaSeed | None:
        reference = resolve_schema_reference(identifier)
        if reference is None:
            logger.warning("Could not resolve schema reference: %s", identifier)
            return None
        return SchemaSeed(slug=reference.slug, kind=reference.kind)

    def _load_cached(
        self, seed: SchemaSeed, documents: dict[str, SchemaDocument | None]
    ) -> SchemaDocument | None:
        if seed.key not in documents:
            documents[seed.key] = self._load(seed)
        return documents[seed.key]

    def _load(self, seed: SchemaSeed) -> SchemaDocument | None:
        try:
            return load_schema_directory(self.schema_dir(seed), base_url=self._base_url)
        except (SchemaError, OSError, ValueError) as exc:
            logger.warning("Failed to load schema %s (%s): %s", seed.slug, seed.kind.value, exc)
            return None


def collect_required_schemas(
    seeds: Sequence[SeedLike],
    schemas_dir: Path | str,
    *,
    include_color_type_dependencies: bool = False,
    base_url: str | None = None,
) -> ResolvedDependencies:
    """Collect the transitive dependencies of ``seeds`` with one set of options."""
    collector = DependencyCollector(
        schemas_dir,
        RequirementOptions(include_color_type_dependencies=include_color_type_dependencies),
        base_url=base_url,
    )
    return collector.collect(seeds)
