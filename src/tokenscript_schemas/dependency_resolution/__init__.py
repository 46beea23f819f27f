"""Dependency resolution exports."""

from .dependency_collector import DependencyCollector, collect_required_schemas
from .dependency_models import (
    DependencyNode,
    RequirementOptions,
    ResolvedDependencies,
    SchemaSeed,
)
from .requirement_extraction import extract_requirements

__all__ = [
    "DependencyCollector",
    "collect_required_schemas",
    "DependencyNode",
    "RequirementOptions",
    "ResolvedDependencies",
    "SchemaSeed",
    "extract_requirements",
]
