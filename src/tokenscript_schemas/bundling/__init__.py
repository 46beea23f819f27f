"""Bundling domain exports."""

from .artifact_writer import write_bundle_file, write_json_artifact, write_registry_artifacts
from .bundle_models import (
    BundledRegistry,
    BundledSchemaEntry,
    BundleMetadata,
    SelectiveBundleRequest,
    SelectiveBundleResult,
)
from .bundle_presets import BUNDLE_PRESETS, BundlePreset, expand_preset_schemas
from .registry_builder import RegistryBuildOutcome, build_registry, bundle_all_schemas
from .selective_bundler import (
    BundleError,
    bundle_selective_schemas,
    detect_schema_kind,
    parse_schema_identifier,
)

__all__ = [
    "write_bundle_file",
    "write_json_artifact",
    "write_registry_artifacts",
    "BundledRegistry",
    "BundledSchemaEntry",
    "BundleMetadata",
    "SelectiveBundleRequest",
    "SelectiveBundleResult",
    "BUNDLE_PRESETS",
    "BundlePreset",
    "expand_preset_schemas",
    "RegistryBuildOutcome",
    "build_registry",
    "bundle_all_schemas",
    "BundleError",
    "bundle_selective_schemas",
    "detect_schema_kind",
    "parse_schema_identifier",
]
