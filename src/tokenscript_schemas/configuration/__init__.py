"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_bundle_config, resolve_bundler_settings
from .runtime_settings import (
    DEFAULT_BUNDLE_OUTPUT,
    DEFAULT_REGISTRY_OUTPUT_DIR,
    DEFAULT_SCHEMAS_DIR,
    BundleConfig,
    BundlerSettings,
)

__all__ = [
    "BundleConfig",
    "BundlerSettings",
    "DEFAULT_BUNDLE_OUTPUT",
    "DEFAULT_REGISTRY_OUTPUT_DIR",
    "DEFAULT_SCHEMAS_DIR",
    "ConfigurationError",
    "load_bundle_config",
    "resolve_bundler_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
