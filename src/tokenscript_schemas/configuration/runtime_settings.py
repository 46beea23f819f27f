"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tokenscript_schemas.schema_management.schema_uri import DEFAULT_REGISTRY_URL

DEFAULT_SCHEMAS_DIR = Path("src") / "schemas"
DEFAULT_BUNDLE_OUTPUT = Path("tokenscript-schemas.json")
DEFAULT_REGISTRY_OUTPUT_DIR = Path("bundled")


@dataclass(frozen=True)
class BundlerSettings:
    """Settings resolved once at the entry point and passed to every bundling call."""

    schemas_dir: Path = DEFAULT_SCHEMAS_DIR
    base_url: str = DEFAULT_REGISTRY_URL
    output_path: Path = DEFAULT_BUNDLE_OUTPUT


@dataclass(frozen=True)
class BundleConfig:
    """Contents of a bundle configuration file."""

    path: Path
    schemas: tuple[str, ...]
    output: Path | None = None
    schemas_dir: Path | None = None
    base_url: str | None = None
