"""Bundle configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import BundleConfig, BundlerSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_bundle_config(config_path: Path | str) -> BundleConfig:
    """Load and validate a YAML or JSON bundle configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse config file: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Config must be a mapping.")

    schemas = _require_string_list(parsed.get("schemas"), "schemas")
    output = _optional_string(parsed.get("output"), "output")
    schemas_dir = _optional_string(parsed.get("schemas_dir"), "schemas_dir")
    base_url = _optional_string(parsed.get("base_url"), "base_url")

    return BundleConfig(
        path=path,
        schemas=schemas,
        output=_resolve_path(path.parent, output) if output else None,
        schemas_dir=_resolve_path(path.parent, schemas_dir) if schemas_dir else None,
        base_url=base_url,
    )


def resolve_bundler_settings(
    *,
    config: BundleConfig | None = None,
    schemas_dir: Path | str | None = None,
    base_url: str | None = None,
    output_path: Path | str | None = None,
) -> BundlerSettings:
    """Merge explicit options over config file values over defaults."""
    defaults = BundlerSettings()
    resolved_schemas_dir = schemas_dir or (config.schemas_dir if config else None)
    resolved_base_url = base_url or (config.base_url if config else None)
    resolved_output = output_path or (config.output if config else None)
    return BundlerSettings(
        schemas_dir=Path(resolved_schemas_dir) if resolved_schemas_dir else defaults.schemas_dir,
        base_url=resolved_base_url or defaults.base_url,
        output_path=Path(resolved_output) if resolved_output else defaults.output_path,
    )


def _require_string_list(value: Any, field_name: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"Config must have a '{field_name}' list.")
    normalized = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(f"All {field_name} entries must be strings.")
        stripped = item.strip()
        if stripped:
            normalized.append(stripped)
    return tuple(normalized)


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"Config '{field_name}' must be a string if provided.")
    stripped = value.strip()
    return stripped or None


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate
