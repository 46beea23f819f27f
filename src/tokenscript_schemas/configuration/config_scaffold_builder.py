"""Bundle configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from tokenscript_schemas.schema_management.schema_uri import DEFAULT_REGISTRY_URL

DEFAULT_CONFIG_FILENAME = "tokenscript-schemas.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = f"""# Bundle configuration for tokenscript-schemas.
# Run: tokenscript-schemas bundle --config {DEFAULT_CONFIG_FILENAME}

# Schemas to bundle. Dependencies are resolved automatically.
# Accepted forms: bare slug (hex-color), explicit kind (type:hex-color,
# function:invert), preset (preset:css) or a registry URI.
schemas:
  - "preset:css"
  - "type:hex-color"

# Optional bundle output path, relative to this file.
# output: "tokenscript-schemas.json"

# Optional schema store directory, relative to this file.
# schemas_dir: "src/schemas"

# Optional registry base URL used in bundled URIs.
# base_url: "{DEFAULT_REGISTRY_URL}"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML bundle configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the bundle configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Bundle configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
