"""Predefined schema selections for common use cases."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PRESET_PREFIX = "preset:"


@dataclass(frozen=True)
class BundlePreset:
    """Named list of type and function slugs."""

    name: str
    description: str
    types: tuple[str, ...]
    functions: tuple[str, ...]


BUNDLE_PRESETS: Mapping[str, BundlePreset] = {
    "css": BundlePreset(
        name="CSS",
        description="CSS color types",
        types=(
            "hex-color",
            "rgb-color",
            "hsl-color",
            "oklch-color",
            "oklab-color",
            # Converting colors to css strings
            "css-color",
        ),
        functions=("lighten", "darken", "saturate", "desaturate", "mix", "invert"),
    ),
    "ts": BundlePreset(
        name="TS",
        description=(
            "Legacy color-space-specific functions "
            "(lighten, darken, mix, alpha in LCH, sRGB, P3, HSL)"
        ),
        types=("hsl-color", "lch-color", "p3-color", "srgb-color"),
        functions=tuple(
            f"ts_{operation}_{space}"
            for operation in ("alpha", "darken", "lighten", "mix")
            for space in ("hsl", "lch", "p3", "srgb")
        ),
    ),
}


def expand_preset_schemas(
    identifiers: Iterable[str], presets: Mapping[str, BundlePreset] = BUNDLE_PRESETS
) -> list[str]:
    """Replace ``preset:<name>`` entries with explicit ``type:``/``function:`` identifiers.

    Unknown presets are logged and dropped; every other identifier is kept as-is.
    """
    expanded: list[str] = []
    for identifier in identifiers:
        if not identifier.startswith(PRESET_PREFIX):
            expanded.append(identifier)
            continue
        preset_name = identifier[len(PRESET_PREFIX) :]
        preset = presets.get(preset_name)
        if preset is None:
            logger.warning("Unknown preset: %s", preset_name)
            continue
        expanded.extend(f"type:{slug}" for slug in preset.types)
        expanded.extend(f"function:{slug}" for slug in preset.functions)
    return expanded
