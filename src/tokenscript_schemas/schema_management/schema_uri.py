"""Registry URI parsing, construction and schema reference resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlsplit

from .schema_models import SchemaKind, SchemaReference

DEFAULT_REGISTRY_URL = "https://schema.tokenscript.dev.gcp.tokens.studio"
DEFAULT_API_PATH = "/api/v1"
LATEST_VERSION = "latest"

SCHEMA_CATEGORIES = ("schema", "core", "function")


@dataclass(frozen=True)
class SemanticVersion:
    """Numeric schema version with one to three components."""

    major: int
    minor: int | None = None
    patch: int | None = None

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.patch]
        return ".".join(str(part) for part in parts if part is not None)


SchemaVersion = SemanticVersion | Literal["latest"]


@dataclass(frozen=True)
class SchemaUriComponents:
    """Structured view of a registry URI."""

    base_url: str
    category: str
    name: str
    version: SchemaVersion


def parse_semantic_version(version_string: str) -> SemanticVersion | None:
    """Parse ``major``, ``major.minor`` or ``major.minor.patch``."""
    parts = version_string.split(".")
    if not 1 <= len(parts) <= 3:
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    numbers = [int(part) for part in parts]
    if len(numbers) == 3:
        return SemanticVersion(numbers[0], numbers[1], numbers[2])
    if len(numbers) == 2:
        return SemanticVersion(numbers[0], numbers[1])
    return SemanticVersion(numbers[0])


def parse_version_string(version_string: str) -> SchemaVersion | None:
    if version_string == LATEST_VERSION:
        return LATEST_VERSION
    return parse_semantic_version(version_string)


def version_to_string(version: SchemaVersion | None) -> str:
    if version is None or version == LATEST_VERSION:
        return LATEST_VERSION
    return str(version)


def build_schema_uri(
    category: str,
    name: str,
    version: SchemaVersion | None = None,
    base_url: str = "",
) -> str:
    """Build ``{base_url}/api/v1/{category}/{name}/{version}/``.

    An empty ``base_url`` yields a registry-relative URI.
    """
    version_string = version_to_string(version)
    return f"{base_url.rstrip('/')}{DEFAULT_API_PATH}/{category}/{name}/{version_string}/"


def parse_schema_uri(uri: str) -> SchemaUriComponents | None:
    """Parse a registry URI into its components, or return None when it does not match."""
    split = _split_uri(uri)
    if split is None:
        return None
    base_url, parts = split
    if not _has_api_prefix(parts) or len(parts) < 5:
        return None
    category, name, raw_version = parts[2], parts[3], parts[4]
    if category not in SCHEMA_CATEGORIES:
        return None
    version = parse_version_string(raw_version)
    if version is None:
        return None
    return SchemaUriComponents(base_url=base_url, category=category, name=name, version=version)


def extract_schema_name(uri: str) -> str | None:
    """Return the ``{name}`` segment of a URI-shaped string that may not fully match."""
    components = parse_schema_uri(uri)
    if components is not None:
        return components.name
    split = _split_uri(uri)
    if split is None:
        return None
    _, parts = split
    if not _has_api_prefix(parts) or len(parts) < 4:
        return None
    return parts[3] or None


def get_base_uri(uri: str) -> str:
    """Strip the version segment from a registry URI."""
    components = parse_schema_uri(uri)
    if components is None:
        return uri
    return f"{components.base_url}{DEFAULT_API_PATH}/{components.category}/{components.name}/"


def normalize_uri(uri: str) -> str:
    return uri if uri.endswith("/") else f"{uri}/"


def resolve_schema_reference(
    identifier: str, kind: SchemaKind | None = None
) -> SchemaReference | None:
    """Normalize a registry URI, partial URI or bare slug into a schema reference.

    A caller-supplied ``kind`` overrides the kind derived from the identifier.
    Returns None when the identifier cannot be interpreted at all.
    """
    components = parse_schema_uri(identifier)
    if components is not None:
        detected = SchemaKind.FUNCTION if components.category == "function" else SchemaKind.TYPE
        return SchemaReference(slug=components.name, kind=kind or detected, uri=identifier)

    extracted_name = extract_schema_name(identifier)
    if extracted_name is not None:
        detected = (
            SchemaKind.FUNCTION if _category_segment(identifier) == "function" else SchemaKind.TYPE
        )
        return SchemaReference(slug=extracted_name, kind=kind or detected, uri=identifier)

    if identifier and "/" not in identifier:
        return SchemaReference(slug=identifier, kind=kind or SchemaKind.TYPE, uri="")

    return None


def _split_uri(uri: str) -> tuple[str, list[str]] | None:
    base_url = ""
    pathname = uri
    if "://" in uri:
        try:
            parsed = urlsplit(uri)
        except ValueError:
            return None
        if not parsed.scheme or not parsed.netloc:
            return None
        base_url = f"{parsed.scheme}://{parsed.netloc}"
        pathname = parsed.path
    return base_url, [part for part in pathname.split("/") if part]


def _has_api_prefix(parts: list[str]) -> bool:
    return len(parts) >= 2 and parts[0] == "api" and parts[1].startswith("v")


def _category_segment(uri: str) -> str | None:
    split = _split_uri(uri)
    if split is None:
        return None
    _, parts = split
    return parts[2] if len(parts) >= 3 else None
