"""Schema loading and script inlining service."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

from .schema_models import (
    SELF_REFERENCE,
    ColorSpecification,
    Conversion,
    FunctionSpecification,
    SchemaDocument,
    ScriptBlock,
    schema_document_from_mapping,
)

SCHEMA_DESCRIPTOR_FILENAME = "schema.json"


class SchemaError(Exception):
    """Raised when a schema directory cannot be loaded or inlined."""


def load_schema_descriptor(schema_dir: Path | str) -> SchemaDocument:
    """Parse ``schema.json`` of a schema directory without touching script references."""
    descriptor_path = Path(schema_dir) / SCHEMA_DESCRIPTOR_FILENAME
    if not descriptor_path.is_file():
        raise SchemaError(f"Schema descriptor not found: {descriptor_path}")
    try:
        parsed = json.loads(descriptor_path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SchemaError(f"Invalid schema descriptor {descriptor_path}: {exc}") from exc
    try:
        return schema_document_from_mapping(parsed)
    except ValueError as exc:
        raise SchemaError(f"Invalid schema descriptor {descriptor_path}: {exc}") from exc


def load_schema_directory(schema_dir: Path | str, *, base_url: str | None = None) -> SchemaDocument:
    """Load a schema directory and return a self-contained document.

    Every script file reference is replaced with the trimmed file content. When
    ``base_url`` is set, registry-relative URIs are made absolute. The slug
    defaults to the directory name.

    Raises:
      SchemaError: If the descriptor or a referenced script file is missing or invalid.
    """
    directory = Path(schema_dir)
    document = load_schema_descriptor(directory)
    if isinstance(document, FunctionSpecification):
        inlined: SchemaDocument = _inline_function(directory, document, base_url)
    else:
        inlined = _inline_color(directory, document, base_url)
    if inlined.slug is None:
        inlined = replace(inlined, slug=directory.name)
    return inlined


def add_base_url(uri: str, base_url: str) -> str:
    """Prefix a registry-relative URI with ``base_url``; other values are returned as-is."""
    if "://" in uri:
        return uri
    if uri.startswith("/"):
        return f"{base_url.rstrip('/')}{uri}"
    return uri


def _inline_color(
    schema_dir: Path, document: ColorSpecification, base_url: str | None
) -> ColorSpecification:
    initializers = tuple(
        replace(item, script=_inline_script(schema_dir, item.script, base_url))
        for item in document.initializers
    )
    conversions = tuple(
        _inline_conversion(schema_dir, item, base_url) for item in document.conversions
    )
    return replace(document, initializers=initializers, conversions=conversions)


def _inline_conversion(
    schema_dir: Path, conversion: Conversion, base_url: str | None
) -> Conversion:
    script = _inline_script(schema_dir, conversion.script, base_url)
    if base_url is None:
        return replace(conversion, script=script)
    return replace(
        conversion,
        source=_endpoint_with_base_url(conversion.source, base_url),
        target=_endpoint_with_base_url(conversion.target, base_url),
        script=script,
    )


def _inline_function(
    schema_dir: Path, document: FunctionSpecification, base_url: str | None
) -> FunctionSpecification:
    script = _inline_script(schema_dir, document.script, base_url)
    requirements = document.requirements
    if base_url is not None and requirements is not None:
        requirements = tuple(add_base_url(item, base_url) for item in requirements)
    return replace(document, script=script, requirements=requirements)


def _inline_script(schema_dir: Path, script: ScriptBlock, base_url: str | None) -> ScriptBlock:
    if script.is_file_reference:
        script_path = schema_dir / script.relative_path
        if not script_path.is_file():
            raise SchemaError(f"Script file not found: {script_path}")
        try:
            body = script_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SchemaError(f"Invalid script file {script_path}: {exc}") from exc
        script = script.with_literal_body(body.strip())
    if base_url is not None:
        script = replace(script, type_uri=add_base_url(script.type_uri, base_url))
    return script


def _endpoint_with_base_url(endpoint: str | None, base_url: str) -> str | None:
    if endpoint is None or endpoint == SELF_REFERENCE:
        return endpoint
    return add_base_url(endpoint, base_url)
