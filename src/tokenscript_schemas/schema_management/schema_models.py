"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

SELF_REFERENCE = "$self"
SCRIPT_REFERENCE_PREFIX = "./"


class SchemaKind(str, Enum):
    """Kind of schema stored in the schema store."""

    TYPE = "type"
    FUNCTION = "function"

    @property
    def directory_name(self) -> str:
        return "types" if self is SchemaKind.TYPE else "functions"

    @property
    def registry_category(self) -> str:
        return "core" if self is SchemaKind.TYPE else "function"


class ScriptBodyKind(str, Enum):
    """Whether a script body is literal source or a relative file reference."""

    LITERAL = "literal"
    FILE_REFERENCE = "file_reference"


@dataclass(frozen=True)
class ScriptBlock:
    """Script attached to an initializer, conversion or function."""

    type_uri: str
    body: str
    body_kind: ScriptBodyKind
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> ScriptBlock:
        body = value.get("script")
        if not isinstance(body, str):
            raise ValueError("script.script must be a string")
        body_kind = (
            ScriptBodyKind.FILE_REFERENCE
            if body.startswith(SCRIPT_REFERENCE_PREFIX)
            else ScriptBodyKind.LITERAL
        )
        return cls(
            type_uri=str(value.get("type", "")),
            body=body,
            body_kind=body_kind,
            attributes=_extra_attributes(value, ("type", "script")),
        )

    @property
    def is_file_reference(self) -> bool:
        return self.body_kind is ScriptBodyKind.FILE_REFERENCE

    @property
    def relative_path(self) -> str:
        """Path of the referenced script file relative to the schema directory."""
        if not self.is_file_reference:
            raise ValueError("Literal script bodies do not reference a file.")
        return self.body[len(SCRIPT_REFERENCE_PREFIX) :]

    def with_literal_body(self, body: str) -> ScriptBlock:
        return replace(self, body=body, body_kind=ScriptBodyKind.LITERAL)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type_uri, "script": self.body, **self.attributes}


@dataclass(frozen=True)
class Initializer:
    """Constructor keyword exposed by a color type."""

    keyword: str
    script: ScriptBlock
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> Initializer:
        return cls(
            keyword=str(value.get("keyword", "")),
            script=ScriptBlock.from_mapping(_require_mapping(value.get("script"), "initializer")),
            attributes=_extra_attributes(value, ("keyword", "script")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {**self.attributes, "keyword": self.keyword, "script": self.script.to_dict()}


@dataclass(frozen=True)
class Conversion:
    """Conversion capability of a color type.

    ``source`` and ``target`` are ``None`` when they point at the owning type.
    """

    source: str | None
    target: str | None
    script: ScriptBlock
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> Conversion:
        return cls(
            source=_endpoint_from_raw(value.get("source")),
            target=_endpoint_from_raw(value.get("target")),
            script=ScriptBlock.from_mapping(_require_mapping(value.get("script"), "conversion")),
            attributes=_extra_attributes(value, ("source", "target", "script")),
        )

    @property
    def other_endpoints(self) -> tuple[str, ...]:
        """Endpoints naming another type, in source/target order."""
        return tuple(endpoint for endpoint in (self.source, self.target) if endpoint is not None)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.attributes,
            "source": SELF_REFERENCE if self.source is None else self.source,
            "target": SELF_REFERENCE if self.target is None else self.target,
            "script": self.script.to_dict(),
        }


@dataclass(frozen=True)
class ColorSpecification:
    """Color type schema document."""

    name: str
    schema: Mapping[str, Any] | None
    initializers: tuple[Initializer, ...]
    conversions: tuple[Conversion, ...]
    slug: str | None = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    kind = SchemaKind.TYPE

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> ColorSpecification:
        schema = value.get("schema")
        return cls(
            name=str(value.get("name", "")),
            schema=schema if isinstance(schema, Mapping) else None,
            initializers=tuple(
                Initializer.from_mapping(_require_mapping(item, "initializer"))
                for item in value.get("initializers") or ()
            ),
            conversions=tuple(
                Conversion.from_mapping(_require_mapping(item, "conversion"))
                for item in value.get("conversions") or ()
            ),
            slug=value.get("slug") if isinstance(value.get("slug"), str) else None,
            attributes=_extra_attributes(
                value, ("name", "type", "schema", "initializers", "conversions", "slug")
            ),
        )

    def script_blocks(self) -> tuple[ScriptBlock, ...]:
        return tuple(item.script for item in self.initializers) + tuple(
            item.script for item in self.conversions
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "type": "color", **self.attributes}
        if self.slug is not None:
            payload["slug"] = self.slug
        if self.schema is not None:
            payload["schema"] = dict(self.schema)
        payload["initializers"] = [item.to_dict() for item in self.initializers]
        payload["conversions"] = [item.to_dict() for item in self.conversions]
        return payload


@dataclass(frozen=True)
class FunctionSpecification:
    """Color function schema document."""

    name: str
    keyword: str
    script: ScriptBlock
    input: Mapping[str, Any] | None = None
    requirements: tuple[str, ...] | None = None
    slug: str | None = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    kind = SchemaKind.FUNCTION

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> FunctionSpecification:
        raw_requirements = value.get("requirements")
        requirements = None
        if raw_requirements is not None:
            if not isinstance(raw_requirements, list) or not all(
                isinstance(item, str) for item in raw_requirements
            ):
                raise ValueError("requirements must be a list of strings")
            requirements = tuple(raw_requirements)
        raw_input = value.get("input")
        return cls(
            name=str(value.get("name", "")),
            keyword=str(value.get("keyword", "")),
            script=ScriptBlock.from_mapping(_require_mapping(value.get("script"), "function")),
            input=raw_input if isinstance(raw_input, Mapping) else None,
            requirements=requirements,
            slug=value.get("slug") if isinstance(value.get("slug"), str) else None,
            attributes=_extra_attributes(
                value, ("name", "type", "keyword", "script", "input", "requirements", "slug")
            ),
        )

    def script_blocks(self) -> tuple[ScriptBlock, ...]:
        return (self.script,)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "type": "function", **self.attributes}
        if self.slug is not None:
            payload["slug"] = self.slug
        payload["keyword"] = self.keyword
        if self.input is not None:
            payload["input"] = dict(self.input)
        payload["script"] = self.script.to_dict()
        if self.requirements is not None:
            payload["requirements"] = list(self.requirements)
        return payload


SchemaDocument = ColorSpecification | FunctionSpecification


@dataclass(frozen=True)
class SchemaReference:
    """Normalized reference to another schema."""

    slug: str
    kind: SchemaKind
    uri: str

    @property
    def key(self) -> str:
        return schema_key(self.kind, self.slug)


def schema_key(kind: SchemaKind, slug: str) -> str:
    """Return the ``kind:slug`` key used for dependency bookkeeping."""
    return f"{kind.value}:{slug}"


def schema_document_from_mapping(value: Any) -> SchemaDocument:
    """Build a typed schema document from a parsed descriptor."""
    mapping = _require_mapping(value, "schema descriptor")
    document_type = mapping.get("type")
    if document_type == "function":
        return FunctionSpecification.from_mapping(mapping)
    if document_type == "color":
        return ColorSpecification.from_mapping(mapping)
    raise ValueError(f"unsupported schema type: {document_type!r}")


def _endpoint_from_raw(value: Any) -> str | None:
    if not isinstance(value, str) or not value:
        raise ValueError("conversion source and target must be non-empty strings")
    return None if value == SELF_REFERENCE else value


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{label} must be an object")
    return value


def _extra_attributes(value: Mapping[str, Any], known_keys: tuple[str, ...]) -> dict[str, Any]:
    return {key: item for key, item in value.items() if key not in known_keys}
