"""Schema management exports."""

from .schema_catalog import SchemaListing, list_schema_slugs, list_schemas
from .schema_models import (
    ColorSpecification,
    Conversion,
    FunctionSpecification,
    Initializer,
    SchemaDocument,
    SchemaKind,
    SchemaReference,
    ScriptBlock,
    ScriptBodyKind,
    schema_key,
)
from .schema_uri import (
    DEFAULT_REGISTRY_URL,
    SchemaUriComponents,
    SemanticVersion,
    build_schema_uri,
    extract_schema_name,
    parse_schema_uri,
    resolve_schema_reference,
)
from .script_inliner import SchemaError, load_schema_descriptor, load_schema_directory

__all__ = [
    "ColorSpecification",
    "Conversion",
    "FunctionSpecification",
    "Initializer",
    "SchemaDocument",
    "SchemaKind",
    "SchemaReference",
    "ScriptBlock",
    "ScriptBodyKind",
    "schema_key",
    "SchemaListing",
    "list_schema_slugs",
    "list_schemas",
    "DEFAULT_REGISTRY_URL",
    "SchemaUriComponents",
    "SemanticVersion",
    "build_schema_uri",
    "extract_schema_name",
    "parse_schema_uri",
    "resolve_schema_reference",
    "SchemaError",
    "load_schema_descriptor",
    "load_schema_directory",
]
