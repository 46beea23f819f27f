"""Requirement extraction rules per schema kind."""

from __future__ import annotations

from tokenscript_schemas.schema_management.schema_models import (
    ColorSpecification,
    FunctionSpecification,
    SchemaDocument,
)

from .dependency_models import RequirementOptions


def extract_requirements(document: SchemaDocument, options: RequirementOptions) -> list[str]:
    """Return the schema references a document depends on.

    Function requirements are prerequisites and are always returned. Color type
    conversions are capabilities, so they only count as dependencies when
    ``options.include_color_type_dependencies`` is set; then both non-``$self``
    endpoints of every conversion are returned.
    """
    if isinstance(document, FunctionSpecification):
        return list(document.requirements or ())
    if isinstance(document, ColorSpecification) and options.include_color_type_dependencies:
        return [
            endpoint
            for conversion in document.conversions
            for endpoint in conversion.other_endpoints
        ]
    return []
