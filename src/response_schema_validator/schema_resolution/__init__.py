"""Schema resolution exports."""

from .path_locator import DEFAULT_METHOD, DEFAULT_STATUS, PathLocator
from .resolver import (
    InvalidPathParametersError,
    ResponseDefinitionNotFoundError,
    SchemaDefinitionNotFoundError,
    SchemaResolutionError,
    resolve_schema_definition,
)
from .schema_identifiers import SchemaIdGenerator
from .schema_models import DocumentKind, DocumentLayout, SchemaDocument, classify_document

__all__ = [
    "DEFAULT_METHOD",
    "DEFAULT_STATUS",
    "DocumentKind",
    "DocumentLayout",
    "InvalidPathParametersError",
    "PathLocator",
    "ResponseDefinitionNotFoundError",
    "SchemaDefinitionNotFoundError",
    "SchemaDocument",
    "SchemaIdGenerator",
    "SchemaResolutionError",
    "classify_document",
    "resolve_schema_definition",
]
