"""Validate API responses against JSON schemas, Swagger and OpenAPI documents."""

import logging

from .configuration import ConfigurationError, IssueStyleConfig
from .mismatch_annotation import SchemaCompilationError, SchemaIssue, ValidationEngine
from .schema_resolution import (
    InvalidPathParametersError,
    PathLocator,
    ResponseDefinitionNotFoundError,
    SchemaDefinitionNotFoundError,
    SchemaResolutionError,
)
from .validation_run import (
    MissingSchemaError,
    ValidationOutcome,
    reset_default_engine,
    validate_schema,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "InvalidPathParametersError",
    "IssueStyleConfig",
    "MissingSchemaError",
    "PathLocator",
    "ResponseDefinitionNotFoundError",
    "SchemaCompilationError",
    "SchemaDefinitionNotFoundError",
    "SchemaIssue",
    "SchemaResolutionError",
    "ValidationEngine",
    "ValidationOutcome",
    "reset_default_engine",
    "validate_schema",
]
