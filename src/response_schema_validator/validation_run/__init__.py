"""Validation run exports."""

from .schema_validation import (
    MissingSchemaError,
    default_engine,
    reset_default_engine,
    validate_schema,
)
from .validation_contracts import ValidationOutcome

__all__ = [
    "MissingSchemaError",
    "ValidationOutcome",
    "default_engine",
    "reset_default_engine",
    "validate_schema",
]
