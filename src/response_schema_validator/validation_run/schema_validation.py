"""Schema validation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from response_schema_validator.configuration import IssueStyleConfig, merge_issue_styles
from response_schema_validator.mismatch_annotation import ValidationEngine, annotate_mismatches
from response_schema_validator.schema_resolution import (
    PathLocator,
    classify_document,
    resolve_schema_definition,
)

from .validation_contracts import ValidationOutcome

logger = logging.getLogger(__name__)

_default_engine = ValidationEngine()


class MissingSchemaError(Exception):
    """Raised when no schema is provided."""


def validate_schema(
    data: Any,
    schema: Any,
    locator: PathLocator | Mapping[str, Any] | None = None,
    issue_styles: IssueStyleConfig | Mapping[str, Any] | None = None,
    *,
    engine: ValidationEngine | None = None,
) -> ValidationOutcome:
    """Validate ``data`` against a plain JSON schema or a Swagger/OpenAPI response schema.

    Args:
      data: The value to validate, typically a decoded response body.
      schema: A plain JSON schema, or a Swagger 2 / OpenAPI 3 document.
      locator: Endpoint, method and status of the response schema inside a
        specification document. Method defaults to ``GET`` and status to
        ``200``; a ``PathLocator`` is updated in place. Ignored for plain schemas.
      issue_styles: Icons and colors overriding the defaults field by field.
      engine: Validation engine to compile with; the module default otherwise.

    Returns:
      The engine errors (``None`` when valid), the annotated copy of ``data``
      and the issue styles used.

    Raises:
      MissingSchemaError: If ``schema`` is ``None``.
      SchemaResolutionError: If the response schema cannot be located.
      SchemaCompilationError: If the schema is malformed.
      ConfigurationError: If ``issue_styles`` is invalid.
    """
    if schema is None:
        raise MissingSchemaError("You must provide a valid schema!")

    if locator is not None:
        path_locator = PathLocator.coerce(locator).apply_defaults()
        document = classify_document(schema)
        if document.is_specification:
            logger.debug(
                "Resolving %s %s (%s) from %s document",
                path_locator.method,
                path_locator.endpoint,
                path_locator.status,
                document.kind.value,
            )
            schema = resolve_schema_definition(document, path_locator)

    styles = merge_issue_styles(issue_styles)
    result = annotate_mismatches(
        schema, data, styles, engine=engine if engine is not None else _default_engine
    )
    return ValidationOutcome(
        errors=result.errors,
        data_mismatches=result.data_mismatches,
        issue_styles=styles,
    )


def default_engine() -> ValidationEngine:
    """Return the process-wide engine used when no engine is passed."""
    return _default_engine


def reset_default_engine() -> ValidationEngine:
    """Replace the process-wide engine, releasing every compiled schema it holds."""
    global _default_engine  # pylint: disable=global-statement
    _default_engine = ValidationEngine()
    return _default_engine
