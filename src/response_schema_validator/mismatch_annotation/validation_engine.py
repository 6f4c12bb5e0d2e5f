"""JSON Schema validation engine backed by ``jsonschema``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import SchemaError, ValidationError
from referencing.exceptions import Unresolvable

from .annotation_outcomes import SchemaIssue
from .data_paths import DataPath

logger = logging.getLogger(__name__)


class SchemaCompilationError(Exception):
    """Raised when a schema cannot be compiled into a validator."""


class CompiledValidator:
    """Validator for one compiled schema.

    Calling it returns whether the data is valid; the ordered issues of the
    last call are kept on ``errors`` (``None`` when the data was valid).
    """

    def __init__(self, schema: Any, validator: Draft7Validator) -> None:
        self.schema = schema
        self.errors: tuple[SchemaIssue, ...] | None = None
        self._validator = validator

    def __call__(self, data: Any) -> bool:
        try:
            issues = tuple(_to_schema_issue(error) for error in self._validator.iter_errors(data))
        except Unresolvable as exc:
            raise SchemaCompilationError(f"Cannot resolve schema reference: {exc}") from exc
        self.errors = issues or None
        return self.errors is None


class ValidationEngine:
    """Compiles schemas and keeps every compiled schema that declares an ``$id``.

    Registered schemas accumulate until ``reset`` is called.
    """

    def __init__(self) -> None:
        self._registry: dict[str, CompiledValidator] = {}

    def compile(self, schema: Any) -> CompiledValidator:
        """Check ``schema`` against the Draft 7 metaschema and build its validator.

        Raises:
          SchemaCompilationError: If the schema is malformed or its ``$id`` is
            already registered for a different schema.
        """
        if not isinstance(schema, Mapping | bool):
            raise SchemaCompilationError(
                f"Schema must be an object or a boolean, got {type(schema).__name__}."
            )
        schema_id = schema.get("$id") if isinstance(schema, Mapping) else None
        if isinstance(schema_id, str) and schema_id in self._registry:
            registered = self._registry[schema_id]
            if registered.schema == schema:
                return registered
            raise SchemaCompilationError(f"schema with key or id \"{schema_id}\" already exists")

        try:
            Draft7Validator.check_schema(schema)
        except SchemaError as exc:
            raise SchemaCompilationError(f"Invalid schema: {exc.message}") from exc

        # A bare FormatChecker knows every format, including uuid which Draft 7 lacks.
        compiled = CompiledValidator(
            schema,
            Draft7Validator(schema, format_checker=FormatChecker()),
        )
        if isinstance(schema_id, str):
            self._registry[schema_id] = compiled
            logger.debug("Registered compiled schema %s", schema_id)
        return compiled

    @property
    def registered_ids(self) -> tuple[str, ...]:
        return tuple(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __bool__(self) -> bool:
        return True

    def reset(self) -> None:
        """Drop every registered compiled schema."""
        logger.debug("Dropping %d compiled schemas", len(self._registry))
        self._registry.clear()


def _to_schema_issue(error: ValidationError) -> SchemaIssue:
    keyword = str(error.validator)
    if keyword == "required":
        params: dict[str, Any] = {"missingProperty": _missing_property(error)}
    else:
        params = {keyword: error.validator_value}
    return SchemaIssue(
        data_path=DataPath.of(error.absolute_path),
        schema_path="#" + DataPath.of(error.absolute_schema_path).to_pointer(),
        keyword=keyword,
        message=error.message,
        params=params,
    )


def _missing_property(error: ValidationError) -> str:
    instance = error.instance
    required = error.validator_value
    if not isinstance(instance, Mapping) or not isinstance(required, list):
        return ""
    missing = [name for name in required if name not in instance]
    for name in missing:
        if error.message == f"{name!r} is a required property":
            return name
    return missing[0] if missing else ""
