"""Schema definition resolution service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .path_locator import PathLocator
from .schema_identifiers import DEFAULT_ID_GENERATOR, SchemaIdGenerator
from .schema_models import SchemaDocument, classify_document

logger = logging.getLogger(__name__)

_MISSING = object()
_DEFAULT_STATUS_KEY = "default"


class SchemaResolutionError(Exception):
    """Raised when a schema cannot be extracted from a specification document."""


class InvalidPathParametersError(SchemaResolutionError):
    """Raised when the path locator lacks endpoint, method or status."""


class ResponseDefinitionNotFoundError(SchemaResolutionError):
    """Raised when neither the status nor the default response is defined."""


class SchemaDefinitionNotFoundError(SchemaResolutionError):
    """Raised when a response definition carries no schema."""


def resolve_schema_definition(
    document: SchemaDocument | Mapping[str, Any],
    locator: PathLocator,
    *,
    id_generator: SchemaIdGenerator | None = None,
) -> dict[str, Any]:
    """Extract a self-contained response schema from a Swagger or OpenAPI document.

    The returned schema carries a fresh ``$id``, the fields of the response
    schema and the document's shared ``definitions``/``components`` so that
    internal ``$ref`` pointers resolve against it.

    Args:
      document: The specification document, raw or already classified.
      locator: Endpoint, method and status of the response to extract.
      id_generator: Source of unique schema identifiers.

    Returns:
      A new schema mapping; the document is not modified.

    Raises:
      InvalidPathParametersError: If endpoint, method or status is missing.
      ResponseDefinitionNotFoundError: If no response matches the status or ``default``.
      SchemaDefinitionNotFoundError: If the response has no schema.
    """
    if not isinstance(document, SchemaDocument):
        document = classify_document(document)
    if not document.is_specification:
        raise ValueError("Only Swagger and OpenAPI documents can be resolved.")

    endpoint, method, status = locator.endpoint, locator.method, locator.status
    if endpoint is None or method is None or status is None:
        raise InvalidPathParametersError(
            "You must provide valid schema parameters "
            "(missing 'endpoint', 'method' or 'status' params)!"
        )

    method = method.lower()
    schema_id = (id_generator or DEFAULT_ID_GENERATOR).next_id(endpoint, method, status)
    layout = document.layout
    root = document.root

    responses_keys = ("paths", endpoint, method, "responses")
    status_path = _describe_path((*responses_keys, str(status)))
    default_path = _describe_path((*responses_keys, _DEFAULT_STATUS_KEY))

    responses = _lookup(root, responses_keys)
    response_definition = _lookup_status(responses, status)
    if response_definition is _MISSING:
        logger.debug("No response for %s, trying %s", status_path, default_path)
        response_definition = _lookup(responses, (_DEFAULT_STATUS_KEY,))
    if response_definition is _MISSING:
        raise ResponseDefinitionNotFoundError(
            f"No response definition found for path '{status_path}' or '{default_path}'!"
        )

    schema_definition = _lookup(response_definition, layout.schema_keys)
    if schema_definition is _MISSING:
        raise SchemaDefinitionNotFoundError(
            "No schema definition found for path "
            f"'{status_path}.{_describe_path(layout.schema_keys)}'!"
        )

    resolved: dict[str, Any] = {"$id": schema_id}
    if isinstance(schema_definition, Mapping):
        resolved.update(schema_definition)
    registry = root.get(layout.registry_key, _MISSING)
    if registry is not _MISSING:
        resolved[layout.registry_key] = registry

    logger.debug("Resolved %s schema %s", document.kind.value, resolved.get("$id"))
    return resolved


def _lookup_status(responses: Any, status: int | str) -> Any:
    found = _lookup(responses, (str(status),))
    if found is _MISSING and str(status).isdigit():
        # YAML documents load unquoted status codes as integer keys.
        found = _lookup(responses, (int(status),))
    return found


def _lookup(node: Any, keys: Sequence[Any]) -> Any:
    current = node
    for key in keys:
        if current is _MISSING or not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _describe_path(keys: Sequence[Any]) -> str:
    return ".".join(str(key) for key in keys)
