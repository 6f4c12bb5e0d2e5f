"""Validation and mismatch annotation service."""

from __future__ import annotations

import copy
import json
import logging
import math
from collections.abc import Mapping, MutableMapping
from typing import Any

from response_schema_validator.configuration.runtime_settings import IssueStyleConfig

from .annotation_outcomes import AnnotationResult, SchemaIssue
from .data_paths import MISSING, DataPath
from .validation_engine import ValidationEngine

logger = logging.getLogger(__name__)


def annotate_mismatches(
    schema: Any,
    data: Any,
    styles: IssueStyleConfig,
    *,
    engine: ValidationEngine,
) -> AnnotationResult:
    """Validate ``data`` and flag every mismatch in a deep copy of it.

    Values that fail a constraint are replaced by the error icon, the original
    value and the engine message; properties missing from the data are added
    with the missing icon and the property name. ``data`` is never modified.
    """
    validate = engine.compile(schema)
    validate(data)
    errors = validate.errors

    data_mismatches = copy.deepcopy(data)
    root_replacement: str | None = None
    for issue in errors or ():
        target, description = _describe_issue(issue, data, styles)
        if target.is_root and not isinstance(data_mismatches, MutableMapping):
            # Replacing a list or scalar root waits until every nested annotation is written.
            root_replacement = description
            continue
        data_mismatches = target.write(data_mismatches, description)
    if root_replacement is not None:
        data_mismatches = root_replacement

    if errors:
        logger.debug("Flagged %d schema mismatches", len(errors))
    return AnnotationResult(errors=errors, data_mismatches=data_mismatches)


def _describe_issue(
    issue: SchemaIssue, original: Any, styles: IssueStyleConfig
) -> tuple[DataPath, str]:
    if issue.keyword == "required":
        missing_property = issue.missing_property or ""
        return (
            issue.data_path.child(missing_property),
            f"{styles.icon_property_missing} Missing property '{missing_property}'",
        )
    # Read from the original data so earlier annotations never leak into later messages.
    value = issue.data_path.read(original)
    return (
        issue.data_path,
        f"{styles.icon_property_error} {_render_value(value)} {issue.message}",
    )


def _render_value(value: Any) -> str:
    if value is MISSING:
        return "undefined"
    rendered = json.dumps(
        _json_compatible(value), ensure_ascii=False, separators=(",", ":"), default=str
    )
    return rendered.replace('"', "'")


def _json_compatible(value: Any) -> Any:
    """Render numbers the way JavaScript serializes them: ``1.0`` as ``1``, NaN as ``null``."""
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() and abs(value) < 1e21 else value
    if isinstance(value, Mapping):
        return {key: _json_compatible(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_json_compatible(item) for item in value]
    return value
