"""Issue style merging service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from .runtime_settings import DEFAULT_ISSUE_STYLES, IssueStyleConfig

_CAMEL_CASE_ALIASES = {
    "iconPropertyError": "icon_property_error",
    "colorPropertyError": "color_property_error",
    "iconPropertyMissing": "icon_property_missing",
    "colorPropertyMissing": "color_property_missing",
}
_FIELD_NAMES = frozenset(field.name for field in fields(IssueStyleConfig))


class ConfigurationError(Exception):
    """Raised when an issue style configuration is invalid."""


def merge_issue_styles(
    overrides: IssueStyleConfig | Mapping[str, Any] | None,
    *,
    base: IssueStyleConfig = DEFAULT_ISSUE_STYLES,
) -> IssueStyleConfig:
    """Shallow-merge caller styles over the base styles, field by field.

    Args:
      overrides: Caller styles. Mappings may use snake_case field names or the
        camelCase names (``iconPropertyError``...). ``None`` values are treated
        as unspecified.
      base: Styles used for every field the caller does not set.

    Returns:
      The merged style configuration.

    Raises:
      ConfigurationError: If a key is unknown or a value is not a string.
    """
    if overrides is None:
        return base
    if isinstance(overrides, IssueStyleConfig):
        return overrides
    if not isinstance(overrides, Mapping):
        raise ConfigurationError("Issue styles must be a mapping.")

    changes: dict[str, str] = {}
    for key, value in overrides.items():
        field_name = _normalize_field_name(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigurationError(f"Issue style '{key}' must be a string.")
        changes[field_name] = value
    return replace(base, **changes)


def _normalize_field_name(key: object) -> str:
    if not isinstance(key, str):
        raise ConfigurationError(f"Unknown issue style: {key!r}")
    field_name = _CAMEL_CASE_ALIASES.get(key, key)
    if field_name not in _FIELD_NAMES:
        raise ConfigurationError(f"Unknown issue style: {key!r}")
    return field_name
