"""Path locator entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_METHOD = "GET"
DEFAULT_STATUS = 200


@dataclass
class PathLocator:
    """Identifies one response schema inside a specification document."""

    endpoint: str | None = None
    method: str | None = None
    status: int | str | None = None

    def apply_defaults(self) -> PathLocator:
        """Fill in the default method and status in place."""
        self.method = self.method or DEFAULT_METHOD
        self.status = self.status or DEFAULT_STATUS
        return self

    @classmethod
    def coerce(cls, value: PathLocator | Mapping[str, Any]) -> PathLocator:
        """Return ``value`` itself when it is a locator, else build one from a mapping."""
        if isinstance(value, PathLocator):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"Path locator must be a PathLocator or a mapping, got {value!r}")
        return cls(
            endpoint=value.get("endpoint"),
            method=value.get("method"),
            status=value.get("status"),
        )
