"""Mismatch annotation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .data_paths import DataPath


@dataclass(frozen=True)
class SchemaIssue:
    """One structural validation error reported by the validation engine."""

    data_path: DataPath
    schema_path: str
    keyword: str
    message: str
    params: Mapping[str, Any] = field(default_factory=dict)

    @property
    def instance_path(self) -> str:
        """JSON pointer into the validated data, ``""`` for the root."""
        return self.data_path.to_pointer()

    @property
    def missing_property(self) -> str | None:
        """Name of the missing property for ``required`` errors."""
        if self.keyword != "required":
            return None
        return self.params.get("missingProperty")

    def to_dict(self) -> dict[str, Any]:
        return {
            "instancePath": self.instance_path,
            "schemaPath": self.schema_path,
            "keyword": self.keyword,
            "params": dict(self.params),
            "message": self.message,
        }


@dataclass(frozen=True)
class AnnotationResult:
    """Engine errors together with the annotated copy of the validated data."""

    errors: tuple[SchemaIssue, ...] | None
    data_mismatches: Any

    @property
    def is_valid(self) -> bool:
        return self.errors is None
