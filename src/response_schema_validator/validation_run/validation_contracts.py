"""Validation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from response_schema_validator.configuration.runtime_settings import IssueStyleConfig
from response_schema_validator.mismatch_annotation.annotation_outcomes import SchemaIssue


@dataclass(frozen=True)
class ValidationOutcome:
    """Output contract for one validation call."""

    errors: tuple[SchemaIssue, ...] | None
    data_mismatches: Any
    issue_styles: IssueStyleConfig

    @property
    def is_valid(self) -> bool:
        """Return True when the data matched the schema."""
        return self.errors is None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable rendering of the outcome."""
        return {
            "errors": None if self.errors is None else [error.to_dict() for error in self.errors],
            "dataMismatches": self.data_mismatches,
            "issueStyles": self.issue_styles.to_dict(),
        }
