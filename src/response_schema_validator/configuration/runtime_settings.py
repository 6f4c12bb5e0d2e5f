"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ICON_PROPERTY_ERROR = "😱"
DEFAULT_COLOR_PROPERTY_ERROR = "#ee930a"
DEFAULT_ICON_PROPERTY_MISSING = "😡"
DEFAULT_COLOR_PROPERTY_MISSING = "#c10000"


@dataclass(frozen=True)
class IssueStyleConfig:
    """Icons and colors used to flag mismatches in annotated data."""

    icon_property_error: str = DEFAULT_ICON_PROPERTY_ERROR
    color_property_error: str = DEFAULT_COLOR_PROPERTY_ERROR
    icon_property_missing: str = DEFAULT_ICON_PROPERTY_MISSING
    color_property_missing: str = DEFAULT_COLOR_PROPERTY_MISSING

    def to_dict(self) -> dict[str, str]:
        """Return the camelCase mapping used in rendered outcomes."""
        return {
            "iconPropertyError": self.icon_property_error,
            "colorPropertyError": self.color_property_error,
            "iconPropertyMissing": self.icon_property_missing,
            "colorPropertyMissing": self.color_property_missing,
        }


DEFAULT_ISSUE_STYLES = IssueStyleConfig()
