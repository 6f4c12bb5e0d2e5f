"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .issue_styles import ConfigurationError, merge_issue_styles
from .loader import load_document, load_issue_styles
from .runtime_settings import DEFAULT_ISSUE_STYLES, IssueStyleConfig

__all__ = [
    "DEFAULT_ISSUE_STYLES",
    "IssueStyleConfig",
    "ConfigurationError",
    "merge_issue_styles",
    "load_document",
    "load_issue_styles",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
