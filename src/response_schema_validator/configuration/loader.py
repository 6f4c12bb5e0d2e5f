"""Configuration and document loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .issue_styles import ConfigurationError, merge_issue_styles
from .runtime_settings import IssueStyleConfig

logger = logging.getLogger(__name__)


def load_issue_styles(config_path: Path | str) -> IssueStyleConfig:
    """Load and validate an issue style configuration file."""
    path = Path(config_path)
    parsed = _parse_file(path, label="Configuration")

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    styles = merge_issue_styles(parsed)
    logger.debug("Loaded issue styles from %s", path)
    return styles


def load_document(document_path: Path | str) -> Any:
    """Load a schema, specification or data document written as YAML or JSON."""
    path = Path(document_path)
    parsed = _parse_file(path, label="Document")
    logger.debug("Loaded document %s", path)
    return parsed


def _parse_file(path: Path, *, label: str) -> Any:
    if not path.exists():
        raise ConfigurationError(f"{label} file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {label.lower()} file: {exc}") from exc
