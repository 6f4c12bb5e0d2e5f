"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from .runtime_settings import DEFAULT_ISSUE_STYLES

DEFAULT_CONFIG_FILENAME = "issue-styles.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = f"""# Issue style configuration for response-schema-validator.
# Every key is optional; omitted keys keep the built-in default shown here.

# Prefix of values that fail a schema constraint.
icon_property_error: "{DEFAULT_ISSUE_STYLES.icon_property_error}"
color_property_error: "{DEFAULT_ISSUE_STYLES.color_property_error}"

# Prefix of properties required by the schema but missing in the data.
icon_property_missing: "{DEFAULT_ISSUE_STYLES.icon_property_missing}"
color_property_missing: "{DEFAULT_ISSUE_STYLES.color_property_missing}"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML issue style configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the issue style configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
