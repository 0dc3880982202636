"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "checks.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Check suite configuration for matcher-combinators.
# Replace every <REQUIRED> placeholder before running `run`.
# Replace <OPTIONAL> placeholders only when your setup needs them.
# Relative paths resolve against the directory of this file.

cases:
  # One entry per check case; ids must be unique.
  - id: "<REQUIRED>"
    # Expectation YAML; tags such as !equals, !in-any-order or !regex select matchers.
    expected: "<REQUIRED>"
    # Actual value as YAML or JSON.
    actual: "<REQUIRED>"
    # Disabled cases are reported as SKIPPED.
    enabled: true
    notes: "<OPTIONAL>"

report:
  # Directory for the results workbook; omit to skip writing one.
  output_dir: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML check suite template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder check suite template to the requested output path.

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
        raise FileExistsError(f"Check suite file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
