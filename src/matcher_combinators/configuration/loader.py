"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import CaseSettings, Configuration, ReportSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the check suite configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    cases = _parse_cases_section(parsed.get("cases"), path.parent)
    report = _parse_report_section(parsed.get("report"), path.parent)

    return Configuration(path=path, cases=cases, report=report)


def _parse_cases_section(value: Any, base_path: Path) -> tuple[CaseSettings, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str) or not value:
        raise ConfigurationError("Configuration section 'cases' must be a non-empty list.")

    cases: list[CaseSettings] = []
    seen_ids: set[str] = set()
    for index, raw_case in enumerate(value, start=1):
        cases.append(_parse_case(raw_case, f"cases[{index}]", base_path))
        if cases[-1].case_id in seen_ids:
            raise ConfigurationError(f"Duplicate case id: {cases[-1].case_id}")
        seen_ids.add(cases[-1].case_id)
    return tuple(cases)


def _parse_case(value: Any, label: str, base_path: Path) -> CaseSettings:
    section = _require_mapping(value, label)
    case_id = _require_non_empty_string(section.get("id"), f"{label}.id")
    expected = _require_non_empty_string(section.get("expected"), f"{label}.expected")
    actual = _require_non_empty_string(section.get("actual"), f"{label}.actual")
    enabled = section.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigurationError(f"{label}.enabled must be a boolean.")
    return CaseSettings(
        case_id=case_id,
        expected_path=_resolve_path(base_path, expected),
        actual_path=_resolve_path(base_path, actual),
        enabled=enabled,
        notes=_optional_string(section.get("notes"), f"{label}.notes") or "",
    )


def _parse_report_section(value: Any, base_path: Path) -> ReportSettings:
    if value is None:
        return ReportSettings(output_dir=None)
    section = _require_mapping(value, "report")
    output_dir = _optional_string(section.get("output_dir"), "report.output_dir")
    return ReportSettings(
        output_dir=_resolve_path(base_path, output_dir) if output_dir else None,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
