"""
Simple text-based rendering of calculator results for inspection reports.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from en14960.models import CalculatorResponse, PlayAreaValidation
from en14960.services.traceability import CalculationRecord


def format_value(response: CalculatorResponse) -> str:
    value = response.value
    if isinstance(value, Mapping):
        return ", ".join(f"{key}: {count}" for key, count in value.items())
    return f"{value}{response.value_suffix}"


def build_breakdown_text(title: str, response: CalculatorResponse) -> str:
    lines: list[str] = []
    lines.append(title)
    lines.append(f"Result: {format_value(response)}")
    for label, text in response.breakdown:
        lines.append(f"  - {label}: {text}" if text else f"  - {label}")
    return "\n".join(lines)


def build_play_area_text(validation: PlayAreaValidation, title: str = "Play area") -> str:
    lines: list[str] = []
    lines.append(title)
    lines.append(f"Status: {'VALID' if validation.valid else 'INVALID'}")
    for error in validation.errors:
        lines.append(f"  ! {error}")
    for name, value in validation.measurements.items():
        lines.append(f"  {name}: {value}")
    return "\n".join(lines)


def build_inspection_summary_text(records: Iterable[CalculationRecord]) -> str:
    sections: list[str] = []
    for record in records:
        if isinstance(record.response, PlayAreaValidation):
            body = build_play_area_text(record.response, title=record.calculator)
        else:
            body = build_breakdown_text(record.calculator, record.response)
        sections.append(f"{body}\nCalculated: {record.timestamp.isoformat(timespec='seconds')}")
    return "\n\n".join(sections)
