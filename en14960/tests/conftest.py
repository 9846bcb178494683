"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from en14960.models import CalculatorResponse
from en14960.services import anchor_calculator, play_area_validator, slide_calculator
from en14960.services.traceability import CalculationRecord, create_record


@pytest.fixture
def sample_response() -> CalculatorResponse:
    """A small response with a two-step breakdown."""
    return CalculatorResponse(
        value=42,
        value_suffix="m",
        breakdown=[("Step 1", "Value 1"), ("Step 2", "Value 2")],
    )


@pytest.fixture
def sample_records() -> list[CalculationRecord]:
    """Records covering a numeric result, a slide result and a failed play area check."""
    return [
        create_record(
            "Anchors",
            {"length": 5, "width": 4, "height": 3},
            anchor_calculator.calculate(length=5, width=4, height=3),
        ),
        create_record(
            "Slide runout",
            {"platform_height": 2.0, "has_stop_wall": True},
            slide_calculator.calculate_required_runout(2.0, has_stop_wall=True),
        ),
        create_record(
            "Play area",
            {"unit_length": 5, "unit_width": 4},
            play_area_validator.validate(
                unit_length=5,
                unit_width=4,
                play_area_length=6,
                play_area_width=7,
                negative_adjustment_area=50,
            ),
        ),
    ]
