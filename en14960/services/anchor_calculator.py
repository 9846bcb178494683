"""
Ground anchor sizing (EN 14960-1:2019 Annex A, lines 1175-1210).

Wind force on an exposed face is 0.5 x Cw x rho x V^2 x A; each anchor must
withstand 1600N and every unit needs at least six anchorage points.
"""

from __future__ import annotations

import logging
import math

from en14960.config.limits import ANCHOR_CALCULATION
from en14960.models import CalculatorResponse

_LOG = logging.getLogger(__name__)


def calculate_required_anchors(area_m2: float | None) -> int:
    """Anchors needed to restrain one exposed face of ``area_m2``."""
    if area_m2 is None or area_m2 <= 0:
        return 0
    c = ANCHOR_CALCULATION
    return math.ceil((float(area_m2) * c.area_coefficient * c.safety_factor) / c.base_divisor)


def calculate(length: float | None, width: float | None, height: float | None) -> CalculatorResponse:
    """
    Total anchors for a unit of the given dimensions (m), with breakdown.

    A missing dimension counts as zero, so the EN 14960 minimum applies.
    """
    c = ANCHOR_CALCULATION
    length = 0.0 if length is None else length
    width = 0.0 if width is None else width
    height = 0.0 if height is None else height

    front_area = round(width * height, 1)
    sides_area = round(length * height, 1)

    required_front = calculate_required_anchors(front_area)
    required_sides = calculate_required_anchors(sides_area)

    # Line 1204: both faces of each pair are loaded
    calculated_total = (required_front + required_sides) * 2
    total_required = max(calculated_total, c.minimum_anchors)

    formula = f"({{area}} × {c.area_coefficient} × {c.safety_factor}) ÷ {c.base_divisor} = {{count}}"
    breakdown = [
        ("Front/back area", f"{width}m (W) × {height}m (H) = {front_area}m²"),
        ("Sides area", f"{length}m (L) × {height}m (H) = {sides_area}m²"),
        ("Front & back anchor counts", formula.format(area=front_area, count=required_front)),
        ("Left & right anchor counts", formula.format(area=sides_area, count=required_sides)),
        ("Required anchors", f"({required_front} + {required_sides}) × 2 = {calculated_total}"),
    ]

    if calculated_total < c.minimum_anchors:
        _LOG.debug(
            "Anchors: calculated %d below minimum, using %d", calculated_total, c.minimum_anchors
        )
        breakdown.append(
            (
                "EN 14960 minimum",
                f"Minimum {c.minimum_anchors} anchors required, using {c.minimum_anchors}",
            )
        )

    return CalculatorResponse(value=total_required, value_suffix="", breakdown=breakdown)


def anchor_formula_text() -> str:
    c = ANCHOR_CALCULATION
    return f"((Area × {c.area_coefficient} × {c.safety_factor}) ÷ {c.base_divisor})"


def anchor_calculation_description() -> str:
    return (
        "Anchors must be calculated based on the play area to ensure adequate "
        "ground restraint for wind loads."
    )
