"""
Maximum simultaneous users per user-height band.

EN 14960-1:2019 Section 4.3 (lines 940-961) names the factors to consider
(user height, playing area, activity) without a formula; the area-per-user
divisors in ``AREA_DIVISOR`` follow industry practice.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Dict, List

from en14960.config.limits import AREA_DIVISOR
from en14960.models import BreakdownStep, CalculatorResponse

_LOG = logging.getLogger(__name__)

_TRAILING_ZERO = re.compile(r"\.0$")


def format_number(number: float) -> str:
    """One decimal place with a trailing ``.0`` dropped (10.0 -> '10', 10.5 -> '10.5')."""
    return _TRAILING_ZERO.sub("", f"{number:.1f}")


def capacity_key(height_mm: int) -> str:
    return f"users_{height_mm}mm"


def calculate(
    length: float | None,
    width: float | None,
    max_user_height: float | None = None,
    negative_adjustment_area: float = 0,
) -> CalculatorResponse:
    """
    Capacity for every height band of a ``length`` x ``width`` play area (m).

    ``negative_adjustment_area`` is the area lost to obstacles; its sign is
    ignored. Bands taller than ``max_user_height`` (m) get zero capacity.
    """
    if length is None or width is None:
        _LOG.debug("User capacity: missing dimensions length=%r width=%r", length, width)
        return _default_result()

    adjustment = abs(float(negative_adjustment_area or 0))
    if not all(math.isfinite(v) for v in (length, width, adjustment)):
        _LOG.debug(
            "User capacity: non-finite input length=%r width=%r adjustment=%r",
            length, width, negative_adjustment_area,
        )
        return _default_result()

    total_area = round(length * width, 2)
    usable_area = round(max(total_area - adjustment, 0), 2)

    breakdown = _build_breakdown(length, width, total_area, adjustment, usable_area)
    capacities = _calculate_capacities(usable_area, max_user_height, breakdown)

    return CalculatorResponse(value=capacities, value_suffix="", breakdown=breakdown)


def _build_breakdown(
    length: float,
    width: float,
    total_area: float,
    adjustment: float,
    usable_area: float,
) -> List[BreakdownStep]:
    breakdown: List[BreakdownStep] = [
        (
            "Total area",
            f"{format_number(length)}m × {format_number(width)}m = {format_number(total_area)}m²",
        ),
    ]
    if adjustment > 0:
        breakdown.append(("Obstacles/adjustments", f"- {format_number(adjustment)}m²"))
    breakdown.append(("Usable area", f"{format_number(usable_area)}m²"))
    breakdown.append(("Capacity calculations", "Based on usable area"))
    return breakdown


def _calculate_capacities(
    usable_area: float,
    max_user_height: float | None,
    breakdown: List[BreakdownStep],
) -> Dict[str, int]:
    capacities: Dict[str, int] = {}

    for height_mm, divisor in sorted(AREA_DIVISOR.items()):
        height_m = height_mm / 1000.0
        key = capacity_key(height_mm)
        label = f"{format_number(height_m)}m users"

        if max_user_height is None or height_m <= max_user_height:
            capacity = math.floor(usable_area / divisor)
            capacities[key] = capacity
            noun = "user" if capacity == 1 else "users"
            breakdown.append(
                (label, f"{format_number(usable_area)} ÷ {format_number(divisor)} = {capacity} {noun}")
            )
        else:
            capacities[key] = 0
            breakdown.append((label, "Not allowed (exceeds height limit)"))

    return capacities


def _default_result() -> CalculatorResponse:
    return CalculatorResponse(
        value={capacity_key(height_mm): 0 for height_mm in sorted(AREA_DIVISOR)},
        value_suffix="",
        breakdown=(("Invalid dimensions", ""),),
    )
