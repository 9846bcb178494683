"""
Slide runout and containing wall requirements.

EN 14960-1:2019 Section 4.2.9 (lines 854-887) sets containing wall heights by
platform height band; Section 4.2.11 (lines 930-939) sets the runout length.
One ordered band table drives the wall height value, its breakdown and the
compliance predicate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from en14960.config.limits import RUNOUT_CALCULATION, SLIDE_HEIGHT_THRESHOLDS, WALL_HEIGHT
from en14960.models import BreakdownStep, CalculatorResponse

_LOG = logging.getLogger(__name__)


class WallBand(Enum):
    NO_WALLS = "no_walls"
    BASIC = "basic"
    ENHANCED = "enhanced"
    ROOF_REQUIRED = "roof_required"
    UNSAFE = "unsafe"


_T = SLIDE_HEIGHT_THRESHOLDS

# (lower, upper, band, upper bound inclusive)
_WALL_BANDS: Tuple[Tuple[float, float, WallBand, bool], ...] = (
    (0.0, _T.no_walls_required, WallBand.NO_WALLS, False),
    (_T.no_walls_required, _T.basic_walls, WallBand.BASIC, False),
    (_T.basic_walls, _T.enhanced_walls, WallBand.ENHANCED, False),
    (_T.enhanced_walls, _T.max_safe_height, WallBand.ROOF_REQUIRED, True),
)


@dataclass(frozen=True, slots=True)
class WallHeightRequirement:
    """Resolved containing wall requirement for one platform height."""
    band: WallBand | None
    required_height: float
    text: str
    breakdown: Tuple[BreakdownStep, ...] = field(default_factory=tuple)


def resolve_wall_band(platform_height: float | None) -> WallBand | None:
    """Band for ``platform_height``; None when absent or negative."""
    if platform_height is None or platform_height < 0:
        return None
    for lower, upper, band, closed in _WALL_BANDS:
        if lower <= platform_height < upper or (closed and platform_height == upper):
            return band
    return WallBand.UNSAFE


def _m(value: float) -> float:
    return round(value, 2)


# --- Runout ------------------------------------------------------------------

def calculate_runout_value(platform_height: float | None, has_stop_wall: bool = False) -> float:
    """Required runout length (m): half the platform height, at least 0.3m."""
    if platform_height is None or platform_height <= 0:
        return 0

    r = RUNOUT_CALCULATION
    base_runout = max(platform_height * r.platform_height_ratio, r.minimum_runout_meters)
    return base_runout + r.stop_wall_addition if has_stop_wall else base_runout


def calculate_required_runout(
    platform_height: float | None, has_stop_wall: bool = False
) -> CalculatorResponse:
    """Required runout with the derivation steps (lines 934-936)."""
    if platform_height is None or platform_height <= 0:
        _LOG.debug("Runout: no platform height (%r), returning 0", platform_height)
        return CalculatorResponse(value=0, value_suffix="m", breakdown=())

    r = RUNOUT_CALCULATION
    calculated_runout = platform_height * r.platform_height_ratio
    base_runout = calculate_runout_value(platform_height, has_stop_wall=False)
    final_runout = calculate_runout_value(platform_height, has_stop_wall=has_stop_wall)

    breakdown = [
        ("50% calculation", f"{platform_height}m × {r.platform_height_ratio} = {_m(calculated_runout)}m"),
        ("Minimum requirement", f"{r.minimum_runout_meters}m ({int(round(r.minimum_runout_meters * 1000))}mm)"),
        (
            "Base runout",
            f"Maximum of {_m(calculated_runout)}m and {r.minimum_runout_meters}m = {_m(base_runout)}m",
        ),
    ]
    if has_stop_wall:
        breakdown.append(
            ("Stop-wall addition", f"{_m(base_runout)}m + {r.stop_wall_addition}m = {_m(final_runout)}m")
        )

    return CalculatorResponse(value=final_runout, value_suffix="m", breakdown=breakdown)


def meets_runout_requirements(
    runout_length: float | None, platform_height: float | None, has_stop_wall: bool = False
) -> bool:
    if runout_length is None:
        return False
    return runout_length >= calculate_runout_value(platform_height, has_stop_wall=has_stop_wall)


def slide_runout_formula_text() -> str:
    r = RUNOUT_CALCULATION
    height_ratio = int(round(r.platform_height_ratio * 100))
    min_runout = int(round(r.minimum_runout_meters * 1000))
    return f"{height_ratio}% of platform height, minimum {min_runout}mm"


# --- Containing walls --------------------------------------------------------

def get_wall_height_requirement_details(
    platform_height: float | None,
    user_height: float,
    has_permanent_roof: bool | None = None,
) -> WallHeightRequirement:
    """
    Resolve the wall requirement band and explain it.

    ``has_permanent_roof`` is tri-state: None means the roof status is unknown
    and no roof status line is reported.
    """
    band = resolve_wall_band(platform_height)
    multiplier = WALL_HEIGHT.enhanced_height_multiplier

    if band is None:
        return WallHeightRequirement(band=None, required_height=0, text="Platform height not provided")

    if band is WallBand.NO_WALLS:
        return WallHeightRequirement(
            band=band,
            required_height=0,
            text="No containing walls required",
            breakdown=(
                ("Height range", f"Under {_T.no_walls_required}m"),
                ("Requirement", "No containing walls required"),
            ),
        )

    if band is WallBand.BASIC:
        return WallHeightRequirement(
            band=band,
            required_height=user_height,
            text=f"Walls must be at least {user_height}m (equal to user height)",
            breakdown=(
                ("Height range", f"{_T.no_walls_required}m - {_T.basic_walls}m"),
                ("Calculation", f"{user_height}m (user height)"),
            ),
        )

    if band is WallBand.UNSAFE:
        _LOG.debug("Wall height: platform %sm exceeds safe limits", platform_height)
        return WallHeightRequirement(
            band=band,
            required_height=0,
            text="Platform height exceeds safe limits",
            breakdown=(("Status", "Platform height exceeds safe limits"),),
        )

    required_height = _m(user_height * multiplier)

    if band is WallBand.ENHANCED:
        height_range = ("Height range", f"{_T.basic_walls}m - {_T.enhanced_walls}m")
        alternative = ("Alternative requirement", "Permanent roof (can replace heightened walls)")
        if has_permanent_roof:
            breakdown = [
                height_range,
                (
                    "Wall requirement",
                    f"{required_height}m ({multiplier}× user height) - skipped due to permanent roof",
                ),
                alternative,
                ("Permanent roof", "Fitted ✓"),
            ]
            text = "Permanent roof fitted - wall height requirement satisfied"
        else:
            breakdown = [
                height_range,
                ("Calculation", f"{user_height}m × {multiplier} = {required_height}m"),
                alternative,
            ]
            if has_permanent_roof is not None:
                breakdown.append(("Permanent roof", "Not fitted ✗"))
            text = f"Walls must be at least {required_height}m ({multiplier}× user height)"
        return WallHeightRequirement(
            band=band, required_height=required_height, text=text, breakdown=tuple(breakdown)
        )

    # WallBand.ROOF_REQUIRED: walls and a permanent roof
    breakdown = [
        ("Height range", f"Over {_T.enhanced_walls}m"),
        ("Calculation", f"{user_height}m × {multiplier} = {required_height}m"),
        ("Additional requirement", "Permanent roof required"),
    ]
    if has_permanent_roof is not None:
        if has_permanent_roof:
            breakdown.append(("Permanent roof", "Required and fitted ✓"))
        else:
            breakdown.append(("Permanent roof", "Required but not fitted ✗"))
    return WallHeightRequirement(
        band=band,
        required_height=required_height,
        text=f"Walls must be at least {required_height}m + permanent roof required",
        breakdown=tuple(breakdown),
    )


def calculate_wall_height_requirements(
    platform_height: float | None,
    user_height: float | None,
    has_permanent_roof: bool | None = None,
) -> CalculatorResponse:
    """Required containing wall height (m) for a platform and maximum user height."""
    if platform_height is None or user_height is None or platform_height <= 0 or user_height <= 0:
        _LOG.debug(
            "Wall height: invalid heights platform=%r user=%r, returning 0",
            platform_height,
            user_height,
        )
        return CalculatorResponse(value=0, value_suffix="m", breakdown=())

    details = get_wall_height_requirement_details(platform_height, user_height, has_permanent_roof)
    return CalculatorResponse(
        value=details.required_height,
        value_suffix="m",
        breakdown=details.breakdown,
    )


def meets_height_requirements(
    platform_height: float | None,
    user_height: float | None,
    containing_wall_height: float | None,
    has_permanent_roof: bool | None,
) -> bool:
    """Whether fitted walls (and roof) satisfy Section 4.2.9 for the platform."""
    band = resolve_wall_band(platform_height)
    if band is None or band is WallBand.UNSAFE:
        return False
    if band is WallBand.NO_WALLS:
        return True
    if user_height is None or containing_wall_height is None:
        return False

    if band is WallBand.BASIC:
        return containing_wall_height >= user_height

    enhanced_height = user_height * WALL_HEIGHT.enhanced_height_multiplier
    if band is WallBand.ENHANCED:
        return bool(has_permanent_roof) or containing_wall_height >= enhanced_height
    return bool(has_permanent_roof) and containing_wall_height >= enhanced_height


def requires_permanent_roof(platform_height: float | None) -> bool:
    # Lines 865-866
    if platform_height is None:
        return False
    return platform_height > _T.enhanced_walls


def wall_height_requirement() -> str:
    return f"Containing walls required {WALL_HEIGHT.enhanced_height_multiplier} times user height"


def slide_calculations() -> Dict[str, Dict[str, str]]:
    """Reference summary of the slide safety requirements."""
    r = RUNOUT_CALCULATION
    return {
        "containing_wall_heights": {
            "under_600mm": "No containing walls required",
            "between_600_3000mm": "Containing walls required of user height",
            "between_3000_6000mm": wall_height_requirement(),
            "over_6000mm": "Both containing walls AND permanent roof required",
        },
        "runout_requirements": {
            "minimum_length": f"{int(round(r.platform_height_ratio * 100))}% of highest platform height",
            "absolute_minimum": f"{int(round(r.minimum_runout_meters * 1000))}mm in any case",
            "maximum_inclination": "Not more than 10°",
            "stop_wall_addition": (
                f"If fitted, adds {int(round(r.stop_wall_addition * 100))}cm to required run-out length"
            ),
            "wall_height_requirement": "50% of user height on run-out sides",
        },
        "safety_factors": {
            "first_metre_gradient": "Special requirements for first metre of slope",
            "surface_requirements": "Non-slip surface material required",
            "edge_protection": "Rounded edges and smooth transitions",
        },
    }
