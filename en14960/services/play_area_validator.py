"""
Geometric consistency checks between a unit and its play area.

All failing checks are reported together; only missing measurements stop
validation early.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List

from en14960.models import PlayAreaValidation

_LOG = logging.getLogger(__name__)

_FIELD_NAMES = {
    "unit_length": "Unit length",
    "unit_width": "Unit width",
    "play_area_length": "Play area length",
    "play_area_width": "Play area width",
    "negative_adjustment_area": "Negative adjustment area",
}


def _to_float(value: object) -> float | None:
    """Finite float for ``value``; None when it is not a usable number."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def validate(
    *,
    unit_length: float | None,
    unit_width: float | None,
    play_area_length: float | None,
    play_area_width: float | None,
    negative_adjustment_area: float | None,
) -> PlayAreaValidation:
    """
    Validate play area dimensions against the unit.

    The play area may equal but not exceed the unit in either dimension, and
    must be larger than the negative adjustment area. The adjustment is used
    as given, so a negative value enlarges the allowance.
    """
    raw = {
        "unit_length": unit_length,
        "unit_width": unit_width,
        "play_area_length": play_area_length,
        "play_area_width": play_area_width,
        "negative_adjustment_area": negative_adjustment_area,
    }
    if any(v is None for v in raw.values()):
        return PlayAreaValidation(valid=False, errors=["All measurements must be provided"])

    errors: List[str] = []
    measurements: Dict[str, float] = {}
    for name, value in raw.items():
        number = _to_float(value)
        if number is None:
            _LOG.debug("Play area: %s=%r is not numeric", name, value)
            errors.append(f"{_FIELD_NAMES[name]} must be a number")
            continue
        measurements[name] = number

    unit_len = measurements.get("unit_length")
    unit_wid = measurements.get("unit_width")
    play_len = measurements.get("play_area_length")
    play_wid = measurements.get("play_area_width")
    adjustment = measurements.get("negative_adjustment_area")

    if play_len is not None and unit_len is not None and play_len > unit_len:
        errors.append(
            f"Play area length ({play_len}) must be less than or equal to unit length ({unit_len})"
        )

    if play_wid is not None and unit_wid is not None and play_wid > unit_wid:
        errors.append(
            f"Play area width ({play_wid}) must be less than or equal to unit width ({unit_wid})"
        )

    if play_len is not None and play_wid is not None:
        total_play_area = play_len * play_wid
        measurements["total_play_area"] = total_play_area
        if adjustment is not None and total_play_area <= adjustment:
            errors.append(
                f"Total play area ({total_play_area}) must be greater than "
                f"negative adjustment area ({adjustment})"
            )

    return PlayAreaValidation(valid=not errors, errors=errors, measurements=measurements)
