"""
Numeric thresholds and coefficients from BS EN 14960-1:2019.

Values are copied verbatim from the standard (line references are to the
2019 edition). They are read-only: each group is a frozen dataclass built
once at import time and shared by every calculator.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class AnchorConstants:
    # Annex A, lines 1194-1199: Cw=1.5, rho=1.24 kg/m3, V=11.1 m/s
    # 0.5 * 1.5 * 1.24 * 11.1^2 ~= 114
    area_coefficient: float = 114.0
    base_divisor: float = 1600.0  # N per anchor (line 450)
    safety_factor: float = 1.5
    minimum_anchors: int = 6  # lines 441-442


@dataclass(frozen=True, slots=True)
class SlideHeightThresholds:
    no_walls_required: float = 0.6  # under 600mm
    basic_walls: float = 3.0  # 600mm - 3000mm
    enhanced_walls: float = 6.0  # 3000mm - 6000mm
    max_safe_height: float = 8.0


@dataclass(frozen=True, slots=True)
class RunoutConstants:
    platform_height_ratio: float = 0.5
    minimum_runout_meters: float = 0.3
    stop_wall_addition: float = 0.5  # line 936


@dataclass(frozen=True, slots=True)
class WallHeightConstants:
    enhanced_height_multiplier: float = 1.25


@dataclass(frozen=True, slots=True)
class FabricStandard:
    min_tensile_strength: int = 1850  # N
    min_tear_strength: int = 350  # N
    fire_standard: str = "EN 71-3"


@dataclass(frozen=True, slots=True)
class ThreadStandard:
    min_tensile_strength: int = 88  # N


@dataclass(frozen=True, slots=True)
class RopeStandard:
    min_diameter: int = 18  # mm
    max_diameter: int = 45  # mm
    max_swing_percentage: int = 20


@dataclass(frozen=True, slots=True)
class NettingStandard:
    max_vertical_mesh: int = 30  # mm, netting over 1m high
    max_roof_mesh: int = 8  # mm


@dataclass(frozen=True, slots=True)
class MaterialStandards:
    fabric: FabricStandard = FabricStandard()
    thread: ThreadStandard = ThreadStandard()
    rope: RopeStandard = RopeStandard()
    netting: NettingStandard = NettingStandard()


ANCHOR_CALCULATION = AnchorConstants()
SLIDE_HEIGHT_THRESHOLDS = SlideHeightThresholds()
RUNOUT_CALCULATION = RunoutConstants()
WALL_HEIGHT = WallHeightConstants()
MATERIAL_STANDARDS = MaterialStandards()

# Section 4.3 (lines 940-961) lists factors, not a formula. Square metres per
# user by user height in mm; industry practice rather than the standard.
AREA_DIVISOR: Mapping[int, float] = MappingProxyType({
    1000: 1.0,
    1200: 1.33,
    1500: 1.66,
    1800: 2.0,
})

HEIGHT_CATEGORIES: Mapping[int, Mapping[str, str]] = MappingProxyType({
    1000: MappingProxyType({"label": "1.0m (Young children)"}),
    1200: MappingProxyType({"label": "1.2m (Children)"}),
    1500: MappingProxyType({"label": "1.5m (Adolescents)"}),
    1800: MappingProxyType({"label": "1.8m (Adults)"}),
})

# Grounding test weights (kg) by user height
GROUNDING_TEST_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "height_1000mm": 25,
    "height_1200mm": 35,
    "height_1500mm": 65,
    "height_1800mm": 85,
})

REINSPECTION_INTERVAL_DAYS = 365


def height_categories() -> Mapping[int, Mapping[str, str]]:
    """User height categories keyed by height in mm."""
    return HEIGHT_CATEGORIES


def material_standards() -> Mapping[str, Mapping[str, Any]]:
    """Material requirements for fabric, thread, rope and netting as plain mappings."""
    return MappingProxyType({
        "fabric": MappingProxyType({
            "min_tensile_strength": MATERIAL_STANDARDS.fabric.min_tensile_strength,
            "min_tear_strength": MATERIAL_STANDARDS.fabric.min_tear_strength,
            "fire_standard": MATERIAL_STANDARDS.fabric.fire_standard,
        }),
        "thread": MappingProxyType({
            "min_tensile_strength": MATERIAL_STANDARDS.thread.min_tensile_strength,
        }),
        "rope": MappingProxyType({
            "min_diameter": MATERIAL_STANDARDS.rope.min_diameter,
            "max_diameter": MATERIAL_STANDARDS.rope.max_diameter,
            "max_swing_percentage": MATERIAL_STANDARDS.rope.max_swing_percentage,
        }),
        "netting": MappingProxyType({
            "max_vertical_mesh": MATERIAL_STANDARDS.netting.max_vertical_mesh,
            "max_roof_mesh": MATERIAL_STANDARDS.netting.max_roof_mesh,
        }),
    })
