"""
Material threshold checks for ropes, fabric, thread and netting (EN 14960:2019).

Every predicate returns False when the measurement is missing.
"""

from __future__ import annotations

from en14960.config.limits import MATERIAL_STANDARDS


def valid_rope_diameter(diameter_mm: float | None) -> bool:
    # Range prevents finger entrapment while keeping grip and strength
    if diameter_mm is None:
        return False
    rope = MATERIAL_STANDARDS.rope
    return rope.min_diameter <= diameter_mm <= rope.max_diameter


def valid_fabric_tensile_strength(strength_n: float | None) -> bool:
    if strength_n is None:
        return False
    return strength_n >= MATERIAL_STANDARDS.fabric.min_tensile_strength


def valid_fabric_tear_strength(strength_n: float | None) -> bool:
    if strength_n is None:
        return False
    return strength_n >= MATERIAL_STANDARDS.fabric.min_tear_strength


def valid_thread_tensile_strength(strength_n: float | None) -> bool:
    if strength_n is None:
        return False
    return strength_n >= MATERIAL_STANDARDS.thread.min_tensile_strength


def valid_netting_mesh(mesh_mm: float | None, is_roof: bool = False) -> bool:
    """Roof netting has a tighter mesh limit than vertical netting."""
    if mesh_mm is None:
        return False
    netting = MATERIAL_STANDARDS.netting
    max_mesh = netting.max_roof_mesh if is_roof else netting.max_vertical_mesh
    return mesh_mm <= max_mesh


def fabric_tensile_requirement() -> str:
    return f"{MATERIAL_STANDARDS.fabric.min_tensile_strength} Newtons minimum"


def fabric_tear_requirement() -> str:
    return f"{MATERIAL_STANDARDS.fabric.min_tear_strength} Newtons minimum"
