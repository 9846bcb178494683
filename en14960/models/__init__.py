"""
Result types shared by the en14960 calculators and validators.

These are plain dataclasses with no behaviour beyond serialisation.
"""

from en14960.models.calculator_response import BreakdownStep, CalculatorResponse
from en14960.models.play_area import PlayAreaValidation

__all__ = [
    "BreakdownStep",
    "CalculatorResponse",
    "PlayAreaValidation",
]
