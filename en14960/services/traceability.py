"""
Calculation traceability: inputs snapshot, result, timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Union

from en14960.models import CalculatorResponse, PlayAreaValidation

RecordResult = Union[CalculatorResponse, PlayAreaValidation]


@dataclass(slots=True)
class CalculationRecord:
    """Traceability snapshot for one calculator or validator call."""
    timestamp: datetime
    calculator: str
    response: RecordResult
    inputs: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "calculator": self.calculator,
            "inputs": dict(self.inputs),
            "result": self.response.to_dict(),
        }


def create_record(
    calculator: str,
    inputs: Mapping[str, Any],
    response: RecordResult,
) -> CalculationRecord:
    """Stamp a result with the inputs that produced it and the current UTC time."""
    return CalculationRecord(
        timestamp=datetime.now(timezone.utc),
        calculator=calculator,
        response=response,
        inputs=dict(inputs),
    )
