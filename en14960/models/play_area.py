from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class PlayAreaValidation:
    """Outcome of the play area geometry checks."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    measurements: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "measurements": dict(self.measurements),
        }
