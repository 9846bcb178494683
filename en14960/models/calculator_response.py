from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Tuple, Union

BreakdownStep = Tuple[str, str]
CapacityValue = Mapping[str, int]


def _freeze_breakdown(steps: Iterable[Iterable[str]]) -> Tuple[BreakdownStep, ...]:
    frozen = []
    for step in steps:
        label, text = step
        frozen.append((str(label), str(text)))
    return tuple(frozen)


@dataclass(frozen=True, slots=True)
class CalculatorResponse:
    """
    Common result of every calculator.

    ``breakdown`` is an ordered tuple of ``(label, text)`` steps explaining how
    ``value`` was derived, in the order they were computed.
    """

    value: Union[float, int, CapacityValue]
    value_suffix: str = ""
    breakdown: Tuple[BreakdownStep, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.value, Mapping):
            object.__setattr__(self, "value", MappingProxyType(dict(self.value)))
        object.__setattr__(self, "breakdown", _freeze_breakdown(self.breakdown))

    def __hash__(self) -> int:
        value = tuple(self.value.items()) if isinstance(self.value, Mapping) else self.value
        return hash((value, self.value_suffix, self.breakdown))

    def to_dict(self) -> Dict[str, Any]:
        value = dict(self.value) if isinstance(self.value, Mapping) else self.value
        return {
            "value": value,
            "value_suffix": self.value_suffix,
            "breakdown": [list(step) for step in self.breakdown],
        }

    as_json = to_dict
