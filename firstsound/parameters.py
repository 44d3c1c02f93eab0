"""Ranged float parameters with listener notification."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

Listener = Callable[[str, float], None]


@dataclass(frozen=True)
class NormalisableRange:
    """A value range with optional snapping interval and skew factor."""

    start: float
    end: float
    interval: float = 0.0
    skew: float = 1.0

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("range end must be greater than its start")
        if self.interval < 0.0:
            raise ValueError("interval must not be negative")
        if self.skew <= 0.0:
            raise ValueError("skew must be positive")

    def convert_to_0to1(self, value: float) -> float:
        """Map a real value onto the normalised 0..1 scale."""
        proportion = min(1.0, max(0.0, (value - self.start) / (self.end - self.start)))
        if self.skew == 1.0:
            return proportion
        return proportion**self.skew

    def convert_from_0to1(self, proportion: float) -> float:
        """Map a normalised 0..1 value back onto the real range."""
        proportion = min(1.0, max(0.0, proportion))
        if self.skew != 1.0 and proportion > 0.0:
            proportion = math.exp(math.log(proportion) / self.skew)
        return self.start + (self.end - self.start) * proportion

    def snap_to_legal_value(self, value: float) -> float:
        """Round to the interval grid and clamp into the range."""
        if self.interval > 0.0:
            value = self.start + self.interval * math.floor(
                (value - self.start) / self.interval + 0.5
            )
        if value <= self.start:
            return self.start
        if value >= self.end:
            return self.end
        return value


@dataclass
class FloatParameter:
    """A named float parameter constrained to a range."""

    parameter_id: str
    name: str
    range: NormalisableRange
    default: float
    value: float = field(init=False)

    def __post_init__(self) -> None:
        self.default = self.range.snap_to_legal_value(self.default)
        self.value = self.default

    @property
    def normalised(self) -> float:
        return self.range.convert_to_0to1(self.value)

    def set_value(self, value: float) -> float:
        """Store ``value`` snapped into the range and return what was stored."""
        self.value = self.range.snap_to_legal_value(value)
        return self.value


class ParameterState:
    """A set of parameters keyed by id, notifying listeners on change."""

    def __init__(self, parameters: Iterable[FloatParameter]) -> None:
        self._parameters: dict[str, FloatParameter] = {}
        self._listeners: dict[str, list[Listener]] = {}
        for parameter in parameters:
            if parameter.parameter_id in self._parameters:
                raise ValueError(f"duplicate parameter id {parameter.parameter_id!r}")
            self._parameters[parameter.parameter_id] = parameter
            self._listeners[parameter.parameter_id] = []

    def __getitem__(self, parameter_id: str) -> FloatParameter:
        return self._lookup(parameter_id)

    def __contains__(self, parameter_id: object) -> bool:
        return parameter_id in self._parameters

    def __iter__(self):
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def _lookup(self, parameter_id: str) -> FloatParameter:
        try:
            return self._parameters[parameter_id]
        except KeyError:
            raise KeyError(f"unknown parameter {parameter_id!r}") from None

    def add_listener(self, parameter_id: str, listener: Listener) -> None:
        """Call ``listener(parameter_id, value)`` whenever the parameter changes."""
        self._lookup(parameter_id)
        listeners = self._listeners[parameter_id]
        if listener not in listeners:
            listeners.append(listener)

    def remove_listener(self, parameter_id: str, listener: Listener) -> None:
        """Stop notifying ``listener``; unknown listeners are ignored."""
        self._lookup(parameter_id)
        listeners = self._listeners[parameter_id]
        if listener in listeners:
            listeners.remove(listener)

    def get_value(self, parameter_id: str) -> float:
        return self._lookup(parameter_id).value

    def set_value(self, parameter_id: str, value: float) -> float:
        """Set a parameter's real value, notify listeners if it changed, return it."""
        parameter = self._lookup(parameter_id)
        old = parameter.value
        new = parameter.set_value(value)
        if new != old:
            for listener in list(self._listeners[parameter_id]):
                listener(parameter_id, new)
        return new