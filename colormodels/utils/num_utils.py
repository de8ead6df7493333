import math
from typing import Iterable, Tuple
from boundednumbers import clamp


def round_value(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_values(values: Iterable[float]) -> Tuple[int, ...]:
    """Apply round_value to every element."""
    return tuple(round_value(v) for v in values)


def clamp_value(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper] and return it as a plain float."""
    return float(clamp(value, lower, upper))


def clamp01(value: float) -> float:
    return clamp_value(value, 0.0, 1.0)
