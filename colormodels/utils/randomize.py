"""Random channel sampling used by ColorBase.random()."""

from typing import Optional
import numpy as np

from ..exceptions import ChannelRangeError
from ..types.constants import HUE_MAX


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def random_value(min_value: float, max_value: float, rng: Optional[np.random.Generator] = None) -> float:
    """
    Draw a float uniformly from [min_value, max_value].

    Args:
        min_value: Lower bound
        max_value: Upper bound, must be >= min_value
        rng: Optional numpy Generator for reproducible draws
    """
    if min_value > max_value:
        raise ChannelRangeError(f"min_value ({min_value}) must be <= max_value ({max_value})")
    if min_value == max_value:
        return float(min_value)
    return float(_generator(rng).uniform(min_value, max_value))


def random_int(min_value: int, max_value: int, rng: Optional[np.random.Generator] = None) -> int:
    """Draw an integer uniformly from [min_value, max_value], both ends included."""
    if min_value > max_value:
        raise ChannelRangeError(f"min_value ({min_value}) must be <= max_value ({max_value})")
    return int(_generator(rng).integers(min_value, max_value, endpoint=True))


def random_hue(min_hue: float = 0.0, max_hue: float = HUE_MAX, rng: Optional[np.random.Generator] = None) -> float:
    """
    Draw a hue in degrees from a circular range.

    If min_hue <= max_hue the range runs clockwise from min_hue to max_hue.
    If min_hue > max_hue the range runs counter-clockwise, wrapping through 0:
    random_hue(300, 60) returns hues in [300, 360) or [0, 60].

    Args:
        min_hue: Start of the range, in [0, 360]
        max_hue: End of the range, in [0, 360]
        rng: Optional numpy Generator
    Returns:
        Hue in [0, 360)
    """
    for name, hue in (("min_hue", min_hue), ("max_hue", max_hue)):
        if not 0 <= hue <= HUE_MAX:
            raise ChannelRangeError(f"{name} must be within [0, {HUE_MAX:g}], got {hue}")

    if min_hue <= max_hue:
        return random_value(min_hue, max_hue, rng) % HUE_MAX

    span = HUE_MAX - min_hue + max_hue
    return (min_hue + random_value(0.0, span, rng)) % HUE_MAX
