"""
Interpolation and hue adjustment helpers layered on the color classes.

Nothing here imports the color classes at runtime; colors are handled
through the ColorBase list views (to_factored_list_with_alpha / extrapolate)
and with_hue.
"""
from __future__ import annotations
import math
from typing import List, TYPE_CHECKING, TypeVar

from ..exceptions import PreconditionError
from ..types.color_types import HUE_SPACES, Scalar
from ..types.constants import COOL_HUE, HUE_MAX, WARM_HUE
from ..utils.num_utils import clamp01

if TYPE_CHECKING:
    from .color_base import ColorBase

C = TypeVar("C", bound="ColorBase")


def lerp_hue(start: float, end: float, t: float) -> float:
    """
    Interpolate between two hues on a 0-1 (turns) scale along the shortest arc.

    Args:
        start: Start hue in turns [0, 1]
        end: End hue in turns [0, 1]
        t: Interpolation coefficient in [0, 1]
    Returns:
        Hue in turns [0, 1)
    """
    delta = end - start
    if delta > 0.5:
        delta -= 1.0
    elif delta < -0.5:
        delta += 1.0
    return (start + delta * t) % 1.0


def interpolate_colors(start: C, end: ColorBase, steps: int, exclude_original_colors: bool = False) -> List[C]:
    """
    Linearly interpolate between two colors, channel by channel, in start's color space.

    end is converted to start's color space first. Hue channels take the
    shortest way around the color wheel.

    Args:
        start: First color
        end: Last color
        steps: Number of colors generated strictly between start and end (>= 1)
        exclude_original_colors: If False, start and end bracket the result
    Returns:
        List of colors of start's class: steps colors, or steps + 2 with the originals
    """
    if steps < 1:
        raise PreconditionError(f"steps must be >= 1, got {steps}")

    end = end.convert(start.mode)
    start_values = start.to_factored_list_with_alpha()
    end_values = end.to_factored_list_with_alpha()
    has_hue = start.mode in HUE_SPACES

    colors: List[C] = []
    for i in range(1, steps + 1):
        t = i / (steps + 1)
        values = [clamp01(a + (b - a) * t) for a, b in zip(start_values, end_values)]
        if has_hue:
            values[0] = lerp_hue(start_values[0], end_values[0], t)
        colors.append(start.extrapolate(values))

    if exclude_original_colors:
        return colors
    return [start, *colors, end]  # type: ignore[list-item]


def _shift_towards(hue: Scalar, pole: float, amount: Scalar, relative: bool) -> float:
    if amount <= 0:
        raise PreconditionError(f"amount must be > 0, got {amount}")
    if relative and amount > 100:
        raise PreconditionError(f"relative amount must be <= 100, got {amount}")

    # signed shortest arc from hue to pole, in (-180, 180]
    distance = (pole - hue + 180) % HUE_MAX - 180
    if relative:
        shift = distance * amount / 100
    else:
        shift = math.copysign(min(amount, abs(distance)), distance)
    return (hue + shift) % HUE_MAX


def warmer_hue(hue: Scalar, amount: Scalar, relative: bool = True) -> float:
    """
    Move a hue towards WARM_HUE along the shortest arc.

    Args:
        hue: Hue in degrees [0, 360]
        amount: Percentage (0-100] of the distance to the pole if relative,
                otherwise degrees; never overshoots the pole
        relative: Interpret amount as a percentage
    """
    return _shift_towards(hue, WARM_HUE, amount, relative)


def cooler_hue(hue: Scalar, amount: Scalar, relative: bool = True) -> float:
    """Move a hue towards COOL_HUE along the shortest arc. See warmer_hue."""
    return _shift_towards(hue, COOL_HUE, amount, relative)
