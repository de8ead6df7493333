from typing import Iterable, Optional, TypeVar

from ..colors.color_base import ColorBase
from ..colors.rgb import RgbColor
from ..types.constants import ALPHA_MAX, PERCENT_MAX
from ..utils.num_utils import clamp01

C = TypeVar("C", bound=ColorBase)


def build_color(color_class: type[C], unit_values: Iterable[float], alpha: int) -> C:
    """Clamp unit-scale channel values onto [0, 1] and construct color_class from them."""
    values = tuple(clamp01(v) for v in unit_values)
    return color_class.extrapolate(values + (alpha / ALPHA_MAX,))


def achromatic_shortcut(color_class: type[C], rgb_color: RgbColor) -> Optional[C]:
    """
    Return the hue-space color for black, white or gray RGB input, whose hue
    is undefined, or None for chromatic input.

    color_class must take (hue, saturation, brightness-like channel, alpha).
    """
    alpha = rgb_color.alpha
    if rgb_color.is_black:
        return color_class(0, 0, 0, alpha)  # type: ignore[call-arg]
    if rgb_color.is_white:
        return color_class(0, 0, 100, alpha)  # type: ignore[call-arg]
    if rgb_color.is_monochromatic:
        return color_class(0, 0, rgb_color.red / 255 * PERCENT_MAX, alpha)  # type: ignore[call-arg]
    return None
