from typing import Tuple

from ..colors.hsl import HslColor
from ..colors.rgb import RgbColor
from .helpers import achromatic_shortcut, build_color
from .hue import get_hue


def unit_rgb_to_hsl(red: float, green: float, blue: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        red, green, blue: Channels in [0, 1]
    Returns:
        (hue in turns, saturation, lightness), each in [0, 1]
    """
    maximum = max(red, green, blue)
    minimum = min(red, green, blue)
    difference = maximum - minimum

    lightness = (maximum + minimum) / 2

    if difference == 0:
        saturation = 0.0
    elif lightness > 0.5:
        saturation = difference / (2 - maximum - minimum)
    else:
        saturation = difference / (maximum + minimum)

    return get_hue(red, green, blue), saturation, lightness


def rgb_to_hsl(rgb_color: RgbColor) -> HslColor:
    shortcut = achromatic_shortcut(HslColor, rgb_color)
    if shortcut is not None:
        return shortcut
    return build_color(HslColor, unit_rgb_to_hsl(*rgb_color.to_factored_list()), rgb_color.alpha)
