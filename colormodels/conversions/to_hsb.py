from typing import Tuple

from ..colors.hsb import HsbColor
from ..colors.rgb import RgbColor
from .helpers import achromatic_shortcut, build_color
from .hue import get_hue


def unit_rgb_to_hsb(red: float, green: float, blue: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSB.

    Args:
        red, green, blue: Channels in [0, 1]
    Returns:
        (hue in turns, saturation, brightness), each in [0, 1]
    """
    maximum = max(red, green, blue)
    minimum = min(red, green, blue)

    saturation = 0.0 if maximum == 0 else (maximum - minimum) / maximum

    return get_hue(red, green, blue), saturation, maximum


def rgb_to_hsb(rgb_color: RgbColor) -> HsbColor:
    shortcut = achromatic_shortcut(HsbColor, rgb_color)
    if shortcut is not None:
        return shortcut
    return build_color(HsbColor, unit_rgb_to_hsb(*rgb_color.to_factored_list()), rgb_color.alpha)
