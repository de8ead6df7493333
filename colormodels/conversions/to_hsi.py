import math
from typing import Tuple

from ..colors.hsi import HsiColor
from ..colors.rgb import RgbColor
from ..utils.num_utils import clamp_value
from .helpers import achromatic_shortcut, build_color


def unit_rgb_to_hsi(red: float, green: float, blue: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSI.

    Chromaticity is taken relative to the channel sum, the hue from the
    angle of the chromaticity vector.

    Args:
        red, green, blue: Channels in [0, 1]
    Returns:
        (hue in turns, saturation, intensity), each in [0, 1]
    """
    total = red + green + blue
    if total == 0:
        return 0.0, 0.0, 0.0

    r, g, b = red / total, green / total, blue / total

    numerator = 0.5 * ((r - g) + (r - b))
    denominator = math.sqrt((r - g) * (r - g) + (r - b) * (g - b))

    if denominator == 0:
        hue = 0.0
    else:
        hue = math.acos(clamp_value(numerator / denominator, -1.0, 1.0))
        if b > g:
            hue = 2 * math.pi - hue
        hue /= 2 * math.pi

    saturation = 1 - 3 * min(r, g, b)
    intensity = total / 3

    return hue, saturation, intensity


def rgb_to_hsi(rgb_color: RgbColor) -> HsiColor:
    shortcut = achromatic_shortcut(HsiColor, rgb_color)
    if shortcut is not None:
        return shortcut
    return build_color(HsiColor, unit_rgb_to_hsi(*rgb_color.to_factored_list()), rgb_color.alpha)
