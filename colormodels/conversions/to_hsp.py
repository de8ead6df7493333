import math
from typing import Tuple

from ..colors.hsp import HspColor
from ..colors.rgb import RgbColor
from ..types.constants import HSP_WEIGHTS
from .helpers import achromatic_shortcut, build_color
from .hue import get_hue


def perceived_brightness(red: float, green: float, blue: float) -> float:
    """Weighted euclidean norm of the channels, using HSP_WEIGHTS."""
    pr, pg, pb = HSP_WEIGHTS
    return math.sqrt(red * red * pr + green * green * pg + blue * blue * pb)


def unit_rgb_to_hsp(red: float, green: float, blue: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSP.

    Args:
        red, green, blue: Channels in [0, 1]
    Returns:
        (hue in turns, saturation, perceived brightness), each in [0, 1]
    """
    brightness = perceived_brightness(red, green, blue)

    maximum = max(red, green, blue)
    minimum = min(red, green, blue)

    if maximum == minimum:
        return 0.0, 0.0, brightness

    saturation = 1 - minimum / maximum

    return get_hue(red, green, blue), saturation, brightness


def rgb_to_hsp(rgb_color: RgbColor) -> HspColor:
    shortcut = achromatic_shortcut(HspColor, rgb_color)
    if shortcut is not None:
        return shortcut
    return build_color(HspColor, unit_rgb_to_hsp(*rgb_color.to_factored_list()), rgb_color.alpha)
