from typing import Tuple
import numpy as np

from ..colors.cmyk import CmykColor
from ..colors.rgb import RgbColor
from .helpers import build_color


def unit_rgb_to_cmyk(red: float, green: float, blue: float) -> Tuple[float, float, float, float]:
    """
    Convert RGB to CMYK.

    Args:
        red, green, blue: Channels in [0, 1]
    Returns:
        (cyan, magenta, yellow, key), each in [0, 1]
    """
    cmy = 1.0 - np.array([red, green, blue], dtype=float)
    key = float(np.clip(cmy.min(), 0.0, 1.0))

    # key == 1 (black) divides 0 by 0; the NaNs are clamped away to 0
    with np.errstate(divide="ignore", invalid="ignore"):
        cmy = (cmy - key) / (1.0 - key)
    cmy = np.clip(np.nan_to_num(cmy, nan=0.0), 0.0, 1.0)

    cyan, magenta, yellow = (float(v) for v in cmy)
    return cyan, magenta, yellow, key


def rgb_to_cmyk(rgb_color: RgbColor) -> CmykColor:
    return build_color(CmykColor, unit_rgb_to_cmyk(*rgb_color.to_factored_list()), rgb_color.alpha)
