from typing import Tuple
import numpy as np

from ..colors.lab import LabColor
from ..colors.rgb import RgbColor
from ..colors.xyz import XyzColor
from ..types.constants import (
    CIE_EPSILON,
    CIE_KAPPA,
    REFERENCE_WHITE,
    SRGB_GAMMA,
    SRGB_LINEAR_THRESHOLD,
    SRGB_TO_XYZ,
)
from .helpers import build_color


def srgb_to_linear(value: float) -> float:
    """Undo the sRGB transfer function for one channel in [0, 1]."""
    if value <= SRGB_LINEAR_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** SRGB_GAMMA


def unit_rgb_to_xyz(red: float, green: float, blue: float) -> Tuple[float, float, float]:
    """
    Convert sRGB to XYZ relative to the reference white.

    Args:
        red, green, blue: Channels in [0, 1]
    Returns:
        (x, y, z) as fractions of the reference white's X, Y, Z; [0, 1] for sRGB input
    """
    linear = np.array([srgb_to_linear(v) for v in (red, green, blue)])
    x, y, z = SRGB_TO_XYZ @ linear / REFERENCE_WHITE
    return float(x), float(y), float(z)


def rgb_to_xyz(rgb_color: RgbColor) -> XyzColor:
    if rgb_color.is_black:
        return XyzColor(0, 0, 0, rgb_color.alpha)
    if rgb_color.is_white:
        return XyzColor(100, 100, 100, rgb_color.alpha)
    return build_color(XyzColor, unit_rgb_to_xyz(*rgb_color.to_factored_list()), rgb_color.alpha)


def _lab_component_to_xyz(f: float) -> float:
    cube = f * f * f
    return cube if cube > CIE_EPSILON else (116 * f - 16) / CIE_KAPPA


def lab_to_unit_xyz(lightness: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Convert CIE L*a*b* to XYZ relative to the reference white.

    Args:
        lightness: L* in [0, 100]
        a, b: a* and b* in [-128, 127]
    Returns:
        (x, y, z) as fractions of the reference white, floored at 0. Colors
        beyond the sRGB gamut (e.g. L=60, a=-128, b=127) produce slightly
        negative x or z before the floor; that is expected.
    """
    fy = (lightness + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = _lab_component_to_xyz(fx)
    y = fy ** 3 if lightness > CIE_EPSILON * CIE_KAPPA else lightness / CIE_KAPPA
    z = _lab_component_to_xyz(fz)

    return max(x, 0.0), max(y, 0.0), max(z, 0.0)


def lab_to_xyz(lab_color: LabColor) -> XyzColor:
    return build_color(XyzColor, lab_to_unit_xyz(*lab_color.to_list()), lab_color.alpha)
