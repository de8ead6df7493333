from typing import Tuple

from ..colors.lab import LabColor
from ..colors.rgb import RgbColor
from ..colors.xyz import XyzColor
from ..types.constants import CIE_EPSILON, CIE_KAPPA
from ..utils.num_utils import clamp_value
from .to_xyz import rgb_to_xyz


def _xyz_component_to_lab(t: float) -> float:
    if t > CIE_EPSILON:
        return t ** (1 / 3)
    return (CIE_KAPPA / 116) * t + 16 / 116


def unit_xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert XYZ relative to the reference white to CIE L*a*b*.

    Args:
        x, y, z: Fractions of the reference white, in [0, 1]
    Returns:
        (lightness, a, b) clamped to [0, 100], [-128, 127], [-128, 127]
    """
    fx, fy, fz = (_xyz_component_to_lab(t) for t in (x, y, z))

    lightness = clamp_value(116 * fy - 16, 0.0, 100.0)
    a = clamp_value(500 * (fx - fy), -128.0, 127.0)
    b = clamp_value(200 * (fy - fz), -128.0, 127.0)

    return lightness, a, b


def xyz_to_lab(xyz_color: XyzColor) -> LabColor:
    return LabColor(*unit_xyz_to_lab(*xyz_color.to_factored_list()), xyz_color.alpha)


def rgb_to_lab(rgb_color: RgbColor) -> LabColor:
    """RGB to LAB, through XYZ."""
    if rgb_color.is_black:
        return LabColor(0, 0, 0, rgb_color.alpha)
    if rgb_color.is_white:
        return LabColor(100, 0, 0, rgb_color.alpha)
    return xyz_to_lab(rgb_to_xyz(rgb_color))
