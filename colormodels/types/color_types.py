from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelBounds = Tuple[Scalar, Scalar]


class ColorSpace(str, Enum):
    RGB = "rgb"
    CMYK = "cmyk"
    HSI = "hsi"
    HSL = "hsl"
    HSB = "hsb"
    HSP = "hsp"
    LAB = "lab"
    XYZ = "xyz"


HUE_SPACES = {ColorSpace.HSI, ColorSpace.HSL, ColorSpace.HSB, ColorSpace.HSP}


def to_color_space(color_space: ColorSpace | str) -> ColorSpace:
    """
    Resolve a color space name (case-insensitive) to its ColorSpace member.

    Args:
        color_space: ColorSpace member or its string name, e.g. "hsl"
    Returns:
        The matching ColorSpace
    Raises:
        ValueError: if the name is not one of the eight supported spaces
    """
    if isinstance(color_space, ColorSpace):
        return color_space
    try:
        return ColorSpace(str(color_space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {color_space!r}") from None


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space carries a hue channel (HSI, HSL, HSB or HSP).

    Args:
        color_space: Color space member or string
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES
