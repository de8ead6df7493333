import math
from typing import Tuple
import numpy as np

from ..colors.cmyk import CmykColor
from ..colors.hsb import HsbColor
from ..colors.hsi import HsiColor
from ..colors.hsl import HslColor
from ..colors.hsp import HspColor
from ..colors.lab import LabColor
from ..colors.rgb import RgbColor
from ..colors.xyz import XyzColor
from ..types.constants import HSP_WEIGHTS, REFERENCE_WHITE, SRGB_ENCODED_THRESHOLD, SRGB_GAMMA, XYZ_TO_SRGB
from ..utils.num_utils import clamp01
from .helpers import build_color
from .to_xyz import lab_to_xyz

UnitRGB = Tuple[float, float, float]


## CMYK to RGB

def cmyk_to_unit_rgb(cyan: float, magenta: float, yellow: float, key: float) -> UnitRGB:
    """
    Args:
        cyan, magenta, yellow, key: Channels in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    red, green, blue = (1 - clamp01(v * (1 - key) + key) for v in (cyan, magenta, yellow))
    return red, green, blue


def cmyk_to_rgb(cmyk_color: CmykColor) -> RgbColor:
    return build_color(RgbColor, cmyk_to_unit_rgb(*cmyk_color.to_factored_list()), cmyk_color.alpha)


## HSI to RGB

def hsi_to_unit_rgb(hue: float, saturation: float, intensity: float) -> UnitRGB:
    """
    Convert HSI to RGB, solving per 120 degree sector.

    Args:
        hue: Hue in turns [0, 1]
        saturation: Saturation in [0, 1]
        intensity: Intensity in [0, 1]
    Returns:
        (r, g, b) clamped to [0, 1]
    """
    angle = hue * 2 * math.pi
    pi3 = math.pi / 3

    first = intensity * (1 - saturation)

    def second(h: float) -> float:
        return intensity * (1 + saturation * math.cos(h) / math.cos(pi3 - h))

    def third(h: float) -> float:
        return intensity * (1 + saturation * (1 - math.cos(h) / math.cos(pi3 - h)))

    if angle < 2 * pi3:
        blue = first
        red = second(angle)
        green = third(angle)
    elif angle < 4 * pi3:
        angle -= 2 * pi3
        red = first
        green = second(angle)
        blue = third(angle)
    else:
        angle -= 4 * pi3
        green = first
        blue = second(angle)
        red = third(angle)

    return clamp01(red), clamp01(green), clamp01(blue)


def hsi_to_rgb(hsi_color: HsiColor) -> RgbColor:
    return build_color(RgbColor, hsi_to_unit_rgb(*hsi_color.to_factored_list()), hsi_color.alpha)


## HSL to RGB

def hsl_to_unit_rgb(hue: float, saturation: float, lightness: float) -> UnitRGB:
    """
    Args:
        hue: Hue in turns [0, 1]
        saturation: Saturation in [0, 1]
        lightness: Lightness in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    if saturation == 0:
        return lightness, lightness, lightness

    if lightness < 0.5:
        q = lightness * (1 + saturation)
    else:
        q = lightness + saturation - lightness * saturation
    p = 2 * lightness - q

    def hue_to_channel(t: float) -> float:
        if t < 0:
            t += 1
        elif t > 1:
            t -= 1

        if t < 1 / 6:
            return p + (q - p) * 6 * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    return (
        clamp01(hue_to_channel(hue + 1 / 3)),
        clamp01(hue_to_channel(hue)),
        clamp01(hue_to_channel(hue - 1 / 3)),
    )


def hsl_to_rgb(hsl_color: HslColor) -> RgbColor:
    return build_color(RgbColor, hsl_to_unit_rgb(*hsl_color.to_factored_list()), hsl_color.alpha)


## HSB to RGB

def hsb_to_unit_rgb(hue: float, saturation: float, brightness: float) -> UnitRGB:
    """
    Args:
        hue: Hue in turns [0, 1]
        saturation: Saturation in [0, 1]
        brightness: Brightness in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    index = math.floor(hue * 6)
    fraction = hue * 6 - index
    segment = 1 - fraction if index % 2 == 0 else fraction

    a = brightness
    b = brightness * (1 - saturation)
    c = brightness * (1 - segment * saturation)

    sectors = (
        (a, c, b),
        (c, a, b),
        (b, a, c),
        (b, c, a),
        (c, b, a),
        (a, b, c),
    )
    return sectors[index % 6]


def hsb_to_rgb(hsb_color: HsbColor) -> RgbColor:
    return build_color(RgbColor, hsb_to_unit_rgb(*hsb_color.to_factored_list()), hsb_color.alpha)


## HSP to RGB

# Channel indices (dominant, middle, smallest) for each 60 degree hue sector.
_HSP_SECTORS = (
    (0, 1, 2),
    (1, 0, 2),
    (1, 2, 0),
    (2, 1, 0),
    (2, 0, 1),
    (0, 2, 1),
)


def hsp_to_unit_rgb(hue: float, saturation: float, brightness: float) -> UnitRGB:
    """
    Convert HSP to RGB.

    Within each 60 degree sector the dominant, middle and smallest channels
    are solved in closed form from the perceived brightness. Fully saturated
    colors (saturation == 1, smallest channel 0) take a separate branch.

    Args:
        hue: Hue in turns [0, 1]; 1 is treated as 0
        saturation: Saturation in [0, 1]
        brightness: Perceived brightness in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    hue %= 1.0
    index = math.floor(hue * 6) % 6
    if index % 2 == 0:
        h = 6 * (hue - index / 6)
    else:
        h = 6 * ((index + 1) / 6 - hue)

    dominant, middle, smallest = _HSP_SECTORS[index]
    w_dominant, w_middle, w_smallest = (HSP_WEIGHTS[i] for i in (dominant, middle, smallest))

    rgb = [0.0, 0.0, 0.0]

    if saturation < 1:
        min_over_max = 1 - saturation
        part = 1 + h * (1 / min_over_max - 1)

        low = clamp01(brightness / math.sqrt(
            w_dominant / min_over_max / min_over_max + w_middle * part * part + w_smallest
        ))
        high = clamp01(low / min_over_max)
        rgb[smallest] = low
        rgb[dominant] = high
        rgb[middle] = clamp01(low + h * (high - low))
    else:
        high = clamp01(math.sqrt(brightness * brightness / (w_dominant + w_middle * h * h)))
        rgb[dominant] = high
        rgb[middle] = clamp01(high * h)
        rgb[smallest] = 0.0

    return rgb[0], rgb[1], rgb[2]


def hsp_to_rgb(hsp_color: HspColor) -> RgbColor:
    return build_color(RgbColor, hsp_to_unit_rgb(*hsp_color.to_factored_list()), hsp_color.alpha)


## XYZ / LAB to RGB

def linear_to_srgb(value: float) -> float:
    """Apply the sRGB transfer function to one linear channel and clamp to [0, 1]."""
    if value <= SRGB_ENCODED_THRESHOLD:
        value = value * 12.92
    else:
        value = 1.055 * value ** (1 / SRGB_GAMMA) - 0.055
    return clamp01(value)


def xyz_to_unit_rgb(x: float, y: float, z: float) -> UnitRGB:
    """
    Args:
        x, y, z: Fractions of the reference white's X, Y, Z, in [0, 1]
    Returns:
        (r, g, b) in [0, 1]; colors outside sRGB are clamped
    """
    linear = XYZ_TO_SRGB @ (np.array([x, y, z]) * REFERENCE_WHITE)
    red, green, blue = (linear_to_srgb(float(v)) for v in linear)
    return red, green, blue


def xyz_to_rgb(xyz_color: XyzColor) -> RgbColor:
    return build_color(RgbColor, xyz_to_unit_rgb(*xyz_color.to_factored_list()), xyz_color.alpha)


def lab_to_rgb(lab_color: LabColor) -> RgbColor:
    """LAB to RGB, through XYZ."""
    return xyz_to_rgb(lab_to_xyz(lab_color))
