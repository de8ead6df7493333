"""
Color Classes
=============

Immutable, range-validated color values for eight color spaces.

>>> from colormodels.colors import RgbColor
>>> red = RgbColor(255, 0, 0)
>>> red.to_hsl_color()
HslColor(0, 100, 50, 255)
>>> red.with_opacity(0.5).alpha
128

Color Classes
-------------
    - RgbColor: red, green, blue (0-255)
    - CmykColor: cyan, magenta, yellow, key (0-100)
    - HsiColor: hue (0-360), saturation, intensity (0-100)
    - HslColor: hue (0-360), saturation, lightness (0-100)
    - HsbColor: hue (0-360), saturation, brightness (0-100)
    - HspColor: hue (0-360), saturation, perceived_brightness (0-100)
    - LabColor: lightness (0-100), a, b (-128-127)
    - XyzColor: x, y, z (0-100, relative to the D65 white)

Every class carries an integer alpha (0-255, default 255).

Notes
-----
- Out-of-range channels raise ChannelRangeError at construction
- Equality rounds every channel to the nearest integer
- Conversion to the color's own space returns the same instance
"""

from .color_base import ColorBase, WithHue
from .rgb import RgbColor
from .cmyk import CmykColor
from .hsi import HsiColor
from .hsl import HslColor
from .hsb import HsbColor
from .hsp import HspColor
from .lab import LabColor
from .xyz import XyzColor
from .color import color_convert, color_classes, get_color_class
from .adjustments import interpolate_colors, lerp_hue, warmer_hue, cooler_hue


__all__ = [
    'ColorBase',
    'WithHue',
    'RgbColor',
    'CmykColor',
    'HsiColor',
    'HslColor',
    'HsbColor',
    'HspColor',
    'LabColor',
    'XyzColor',
    'color_convert',
    'color_classes',
    'get_color_class',
    'interpolate_colors',
    'lerp_hue',
    'warmer_hue',
    'cooler_hue',
]
