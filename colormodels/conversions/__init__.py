"""
Color Space Conversions
=======================

Scalar conversion routines between RGB, CMYK, HSI, HSL, HSB, HSP, LAB and XYZ.

Every space converts to and from RGB directly; LAB and XYZ also convert to
each other directly. Any other pair is routed through RGB by convert().

Conversion Functions
--------------------

Unit level (plain floats, hue in turns, every other channel in [0, 1]):
    unit_rgb_to_cmyk / unit_rgb_to_hsi / unit_rgb_to_hsl / unit_rgb_to_hsb
    unit_rgb_to_hsp / unit_rgb_to_xyz
    cmyk_to_unit_rgb / hsi_to_unit_rgb / hsl_to_unit_rgb / hsb_to_unit_rgb
    hsp_to_unit_rgb / xyz_to_unit_rgb
    unit_xyz_to_lab / lab_to_unit_xyz

Color level (color instances in, color instances out, alpha preserved):
    rgb_to_cmyk, rgb_to_hsi, rgb_to_hsl, rgb_to_hsb, rgb_to_hsp, rgb_to_lab, rgb_to_xyz
    cmyk_to_rgb, hsi_to_rgb, hsl_to_rgb, hsb_to_rgb, hsp_to_rgb, lab_to_rgb, xyz_to_rgb
    xyz_to_lab, lab_to_xyz

High-Level API
--------------
    convert(color, to_space)
        Convert any color to any space
    conversion_route(from_space, to_space)
        Spaces visited by convert()

Hex
---
    hex_to_rgb(hex_color), rgb_to_hex(red, green, blue)

Examples
--------
>>> from colormodels import RgbColor
>>> from colormodels.conversions import convert, hex_to_rgb
>>> convert(RgbColor(255, 0, 0), "hsb")
HsbColor(0, 100, 100, 255)
>>> hex_to_rgb("#0f0")
RgbColor(0, 255, 0, 255)
"""

# RGB → other spaces
from .to_cmyk import unit_rgb_to_cmyk, rgb_to_cmyk
from .to_hsi import unit_rgb_to_hsi, rgb_to_hsi
from .to_hsl import unit_rgb_to_hsl, rgb_to_hsl
from .to_hsb import unit_rgb_to_hsb, rgb_to_hsb
from .to_hsp import unit_rgb_to_hsp, rgb_to_hsp, perceived_brightness
from .to_xyz import unit_rgb_to_xyz, rgb_to_xyz, srgb_to_linear, lab_to_unit_xyz, lab_to_xyz
from .to_lab import unit_xyz_to_lab, xyz_to_lab, rgb_to_lab

# Other spaces → RGB
from .to_rgb import (
    cmyk_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsb_to_unit_rgb,
    hsp_to_unit_rgb,
    xyz_to_unit_rgb,
    linear_to_srgb,
    cmyk_to_rgb,
    hsi_to_rgb,
    hsl_to_rgb,
    hsb_to_rgb,
    hsp_to_rgb,
    xyz_to_rgb,
    lab_to_rgb,
)

from .hex import hex_to_rgb, rgb_to_hex
from .hue import get_hue

# High-level API
from .wrapper import convert, conversion_route, CONVERSIONS

__all__ = [
    # RGB → other spaces
    'unit_rgb_to_cmyk',
    'unit_rgb_to_hsi',
    'unit_rgb_to_hsl',
    'unit_rgb_to_hsb',
    'unit_rgb_to_hsp',
    'unit_rgb_to_xyz',
    'rgb_to_cmyk',
    'rgb_to_hsi',
    'rgb_to_hsl',
    'rgb_to_hsb',
    'rgb_to_hsp',
    'rgb_to_xyz',
    'rgb_to_lab',
    'perceived_brightness',
    'srgb_to_linear',

    # Other spaces → RGB
    'cmyk_to_unit_rgb',
    'hsi_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hsb_to_unit_rgb',
    'hsp_to_unit_rgb',
    'xyz_to_unit_rgb',
    'linear_to_srgb',
    'cmyk_to_rgb',
    'hsi_to_rgb',
    'hsl_to_rgb',
    'hsb_to_rgb',
    'hsp_to_rgb',
    'xyz_to_rgb',
    'lab_to_rgb',

    # LAB ↔ XYZ
    'unit_xyz_to_lab',
    'lab_to_unit_xyz',
    'xyz_to_lab',
    'lab_to_xyz',

    # Hex / hue
    'hex_to_rgb',
    'rgb_to_hex',
    'get_hue',

    # High-level API
    'convert',
    'conversion_route',
    'CONVERSIONS',
]
