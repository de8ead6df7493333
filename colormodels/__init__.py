"""Colormodels: immutable color values and conversions between eight color spaces."""
import logging

from .colors import (
    ColorBase,
    WithHue,
    RgbColor,
    CmykColor,
    HsiColor,
    HslColor,
    HsbColor,
    HspColor,
    LabColor,
    XyzColor,
    color_convert,
    get_color_class,
)
from .conversions import (
    convert,
    conversion_route,
    hex_to_rgb,
    rgb_to_hex,
)
from .exceptions import (
    ColorModelError,
    PreconditionError,
    ChannelRangeError,
    ChannelCountError,
    InvalidHexError,
)
from .types import ColorSpace, to_color_space

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # color types
    "ColorBase",
    "WithHue",
    "RgbColor",
    "CmykColor",
    "HsiColor",
    "HslColor",
    "HsbColor",
    "HspColor",
    "LabColor",
    "XyzColor",
    "ColorSpace",
    "to_color_space",
    "get_color_class",
    # conversions
    "color_convert",
    "convert",
    "conversion_route",
    "hex_to_rgb",
    "rgb_to_hex",
    # errors
    "ColorModelError",
    "PreconditionError",
    "ChannelRangeError",
    "ChannelCountError",
    "InvalidHexError",
]
