from __future__ import annotations
from .color_base import ColorBase
from .rgb import RgbColor
from .cmyk import CmykColor
from .hsi import HsiColor
from .hsl import HslColor
from .hsb import HsbColor
from .hsp import HspColor
from .lab import LabColor
from .xyz import XyzColor
from ..conversions import convert
from ..types.color_types import ColorSpace, to_color_space

color_classes: dict[ColorSpace, type[ColorBase]] = {
    cls.mode: cls
    for cls in (RgbColor, CmykColor, HsiColor, HslColor, HsbColor, HspColor, LabColor, XyzColor)
}


def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    """
    Convert this color to another color space.

    Args:
        to_space: Target color space, member or name (e.g. "hsl")
    Returns:
        self if to_space is this color's own space, otherwise a new instance
        of the target space's class
    """
    to_space = to_color_space(to_space)
    if to_space == self.mode:
        return self
    return convert(self, to_space)

ColorBase.convert = color_convert


def get_color_class(color_space: ColorSpace | str) -> type[ColorBase]:
    return color_classes[to_color_space(color_space)]
