import logging
from typing import Callable, Dict, List, Tuple

from ..colors.color_base import ColorBase
from ..types.color_types import ColorSpace, to_color_space

from .to_cmyk import rgb_to_cmyk
from .to_hsb import rgb_to_hsb
from .to_hsi import rgb_to_hsi
from .to_hsl import rgb_to_hsl
from .to_hsp import rgb_to_hsp
from .to_lab import rgb_to_lab, xyz_to_lab
from .to_rgb import cmyk_to_rgb, hsb_to_rgb, hsi_to_rgb, hsl_to_rgb, hsp_to_rgb, lab_to_rgb, xyz_to_rgb
from .to_xyz import lab_to_xyz, rgb_to_xyz

logger = logging.getLogger(__name__)

ConversionFunc = Callable[[ColorBase], ColorBase]

# Direct conversions; every other pair is routed through RGB.
CONVERSIONS: Dict[Tuple[ColorSpace, ColorSpace], ConversionFunc] = {
    (ColorSpace.RGB, ColorSpace.CMYK): rgb_to_cmyk,
    (ColorSpace.RGB, ColorSpace.HSI): rgb_to_hsi,
    (ColorSpace.RGB, ColorSpace.HSL): rgb_to_hsl,
    (ColorSpace.RGB, ColorSpace.HSB): rgb_to_hsb,
    (ColorSpace.RGB, ColorSpace.HSP): rgb_to_hsp,
    (ColorSpace.RGB, ColorSpace.LAB): rgb_to_lab,
    (ColorSpace.RGB, ColorSpace.XYZ): rgb_to_xyz,
    (ColorSpace.CMYK, ColorSpace.RGB): cmyk_to_rgb,
    (ColorSpace.HSI, ColorSpace.RGB): hsi_to_rgb,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_rgb,
    (ColorSpace.HSB, ColorSpace.RGB): hsb_to_rgb,
    (ColorSpace.HSP, ColorSpace.RGB): hsp_to_rgb,
    (ColorSpace.LAB, ColorSpace.RGB): lab_to_rgb,
    (ColorSpace.XYZ, ColorSpace.RGB): xyz_to_rgb,
    (ColorSpace.XYZ, ColorSpace.LAB): xyz_to_lab,
    (ColorSpace.LAB, ColorSpace.XYZ): lab_to_xyz,
}  # type: ignore[dict-item]


def conversion_route(from_space: ColorSpace | str, to_space: ColorSpace | str) -> List[ColorSpace]:
    """
    Color spaces visited when converting from_space to to_space, both ends included.

    >>> conversion_route("hsl", "cmyk")
    [<ColorSpace.HSL: 'hsl'>, <ColorSpace.RGB: 'rgb'>, <ColorSpace.CMYK: 'cmyk'>]
    """
    fs, ts = to_color_space(from_space), to_color_space(to_space)
    if fs == ts:
        return [fs]
    if (fs, ts) in CONVERSIONS:
        return [fs, ts]
    return [fs, ColorSpace.RGB, ts]


def convert(color: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    """
    Convert a color to another color space.

    Args:
        color: Any color instance
        to_space: Target color space, member or name
    Returns:
        Instance of the target space's class; color itself when to_space is its own space.
        Alpha is carried through unchanged.
    """
    route = conversion_route(color.mode, to_space)
    logger.debug("Converting %r along %s", color, " -> ".join(space.value for space in route))

    result = color
    for fs, ts in zip(route, route[1:]):
        result = CONVERSIONS[(fs, ts)](result)
    return result
