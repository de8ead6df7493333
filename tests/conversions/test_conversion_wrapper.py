import logging

import pytest

from colormodels import ColorSpace, HslColor, LabColor, RgbColor, XyzColor, convert, conversion_route, get_color_class
from colormodels.colors import color_classes
from colormodels.conversions import CONVERSIONS, hsl_to_rgb, rgb_to_cmyk
from colormodels.types import is_hue_space, to_color_space


def test_dispatch_table_covers_rgb_star_and_lab_xyz():
    for space in ColorSpace:
        if space is ColorSpace.RGB:
            continue
        assert (ColorSpace.RGB, space) in CONVERSIONS
        assert (space, ColorSpace.RGB) in CONVERSIONS
    assert (ColorSpace.LAB, ColorSpace.XYZ) in CONVERSIONS
    assert (ColorSpace.XYZ, ColorSpace.LAB) in CONVERSIONS
    assert len(CONVERSIONS) == 16

def test_conversion_route():
    assert conversion_route("hsl", "cmyk") == [ColorSpace.HSL, ColorSpace.RGB, ColorSpace.CMYK]
    assert conversion_route("lab", "xyz") == [ColorSpace.LAB, ColorSpace.XYZ]
    assert conversion_route(ColorSpace.RGB, "hsp") == [ColorSpace.RGB, ColorSpace.HSP]
    assert conversion_route("xyz", "hsb") == [ColorSpace.XYZ, ColorSpace.RGB, ColorSpace.HSB]
    assert conversion_route("hsi", "hsi") == [ColorSpace.HSI]

def test_convert_pivots_through_rgb():
    hsl = HslColor(200, 70, 40)
    assert convert(hsl, "cmyk") == rgb_to_cmyk(hsl_to_rgb(hsl))

def test_convert_accepts_any_case():
    assert isinstance(convert(RgbColor(1, 2, 3), "LAB"), LabColor)

def test_convert_identity_returns_same_object():
    color = XyzColor(1, 2, 3)
    assert convert(color, "xyz") is color
    assert color.convert(ColorSpace.XYZ) is color

def test_unknown_space_raises_value_error():
    with pytest.raises(ValueError, match="Unknown color space"):
        convert(RgbColor(0, 0, 0), "hsv")
    with pytest.raises(ValueError):
        RgbColor(0, 0, 0).convert("rgba")

def test_convert_logs_route(caplog):
    with caplog.at_level(logging.DEBUG, logger="colormodels"):
        convert(HslColor(10, 20, 30), "cmyk")
    assert "hsl -> rgb -> cmyk" in caplog.text

def test_color_registry():
    assert len(color_classes) == 8
    assert get_color_class("lab") is LabColor
    assert get_color_class(ColorSpace.HSL) is HslColor

def test_color_space_helpers():
    assert to_color_space("Hsb") is ColorSpace.HSB
    assert is_hue_space("hsp")
    assert not is_hue_space(ColorSpace.XYZ)
