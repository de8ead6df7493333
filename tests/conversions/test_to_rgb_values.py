import math

import pytest

from colormodels import CmykColor, HsbColor, HsiColor, HslColor, HspColor, LabColor, RgbColor, XyzColor
from colormodels.conversions import (
    cmyk_to_unit_rgb,
    hsb_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsp_to_unit_rgb,
    linear_to_srgb,
    srgb_to_linear,
    unit_rgb_to_hsp,
    xyz_to_unit_rgb,
)


def assert_close(actual, expected, tol=1e-6):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{actual} != {expected}"


# ------------------ CMYK ------------------
def test_cmyk_to_unit_rgb():
    assert_close(cmyk_to_unit_rgb(0, 1, 1, 0), (1, 0, 0))
    assert_close(cmyk_to_unit_rgb(0, 0, 0, 1), (0, 0, 0))
    assert_close(cmyk_to_unit_rgb(0.5, 0, 0, 0.5), (0.25, 0.5, 0.5))

# ------------------ HSI ------------------
@pytest.mark.parametrize("hue, expected", [
    (0, (1, 0, 0)),
    (1 / 3, (0, 1, 0)),
    (2 / 3, (0, 0, 1)),
    (1, (1, 0, 0)),
])
def test_hsi_to_unit_rgb_primaries(hue, expected):
    assert_close(hsi_to_unit_rgb(hue, 1, 1 / 3), expected)

def test_hsi_to_unit_rgb_gray():
    assert_close(hsi_to_unit_rgb(0, 0, 0.4), (0.4, 0.4, 0.4))

def test_hsi_to_unit_rgb_clamps():
    for channel in hsi_to_unit_rgb(0.1, 1, 1):
        assert 0 <= channel <= 1

# ------------------ HSL ------------------
def test_hsl_to_unit_rgb():
    assert_close(hsl_to_unit_rgb(1 / 3, 1, 0.5), (0, 1, 0))
    assert_close(hsl_to_unit_rgb(0.5, 1, 0.25), (0, 0.5, 0.5))
    assert_close(hsl_to_unit_rgb(7 / 12, 0.5, 0.4), (0.2, 0.4, 0.6))
    assert_close(hsl_to_unit_rgb(1, 1, 0.5), (1, 0, 0))

def test_hsl_zero_saturation_is_gray():
    assert hsl_to_unit_rgb(0.7, 0, 0.3) == (0.3, 0.3, 0.3)

# ------------------ HSB ------------------
def test_hsb_to_unit_rgb():
    assert_close(hsb_to_unit_rgb(0, 1, 1), (1, 0, 0))
    assert_close(hsb_to_unit_rgb(1 / 3, 1, 1), (0, 1, 0))
    assert_close(hsb_to_unit_rgb(0.5, 0.5, 0.8), (0.4, 0.8, 0.8))
    assert_close(hsb_to_unit_rgb(1 / 12, 1, 1), (1, 0.5, 0))
    assert_close(hsb_to_unit_rgb(1, 1, 1), (1, 0, 0))

# ------------------ HSP ------------------
def test_hsp_to_unit_rgb_fully_saturated():
    assert_close(hsp_to_unit_rgb(0, 1, math.sqrt(0.2989)), (1, 0, 0))
    assert_close(hsp_to_unit_rgb(1 / 3, 1, math.sqrt(0.587)), (0, 1, 0))
    assert_close(hsp_to_unit_rgb(2 / 3, 1, math.sqrt(0.114)), (0, 0, 1))

def test_hsp_hue_one_is_hue_zero():
    assert_close(hsp_to_unit_rgb(1.0, 1, 0.5), hsp_to_unit_rgb(0.0, 1, 0.5))
    assert_close(hsp_to_unit_rgb(1.0, 0.4, 0.5), hsp_to_unit_rgb(0.0, 0.4, 0.5))

@pytest.mark.parametrize("rgb", [(1, 0.5, 0.5), (0.2, 0.6, 0.9), (0.9, 0.1, 0.7), (0.3, 0.8, 0.1)])
def test_hsp_inverse_matches_forward(rgb):
    assert_close(hsp_to_unit_rgb(*unit_rgb_to_hsp(*rgb)), rgb)

# ------------------ XYZ ------------------
def test_xyz_to_unit_rgb_white_and_black():
    assert_close(xyz_to_unit_rgb(1, 1, 1), (1, 1, 1))
    assert_close(xyz_to_unit_rgb(0, 0, 0), (0, 0, 0))

def test_xyz_out_of_gamut_is_clamped():
    for channel in xyz_to_unit_rgb(0, 1, 0):
        assert 0 <= channel <= 1

def test_srgb_transfer_functions_are_inverse():
    for v in (0.0, 0.002, 0.04, 0.2, 0.5, 0.9, 1.0):
        assert linear_to_srgb(srgb_to_linear(v)) == pytest.approx(v, abs=1e-9)

# ------------------ COLOR LEVEL ------------------
def test_color_level_to_rgb():
    assert CmykColor(0, 100, 100, 0).to_rgb_color() == RgbColor(255, 0, 0)
    assert CmykColor(0, 0, 0, 100).to_rgb_color() == RgbColor(0, 0, 0)
    assert HsiColor(0, 100, 100 / 3).to_rgb_color() == RgbColor(255, 0, 0)
    assert HslColor(120, 100, 50).to_rgb_color() == RgbColor(0, 255, 0)
    assert HslColor(0, 0, 50).to_rgb_color() == RgbColor(128, 128, 128)
    assert HsbColor(240, 100, 100).to_rgb_color() == RgbColor(0, 0, 255)
    assert HspColor(360, 100, math.sqrt(0.2989) * 100).to_rgb_color() == RgbColor(255, 0, 0)
    assert XyzColor(100, 100, 100).to_rgb_color() == RgbColor(255, 255, 255)
    assert LabColor(100, 0, 0).to_rgb_color() == RgbColor(255, 255, 255)
    assert LabColor(0, 0, 0).to_rgb_color() == RgbColor(0, 0, 0)

def test_to_rgb_keeps_alpha():
    assert HslColor(10, 20, 30, 77).to_rgb_color().alpha == 77
    assert LabColor(50, 20, 30, 3).to_rgb_color().alpha == 3
