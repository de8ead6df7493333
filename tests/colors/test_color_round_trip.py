import itertools

import pytest

from colormodels import CmykColor, HsbColor, HsiColor, HslColor, HspColor, LabColor, RgbColor, XyzColor

GRID = range(0, 256, 51)
RGB_GRID = [RgbColor(r, g, b) for r, g, b in itertools.product(GRID, GRID, GRID)]

SPACES = ["cmyk", "hsi", "hsl", "hsb", "hsp", "lab", "xyz"]

SAMPLES = [
    RgbColor(12, 200, 97, 10),
    CmykColor(10, 20.5, 30, 40, 200),
    HsiColor(200, 35, 60),
    HslColor(359.5, 80, 20),
    HsbColor(45, 100, 75, 0),
    HspColor(300, 12, 88),
    LabColor(42, -100, 90.5),
    XyzColor(33, 66, 99),
]


@pytest.mark.parametrize("space", SPACES)
def test_rgb_round_trip_grid(space):
    for rgb in RGB_GRID:
        back = rgb.convert(space).to_rgb_color()
        assert back == rgb, f"{rgb} -> {space} -> {back}"

@pytest.mark.parametrize("space", SPACES)
def test_rgb_round_trip_offgrid(space):
    for rgb in (RgbColor(1, 2, 3), RgbColor(250, 17, 128), RgbColor(17, 34, 68), RgbColor(100, 200, 150, 7)):
        assert rgb.convert(space).to_rgb_color() == rgb

@pytest.mark.parametrize("color", SAMPLES, ids=lambda c: type(c).__name__)
def test_factored_round_trip(color):
    rebuilt = type(color).extrapolate(color.to_factored_list_with_alpha())
    assert rebuilt == color
    assert type(color).extrapolate(color.to_factored_list()).alpha == 255

@pytest.mark.parametrize("color", SAMPLES, ids=lambda c: type(c).__name__)
def test_raw_list_round_trip(color):
    assert type(color).from_list(color.to_list_with_alpha()) == color

@pytest.mark.parametrize("color", SAMPLES, ids=lambda c: type(c).__name__)
def test_identity_conversions_return_self(color):
    assert color.convert(color.mode) is color
    to_own = getattr(color, f"to_{color.mode.value}_color")
    assert to_own() is color

@pytest.mark.parametrize("color", SAMPLES, ids=lambda c: type(c).__name__)
def test_alpha_survives_conversion(color):
    for space in ["rgb"] + SPACES:
        assert color.convert(space).alpha == color.alpha

def test_to_color_methods_return_each_class():
    color = RgbColor(10, 120, 230)
    assert isinstance(color.to_cmyk_color(), CmykColor)
    assert isinstance(color.to_hsi_color(), HsiColor)
    assert isinstance(color.to_hsl_color(), HslColor)
    assert isinstance(color.to_hsb_color(), HsbColor)
    assert isinstance(color.to_hsp_color(), HspColor)
    assert isinstance(color.to_lab_color(), LabColor)
    assert isinstance(color.to_xyz_color(), XyzColor)
    assert isinstance(color.to_hsl_color().to_rgb_color(), RgbColor)

def test_cross_space_pivot():
    hsl = HslColor(210, 60, 40)
    assert hsl.to_cmyk_color().to_hsl_color() == hsl
    assert hsl.to_lab_color().to_hsb_color() == hsl.to_hsb_color()
