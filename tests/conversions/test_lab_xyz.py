import pytest

from colormodels import LabColor, RgbColor, XyzColor
from colormodels.conversions import lab_to_unit_xyz, lab_to_xyz, unit_xyz_to_lab, xyz_to_lab


def assert_close(actual, expected, tol=1e-6):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{actual} != {expected}"


def test_lab_gamut_boundary_does_not_raise():
    xyz = LabColor(60, -128, 127).to_xyz_color()
    assert isinstance(xyz, XyzColor)
    assert all(v >= 0 for v in xyz.to_list())
    assert xyz.z == 0

def test_lab_gamut_boundary_floors_intermediate_values():
    x, y, z = lab_to_unit_xyz(60, -128, 127)
    assert z == 0.0
    assert x > 0
    assert y > 0

def test_lab_gamut_boundary_to_rgb():
    rgb = LabColor(60, -128, 127).to_rgb_color()
    assert isinstance(rgb, RgbColor)

def test_white_and_black():
    assert_close(unit_xyz_to_lab(1, 1, 1), (100, 0, 0))
    assert_close(unit_xyz_to_lab(0, 0, 0), (0, 0, 0))
    assert_close(lab_to_unit_xyz(100, 0, 0), (1, 1, 1))
    assert_close(lab_to_unit_xyz(0, 0, 0), (0, 0, 0))

def test_neutral_xyz_has_no_chroma():
    lightness, a, b = unit_xyz_to_lab(0.5, 0.5, 0.5)
    assert lightness == pytest.approx(116 * 0.5 ** (1 / 3) - 16)
    assert a == pytest.approx(0)
    assert b == pytest.approx(0)

@pytest.mark.parametrize("lab", [(7.9, 0, 0), (50, 0, 0), (50, 40, -60), (85, -30, 20), (3, 1, -1)])
def test_lab_xyz_inverse(lab):
    assert_close(unit_xyz_to_lab(*lab_to_unit_xyz(*lab)), lab, 1e-6)

def test_unit_xyz_to_lab_clamps_channels():
    lightness, a, b = unit_xyz_to_lab(1, 0, 1)
    assert lightness == pytest.approx(0, abs=1e-9)
    assert a == 127
    assert b == -128

def test_direct_color_pair():
    xyz = XyzColor(50, 50, 50, 90)
    lab = xyz_to_lab(xyz)
    assert isinstance(lab, LabColor)
    assert lab.alpha == 90
    assert lab_to_xyz(lab) == xyz
    assert lab.to_xyz_color() == xyz
