import pytest

from colormodels import HslColor, HsbColor, PreconditionError, RgbColor
from colormodels.colors import cooler_hue, interpolate_colors, lerp_hue, warmer_hue


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


# ------------------ INTERPOLATION ------------------
def test_lerp_includes_originals_by_default():
    black, white = RgbColor(0, 0, 0), RgbColor(255, 255, 255)
    colors = black.lerp_to(white, 4)
    assert len(colors) == 6
    assert colors[0] is black
    assert colors[-1] == white
    assert [c.red for c in colors[1:-1]] == [51, 102, 153, 204]

def test_lerp_excluding_originals():
    colors = RgbColor(0, 0, 0).lerp_to(RgbColor(0, 0, 200), 1, exclude_original_colors=True)
    assert colors == [RgbColor(0, 0, 100)]

def test_lerp_interpolates_alpha():
    [middle] = RgbColor(0, 0, 0, 0).lerp_to(RgbColor(0, 0, 0, 255), 1, exclude_original_colors=True)
    assert middle.alpha == 128

def test_lerp_converts_end_to_start_space():
    colors = RgbColor(255, 0, 0).lerp_to(HslColor(0, 0, 0), 1)
    assert all(isinstance(c, RgbColor) for c in colors)
    assert colors[1] == RgbColor(127.5, 0, 0)

def test_lerp_hue_takes_shortest_arc():
    [middle] = HslColor(350, 100, 50).lerp_to(HslColor(10, 100, 50), 1, exclude_original_colors=True)
    assert hue_distance(middle.hue, 0) < 1e-6
    [middle] = HsbColor(10, 100, 50).lerp_to(HsbColor(350, 100, 50), 1, exclude_original_colors=True)
    assert hue_distance(middle.hue, 0) < 1e-6

def test_lerp_hue_in_turns():
    assert lerp_hue(0.25, 0.75, 0.5) == pytest.approx(0.5)
    wrapped = lerp_hue(0.9, 0.1, 0.5)
    assert min(wrapped, 1 - wrapped) < 1e-9

def test_lerp_rejects_non_positive_steps():
    with pytest.raises(PreconditionError):
        RgbColor(0, 0, 0).lerp_to(RgbColor(1, 1, 1), 0)
    with pytest.raises(PreconditionError):
        interpolate_colors(HslColor(0, 0, 0), HslColor(0, 0, 0), -1)

# ------------------ WARMER / COOLER ------------------
def test_warmer_hue_relative():
    assert warmer_hue(0, 50) == pytest.approx(45)
    assert warmer_hue(0, 100) == pytest.approx(90)
    assert warmer_hue(180, 50) == pytest.approx(135)

def test_cooler_hue_relative():
    assert cooler_hue(0, 50) == pytest.approx(315)
    assert cooler_hue(180, 100) == pytest.approx(270)

def test_absolute_amount_never_overshoots():
    assert warmer_hue(0, 30, relative=False) == pytest.approx(30)
    assert warmer_hue(80, 30, relative=False) == pytest.approx(90)
    assert cooler_hue(300, 45, relative=False) == pytest.approx(270)

def test_amount_preconditions():
    with pytest.raises(PreconditionError):
        warmer_hue(0, 0)
    with pytest.raises(PreconditionError):
        cooler_hue(0, 101)

def test_warmer_and_cooler_on_colors():
    hsl = HslColor(0, 100, 50)
    assert hsl.warmer(50).hue == pytest.approx(45)
    assert hsl.cooler(100).hue == pytest.approx(270)
    warmed = RgbColor(255, 0, 0).warmer(100)
    assert isinstance(warmed, RgbColor)
    assert hue_distance(warmed.hue, 90) < 1
