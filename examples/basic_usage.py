"""Basic colormodels usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

import numpy as np

from colormodels import HslColor, LabColor, RgbColor, convert


def demonstrate_colors() -> None:
    # Construct colors and convert between spaces.
    accent = RgbColor.from_hex("#ff8040")
    print("RGB:", accent, accent.hex)
    print("RGB -> HSL:", accent.to_hsl_color())
    print("RGB -> CMYK:", accent.to_cmyk_color())
    print("RGB -> LAB:", accent.to_lab_color())

    # Any pair converts, routed through RGB where there is no direct formula.
    print("HSL -> XYZ:", convert(HslColor(200, 60, 40), "xyz"))
    print("LAB -> RGB:", LabColor(60, -128, 127).to_rgb_color())


def demonstrate_adjustments() -> None:
    red = RgbColor(255, 0, 0)
    print("opposite:", red.opposite)
    print("inverted:", red.inverted)
    print("warmer by 50%:", red.warmer(50))
    print("half transparent:", red.with_opacity(0.5))

    # Hue-aware interpolation from red to blue in HSL.
    for color in red.to_hsl_color().lerp_to(RgbColor(0, 0, 255), 3):
        print("  lerp:", color.to_rgb_color().hex)


def demonstrate_random() -> None:
    rng = np.random.default_rng(7)
    # Hue range wrapping counter-clockwise through 0 (magentas to yellows).
    for _ in range(3):
        print("random:", HslColor.random(rng, hue=(300, 60), lightness=(40, 60)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demonstrate_colors()
    demonstrate_adjustments()
    demonstrate_random()
