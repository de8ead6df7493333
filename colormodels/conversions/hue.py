def get_hue(red: float, green: float, blue: float) -> float:
    """
    Hue of an RGB color on a 0-1 (turns) scale, as used by HSL, HSB and HSP.

    Args:
        red, green, blue: Channels in [0, 1]
    Returns:
        Hue in [0, 1]; 0 for achromatic input
    """
    maximum = max(red, green, blue)
    minimum = min(red, green, blue)
    difference = maximum - minimum

    if difference == 0:
        return 0.0

    if maximum == red:
        hue = (green - blue) / difference + (6 if green < blue else 0)
    elif maximum == green:
        hue = (blue - red) / difference + 2
    else:
        hue = (red - green) / difference + 4

    return hue / 6
