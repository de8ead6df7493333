import re
from ..colors.rgb import RgbColor
from ..exceptions import InvalidHexError

_HEX_PATTERN = re.compile(r"[0-9a-f]{3}|[0-9a-f]{6}")


def hex_to_rgb(hex_color: str) -> RgbColor:
    """
    Parse a hex color string.

    Args:
        hex_color: 3 or 6 hexadecimal digits, case-insensitive, with an optional
                   leading '#'. In the 3 digit form every digit is doubled
                   ("abc" == "aabbcc").
    Returns:
        RgbColor with alpha 255
    Raises:
        InvalidHexError: for any other input
    """
    if not isinstance(hex_color, str):
        raise InvalidHexError(f"hex color must be a string, got {type(hex_color).__name__}")

    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    digits = digits.lower()
    if not _HEX_PATTERN.fullmatch(digits):
        raise InvalidHexError(f"Invalid hex color: {hex_color!r}")

    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)

    red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return RgbColor(red, green, blue)


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Format integer channels (0-255) as lowercase '#rrggbb'."""
    return f"#{red:02x}{green:02x}{blue:02x}"
