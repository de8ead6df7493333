from typing import ClassVar, Optional, Tuple
import numpy as np
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_value, round_values
from ..utils.randomize import random_int
from .color_base import ColorBase


class RgbColor(ColorBase):
    """
    A color in the RGB color space.

    Channels are stored unrounded so that chains of conversions do not
    accumulate rounding error; red, green, blue and to_list() expose them
    rounded to integers, to_precise_list() exposes the stored values.
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.RGB
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")
    minima:        ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int]] = (255, 255, 255)

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((red, green, blue), alpha)

    @property
    def red(self) -> int:
        return round_value(self._value[0])

    @property
    def green(self) -> int:
        return round_value(self._value[1])

    @property
    def blue(self) -> int:
        return round_value(self._value[2])

    @property
    def hex(self) -> str:
        """Lowercase '#rrggbb' representation."""
        from ..conversions.hex import rgb_to_hex  # local import to avoid cycles
        return rgb_to_hex(self.red, self.green, self.blue)

    @property
    def is_black(self) -> bool:
        return self.to_list() == (0, 0, 0)

    @property
    def is_white(self) -> bool:
        return self.to_list() == (255, 255, 255)

    @property
    def is_monochromatic(self) -> bool:
        red, green, blue = self.to_list()
        return red == green == blue

    def to_list(self) -> Tuple[int, ...]:
        return round_values(self._value)

    def to_precise_list(self) -> Tuple[Scalar, ...]:
        return self._value

    @staticmethod
    def _random_channel(lower: Scalar, upper: Scalar, rng: Optional[np.random.Generator]) -> Scalar:
        return random_int(round_value(lower), round_value(upper), rng)

    def with_red(self, red: Scalar) -> "RgbColor":
        return self._with_channel(0, red)

    def with_green(self, green: Scalar) -> "RgbColor":
        return self._with_channel(1, green)

    def with_blue(self, blue: Scalar) -> "RgbColor":
        return self._with_channel(2, blue)
