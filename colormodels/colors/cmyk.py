from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_value, round_values
from .color_base import ColorBase


class CmykColor(ColorBase):
    """A color in the CMYK color space, every channel a percentage (0-100)."""
    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = ColorSpace.CMYK
    channel_names: ClassVar[Tuple[str, ...]] = ("cyan", "magenta", "yellow", "key")
    minima:        ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int, int]] = (100, 100, 100, 100)

    def __init__(self, cyan: Scalar, magenta: Scalar, yellow: Scalar, key: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((cyan, magenta, yellow, key), alpha)

    @property
    def cyan(self) -> Scalar:
        return self._value[0]

    @property
    def magenta(self) -> Scalar:
        return self._value[1]

    @property
    def yellow(self) -> Scalar:
        return self._value[2]

    @property
    def key(self) -> Scalar:
        return self._value[3]

    @property
    def is_black(self) -> bool:
        return round_value(self.key) == 100

    @property
    def is_white(self) -> bool:
        return round_values(self._value) == (0, 0, 0, 0)

    @property
    def is_monochromatic(self) -> bool:
        cyan, magenta, yellow, _ = round_values(self._value)
        return cyan == magenta == yellow

    def with_cyan(self, cyan: Scalar) -> "CmykColor":
        return self._with_channel(0, cyan)

    def with_magenta(self, magenta: Scalar) -> "CmykColor":
        return self._with_channel(1, magenta)

    def with_yellow(self, yellow: Scalar) -> "CmykColor":
        return self._with_channel(2, yellow)

    def with_key(self, key: Scalar) -> "CmykColor":
        return self._with_channel(3, key)
