from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_value
from .color_base import ColorBase


class LabColor(ColorBase):
    """A color in the CIE L*a*b* color space: lightness (0-100), a and b (-128-127)."""
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.LAB
    channel_names: ClassVar[Tuple[str, ...]] = ("lightness", "a", "b")
    minima:        ClassVar[Tuple[int, int, int]] = (0, -128, -128)
    maxima:        ClassVar[Tuple[int, int, int]] = (100, 127, 127)

    def __init__(self, lightness: Scalar, a: Scalar, b: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((lightness, a, b), alpha)

    @property
    def lightness(self) -> Scalar:
        return self._value[0]

    @property
    def a(self) -> Scalar:
        return self._value[1]

    @property
    def b(self) -> Scalar:
        return self._value[2]

    @property
    def is_black(self) -> bool:
        return round_value(self.lightness) == 0

    @property
    def is_white(self) -> bool:
        return round_value(self.lightness) == 100 and self.is_monochromatic

    @property
    def is_monochromatic(self) -> bool:
        return round_value(self.a) == 0 and round_value(self.b) == 0

    def with_lightness(self, lightness: Scalar) -> "LabColor":
        return self._with_channel(0, lightness)

    def with_a(self, a: Scalar) -> "LabColor":
        return self._with_channel(1, a)

    def with_b(self, b: Scalar) -> "LabColor":
        return self._with_channel(2, b)
