from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_values
from .color_base import ColorBase


class XyzColor(ColorBase):
    """
    A color in the CIE XYZ color space.

    x, y and z are percentages (0-100) of the D65 reference white's
    tristimulus values, so white is XyzColor(100, 100, 100).
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.XYZ
    channel_names: ClassVar[Tuple[str, ...]] = ("x", "y", "z")
    minima:        ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int]] = (100, 100, 100)

    def __init__(self, x: Scalar, y: Scalar, z: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((x, y, z), alpha)

    @property
    def x(self) -> Scalar:
        return self._value[0]

    @property
    def y(self) -> Scalar:
        return self._value[1]

    @property
    def z(self) -> Scalar:
        return self._value[2]

    @property
    def is_black(self) -> bool:
        return round_values(self._value) == (0, 0, 0)

    @property
    def is_white(self) -> bool:
        return round_values(self._value) == (100, 100, 100)

    @property
    def is_monochromatic(self) -> bool:
        x, y, z = round_values(self._value)
        return x == y == z

    def with_x(self, x: Scalar) -> "XyzColor":
        return self._with_channel(0, x)

    def with_y(self, y: Scalar) -> "XyzColor":
        return self._with_channel(1, y)

    def with_z(self, z: Scalar) -> "XyzColor":
        return self._with_channel(2, z)
