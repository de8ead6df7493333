from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_value
from .color_base import ColorBase, WithHue


class HslColor(WithHue, ColorBase):
    """A color in the HSL color space: hue (0-360), saturation and lightness (0-100)."""
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.HSL
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness")
    minima:        ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int]] = (360, 100, 100)

    def __init__(self, hue: Scalar, saturation: Scalar, lightness: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((hue, saturation, lightness), alpha)

    @property
    def lightness(self) -> Scalar:
        return self._value[2]

    @property
    def is_black(self) -> bool:
        return round_value(self.lightness) == 0

    @property
    def is_white(self) -> bool:
        return round_value(self.lightness) == 100

    @property
    def is_monochromatic(self) -> bool:
        lightness = round_value(self.lightness)
        return lightness == 0 or lightness == 100 or round_value(self.saturation) == 0

    def with_lightness(self, lightness: Scalar) -> "HslColor":
        return self._with_channel(2, lightness)
