from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_value
from .color_base import ColorBase, WithHue


class HsbColor(WithHue, ColorBase):
    """A color in the HSB (HSV) color space: hue (0-360), saturation and brightness (0-100)."""
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.HSB
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "brightness")
    minima:        ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int]] = (360, 100, 100)

    def __init__(self, hue: Scalar, saturation: Scalar, brightness: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((hue, saturation, brightness), alpha)

    @property
    def brightness(self) -> Scalar:
        return self._value[2]

    @property
    def is_black(self) -> bool:
        return round_value(self.brightness) == 0

    @property
    def is_white(self) -> bool:
        return round_value(self.saturation) == 0 and round_value(self.brightness) == 100

    @property
    def is_monochromatic(self) -> bool:
        return round_value(self.brightness) == 0 or round_value(self.saturation) == 0

    def with_brightness(self, brightness: Scalar) -> "HsbColor":
        return self._with_channel(2, brightness)
