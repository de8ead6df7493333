from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_value
from .color_base import ColorBase, WithHue


class HsiColor(WithHue, ColorBase):
    """A color in the HSI color space: hue (0-360), saturation and intensity (0-100)."""
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.HSI
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "intensity")
    minima:        ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int]] = (360, 100, 100)

    def __init__(self, hue: Scalar, saturation: Scalar, intensity: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((hue, saturation, intensity), alpha)

    @property
    def intensity(self) -> Scalar:
        return self._value[2]

    @property
    def is_black(self) -> bool:
        return round_value(self.intensity) == 0

    @property
    def is_white(self) -> bool:
        return round_value(self.saturation) == 0 and round_value(self.intensity) == 100

    @property
    def is_monochromatic(self) -> bool:
        return round_value(self.intensity) == 0 or round_value(self.saturation) == 0

    def with_intensity(self, intensity: Scalar) -> "HsiColor":
        return self._with_channel(2, intensity)
