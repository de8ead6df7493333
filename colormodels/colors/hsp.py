from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Scalar
from ..types.constants import ALPHA_MAX
from ..utils.num_utils import round_value
from .color_base import ColorBase, WithHue


class HspColor(WithHue, ColorBase):
    """
    A color in the HSP color space: hue (0-360), saturation and
    perceived_brightness (0-100).

    Perceived brightness is the weighted euclidean norm of the RGB channels,
    see colormodels.types.constants.HSP_WEIGHTS.
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.HSP
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "perceived_brightness")
    minima:        ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int]] = (360, 100, 100)

    def __init__(self, hue: Scalar, saturation: Scalar, perceived_brightness: Scalar, alpha: int = ALPHA_MAX) -> None:
        super().__init__((hue, saturation, perceived_brightness), alpha)

    @property
    def perceived_brightness(self) -> Scalar:
        return self._value[2]

    @property
    def is_black(self) -> bool:
        return round_value(self.perceived_brightness) == 0

    @property
    def is_white(self) -> bool:
        return round_value(self.saturation) == 0 and round_value(self.perceived_brightness) == 100

    @property
    def is_monochromatic(self) -> bool:
        return round_value(self.perceived_brightness) == 0 or round_value(self.saturation) == 0

    def with_perceived_brightness(self, perceived_brightness: Scalar) -> "HspColor":
        return self._with_channel(2, perceived_brightness)
