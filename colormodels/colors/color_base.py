from __future__ import annotations
import numbers
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, List, Optional, Self, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from ..exceptions import ChannelCountError, ChannelRangeError
from ..types.color_types import ChannelBounds, ColorSpace, Scalar, ScalarVector, HUE_SPACES
from ..types.constants import ALPHA_MAX, HUE_MAX, PERCENT_MAX
from ..utils.num_utils import round_value, round_values
from ..utils.randomize import random_hue, random_value
from .adjustments import cooler_hue, interpolate_colors, warmer_hue

if TYPE_CHECKING:
    from .cmyk import CmykColor
    from .hsb import HsbColor
    from .hsi import HsiColor
    from .hsl import HslColor
    from .hsp import HspColor
    from .lab import LabColor
    from .rgb import RgbColor
    from .xyz import XyzColor


class ColorBase(ABC):
    __slots__ = ('_value', '_alpha', '_is_frozen')

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]
    minima:        ClassVar[ScalarVector]
    maxima:        ClassVar[ScalarVector]
    alpha_max:     ClassVar[int] = ALPHA_MAX
    # def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace | str], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector, alpha: int = ALPHA_MAX) -> None:
        if len(value) != self.num_channels:
            raise ChannelCountError(
                f"{self.__class__.__name__} expects {self.num_channels} channels, got {len(value)}"
            )

        checked = tuple(
            self._check_channel(name, v, lo, hi)
            for name, v, lo, hi in zip(self.channel_names, value, self.minima, self.maxima)
        )

        self._value = checked
        self._alpha = self._check_alpha(alpha)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _check_channel(cls, name: str, value: Any, lower: Scalar, upper: Scalar) -> Scalar:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{cls.__name__}.{name} must be a real number, got {type(value).__name__}")
        # NaN fails both comparisons and is rejected here too
        if not lower <= value <= upper:
            raise ChannelRangeError(
                f"{cls.__name__}.{name} must be within [{lower}, {upper}], got {value}"
            )
        return int(value) if isinstance(value, numbers.Integral) else float(value)

    @classmethod
    def _check_alpha(cls, alpha: Any) -> int:
        if isinstance(alpha, bool) or not isinstance(alpha, numbers.Integral):
            raise TypeError(f"{cls.__name__}.alpha must be an integer, got {type(alpha).__name__}")
        if not 0 <= alpha <= cls.alpha_max:
            raise ChannelRangeError(f"{cls.__name__}.alpha must be within [0, {cls.alpha_max}], got {alpha}")
        return int(alpha)

    @classmethod
    def _from_channels(cls, value: ScalarVector, alpha: int = ALPHA_MAX) -> Self:
        """Build an instance from a channel tuple, bypassing the per-class signature."""
        obj = cls.__new__(cls)
        ColorBase.__init__(obj, tuple(value), alpha)
        return obj

    def _with_channel(self, index: int, value: Scalar) -> Self:
        values = list(self._value)
        values[index] = value
        return self._from_channels(tuple(values), self._alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def opacity(self) -> float:
        return self._alpha / self.alpha_max

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    @abstractmethod
    def is_black(self) -> bool:
        ...

    @property
    @abstractmethod
    def is_white(self) -> bool:
        ...

    @property
    @abstractmethod
    def is_monochromatic(self) -> bool:
        """True when the color carries no chroma (a shade of grey)."""

    # ------------------ CONVERSIONS ------------------
    def to_rgb_color(self) -> RgbColor:
        return self.convert(ColorSpace.RGB)  # type: ignore[return-value]

    def to_cmyk_color(self) -> CmykColor:
        return self.convert(ColorSpace.CMYK)  # type: ignore[return-value]

    def to_hsi_color(self) -> HsiColor:
        return self.convert(ColorSpace.HSI)  # type: ignore[return-value]

    def to_hsl_color(self) -> HslColor:
        return self.convert(ColorSpace.HSL)  # type: ignore[return-value]

    def to_hsb_color(self) -> HsbColor:
        return self.convert(ColorSpace.HSB)  # type: ignore[return-value]

    def to_hsp_color(self) -> HspColor:
        return self.convert(ColorSpace.HSP)  # type: ignore[return-value]

    def to_lab_color(self) -> LabColor:
        return self.convert(ColorSpace.LAB)  # type: ignore[return-value]

    def to_xyz_color(self) -> XyzColor:
        return self.convert(ColorSpace.XYZ)  # type: ignore[return-value]

    @classmethod
    def from_color(cls, color: ColorBase) -> Self:
        """Construct this color space's equivalent of any other color."""
        return color.convert(cls.mode)  # type: ignore[return-value]

    @classmethod
    def from_hex(cls, hex_color: str) -> Self:
        """
        Construct a color from a 3 or 6 digit hex string with optional leading '#'.
        """
        from ..conversions.hex import hex_to_rgb  # local import to avoid cycles
        return cls.from_color(hex_to_rgb(hex_color))

    # ------------------ LIST VIEWS ------------------
    def to_list(self) -> ScalarVector:
        """Channel values on their native scale, in channel order."""
        return self._value

    def to_list_with_alpha(self) -> ScalarVector:
        return tuple(self.to_list()) + (self._alpha,)

    def to_factored_list(self) -> Tuple[float, ...]:
        """Channel values rescaled onto [0, 1]."""
        return tuple(
            (v - lo) / (hi - lo) for v, lo, hi in zip(self._value, self.minima, self.maxima)
        )

    def to_factored_list_with_alpha(self) -> Tuple[float, ...]:
        return self.to_factored_list() + (self._alpha / self.alpha_max,)

    @classmethod
    def _split_alpha(cls, values: Sequence[Scalar]) -> Tuple[Sequence[Scalar], Optional[Scalar]]:
        if len(values) == cls.num_channels:
            return values, None
        if len(values) == cls.num_channels + 1:
            return values[:cls.num_channels], values[cls.num_channels]
        raise ChannelCountError(
            f"{cls.__name__} expects {cls.num_channels} or {cls.num_channels + 1} values, got {len(values)}"
        )

    @classmethod
    def from_list(cls, values: Sequence[Scalar]) -> Self:
        """
        Construct a color from native-scale channel values, optionally followed by alpha.

        Args:
            values: num_channels values, or num_channels + 1 with alpha (0-255) last.
                    A fractional alpha is rounded.
        """
        channels, alpha = cls._split_alpha(values)
        # NaN fails the comparison and is rejected here too
        if alpha is not None and not 0 <= alpha <= cls.alpha_max:
            raise ChannelRangeError(f"{cls.__name__}.alpha must be within [0, {cls.alpha_max}], got {alpha}")
        alpha_int = ALPHA_MAX if alpha is None else round_value(alpha)
        return cls._from_channels(tuple(channels), alpha_int)

    @classmethod
    def extrapolate(cls, values: Sequence[float]) -> Self:
        """
        Construct a color from channel values on a 0 to 1 scale (the inverse of
        to_factored_list / to_factored_list_with_alpha).

        Args:
            values: num_channels values in [0, 1], optionally followed by alpha in [0, 1]
        """
        channels, alpha = cls._split_alpha(values)
        for v in values:
            if not 0 <= v <= 1:
                raise ChannelRangeError(f"{cls.__name__}.extrapolate expects values within [0, 1], got {v}")

        native = tuple(lo + v * (hi - lo) for v, lo, hi in zip(channels, cls.minima, cls.maxima))
        alpha_int = ALPHA_MAX if alpha is None else round_value(alpha * cls.alpha_max)
        return cls._from_channels(native, alpha_int)

    @classmethod
    def channel_bounds(cls) -> Dict[str, ChannelBounds]:
        """Native (min, max) range for each channel, keyed by channel name."""
        return dict(zip(cls.channel_names, zip(cls.minima, cls.maxima)))

    @staticmethod
    def _random_channel(lower: Scalar, upper: Scalar, rng: Optional[np.random.Generator]) -> Scalar:
        return random_value(lower, upper, rng)

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None, **bounds: ChannelBounds) -> Self:
        """
        Generate a color at random.

        Each keyword names a channel and gives its (min, max) bounds, e.g.
        HslColor.random(hue=(300, 60), lightness=(40, 60)). Channels without
        bounds use their full native range. A hue range with min > max runs
        counter-clockwise through 0.
        """
        unknown = set(bounds) - set(cls.channel_names)
        if unknown:
            raise ValueError(f"{cls.__name__} has no channel(s) {sorted(unknown)}")

        values = []
        for name, lo, hi in zip(cls.channel_names, cls.minima, cls.maxima):
            lower, upper = bounds.get(name, (lo, hi))
            if name == "hue":
                values.append(random_hue(lower, upper, rng))
                continue
            if not lo <= lower <= upper <= hi:
                raise ChannelRangeError(
                    f"{cls.__name__}.{name} bounds must satisfy {lo} <= min <= max <= {hi}, got ({lower}, {upper})"
                )
            values.append(cls._random_channel(lower, upper, rng))
        return cls._from_channels(tuple(values))

    # ------------------ ALPHA ------------------
    def with_alpha(self, alpha: int) -> Self:
        """Return a copy with alpha (0-255) replaced."""
        return self._from_channels(self._value, alpha)

    def with_opacity(self, opacity: float) -> Self:
        """Return a copy with alpha set from an opacity in [0, 1]."""
        if not 0 <= opacity <= 1:
            raise ChannelRangeError(f"opacity must be within [0, 1], got {opacity}")
        return self.with_alpha(round_value(opacity * self.alpha_max))

    # ------------------ HUE ------------------
    # Spaces without a hue channel go through HSL; WithHue overrides these.
    @property
    def hue(self) -> float:
        return self.to_hsl_color().hue

    def with_hue(self, hue: Scalar) -> Self:
        return self.to_hsl_color().with_hue(hue).convert(self.mode)  # type: ignore[return-value]

    def rotate_hue(self, amount: Scalar) -> Self:
        return self.with_hue((self.hue + amount) % HUE_MAX)

    @property
    def opposite(self) -> Self:
        return self.rotate_hue(180)

    @property
    def inverted(self) -> Self:
        """Complement every channel on its native range (v -> min + max - v)."""
        return self._from_channels(
            tuple(lo + hi - v for v, lo, hi in zip(self._value, self.minima, self.maxima)),
            self._alpha,
        )

    def warmer(self, amount: Scalar, relative: bool = True) -> Self:
        """Shift the hue towards the warm pole. See warmer_hue."""
        return self.with_hue(warmer_hue(self.hue, amount, relative=relative))

    def cooler(self, amount: Scalar, relative: bool = True) -> Self:
        """Shift the hue towards the cool pole. See cooler_hue."""
        return self.with_hue(cooler_hue(self.hue, amount, relative=relative))

    def lerp_to(self, color: ColorBase, steps: int, exclude_original_colors: bool = False) -> List[Self]:
        """Interpolate towards color in this color's space. See interpolate_colors."""
        return interpolate_colors(self, color, steps, exclude_original_colors=exclude_original_colors)

    # ------------------ ROUNDING / EQUALITY ------------------
    def rounded(self) -> Self:
        """Return a copy with every channel rounded to the nearest integer."""
        return self._from_channels(round_values(self._value), self._alpha)

    def _rounded_key(self) -> Tuple[int, ...]:
        return round_values(self._value) + (self._alpha,)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rounded_key() == other._rounded_key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._rounded_key()))

    def __repr__(self) -> str:
        channels = ", ".join(f"{v:g}" if isinstance(v, float) else str(v) for v in self._value)
        return f"{self.__class__.__name__}({channels}, {self._alpha})"


class WithHue(ABC):
    """
    Mixin for the cylindrical color spaces (HSI, HSL, HSB, HSP).
    Assumes hue is the first channel and saturation the second, both followed
    by a single brightness-like channel on a 0-100 scale.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    value: ScalarVector
    alpha: int
    _from_channels: Callable[..., Any]
    _with_channel: Callable[[int, Scalar], Any]

    @property
    def hue(self) -> Scalar:
        return self.value[0]

    @property
    def saturation(self) -> Scalar:
        return self.value[1]

    def with_hue(self, hue: Scalar) -> Self:
        """Return a copy with hue (0-360) replaced."""
        return self._with_channel(0, hue)

    def with_saturation(self, saturation: Scalar) -> Self:
        return self._with_channel(1, saturation)

    def _rounded_key(self) -> Tuple[int, ...]:
        # hue is circular: 0 and 360 compare equal
        hue, *rest = round_values(self.value)
        return (hue % int(HUE_MAX), *rest, self.alpha)

    @property
    def inverted(self) -> Self:
        """Rotate the hue by 180 degrees and complement the other two channels."""
        hue, saturation, third = self.value
        return self._from_channels(
            ((hue + 180) % HUE_MAX, PERCENT_MAX - saturation, PERCENT_MAX - third),
            self.alpha,
        )
