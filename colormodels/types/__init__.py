from .color_types import ColorSpace, HUE_SPACES, Scalar, ScalarVector, ChannelBounds, to_color_space, is_hue_space

__all__ = [
    "ColorSpace",
    "HUE_SPACES",
    "Scalar",
    "ScalarVector",
    "ChannelBounds",
    "to_color_space",
    "is_hue_space",
]
