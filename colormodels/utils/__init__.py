from .num_utils import round_value, round_values, clamp_value, clamp01
from .randomize import random_value, random_int, random_hue

__all__ = [
    "round_value",
    "round_values",
    "clamp_value",
    "clamp01",
    "random_value",
    "random_int",
    "random_hue",
]
