from __future__ import annotations
from numbers import Real
from typing import Literal, Optional, Tuple, Union

RealNumber = Union[int, float, Real]
Channel = Optional[float]
ChannelTuple = Tuple[Channel, ...]
Bounds = Tuple[float, float]
ColorSpace = Literal["srgb", "oklab"]

# Keyword CSS Color 4 uses for a missing component
CSS_NONE = "none"


def is_real_number(value: object) -> bool:
    """Check if a value is a real number usable as a channel (bools excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)
