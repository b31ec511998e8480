from typing import ClassVar, Dict, Tuple
from ..types.color_types import Bounds, Channel, ColorSpace
from .color_base import ColorSpaceBase

# Lightness above 1.0 (100%) is headroom for HDR displays
LIGHTNESS_BOUNDS: Bounds = (0.0, 4.0)
# 3 decimals of the 0-400 percentage scale
LIGHTNESS_PRECISION = 5
# a and b are unbounded in theory but stay within ±0.5 in practice
AXIS_BOUNDS: Bounds = (-0.5, 0.5)


class LabSpace(ColorSpaceBase):
    """
    A point in the `OKLab <https://www.w3.org/TR/css-color-4/#lab-colors>`_
    color space, a perceptually uniform space with a D65 white point.

    Channels:
        l: Lightness in [0, 4], rounded to 5 decimal places
        a: Green (negative) to purplish red (positive) axis, in [-0.5, 0.5]
        b: Blue (negative) to yellow (positive) axis, in [-0.5, 0.5]
        alpha: Opacity in [0, 1]; None reads as fully opaque

    Any channel may be None so a blend can take it from the other color.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "oklab"
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "a", "b", "alpha")
    channel_bounds: ClassVar[Dict[str, Bounds]] = {
        "l": LIGHTNESS_BOUNDS,
        "a": AXIS_BOUNDS,
        "b": AXIS_BOUNDS,
        "alpha": (0.0, 1.0),
    }
    channel_precision: ClassVar[Dict[str, int]] = {"l": LIGHTNESS_PRECISION}

    def __init__(
        self,
        l: Channel = None,
        a: Channel = None,
        b: Channel = None,
        alpha: Channel = None,
    ) -> None:
        super().__init__(l, a, b, alpha)

    @property
    def l(self) -> Channel:
        return self._channels[0]

    @property
    def a(self) -> Channel:
        return self._channels[1]

    @property
    def b(self) -> Channel:
        return self._channels[2]

    @property
    def alpha(self) -> Channel:
        return self._channels[3]
