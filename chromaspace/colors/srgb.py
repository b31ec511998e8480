from typing import ClassVar, Dict, Tuple
from ..types.color_types import Bounds, Channel, ColorSpace
from .color_base import ColorSpaceBase

UNIT_BOUNDS: Bounds = (0.0, 1.0)


class SRgbSpace(ColorSpaceBase):
    """
    A point in the `sRGB <https://www.w3.org/TR/css-color-4/#numeric-srgb>`_
    color space: red, green and blue as unit percentages, plus an optional
    alpha. A missing alpha is read as fully opaque.

    Every channel may be None. When blended with another color, an omitted
    channel takes the other color's value, so "absent" is not the same as 0.
    Present values outside [0, 1] are clamped.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "srgb"
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")
    channel_bounds: ClassVar[Dict[str, Bounds]] = {
        "red": UNIT_BOUNDS,
        "green": UNIT_BOUNDS,
        "blue": UNIT_BOUNDS,
        "alpha": UNIT_BOUNDS,
    }

    def __init__(
        self,
        red: Channel = None,
        green: Channel = None,
        blue: Channel = None,
        alpha: Channel = None,
    ) -> None:
        super().__init__(red, green, blue, alpha)

    @property
    def red(self) -> Channel:
        return self._channels[0]

    @property
    def green(self) -> Channel:
        return self._channels[1]

    @property
    def blue(self) -> Channel:
        return self._channels[2]

    @property
    def alpha(self) -> Channel:
        return self._channels[3]
