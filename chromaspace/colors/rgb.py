from __future__ import annotations
from ..types.color_types import CSS_NONE, Channel
from ..utils import as_percentage
from .srgb import SRgbSpace


def _component(value: Channel) -> str:
    return CSS_NONE if value is None else as_percentage(value)


class Rgb:
    """CSS ``rgb()`` color backed by an :class:`SRgbSpace`."""
    __slots__ = ('_color_space', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        r: Channel = None,
        g: Channel = None,
        b: Channel = None,
        a: Channel = None,
    ) -> None:
        self._color_space = SRgbSpace(r, g, b, a)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_space(cls, color_space: SRgbSpace) -> Rgb:
        """Wrap an existing sRGB color without renormalizing it."""
        if not isinstance(color_space, SRgbSpace):
            raise TypeError(f"Rgb expects an SRgbSpace, got {type(color_space).__name__}")
        rgb = cls.__new__(cls)
        object.__setattr__(rgb, '_color_space', color_space)
        object.__setattr__(rgb, '_is_frozen', True)
        return rgb

    @property
    def color_space(self) -> SRgbSpace:
        return self._color_space

    def css_as_percentage(self) -> str:
        """
        Serialize as CSS Color 4 percentages, e.g. ``rgb(50% none 50% 100%)``.

        Missing red, green or blue channels are written as ``none``. A
        missing alpha is left out entirely, separator included.
        """
        space = self._color_space
        alpha = "" if space.alpha is None else f" {as_percentage(space.alpha)}"
        return (
            f"rgb({_component(space.red)} {_component(space.green)} "
            f"{_component(space.blue)}{alpha})"
        )

    def __str__(self) -> str:
        return self.css_as_percentage()

    def __repr__(self) -> str:
        return f"Rgb({self._color_space!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rgb):
            return NotImplemented
        return self._color_space == other._color_space

    def __hash__(self) -> int:
        return hash(self._color_space)
