from __future__ import annotations
from typing import ClassVar, Dict, Tuple, Union
import math
import warnings
import numpy as np
from numpy import ndarray
from ..types.color_types import Bounds, Channel, ChannelTuple, ColorSpace, is_real_number
from ..utils import clamp, round_to


class ColorSpaceBase:
    __slots__ = ('_channels', '_is_frozen')  # no per-instance __dict__ → immutability

    mode:              ClassVar[ColorSpace]
    channel_names:     ClassVar[Tuple[str, ...]]
    channel_bounds:    ClassVar[Dict[str, Bounds]]
    channel_precision: ClassVar[Dict[str, int]] = {}
    alpha_name:        ClassVar[str] = "alpha"

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Channel) -> None:
        if not hasattr(self, "channel_names"):
            raise TypeError(
                f"{self.__class__.__name__} defines no channels; "
                "use a concrete space such as SRgbSpace or LabSpace"
            )
        if len(values) != len(self.channel_names):
            raise TypeError(
                f"{self.mode} expects {len(self.channel_names)} channels "
                f"{self.channel_names!r}, got {len(values)}"
            )

        self._channels = tuple(
            self._normalize_channel(name, value)
            for name, value in zip(self.channel_names, values)
        )

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _normalize_channel(cls, name: str, value: Union[Channel, object]) -> Channel:
        """
        Bring a single channel value into its valid range.

        Absent channels stay absent. Present values are clamped to the
        channel bounds and, where the channel has a precision, rounded.

        Args:
            name: Channel name, a key of channel_bounds
            value: Raw channel value or None

        Returns:
            The normalized float, or None if the channel is absent
        """
        if value is None:
            return None
        if not is_real_number(value):
            raise TypeError(
                f"{cls.mode} channel {name!r} expects a real number or None, "
                f"got {type(value).__name__}"
            )

        value = float(value)
        if math.isnan(value):
            warnings.warn(f"{cls.mode} channel {name!r} is NaN, treating it as none")
            return None

        low, high = cls.channel_bounds[name]
        value = float(clamp(value, low, high))

        precision = cls.channel_precision.get(name)
        if precision is not None:
            value = round_to(value, precision)
        return value

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def channels(self) -> ChannelTuple:
        return self._channels

    @property
    def has_alpha(self) -> bool:
        """Check if an alpha value was provided."""
        return self._channel(self.alpha_name) is not None

    @property
    def is_complete(self) -> bool:
        """Check if every color channel (alpha aside) has a value."""
        return all(
            value is not None
            for name, value in zip(self.channel_names, self._channels)
            if name != self.alpha_name
        )

    @property
    def missing_channels(self) -> Tuple[str, ...]:
        """Names of the channels that were not provided."""
        return tuple(
            name for name, value in zip(self.channel_names, self._channels)
            if value is None
        )

    def _channel(self, name: str) -> Channel:
        return self._channels[self.channel_names.index(name)]

    def as_dict(self) -> Dict[str, Channel]:
        return dict(zip(self.channel_names, self._channels))

    # ------------------ NUMPY INTEROP ------------------
    def to_array(self) -> ndarray:
        """
        Return the channels as a float64 array.

        Absent channels become NaN, which is how numpy marks missing values.
        """
        return np.array(
            [np.nan if value is None else value for value in self._channels],
            dtype=np.float64,
        )

    @classmethod
    def from_array(cls, arr: ndarray) -> ColorSpaceBase:
        """
        Build a color from a 1D array of channels; NaN entries become absent.

        Args:
            arr: Array-like with one entry per channel

        Returns:
            New instance with normalized channels
        """
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (len(cls.channel_names),):
            raise ValueError(
                f"{cls.mode} expects an array of shape ({len(cls.channel_names)},), "
                f"got shape {arr.shape}"
            )
        values = [None if np.isnan(v) else float(v) for v in arr]
        return cls(*values)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSpaceBase):
            return NotImplemented
        return type(self) is type(other) and self._channels == other._channels

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._channels))

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in zip(self.channel_names, self._channels)
        )
        return f"{self.__class__.__name__}({fields})"
