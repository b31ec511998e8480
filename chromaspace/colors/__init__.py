"""
Chromaspace Color Classes
=========================

Immutable value objects for the sRGB and OKLab color spaces, and a CSS
``rgb()`` formatter for sRGB colors.

Usage
-----
>>> from chromaspace.colors import SRgbSpace, LabSpace, Rgb
>>>
>>> SRgbSpace(red=2.0, green=0.5).red  # clamped
1.0
>>> LabSpace(l=5.0).l
4.0
>>> Rgb(0.5, None, 0.5, 1.0).css_as_percentage()
'rgb(50% none 50% 100%)'

Notes
-----
- Every channel is optional; None means "not provided", not zero
- Values are clamped to each channel's range during initialization
- OKLab lightness is also rounded to 5 decimal places
- Instances are frozen after initialization
"""

from .color_base import ColorSpaceBase
from .srgb import SRgbSpace
from .oklab import LabSpace
from .rgb import Rgb


__all__ = ['ColorSpaceBase', 'SRgbSpace', 'LabSpace', 'Rgb']
