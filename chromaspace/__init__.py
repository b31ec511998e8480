"""
Chromaspace - sRGB and OKLab Color Values
=========================================

Color values for the sRGB and OKLab spaces of the
`CSS Color Module Level 4 <https://www.w3.org/TR/css-color-4/>`_, with
channel clamping on construction and CSS percentage serialization.

OKLab lightness may exceed 1 (100%) for forwards compatibility with HDR
devices.
"""

from .colors import ColorSpaceBase, SRgbSpace, LabSpace, Rgb
from .utils import clamp, round_to, as_percentage

__version__ = "0.1.0"

__all__ = [
    # Color spaces
    "ColorSpaceBase",
    "SRgbSpace",
    "LabSpace",

    # Formatting
    "Rgb",
    "as_percentage",

    # Numeric helpers
    "clamp",
    "round_to",

    "__version__",
]
