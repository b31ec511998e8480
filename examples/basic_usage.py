"""Basic Chromaspace usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaspace import LabSpace, Rgb, SRgbSpace


def demonstrate_colors() -> None:
    # Out-of-range channels are clamped, missing ones stay None.
    accent = SRgbSpace(red=1.2, green=0.5, blue=None)
    print("sRGB channels:", accent.channels)
    print("Missing:", accent.missing_channels)

    # Lightness keeps HDR headroom up to 4.0 and 5 decimal places.
    bright = LabSpace(l=1.234567, a=0.8, b=-0.1)
    print("OKLab:", bright)


def demonstrate_css() -> None:
    print(Rgb(0.5, 0.5, 0.5, 1.0).css_as_percentage())
    print(Rgb(None, 0.25, 0.75).css_as_percentage())
    print(Rgb.from_space(SRgbSpace(0.2, 0.4, 0.6, 0.5)))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_css()
