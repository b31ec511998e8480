import pytest
from chromaspace.colors import Rgb, SRgbSpace


def test_rgb_with_all_values_formats_as_percentage():
    assert Rgb(0.5, 0.5, 0.5, 1.0).css_as_percentage() == "rgb(50% 50% 50% 100%)"


def test_rgb_with_no_red_formats_as_percentage():
    assert Rgb(None, 0.5, 0.5, 1.0).css_as_percentage() == "rgb(none 50% 50% 100%)"


def test_rgb_with_no_green_formats_as_percentage():
    assert Rgb(0.5, None, 0.5, 1.0).css_as_percentage() == "rgb(50% none 50% 100%)"


def test_rgb_with_no_blue_formats_as_percentage():
    assert Rgb(0.5, 0.5, None, 1.0).css_as_percentage() == "rgb(50% 50% none 100%)"


def test_rgb_with_no_alpha_formats_as_percentage():
    assert Rgb(0.5, 0.5, 0.5, None).css_as_percentage() == "rgb(50% 50% 50%)"


def test_rgb_with_nothing_set():
    assert Rgb().css_as_percentage() == "rgb(none none none)"


def test_rgb_clamps_before_formatting():
    assert Rgb(2.0, -1.0, 0.125, 0.333333).css_as_percentage() == "rgb(100% 0% 12.5% 33.333%)"


def test_rgb_wraps_srgb_space():
    rgb = Rgb(0.5, None, 1.0)
    assert rgb.color_space == SRgbSpace(0.5, None, 1.0)


def test_from_space():
    space = SRgbSpace(0.25, 0.5, 0.75, 0.5)
    rgb = Rgb.from_space(space)
    assert rgb.color_space is space
    assert rgb == Rgb(0.25, 0.5, 0.75, 0.5)
    assert str(rgb) == "rgb(25% 50% 75% 50%)"


def test_from_space_rejects_other_types():
    with pytest.raises(TypeError):
        Rgb.from_space((0.5, 0.5, 0.5))


def test_str_and_repr():
    rgb = Rgb(0.5, 0.5, 0.5)
    assert str(rgb) == "rgb(50% 50% 50%)"
    assert repr(rgb) == "Rgb(SRgbSpace(red=0.5, green=0.5, blue=0.5, alpha=None))"


def test_hashable():
    assert len({Rgb(0.5), Rgb(0.5), Rgb(0.6)}) == 2


def test_immutable():
    rgb = Rgb(0.5, 0.5, 0.5)
    before = hash(rgb)
    with pytest.raises(AttributeError):
        rgb._color_space = SRgbSpace(0.1)
    with pytest.raises(AttributeError):
        rgb.extra = 1
    assert rgb.css_as_percentage() == "rgb(50% 50% 50%)"
    assert hash(rgb) == before


def test_from_space_is_immutable():
    rgb = Rgb.from_space(SRgbSpace(0.25, 0.5, 0.75))
    with pytest.raises(AttributeError):
        rgb._color_space = SRgbSpace(0.1)
    assert str(rgb) == "rgb(25% 50% 75%)"
