"""Tests for color keys and the Color value."""

from __future__ import annotations

import pytest

from themecascade.themes.colors import AppColor, Color, SysColor, color_key_names, parse_color_key


def test_parse_color_key_namespaces() -> None:
    assert parse_color_key("Graph") is AppColor.GRAPH
    assert parse_color_key("WindowText") is SysColor.WINDOW_TEXT
    assert parse_color_key("NotARealColor") is None


def test_parse_color_key_is_case_sensitive() -> None:
    assert parse_color_key("graph") is None
    assert parse_color_key("WINDOWTEXT") is None


def test_color_key_names_are_unique() -> None:
    names = color_key_names()
    assert len(names) == len(set(names)) == len(AppColor) + len(SysColor)


def test_color_argb_conversions() -> None:
    color = Color.from_argb(0x80123456)

    assert (color.alpha, color.red, color.green, color.blue) == (0x80, 0x12, 0x34, 0x56)
    assert color.to_argb() == 0x80123456
    assert color.to_rgb() == 0x123456
    assert color.hex_rgb() == "#123456"


def test_from_rgb_is_opaque() -> None:
    assert Color.from_rgb(0xABCDEF).alpha == 255


def test_from_floats_rounds_to_channels() -> None:
    assert Color.from_floats(1.0, 0.5, 0.0, 1.0) == Color(255, 128, 0, 255)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range_channels(channels) -> None:
    with pytest.raises(ValueError):
        Color(*channels)
