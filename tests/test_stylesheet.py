"""Tests for the tinycss2 stylesheet binding."""

from __future__ import annotations

from themecascade.themes.colors import Color
from themecascade.themes.stylesheet import parse_color_value, parse_stylesheet


def test_rules_and_imports_keep_document_order() -> None:
    parsed = parse_stylesheet(
        '@import "a";\n.Control { color: #010203 }\n@import url(b.css);\n.Window.X { color: #040506 }\n'
    )

    assert [item.reference for item in parsed.imports] == ["a", "b.css"]
    assert [rule.selector_classes for rule in parsed.rules] == [("Control",), ("Window", "X")]
    assert parsed.errors == ()


def test_declarations_are_exposed() -> None:
    rule = parse_stylesheet(".Control { COLOR: #010203 }").rules[0]

    assert len(rule.declarations) == 1
    assert rule.declarations[0].name == "color"
    assert rule.declarations[0].value_text == "#010203"
    assert parse_color_value(rule.declarations[0]) == Color(1, 2, 3)


def test_non_class_selectors_have_no_classes() -> None:
    parsed = parse_stylesheet("Control { color: red }\n.A .B { color: red }\n")

    assert [rule.selector_classes for rule in parsed.rules] == [None, None]


def test_invalid_import_is_a_parse_error() -> None:
    parsed = parse_stylesheet("@import 42;\n")

    assert parsed.imports == ()
    assert len(parsed.errors) == 1


def test_current_color_is_not_a_color_literal() -> None:
    rule = parse_stylesheet(".Control { color: currentColor }").rules[0]

    assert parse_color_value(rule.declarations[0]) is None
