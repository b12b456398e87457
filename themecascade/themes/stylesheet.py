"""Binding of the theme dialect onto the tinycss2 parser.

tinycss2 does the tokenizing; this module only turns its AST into the small
shapes the cascade needs: style rules with their selector text and
declarations, and ``@import`` references. Nothing here decides whether a
rule is valid for a theme, that is the loader's job.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import tinycss2
import tinycss2.color3

from themecascade.themes.colors import Color
from themecascade.themes.constants import CLASS_SELECTOR

_CLASS_SELECTOR_RE = re.compile(r"^(?:\.-?[_a-zA-Z][_a-zA-Z0-9-]*)+$")
_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_SKIPPED_TOKEN_TYPES = frozenset({"whitespace", "comment"})


@dataclass(frozen=True, slots=True)
class Declaration:
    name: str
    value: tuple[object, ...]
    important: bool = False

    @property
    def value_text(self) -> str:
        return tinycss2.serialize(self.value).strip()


@dataclass(frozen=True, slots=True)
class StyleRule:
    """A qualified rule, or any at-rule other than ``@import``."""

    selector_text: str
    declarations: tuple[Declaration, ...]
    source_text: str
    line: int = 0
    errors: tuple[str, ...] = ()

    @property
    def selector_classes(self) -> tuple[str, ...] | None:
        """Class tokens of a ``.a.b.c`` selector, or None for any other selector."""
        if not _CLASS_SELECTOR_RE.match(self.selector_text):
            return None
        return tuple(part for part in self.selector_text.split(CLASS_SELECTOR) if part)


@dataclass(frozen=True, slots=True)
class ImportDirective:
    reference: str
    line: int = 0


@dataclass(frozen=True, slots=True)
class ParsedStylesheet:
    rules: tuple[StyleRule, ...]
    imports: tuple[ImportDirective, ...]
    errors: tuple[str, ...]


def parse_stylesheet(text: str) -> ParsedStylesheet:
    """Parse stylesheet text, keeping rules and imports in document order."""
    rules: list[StyleRule] = []
    imports: list[ImportDirective] = []
    errors: list[str] = []

    for node in tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True):
        if node.type == "error":
            errors.append(_describe_error(node))
        elif node.type == "at-rule" and node.lower_at_keyword == "import":
            reference = _import_reference(node.prelude)
            if reference is None:
                errors.append(
                    f"{node.source_line}:{node.source_column} invalid @import "
                    f"{tinycss2.serialize(node.prelude).strip()!r}"
                )
            else:
                imports.append(ImportDirective(reference=reference, line=node.source_line))
        elif node.type == "at-rule":
            rules.append(
                StyleRule(
                    selector_text=f"@{node.at_keyword} {tinycss2.serialize(node.prelude).strip()}",
                    declarations=(),
                    source_text=node.serialize().strip(),
                    line=node.source_line,
                )
            )
        else:
            rules.append(_style_rule(node))

    return ParsedStylesheet(rules=tuple(rules), imports=tuple(imports), errors=tuple(errors))


def parse_color_value(declaration: Declaration) -> Color | None:
    """Return the color literal a declaration holds, or None if it holds anything else."""
    tokens = _significant(declaration.value)
    if len(tokens) != 1:
        return None
    if tokens[0].type == "hash":
        return _parse_hex(tokens[0].value)
    rgba = tinycss2.color3.parse_color(tokens[0])
    # parse_color returns the string "currentColor" for that keyword
    if rgba is None or isinstance(rgba, str):
        return None
    return Color.from_floats(rgba.red, rgba.green, rgba.blue, rgba.alpha)


def _parse_hex(digits: str) -> Color | None:
    """Parse ``rgb``, ``rgba``, ``rrggbb`` or ``rrggbbaa`` hex digits."""
    if not _HEX_RE.match(digits):
        return None
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    return Color(*channels)


def _style_rule(node) -> StyleRule:
    declarations: list[Declaration] = []
    errors: list[str] = []
    for item in tinycss2.parse_declaration_list(node.content, skip_comments=True, skip_whitespace=True):
        if item.type == "error":
            errors.append(_describe_error(item))
        elif item.type == "declaration":
            declarations.append(
                Declaration(name=item.lower_name, value=tuple(item.value), important=item.important)
            )
        else:
            errors.append(f"{item.source_line}:{item.source_column} unexpected {item.type}")
    return StyleRule(
        selector_text=tinycss2.serialize(node.prelude).strip(),
        declarations=tuple(declarations),
        source_text=node.serialize().strip(),
        line=node.source_line,
        errors=tuple(errors),
    )


def _import_reference(prelude) -> str | None:
    tokens = _significant(prelude)
    if len(tokens) != 1:
        return None
    token = tokens[0]
    if token.type in ("string", "url"):
        return token.value
    if token.type == "function" and token.lower_name == "url":
        arguments = _significant(token.arguments)
        if len(arguments) == 1 and arguments[0].type == "string":
            return arguments[0].value
    return None


def _significant(tokens) -> list:
    return [token for token in tokens if token.type not in _SKIPPED_TOKEN_TYPES]


def _describe_error(error) -> str:
    return f"{error.source_line}:{error.source_column} {error.kind}: {error.message}"
