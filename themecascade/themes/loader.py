"""Theme stylesheet loading: import resolution and the color cascade."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from themecascade.errors import (
    CyclicImportError,
    FileNotFoundThemeError,
    FileTooLargeError,
    FileUnreadableError,
    ImportNotResolvableError,
    InvalidRuleError,
    MalformedStylesheetError,
    UnknownColorKeyError,
)
from themecascade.themes.colors import parse_color_key
from themecascade.themes.constants import COLOR_PROPERTY, MAX_THEME_FILE_BYTES
from themecascade.themes.locations import ThemeLocationResolver
from themecascade.themes.models import ResolvedColorTable
from themecascade.themes.stylesheet import StyleRule, parse_color_value, parse_stylesheet

logger = logging.getLogger(__name__)


class ThemeCascadeResolver:
    """Resolves a theme file and everything it imports into one color table.

    Imports are walked depth-first in document order and merged before the
    importing file's own rules. For each color key the rule with the most
    modifier classes wins; among rules with equal specificity the last one
    processed wins. Rules whose modifiers are not all in ``allowed_variants``
    are ignored.
    """

    def __init__(
        self,
        locations: ThemeLocationResolver,
        *,
        max_bytes: int = MAX_THEME_FILE_BYTES,
    ) -> None:
        self._locations = locations
        self._max_bytes = max_bytes

    def resolve(self, entry_path: Path, allowed_variants: Iterable[str] = ()) -> ResolvedColorTable:
        entry_path = Path(entry_path)
        cascade = _CascadePass(
            locations=self._locations,
            allowed_variants=frozenset(variant.casefold() for variant in allowed_variants),
            max_bytes=self._max_bytes,
        )
        cascade.load(entry_path, (entry_path,))
        logger.debug("resolved %s: %d colors", entry_path, len(cascade.table))
        return cascade.table


class _CascadePass:
    """Scratch state of a single ``resolve`` call."""

    def __init__(
        self,
        locations: ThemeLocationResolver,
        allowed_variants: frozenset[str],
        max_bytes: int,
    ) -> None:
        self._locations = locations
        self._allowed_variants = allowed_variants
        self._max_bytes = max_bytes
        self._specificity_by_key: dict[str, int] = {}
        self.table = ResolvedColorTable()

    def load(self, path: Path, chain: tuple[Path, ...]) -> None:
        content = _read_text_limited(path, max_bytes=self._max_bytes, chain=chain)
        stylesheet = parse_stylesheet(content)
        if stylesheet.errors:
            raise MalformedStylesheetError(
                path=path,
                chain=chain,
                details={"errors": "; ".join(stylesheet.errors)},
            )
        logger.debug(
            "loading %s: %d imports, %d rules",
            path,
            len(stylesheet.imports),
            len(stylesheet.rules),
        )

        for directive in stylesheet.imports:
            try:
                import_path = self._locations.resolve_import_path(directive.reference)
            except ImportNotResolvableError as exc:
                raise ImportNotResolvableError(
                    message=exc.message,
                    path=path,
                    chain=chain,
                    details=exc.details,
                ) from exc
            if _chain_key(import_path) in {_chain_key(item) for item in chain}:
                raise CyclicImportError(
                    message=f"Cyclic css imports: {', '.join(str(item) for item in chain + (import_path,))}",
                    path=path,
                    chain=chain + (import_path,),
                )
            self.load(import_path, chain + (import_path,))

        for rule in stylesheet.rules:
            self._apply_rule(rule, path, chain)

    def _apply_rule(self, rule: StyleRule, path: Path, chain: tuple[Path, ...]) -> None:
        classes = rule.selector_classes
        if classes is None or rule.errors or len(rule.declarations) != 1:
            raise _invalid_rule(rule, path, chain)
        declaration = rule.declarations[0]
        if declaration.name != COLOR_PROPERTY or declaration.important:
            raise _invalid_rule(rule, path, chain)
        color = parse_color_value(declaration)
        if color is None:
            raise _invalid_rule(rule, path, chain)

        key_name, modifiers = classes[0], classes[1:]
        if not all(modifier.casefold() in self._allowed_variants for modifier in modifiers):
            logger.debug("%s:%d: skipping %s, variant not allowed", path, rule.line, rule.selector_text)
            return

        specificity = len(modifiers)
        previous = self._specificity_by_key.get(key_name)
        if previous is not None and specificity < previous:
            return

        key = parse_color_key(key_name)
        if key is None:
            raise UnknownColorKeyError(
                message=f"Unknown color name {key_name!r}",
                path=path,
                chain=chain,
                details={"rule": rule.source_text, "line": rule.line},
            )
        self._specificity_by_key[key_name] = specificity
        self.table.set(key, color)


def _invalid_rule(rule: StyleRule, path: Path, chain: tuple[Path, ...]) -> InvalidRuleError:
    details: dict[str, object] = {"rule": rule.source_text, "line": rule.line}
    if rule.errors:
        details["errors"] = "; ".join(rule.errors)
    return InvalidRuleError(
        message=f"Invalid rule: {rule.source_text}",
        path=path,
        chain=chain,
        details=details,
    )


def _chain_key(path: Path) -> str:
    return str(path.absolute()).casefold()


def _read_text_limited(path: Path, *, max_bytes: int, chain: tuple[Path, ...]) -> str:
    try:
        size = path.stat().st_size
    except FileNotFoundError as exc:
        raise FileNotFoundThemeError(path=path, chain=chain) from exc
    except OSError as exc:
        raise FileUnreadableError(path=path, chain=chain, details={"original": str(exc)}) from exc
    if size > max_bytes:
        raise FileTooLargeError(
            message=f"File too large ({size} bytes, limit {max_bytes} bytes)",
            path=path,
            chain=chain,
        )
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileUnreadableError(path=path, chain=chain, details={"original": str(exc)}) from exc
