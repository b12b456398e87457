"""Mapping of theme ids and import references onto theme files."""

from __future__ import annotations

import re
from pathlib import Path

from themecascade.errors import (
    ImportNotResolvableError,
    InvalidThemeOperationError,
    ThemeError,
    ThemeNotFoundError,
)
from themecascade.themes.constants import THEME_EXTENSION, USER_THEMES_MARKER
from themecascade.themes.models import ThemeId

_THEME_NAME_RE = re.compile(r"[^./\\:\x00-\x1f][^/\\:\x00-\x1f]*")


class ThemeLocationResolver:
    """Computes theme file paths for the built-in and user tiers.

    ``user_root`` is None in portable deployments, where no user tier exists.
    Tiers never fall back to each other.
    """

    def __init__(self, builtin_root: Path, user_root: Path | None) -> None:
        self._builtin_root = Path(builtin_root)
        self._user_root = Path(user_root) if user_root is not None else None

    @property
    def builtin_root(self) -> Path:
        return self._builtin_root

    @property
    def user_root(self) -> Path | None:
        return self._user_root

    def theme_path(self, theme_id: ThemeId) -> Path:
        """Return where the theme lives, whether or not the file exists."""
        if not _THEME_NAME_RE.fullmatch(theme_id.name):
            raise InvalidThemeOperationError(
                message=f"Invalid theme name: {theme_id.name!r}",
                details={"theme": theme_id.name},
            )
        if theme_id.is_builtin:
            return self._builtin_root / f"{theme_id.name}{THEME_EXTENSION}"
        if self._user_root is None:
            raise InvalidThemeOperationError(
                message="Portable mode only supports local themes",
                details={"theme": theme_id.name},
            )
        return self._user_root / f"{theme_id.name}{THEME_EXTENSION}"

    def locate_theme(self, theme_id: ThemeId) -> Path:
        path = self.theme_path(theme_id)
        if not path.is_file():
            raise ThemeNotFoundError(
                message=f"Theme not found: {theme_id}",
                path=path,
            )
        return path

    @staticmethod
    def resolve_import_reference(reference: str) -> ThemeId:
        """Interpret an ``@import`` reference as a theme id."""
        name = reference
        if name.lower().endswith(THEME_EXTENSION):
            name = name[: -len(THEME_EXTENSION)]
        if name.startswith(USER_THEMES_MARKER):
            return ThemeId(name=name[len(USER_THEMES_MARKER):], is_builtin=False)
        return ThemeId(name=name, is_builtin=True)

    def resolve_import_path(self, reference: str) -> Path:
        theme_id = self.resolve_import_reference(reference)
        try:
            return self.locate_theme(theme_id)
        except ThemeError as exc:
            raise ImportNotResolvableError(
                message=f"Failed to resolve import: {reference}",
                path=exc.path,
                details={"reference": reference, "reason": exc.message},
            ) from exc
