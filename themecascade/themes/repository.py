"""Theme storage: load, save, delete and enumerate theme files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from themecascade.errors import FileUnwritableError, InvalidThemeOperationError, classify_exception
from themecascade.themes.constants import INVARIANT_THEME_NAME, THEME_EXTENSION
from themecascade.themes.loader import ThemeCascadeResolver
from themecascade.themes.locations import ThemeLocationResolver
from themecascade.themes.models import Theme, ThemeId
from themecascade.themes.persistence import serialize_theme, write_text_atomic

logger = logging.getLogger(__name__)


class ThemeRepository:
    """Themes stored as stylesheet files in the built-in and user directories.

    Holds no state of its own; every call goes back to the file system.
    """

    def __init__(
        self,
        locations: ThemeLocationResolver,
        resolver: ThemeCascadeResolver | None = None,
    ) -> None:
        self._locations = locations
        self._resolver = resolver or ThemeCascadeResolver(locations)

    @property
    def locations(self) -> ThemeLocationResolver:
        return self._locations

    def get_theme(self, theme_id: ThemeId, variations: Iterable[str] = ()) -> Theme:
        path = self._locations.locate_theme(theme_id)
        table = self._resolver.resolve(path, variations)
        return Theme.from_table(theme_id, table)

    def get_invariant_theme(self) -> Theme:
        return self.get_theme(ThemeId(name=INVARIANT_THEME_NAME, is_builtin=True), variations=())

    def save(self, theme: Theme) -> Path:
        path = self._locations.theme_path(theme.id)
        try:
            write_text_atomic(path, serialize_theme(theme))
        except OSError as exc:
            raise FileUnwritableError(path=path, details={"original": str(exc)}) from exc
        logger.info("saved theme %s to %s", theme.id, path)
        return path

    def delete(self, theme_id: ThemeId) -> None:
        if theme_id.is_builtin:
            raise InvalidThemeOperationError(
                message="Only user-defined themes can be deleted",
                details={"theme": theme_id.name},
            )
        path = self._locations.locate_theme(theme_id)
        try:
            path.unlink()
        except OSError as exc:
            raise FileUnwritableError(path=path, details={"original": str(exc)}) from exc
        logger.info("deleted theme %s", theme_id)

    def theme_ids(self) -> list[ThemeId]:
        """Built-in themes except the invariant one, then user themes."""
        builtin = [
            ThemeId(name=name, is_builtin=True)
            for name in _theme_names(self._locations.builtin_root)
            if name.casefold() != INVARIANT_THEME_NAME
        ]
        user_root = self._locations.user_root
        user = (
            [ThemeId(name=name, is_builtin=False) for name in _theme_names(user_root)]
            if user_root is not None
            else []
        )
        return builtin + user


def _theme_names(root: Path) -> list[str]:
    if not root.is_dir():
        return []
    try:
        names = [
            path.stem
            for path in root.iterdir()
            if path.is_file() and path.suffix.lower() == THEME_EXTENSION
        ]
    except OSError as exc:
        raise classify_exception(exc, root) from exc
    return sorted(names, key=str.casefold)
