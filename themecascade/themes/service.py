"""Runtime theme selection, change notification and persistence service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from PySide6.QtCore import QObject, Signal

from themecascade.errors import ThemeError
from themecascade.themes.models import Theme, ThemeId
from themecascade.themes.repository import ThemeRepository

if TYPE_CHECKING:
    from themecascade.config.settings import AppSettings

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Holds the active theme and notifies listeners when it changes.

    Consumers connect to ``theme_changed`` instead of listening for global
    system color notifications.
    """

    theme_changed = Signal(object)

    def __init__(self, repository: ThemeRepository, settings: AppSettings) -> None:
        super().__init__()
        self._repository = repository
        self._settings = settings
        self._current_theme: Theme | None = None

    @property
    def repository(self) -> ThemeRepository:
        return self._repository

    @property
    def current_theme(self) -> Theme | None:
        return self._current_theme

    def available_themes(self) -> list[ThemeId]:
        return self._repository.theme_ids()

    def apply_theme(
        self,
        theme_id: ThemeId,
        variations: Iterable[str] = (),
        *,
        persist: bool = True,
    ) -> Theme:
        variations = list(variations)
        theme = self._repository.get_theme(theme_id, variations)
        self._set_current(theme)
        if persist:
            self._settings.theme_id = theme_id
            self._settings.theme_variations = variations
        return theme

    def load_configured_theme(self) -> Theme:
        """Apply the theme from settings, or the invariant theme if it cannot load."""
        theme_id = self._settings.theme_id
        if not theme_id.is_default:
            try:
                return self.apply_theme(theme_id, self._settings.theme_variations, persist=False)
            except ThemeError as exc:
                logger.warning("failed to load theme %s, using invariant theme: %s", theme_id, exc)
        theme = self._repository.get_invariant_theme()
        self._set_current(theme)
        return theme

    def save_theme(self, theme: Theme) -> None:
        self._repository.save(theme)
        if self._current_theme is not None and self._current_theme.id == theme.id:
            self._set_current(theme)

    def delete_theme(self, theme_id: ThemeId) -> None:
        self._repository.delete(theme_id)
        if self._current_theme is not None and self._current_theme.id == theme_id:
            logger.info("active theme %s deleted, reverting to invariant theme", theme_id)
            self._settings.theme_id = ThemeId.default()
            self._settings.theme_variations = []
            self._set_current(self._repository.get_invariant_theme())

    def _set_current(self, theme: Theme) -> None:
        self._current_theme = theme
        self.theme_changed.emit(theme)
