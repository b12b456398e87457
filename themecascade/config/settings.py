"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themecascade.themes.constants import THEMES_SUBDIRECTORY
from themecascade.themes.models import ThemeId


class AppSettings:
    """Wraps QSettings for persistent theme configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ThemeCascade", "ThemeCascade")

    @classmethod
    def from_ini(cls, path: Path) -> AppSettings:
        return cls(QSettings(str(path), QSettings.Format.IniFormat))

    def sync(self) -> None:
        self._qs.sync()

    # -- theme --

    @property
    def theme_id(self) -> ThemeId:
        name = (self._qs.value("ui/theme_name", "", type=str) or "").strip()
        is_builtin = self._qs.value("ui/theme_is_builtin", True, type=bool)
        return ThemeId(name=name, is_builtin=bool(is_builtin))

    @theme_id.setter
    def theme_id(self, value: ThemeId) -> None:
        self._qs.setValue("ui/theme_name", value.name.strip())
        self._qs.setValue("ui/theme_is_builtin", value.is_builtin)

    @property
    def theme_variations(self) -> list[str]:
        raw = self._qs.value("ui/theme_variations", [])
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = [raw]
        return [item.strip() for item in raw if isinstance(item, str) and item.strip()]

    @theme_variations.setter
    def theme_variations(self, value: list[str]) -> None:
        cleaned = [item.strip() for item in value if isinstance(item, str) and item.strip()]
        self._qs.setValue("ui/theme_variations", cleaned)

    # -- deployment --

    @property
    def portable(self) -> bool:
        return bool(self._qs.value("app/portable", False, type=bool))

    @portable.setter
    def portable(self, value: bool) -> None:
        self._qs.setValue("app/portable", bool(value))

    @property
    def user_themes_override(self) -> str:
        return self._qs.value("dirs/user_themes", "", type=str)

    @user_themes_override.setter
    def user_themes_override(self, value: str) -> None:
        self._qs.setValue("dirs/user_themes", value)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def user_themes_dir(self) -> Path | None:
        """User theme directory, or None in portable mode. Not created here."""
        if self.portable:
            return None
        override = (self.user_themes_override or "").strip()
        if override:
            return Path(override)
        return self._app_data_dir() / THEMES_SUBDIRECTORY

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themecascade"
