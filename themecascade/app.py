"""Theme subsystem bootstrap for the host application."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from themecascade.config.settings import AppSettings
from themecascade.runtime_paths import builtin_themes_root
from themecascade.themes.loader import ThemeCascadeResolver
from themecascade.themes.locations import ThemeLocationResolver
from themecascade.themes.repository import ThemeRepository
from themecascade.themes.service import ThemeService


def configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themecascade")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "themes.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def create_theme_service(settings: AppSettings | None = None) -> ThemeService:
    """Wire settings, theme storage and the cascade resolver into a service."""
    settings = settings or AppSettings()
    logger = configure_logger(settings)
    builtin_themes = builtin_themes_root()
    logger.info("startup mode frozen=%s builtin_themes=%s", getattr(sys, "frozen", False), builtin_themes)
    if not builtin_themes.exists():
        logger.warning("builtin theme root missing at %s", builtin_themes)
    user_themes = settings.user_themes_dir
    if user_themes is None:
        logger.info("portable mode, user themes disabled")

    locations = ThemeLocationResolver(builtin_root=builtin_themes, user_root=user_themes)
    repository = ThemeRepository(locations, ThemeCascadeResolver(locations))
    return ThemeService(repository, settings)
