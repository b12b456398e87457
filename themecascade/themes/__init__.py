"""Theme cascade framework exports."""

from themecascade.themes.colors import AppColor, Color, SysColor, parse_color_key
from themecascade.themes.loader import ThemeCascadeResolver
from themecascade.themes.locations import ThemeLocationResolver
from themecascade.themes.models import ResolvedColorTable, Theme, ThemeId
from themecascade.themes.repository import ThemeRepository

__all__ = [
    "AppColor",
    "Color",
    "SysColor",
    "parse_color_key",
    "ResolvedColorTable",
    "Theme",
    "ThemeId",
    "ThemeCascadeResolver",
    "ThemeLocationResolver",
    "ThemeRepository",
]
