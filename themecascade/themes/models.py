"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from themecascade.themes.colors import AppColor, Color, ColorKey, SysColor
from themecascade.themes.constants import USER_THEMES_MARKER


@dataclass(frozen=True, slots=True, eq=False)
class ThemeId:
    """Identity of a theme: a name within the built-in or user tier.

    Names compare case-insensitively.
    """

    name: str
    is_builtin: bool

    @classmethod
    def default(cls) -> ThemeId:
        """The empty built-in id, meaning no theme is selected."""
        return cls(name="", is_builtin=True)

    @property
    def is_default(self) -> bool:
        return self.is_builtin and not self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThemeId):
            return NotImplemented
        return self.is_builtin == other.is_builtin and self.name.casefold() == other.name.casefold()

    def __hash__(self) -> int:
        return hash((self.name.casefold(), self.is_builtin))

    def __str__(self) -> str:
        return self.name if self.is_builtin else f"{USER_THEMES_MARKER}{self.name}"


@dataclass(slots=True)
class ResolvedColorTable:
    """Colors collected during one cascade pass, split by namespace."""

    app_colors: dict[AppColor, Color] = field(default_factory=dict)
    sys_colors: dict[SysColor, Color] = field(default_factory=dict)

    def set(self, key: ColorKey, color: Color) -> None:
        if isinstance(key, AppColor):
            self.app_colors[key] = color
        else:
            self.sys_colors[key] = color

    def __len__(self) -> int:
        return len(self.app_colors) + len(self.sys_colors)


@dataclass(frozen=True, slots=True)
class Theme:
    """A fully resolved, read-only palette bound to its id."""

    id: ThemeId
    app_colors: Mapping[AppColor, Color] = field(default_factory=dict)
    sys_colors: Mapping[SysColor, Color] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "app_colors", MappingProxyType(dict(self.app_colors)))
        object.__setattr__(self, "sys_colors", MappingProxyType(dict(self.sys_colors)))

    @classmethod
    def from_table(cls, theme_id: ThemeId, table: ResolvedColorTable) -> Theme:
        return cls(id=theme_id, app_colors=table.app_colors, sys_colors=table.sys_colors)

    def get_color(self, key: ColorKey) -> Color | None:
        if isinstance(key, AppColor):
            return self.app_colors.get(key)
        return self.sys_colors.get(key)

    def with_colors(
        self,
        *,
        app_colors: Mapping[AppColor, Color] | None = None,
        sys_colors: Mapping[SysColor, Color] | None = None,
        theme_id: ThemeId | None = None,
    ) -> Theme:
        """Return a copy with the given colors merged over this theme's colors."""
        merged_app = dict(self.app_colors)
        merged_app.update(app_colors or {})
        merged_sys = dict(self.sys_colors)
        merged_sys.update(sys_colors or {})
        return Theme(id=theme_id or self.id, app_colors=merged_app, sys_colors=merged_sys)
