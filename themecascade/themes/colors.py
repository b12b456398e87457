"""Color keys recognized in theme files and the RGBA color value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class AppColor(Enum):
    """Application-specific palette roles."""

    OTHER_TAG = "OtherTag"
    AUTHORED_HIGHLIGHT = "AuthoredHighlight"
    HIGHLIGHT_ALL_OCCURENCES = "HighlightAllOccurences"
    TAG = "Tag"
    GRAPH = "Graph"
    BRANCH = "Branch"
    REMOTE_BRANCH = "RemoteBranch"
    DIFF_SECTION = "DiffSection"
    DIFF_REMOVED = "DiffRemoved"
    DIFF_REMOVED_EXTRA = "DiffRemovedExtra"
    DIFF_ADDED = "DiffAdded"
    DIFF_ADDED_EXTRA = "DiffAddedExtra"
    GRAPH_BRANCH_1 = "GraphBranch1"
    GRAPH_BRANCH_2 = "GraphBranch2"
    GRAPH_BRANCH_3 = "GraphBranch3"
    GRAPH_BRANCH_4 = "GraphBranch4"
    GRAPH_NON_RELATIVE_BRANCH = "GraphNonRelativeBranch"


class SysColor(Enum):
    """Platform system color roles."""

    ACTIVE_BORDER = "ActiveBorder"
    ACTIVE_CAPTION = "ActiveCaption"
    ACTIVE_CAPTION_TEXT = "ActiveCaptionText"
    APP_WORKSPACE = "AppWorkspace"
    CONTROL = "Control"
    CONTROL_DARK = "ControlDark"
    CONTROL_DARK_DARK = "ControlDarkDark"
    CONTROL_LIGHT = "ControlLight"
    CONTROL_LIGHT_LIGHT = "ControlLightLight"
    CONTROL_TEXT = "ControlText"
    DESKTOP = "Desktop"
    GRAY_TEXT = "GrayText"
    HIGHLIGHT = "Highlight"
    HIGHLIGHT_TEXT = "HighlightText"
    HOT_TRACK = "HotTrack"
    INACTIVE_BORDER = "InactiveBorder"
    INACTIVE_CAPTION = "InactiveCaption"
    INACTIVE_CAPTION_TEXT = "InactiveCaptionText"
    INFO = "Info"
    INFO_TEXT = "InfoText"
    MENU = "Menu"
    MENU_TEXT = "MenuText"
    SCROLL_BAR = "ScrollBar"
    WINDOW = "Window"
    WINDOW_FRAME = "WindowFrame"
    WINDOW_TEXT = "WindowText"
    BUTTON_FACE = "ButtonFace"
    BUTTON_HIGHLIGHT = "ButtonHighlight"
    BUTTON_SHADOW = "ButtonShadow"
    GRADIENT_ACTIVE_CAPTION = "GradientActiveCaption"
    GRADIENT_INACTIVE_CAPTION = "GradientInactiveCaption"
    MENU_BAR = "MenuBar"
    MENU_HIGHLIGHT = "MenuHighlight"


ColorKey = Union[AppColor, SysColor]

_APP_COLORS_BY_NAME: dict[str, AppColor] = {member.value: member for member in AppColor}
_SYS_COLORS_BY_NAME: dict[str, SysColor] = {member.value: member for member in SysColor}


def parse_color_key(name: str) -> ColorKey | None:
    """Return the color key named ``name`` (case-sensitive), or None.

    Application colors are checked first, so a name present in both
    enumerations resolves to the application color.
    """
    app_color = _APP_COLORS_BY_NAME.get(name)
    if app_color is not None:
        return app_color
    return _SYS_COLORS_BY_NAME.get(name)


def color_key_names() -> tuple[str, ...]:
    return tuple(_APP_COLORS_BY_NAME) + tuple(_SYS_COLORS_BY_NAME)


def _channel(value: int, name: str) -> int:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"color channel {name} must be an int in 0..255, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class Color:
    """An opaque 32-bit color: alpha plus three 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        _channel(self.red, "red")
        _channel(self.green, "green")
        _channel(self.blue, "blue")
        _channel(self.alpha, "alpha")

    @classmethod
    def from_argb(cls, value: int) -> Color:
        return cls(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
            alpha=(value >> 24) & 0xFF,
        )

    @classmethod
    def from_rgb(cls, value: int) -> Color:
        """Build an opaque color from a 24-bit ``0xRRGGBB`` value."""
        return cls.from_argb(0xFF000000 | (value & 0xFFFFFF))

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
        """Build a color from channels in the 0..1 range."""
        return cls(
            red=_float_to_channel(red),
            green=_float_to_channel(green),
            blue=_float_to_channel(blue),
            alpha=_float_to_channel(alpha),
        )

    def to_argb(self) -> int:
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    def to_rgb(self) -> int:
        """Return the 24-bit ``0xRRGGBB`` value; alpha is dropped."""
        return self.to_argb() & 0x00FFFFFF

    def hex_rgb(self) -> str:
        return f"#{self.to_rgb():06x}"


def _float_to_channel(value: float) -> int:
    return max(0, min(255, int(round(value * 255))))
