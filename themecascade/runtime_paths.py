"""Location of the themes shipped with the package."""

from __future__ import annotations

from pathlib import Path
import sys

_BUILTIN_THEMES = Path("themes") / "builtin"


def builtin_themes_root() -> Path:
    """Shipped theme directory; under the PyInstaller extraction root when frozen."""
    bundle = getattr(sys, "_MEIPASS", None) if getattr(sys, "frozen", False) else None
    if bundle:
        packaged = Path(bundle) / "themecascade" / _BUILTIN_THEMES
        if packaged.is_dir():
            return packaged
        return Path(bundle) / _BUILTIN_THEMES
    return Path(__file__).resolve().parent / _BUILTIN_THEMES
