"""Theme framework constants."""

from __future__ import annotations

THEME_EXTENSION = ".css"
THEMES_SUBDIRECTORY = "Themes"
INVARIANT_THEME_NAME = "invariant"

# Import references starting with this marker point into the user themes directory.
USER_THEMES_MARKER = "{UserAppData}/"

COLOR_PROPERTY = "color"
CLASS_SELECTOR = "."

MAX_THEME_FILE_BYTES = 1024 * 1024
