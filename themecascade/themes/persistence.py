"""Theme serialization back to the stylesheet dialect."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from themecascade.themes.models import Theme

_RULE_FORMAT = ".{name} {{ color: #{rgb:06x} }}"


def serialize_theme(theme: Theme) -> str:
    """Render one rule per color, system colors first. Alpha is not kept."""
    lines = [
        _RULE_FORMAT.format(name=key.value, rgb=color.to_rgb())
        for key, color in theme.sys_colors.items()
    ]
    lines.extend(
        _RULE_FORMAT.format(name=key.value, rgb=color.to_rgb())
        for key, color in theme.app_colors.items()
    )
    return "\n".join(lines) + ("\n" if lines else "")


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}-", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
