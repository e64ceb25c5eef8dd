from __future__ import annotations
import re
from dataclasses import dataclass
from pathlib import Path

from .config import FALLBACK_TEXT_COLOR
from .errors import ThemeLoadError

THEME_DIR = Path(__file__).resolve().parent.parent / "views" / "themes"
THEMES = {
    "light": "light.qss",
    "dark": "dark.qss",
}

_TEXT_COLOR_RE = re.compile(r"/\*\s*@text-color:\s*(#[0-9a-fA-F]{3,8})\s*\*/")


@dataclass(frozen=True)
class Theme:
    name: str
    stylesheet: str
    text_color: str


def load_theme(name: str, theme_dir: Path = THEME_DIR) -> Theme:
    """
    Reads the style sheet for a named theme.
    The text color comes from a ``/* @text-color: #rrggbb */`` line in the
    sheet; themes without one get the high-contrast fallback.
    """
    file_name = THEMES.get(name)
    if file_name is None:
        raise ThemeLoadError(f"Unknown theme: {name!r}")

    path = Path(theme_dir) / file_name
    try:
        stylesheet = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ThemeLoadError(f"Could not read theme {name!r} from {path}: {e}") from e

    match = _TEXT_COLOR_RE.search(stylesheet)
    text_color = match.group(1) if match else FALLBACK_TEXT_COLOR
    return Theme(name=name, stylesheet=stylesheet, text_color=text_color)
