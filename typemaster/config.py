from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .errors import ConfigError
from .words import DIFFICULTIES, SAMPLE_SIZE

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parent / "typemaster.config.json"


def default_data_dir() -> Path:
    """
    Local-only app data (currently just the log file):
    - macOS: ~/Library/Application Support/typemaster
    - Linux: $XDG_DATA_HOME/typemaster or ~/.local/share/typemaster
    """
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "typemaster"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "typemaster"
    return home / ".local" / "share" / "typemaster"


@dataclass
class Settings:
    theme: str = "slate"
    difficulty: str = "normal"
    word_count: int = SAMPLE_SIZE
    word_file: Optional[Path] = None
    start_on_keystroke: bool = False
    themes: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Settings":
        settings = cls()
        settings.theme = str(data.get("theme", settings.theme))

        difficulty = str(data.get("difficulty", settings.difficulty))
        if difficulty in DIFFICULTIES:
            settings.difficulty = difficulty
        else:
            logger.warning("unknown difficulty %r, using %r", difficulty, settings.difficulty)

        if "word_count" in data:
            raw = data["word_count"]
            try:
                count = 0 if isinstance(raw, bool) else int(raw)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                count = 0
            if count > 0:
                settings.word_count = count
            else:
                logger.warning("invalid word_count %r, using %d", data["word_count"], settings.word_count)

        word_file = data.get("word_file")
        if isinstance(word_file, str) and word_file:
            settings.word_file = Path(word_file).expanduser()

        start = data.get("start_on_keystroke", settings.start_on_keystroke)
        if isinstance(start, bool):
            settings.start_on_keystroke = start

        extra_themes = data.get("themes")
        if isinstance(extra_themes, dict):
            settings.themes = {
                str(name): {str(k): str(v) for k, v in colors.items()}
                for name, colors in extra_themes.items()
                if isinstance(colors, dict)
            }
        return settings


def load_config(path: Optional[Path] = None) -> Dict[str, object]:
    """Read the JSON config. A missing default file or a corrupt file gives {}."""
    explicit = path is not None
    path = Path(path) if path is not None else CONFIG_PATH
    if not path.exists():
        if explicit:
            raise ConfigError(f"config file not found: {path}")
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", path)
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> Settings:
    return Settings.from_dict(load_config(path))
