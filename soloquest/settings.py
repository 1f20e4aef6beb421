"""Application settings with JSON persistence.

Settings are stored as ``settings.json`` in the app support directory
(see :mod:`soloquest.paths`).

Usage::

    settings = load_settings()
    settings.new_quest_experience = 80
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .paths import SETTINGS_PATH

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── quests ────────────────────────────────────────────────────────
    new_quest_experience: int = 50         # reward for user-added quests

    # ── storage ───────────────────────────────────────────────────────
    fallback_on_corrupt: bool = True       # start fresh if the save is unreadable


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
    return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
