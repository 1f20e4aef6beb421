"""Where SoloQuest keeps its files on disk.

    macOS     ~/Library/Application Support/SoloQuest
    Windows   %APPDATA%\\SoloQuest
    other     $XDG_DATA_HOME/soloquest  (default ~/.local/share/soloquest)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "SoloQuest"


def app_support_dir() -> Path:
    """Per-user data directory.  Not created here."""
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / APP_NAME
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", home)) / APP_NAME
    base = os.environ.get("XDG_DATA_HOME") or home / ".local" / "share"
    return Path(base) / APP_NAME.lower()


APP_SUPPORT_DIR = app_support_dir()
DB_PATH = APP_SUPPORT_DIR / "soloquest.db"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"
