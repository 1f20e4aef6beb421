"""Database package."""

from .db import get_session, init_db, configure_engine
from .models import KeyValue
from .store import PlayerStore, PLAYER_KEY

__all__ = [
    "get_session", "init_db", "configure_engine",
    "KeyValue", "PlayerStore", "PLAYER_KEY",
]
