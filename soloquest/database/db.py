"""SQLite engine and sessions behind the player key-value store.

One engine per process.  It is built on first use from :data:`DB_PATH`,
or from whatever URL :func:`configure_engine` / :func:`init_db` was given
(tests pass ``sqlite:///:memory:``).
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session as OrmSession, sessionmaker

from ..paths import DB_PATH
from .models import Base

_engine: Engine | None = None
_sessions: sessionmaker | None = None


def configure_engine(url: str | None = None) -> Engine:
    """Point the store at *url*, or at the on-disk database by default.

    Replaces any engine built before; existing sessions keep the old one.
    """
    global _engine, _sessions
    if url is None:
        DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        url = f"sqlite:///{DB_PATH}"
    _engine = create_engine(url, connect_args={"check_same_thread": False})
    _sessions = sessionmaker(bind=_engine, expire_on_commit=False)
    return _engine


def init_db(url: str | None = None) -> Engine:
    """Create the ``kv_store`` table, configuring the engine if needed."""
    engine = configure_engine(url) if url is not None or _engine is None else _engine
    Base.metadata.create_all(engine)
    return engine


@contextmanager
def get_session() -> Iterator[OrmSession]:
    """One transaction: committed when the block exits, rolled back if it raises."""
    if _sessions is None:
        configure_engine()
    with _sessions.begin() as session:
        yield session
