"""Load and save the player record.

The record is stored as one JSON document under :data:`PLAYER_KEY` in the
``kv_store`` table.  Every save overwrites the whole document.

Ordering
--------
``save`` accepts an optional *revision*.  The stored row remembers the
revision it was written with, and a save carrying a revision that is not
newer is skipped.  An older state can therefore never overwrite a newer
one, even if saves were ever replayed out of order.

Errors
------
Database failures surface as :class:`PersistenceUnavailable`; payloads
that cannot be decoded surface as :class:`CorruptState`.  Neither is
fatal; :class:`~soloquest.controller.PlayerController` decides the
fallback.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from ..errors import CorruptState, PersistenceUnavailable
from ..progression.catalog import default_record
from ..progression.record import PlayerRecord, record_from_dict, record_to_dict
from .db import get_session
from .models import KeyValue

logger = logging.getLogger(__name__)

PLAYER_KEY = "@player"


class PlayerStore:
    """Key-value persistence for a single :class:`PlayerRecord`."""

    def __init__(self, key: str = PLAYER_KEY) -> None:
        self.key = key

    def load(self) -> PlayerRecord:
        """Return the stored record, or a fresh default one if none exists."""
        try:
            with get_session() as db:
                row = db.get(KeyValue, self.key)
                raw = row.value if row is not None else None
        except SQLAlchemyError as exc:
            raise PersistenceUnavailable(f"Could not read {self.key}: {exc}") from exc

        if raw is None:
            logger.info("No stored player under %s, starting fresh", self.key)
            return default_record()

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CorruptState(f"Stored player is not valid JSON: {exc}") from exc
        return record_from_dict(data)

    def stored_revision(self) -> int | None:
        """Revision of the stored row, or ``None`` when nothing is stored."""
        try:
            with get_session() as db:
                row = db.get(KeyValue, self.key)
                return row.revision if row is not None else None
        except SQLAlchemyError as exc:
            raise PersistenceUnavailable(f"Could not read {self.key}: {exc}") from exc

    def save(self, record: PlayerRecord, revision: int | None = None) -> bool:
        """Write *record*, replacing any previous value.

        Returns ``False`` when the write was skipped as stale.
        """
        payload = json.dumps(record_to_dict(record), separators=(",", ":"))
        try:
            with get_session() as db:
                row = db.get(KeyValue, self.key)
                if row is None:
                    row = KeyValue(key=self.key, value=payload, revision=revision or 0)
                    db.add(row)
                    return True
                if revision is not None and row.revision >= revision:
                    logger.debug(
                        "Skipping stale save of %s (revision %d <= %d)",
                        self.key, revision, row.revision,
                    )
                    return False
                row.value = payload
                if revision is not None:
                    row.revision = revision
                row.updated_at = datetime.utcnow()
                return True
        except SQLAlchemyError as exc:
            raise PersistenceUnavailable(f"Could not write {self.key}: {exc}") from exc
