"""The single owner of the current player record.

``PlayerController`` is what a UI talks to.  Every mutating method runs
one pure engine operation, swaps in the returned record, emits signals,
and then explicitly saves.  Nothing else writes to storage.

Signals
-------
player_changed(record: PlayerRecord)
    Emitted after every change, before the save.
level_up(data: dict)
    ``old_level``, ``new_level``, ``points_awarded``.
skills_unlocked(skills: list[SkillDef])
    Catalog skills gained by the change.
quest_completed(quest: Quest)
    The quest as it was before completion.
save_failed(message: str)
    A save did not reach storage: it raised
    :class:`PersistenceUnavailable`, was skipped as stale, or was refused
    because storage came back holding a player this session never loaded.
    The in-memory record stays authoritative and the next change (or
    :meth:`flush`) retries.

Engine errors (``InsufficientPoints``, ``InvalidStat`` ...) propagate to
the caller unchanged and leave the record as it was.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from .database.store import PlayerStore
from .errors import CorruptState, PersistenceUnavailable
from .progression import engine
from .progression.catalog import default_record
from .progression.record import PlayerRecord, Stat
from .settings import Settings

logger = logging.getLogger(__name__)


class PlayerController(QObject):

    player_changed = pyqtSignal(object)
    level_up = pyqtSignal(object)
    skills_unlocked = pyqtSignal(object)
    quest_completed = pyqtSignal(object)
    save_failed = pyqtSignal(str)

    def __init__(
        self,
        store: PlayerStore | None = None,
        settings: Settings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store or PlayerStore()
        self._settings = settings or Settings()
        self._player: PlayerRecord = default_record()
        self._revision: int = 0
        self._revision_known: bool = True
        self._dirty: bool = False

    # ── properties ───────────────────────────────────────────────────────

    @property
    def player(self) -> PlayerRecord:
        return self._player

    @property
    def dirty(self) -> bool:
        """True while the in-memory record has changes not yet saved."""
        return self._dirty

    @property
    def revision(self) -> int:
        return self._revision

    # ── loading / saving ─────────────────────────────────────────────────

    def load(self) -> PlayerRecord:
        """Load the stored player, or fall back to a fresh one."""
        try:
            self._revision = self._store.stored_revision() or 0
            self._revision_known = True
            self._player = self._store.load()
            self._dirty = False
        except CorruptState as exc:
            if not self._settings.fallback_on_corrupt:
                raise
            # The unreadable save is overwritten by the next successful save.
            logger.warning("Stored player is corrupt, starting fresh: %s", exc)
            self._player = default_record()
            self._dirty = True
        except PersistenceUnavailable as exc:
            logger.warning("Player storage unavailable, running in memory: %s", exc)
            self._player = default_record()
            self._revision_known = False
            self._dirty = True
        self.player_changed.emit(self._player)
        return self._player

    def flush(self) -> bool:
        """Save the current record now.  Returns True on success.

        After a load that could not reach storage, a stored player that
        this session never read is left alone rather than overwritten.
        """
        try:
            if not self._revision_known:
                if self._store.stored_revision() is not None:
                    return self._unsaved(
                        "Save refused, storage holds a player this session "
                        "never loaded"
                    )
                self._revision_known = True
            self._revision += 1
            written = self._store.save(self._player, revision=self._revision)
        except PersistenceUnavailable as exc:
            return self._unsaved(
                f"Save failed, keeping changes in memory: {exc.message}"
            )
        if not written:
            return self._unsaved(
                "Save skipped, storage holds a newer revision than "
                f"{self._revision}"
            )
        self._dirty = False
        return True

    def _unsaved(self, message: str) -> bool:
        self._dirty = True
        logger.warning(message)
        self.save_failed.emit(message)
        return False

    def _commit(self, updated: PlayerRecord) -> bool:
        """Swap in *updated*, notify, and save.  Returns True if it changed."""
        previous = self._player
        if updated == previous:
            return False
        self._player = updated

        if updated.level > previous.level:
            self.level_up.emit({
                "old_level": previous.level,
                "new_level": updated.level,
                "points_awarded": updated.allocatable_points
                - previous.allocatable_points,
            })
        gained = engine.new_skills(previous, updated)
        if gained:
            self.skills_unlocked.emit(gained)
        self.player_changed.emit(updated)

        self.flush()
        return True

    # ── mutations ────────────────────────────────────────────────────────

    def add_experience(self, amount: int) -> PlayerRecord:
        """Grant raw XP and unlock whatever skills the new level allows."""
        updated = engine.grant_experience(self._player, amount)
        self._commit(engine.unlock_eligible_skills(updated))
        return self._player

    def allocate_stat(self, stat: Stat | str) -> PlayerRecord:
        self._commit(engine.allocate_stat(self._player, stat))
        return self._player

    def complete_quest(self, quest_id: str) -> PlayerRecord:
        quest = self._player.find_quest(quest_id)
        if self._commit(engine.complete_quest(self._player, quest_id)):
            self.quest_completed.emit(quest)
        return self._player

    def add_quest(
        self, title: str, experience_reward: int | None = None,
    ) -> PlayerRecord:
        if experience_reward is None:
            experience_reward = self._settings.new_quest_experience
        self._commit(engine.add_quest(self._player, title, experience_reward))
        return self._player

    def reset_daily_quests(self) -> PlayerRecord:
        self._commit(engine.reset_daily_quests(self._player))
        return self._player

    def grant_skill(self, skill_id: str) -> PlayerRecord:
        self._commit(engine.grant_skill(self._player, skill_id))
        return self._player
