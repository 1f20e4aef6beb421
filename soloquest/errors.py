"""Exception hierarchy for SoloQuest.

Every error here is recoverable: the engine never leaves a record half
updated, so a UI can catch these and show a friendly message instead of
crashing.

    SoloQuestError
    ├── ProgressionError
    │   ├── InsufficientPoints
    │   ├── InvalidStat
    │   ├── InvalidQuestTitle
    │   ├── InvalidAmount       (also a ValueError)
    │   └── InvalidSkill
    └── PersistenceError
        ├── CorruptState
        └── PersistenceUnavailable
"""

from __future__ import annotations


class SoloQuestError(Exception):
    """Base class.  ``error_code`` is a short stable identifier."""

    error_code = "soloquest_error"
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# ── progression ──────────────────────────────────────────────────────────


class ProgressionError(SoloQuestError):
    error_code = "progression_error"


class InsufficientPoints(ProgressionError):
    error_code = "insufficient_points"
    default_message = "You have no allocation points"


class InvalidStat(ProgressionError):
    error_code = "invalid_stat"
    default_message = "Unknown stat"


class InvalidQuestTitle(ProgressionError):
    error_code = "invalid_quest_title"
    default_message = "Quest title cannot be blank"


class InvalidAmount(ProgressionError, ValueError):
    error_code = "invalid_amount"
    default_message = "Amount must be a non-negative integer"


class InvalidSkill(ProgressionError):
    error_code = "invalid_skill"
    default_message = "Skill id cannot be blank"


# ── persistence ──────────────────────────────────────────────────────────


class PersistenceError(SoloQuestError):
    error_code = "persistence_error"


class CorruptState(PersistenceError):
    error_code = "corrupt_state"
    default_message = "Stored player data could not be read"


class PersistenceUnavailable(PersistenceError):
    error_code = "persistence_unavailable"
    default_message = "Player storage is unavailable"
