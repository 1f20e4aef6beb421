"""Player record value types and their JSON layout.

``PlayerRecord`` and ``Quest`` are frozen dataclasses: every engine
operation returns a new value via :func:`dataclasses.replace`.

Stored layout
-------------
The JSON object keeps the field names of the first mobile release so old
saves still load::

    {
      "schema": 1,
      "level": 2, "xp": 150, "allocPoints": 3,
      "stats": {"STR": 5, "AGI": 5, "END": 5, "INT": 5, "LUCK": 1},
      "skills": ["s1"],
      "quests": [{"id": "q1", "title": "...", "xp": 40,
                  "daily": true, "done": false}],
      "createdAt": 1700000000000
    }

Older saves stored skills as ``{"id", "name", "desc"}`` objects; those
are read back as their ids.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from ..errors import CorruptState

SCHEMA_VERSION = 1


class Stat(Enum):
    STRENGTH = "STR"
    AGILITY = "AGI"
    ENDURANCE = "END"
    INTELLIGENCE = "INT"
    LUCK = "LUCK"


STAT_KEYS: tuple[str, ...] = tuple(s.value for s in Stat)

DEFAULT_STATS: Mapping[str, int] = MappingProxyType({
    Stat.STRENGTH.value: 5,
    Stat.AGILITY.value: 5,
    Stat.ENDURANCE.value: 5,
    Stat.INTELLIGENCE.value: 5,
    Stat.LUCK.value: 1,
})


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Quest:
    id: str
    title: str
    experience_reward: int
    is_daily: bool = False
    is_done: bool = False


@dataclass(frozen=True)
class PlayerRecord:
    """The complete progression state for one player."""

    level: int = 1
    experience: int = 0
    allocatable_points: int = 0
    stats: Mapping[str, int] = field(default_factory=lambda: DEFAULT_STATS)
    skills: tuple[str, ...] = ()
    quests: tuple[Quest, ...] = ()
    created_at: int = field(default_factory=now_ms)

    def __post_init__(self) -> None:
        # Always a private read-only copy of whatever mapping was passed in.
        object.__setattr__(self, "stats", MappingProxyType(dict(self.stats)))

    def __hash__(self) -> int:
        return hash((
            self.level, self.experience, self.allocatable_points,
            tuple(sorted(self.stats.items())), self.skills, self.quests,
            self.created_at,
        ))

    def find_quest(self, quest_id: str) -> Quest | None:
        for quest in self.quests:
            if quest.id == quest_id:
                return quest
        return None


# ── serialization ────────────────────────────────────────────────────────


def quest_to_dict(quest: Quest) -> dict[str, Any]:
    return {
        "id": quest.id,
        "title": quest.title,
        "xp": quest.experience_reward,
        "daily": quest.is_daily,
        "done": quest.is_done,
    }


def record_to_dict(record: PlayerRecord) -> dict[str, Any]:
    """Return the JSON-serialisable form of *record*."""
    return {
        "schema": SCHEMA_VERSION,
        "level": record.level,
        "xp": record.experience,
        "allocPoints": record.allocatable_points,
        "stats": {key: record.stats[key] for key in STAT_KEYS},
        "skills": list(record.skills),
        "quests": [quest_to_dict(q) for q in record.quests],
        "createdAt": record.created_at,
    }


def _int(data: dict, key: str, minimum: int = 0) -> int:
    value = data.get(key)
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        raise CorruptState(f"Field {key!r} must be an integer >= {minimum}")
    return value


def _bool(data: dict, key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise CorruptState(f"Field {key!r} must be a boolean")
    return value


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise CorruptState(f"Field {key!r} must be a string")
    return value


def quest_from_dict(data: Any) -> Quest:
    if not isinstance(data, dict):
        raise CorruptState("Quest entry must be an object")
    return Quest(
        id=_str(data, "id"),
        title=_str(data, "title"),
        experience_reward=_int(data, "xp"),
        is_daily=_bool(data, "daily"),
        is_done=_bool(data, "done"),
    )


def _skill_id(entry: Any) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict) and isinstance(entry.get("id"), str):
        return entry["id"]
    raise CorruptState("Skill entry must be an id or an object with an id")


def record_from_dict(data: Any) -> PlayerRecord:
    """Rebuild a :class:`PlayerRecord`, raising ``CorruptState`` on bad shape."""
    if not isinstance(data, dict):
        raise CorruptState("Player payload must be an object")

    schema = data.get("schema", SCHEMA_VERSION)
    if not isinstance(schema, int) or schema > SCHEMA_VERSION:
        raise CorruptState(f"Unsupported schema version {schema!r}")

    raw_stats = data.get("stats")
    if not isinstance(raw_stats, dict):
        raise CorruptState("Field 'stats' must be an object")
    missing = [k for k in STAT_KEYS if k not in raw_stats]
    if missing:
        raise CorruptState(f"Missing stats: {', '.join(missing)}")
    stats = {key: _int(raw_stats, key) for key in STAT_KEYS}

    raw_skills = data.get("skills", [])
    raw_quests = data.get("quests", [])
    if not isinstance(raw_skills, list) or not isinstance(raw_quests, list):
        raise CorruptState("Fields 'skills' and 'quests' must be lists")

    skills: list[str] = []
    for entry in raw_skills:
        skill_id = _skill_id(entry)
        if skill_id not in skills:
            skills.append(skill_id)

    quests = tuple(quest_from_dict(q) for q in raw_quests)
    seen: set[str] = set()
    for quest in quests:
        if quest.id in seen:
            raise CorruptState(f"Duplicate quest id {quest.id!r}")
        seen.add(quest.id)

    return PlayerRecord(
        level=_int(data, "level", minimum=1),
        experience=_int(data, "xp"),
        allocatable_points=_int(data, "allocPoints"),
        stats=stats,
        skills=tuple(skills),
        quests=quests,
        created_at=_int(data, "createdAt"),
    )
