"""Static game data: skills unlocked by level and the starter quests.

Skill Catalog
-------------
    Lv 2   Power Strike   a small strike for bonus damage
    Lv 4   Quickstep      a short burst of extra speed

Starter Quests
--------------
Every new player starts with three daily quests (walk, workout, read).
A daily quest can be cleared for another run with
:func:`~soloquest.progression.engine.reset_daily_quests`.

All tables here are built once at import time and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .record import PlayerRecord, Quest, now_ms


# ── skills ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SkillDef:
    key: str
    name: str
    required_level: int
    description: str


SKILLS: tuple[SkillDef, ...] = (
    SkillDef(
        key="s1", name="Power Strike", required_level=2,
        description="A small strike for bonus damage.",
    ),
    SkillDef(
        key="s2", name="Quickstep", required_level=4,
        description="A short burst of increased speed.",
    ),
)


def _by_level(skills: tuple[SkillDef, ...]) -> Mapping[int, tuple[SkillDef, ...]]:
    table: dict[int, list[SkillDef]] = {}
    for skill in skills:
        table.setdefault(skill.required_level, []).append(skill)
    return MappingProxyType(
        {lvl: tuple(table[lvl]) for lvl in sorted(table)}
    )


SKILLS_BY_LEVEL: Mapping[int, tuple[SkillDef, ...]] = _by_level(SKILLS)

_SKILL_MAP: Mapping[str, SkillDef] = MappingProxyType({s.key: s for s in SKILLS})


def get_skill_def(key: str) -> SkillDef | None:
    """Return the SkillDef for *key*, or ``None``."""
    return _SKILL_MAP.get(key)


def next_skill_unlock(current_level: int) -> SkillDef | None:
    """Return the lowest-level skill the player hasn't reached yet."""
    for level, skills in SKILLS_BY_LEVEL.items():
        if level > current_level:
            return skills[0]
    return None


# ── starter quests ───────────────────────────────────────────────────────

STARTER_QUESTS: tuple[Quest, ...] = (
    Quest("q1", "Walk 5000 steps",       40, is_daily=True),
    Quest("q2", "Complete push workout", 70, is_daily=True),
    Quest("q3", "Read 30 minutes",       30, is_daily=True),
)


def default_record(created_at: int | None = None) -> PlayerRecord:
    """A fresh level-1 player seeded with the starter quests."""
    return PlayerRecord(
        quests=STARTER_QUESTS,
        created_at=now_ms() if created_at is None else created_at,
    )
