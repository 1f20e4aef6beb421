"""Leveling and progression rules for SoloQuest.

Every function here is pure: it takes a :class:`PlayerRecord` and returns
a new one (or the same one, when nothing changes).  Nothing touches
storage; callers save the result themselves.

Leveling Curve
--------------
Going from *level* to *level + 1* costs ``floor(100 * level ** 1.2)`` XP:

    Lv 1 → 2   100
    Lv 2 → 3   229
    Lv 3 → 4   373
    Lv 4 → 5   527

Experience is kept *within* the current level.  A large grant can cross
several levels at once; each level gained awards
:data:`POINTS_PER_LEVEL` allocation points.

Quests
------
Completing a quest marks it done, grants its reward and unlocks any skills
the new level qualifies for, all in one returned value.  Completing an
unknown or already-done quest returns the record unchanged.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import replace
from typing import Callable, Iterable

from ..errors import (
    InsufficientPoints,
    InvalidAmount,
    InvalidQuestTitle,
    InvalidSkill,
    InvalidStat,
)
from .catalog import SKILLS, SkillDef
from .record import PlayerRecord, Quest, Stat


# ── leveling constants ───────────────────────────────────────────────────

BASE_XP = 100
LEVEL_EXPONENT = 1.2
POINTS_PER_LEVEL = 3


# ── level math ───────────────────────────────────────────────────────────


def threshold_for(level: int) -> int:
    """XP needed to go from *level* to *level + 1*."""
    return math.floor(BASE_XP * level ** LEVEL_EXPONENT)


def experience_progress(record: PlayerRecord) -> float:
    """0.0 → 1.0 progress through the current level."""
    return min(1.0, record.experience / threshold_for(record.level))


def _check_amount(amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
        raise InvalidAmount(f"Experience amount must be >= 0, got {amount!r}")


def grant_experience(record: PlayerRecord, amount: int) -> PlayerRecord:
    """Add *amount* XP, rolling over into as many levels as it covers.

    A zero grant still normalises a record whose experience has reached
    its threshold.  Raises :class:`InvalidAmount` for negative amounts.
    """
    _check_amount(amount)
    level = record.level
    xp = record.experience + amount
    points = record.allocatable_points

    while xp >= threshold_for(level):
        xp -= threshold_for(level)
        level += 1
        points += POINTS_PER_LEVEL

    return replace(
        record, level=level, experience=xp, allocatable_points=points,
    )


# ── skills ───────────────────────────────────────────────────────────────


def unlock_eligible_skills(
    record: PlayerRecord, skills: Iterable[SkillDef] = SKILLS,
) -> PlayerRecord:
    """Add every skill the record's level qualifies for.

    New ids are appended by ascending required level, then catalog order.
    """
    owned = set(record.skills)
    eligible = sorted(
        (s for s in skills if s.required_level <= record.level),
        key=lambda s: s.required_level,
    )
    added = []
    for skill in eligible:
        if skill.key not in owned:
            owned.add(skill.key)
            added.append(skill.key)
    if not added:
        return record
    return replace(record, skills=record.skills + tuple(added))


def grant_skill(record: PlayerRecord, skill_id: str) -> PlayerRecord:
    """Explicitly grant *skill_id*, regardless of level."""
    if not isinstance(skill_id, str) or not skill_id.strip():
        raise InvalidSkill()
    skill_id = skill_id.strip()
    if skill_id in record.skills:
        return record
    return replace(record, skills=record.skills + (skill_id,))


def new_skills(
    before: PlayerRecord, after: PlayerRecord,
    skills: Iterable[SkillDef] = SKILLS,
) -> list[SkillDef]:
    """Catalog skills present in *after* but not in *before*."""
    gained = set(after.skills) - set(before.skills)
    by_key = {s.key: s for s in skills}
    return [by_key[k] for k in after.skills if k in gained and k in by_key]


# ── stats ────────────────────────────────────────────────────────────────


def _resolve_stat(stat: Stat | str) -> Stat:
    if isinstance(stat, Stat):
        return stat
    try:
        return Stat(stat)
    except ValueError:
        raise InvalidStat(f"Unknown stat {stat!r}") from None


def allocate_stat(record: PlayerRecord, stat: Stat | str) -> PlayerRecord:
    """Spend one allocation point on *stat*."""
    key = _resolve_stat(stat).value
    if record.allocatable_points <= 0:
        raise InsufficientPoints()
    stats = dict(record.stats)
    stats[key] += 1
    return replace(
        record, stats=stats,
        allocatable_points=record.allocatable_points - 1,
    )


# ── quests ───────────────────────────────────────────────────────────────


def complete_quest(record: PlayerRecord, quest_id: str) -> PlayerRecord:
    """Mark *quest_id* done, grant its reward and unlock skills.

    Unknown ids and already-completed quests leave the record unchanged.
    """
    quest = record.find_quest(quest_id)
    if quest is None or quest.is_done:
        return record

    quests = tuple(
        replace(q, is_done=True) if q.id == quest_id else q
        for q in record.quests
    )
    updated = replace(record, quests=quests)
    updated = grant_experience(updated, quest.experience_reward)
    return unlock_eligible_skills(updated)


def _new_quest_id() -> str:
    return f"q{uuid.uuid4().hex[:12]}"


def add_quest(
    record: PlayerRecord,
    title: str,
    experience_reward: int,
    *,
    id_factory: Callable[[], str] | None = None,
) -> PlayerRecord:
    """Append a one-off (non-daily) quest with a fresh id."""
    if not isinstance(title, str) or not title.strip():
        raise InvalidQuestTitle()
    _check_amount(experience_reward)

    make_id = id_factory or _new_quest_id
    existing = {q.id for q in record.quests}
    quest_id = make_id()
    while quest_id in existing:
        quest_id = make_id()

    quest = Quest(
        id=quest_id,
        title=title.strip(),
        experience_reward=experience_reward,
    )
    return replace(record, quests=record.quests + (quest,))


def reset_daily_quests(record: PlayerRecord) -> PlayerRecord:
    """Clear completion on every daily quest."""
    if not any(q.is_daily and q.is_done for q in record.quests):
        return record
    quests = tuple(
        replace(q, is_done=False) if q.is_daily else q
        for q in record.quests
    )
    return replace(record, quests=quests)
