"""Progression package."""

from .record import (
    PlayerRecord,
    Quest,
    Stat,
    STAT_KEYS,
    DEFAULT_STATS,
    record_to_dict,
    record_from_dict,
)
from .catalog import (
    SkillDef,
    SKILLS,
    SKILLS_BY_LEVEL,
    STARTER_QUESTS,
    default_record,
    get_skill_def,
    next_skill_unlock,
)
from .engine import (
    POINTS_PER_LEVEL,
    threshold_for,
    experience_progress,
    grant_experience,
    unlock_eligible_skills,
    grant_skill,
    new_skills,
    allocate_stat,
    complete_quest,
    add_quest,
    reset_daily_quests,
)

__all__ = [
    "PlayerRecord",
    "Quest",
    "Stat",
    "STAT_KEYS",
    "DEFAULT_STATS",
    "record_to_dict",
    "record_from_dict",
    "SkillDef",
    "SKILLS",
    "SKILLS_BY_LEVEL",
    "STARTER_QUESTS",
    "default_record",
    "get_skill_def",
    "next_skill_unlock",
    "POINTS_PER_LEVEL",
    "threshold_for",
    "experience_progress",
    "grant_experience",
    "unlock_eligible_skills",
    "grant_skill",
    "new_skills",
    "allocate_stat",
    "complete_quest",
    "add_quest",
    "reset_daily_quests",
]
