"""Shared test helpers for SoloQuest."""

from soloquest.database.db import configure_engine
from soloquest.progression.record import PlayerRecord, Quest


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def make_record(**overrides) -> PlayerRecord:
    """A level-1 record with a fixed timestamp and no quests."""
    defaults = dict(created_at=1_700_000_000_000)
    defaults.update(overrides)
    return PlayerRecord(**defaults)


def daily(quest_id="d1", xp=40, done=False) -> Quest:
    return Quest(quest_id, f"Daily {quest_id}", xp, is_daily=True, is_done=done)


def one_off(quest_id="o1", xp=70, done=False) -> Quest:
    return Quest(quest_id, f"One-off {quest_id}", xp, is_daily=False, is_done=done)


def break_storage() -> None:
    """Swap in a fresh in-memory database with no tables, so every query
    raises ``OperationalError``."""
    configure_engine("sqlite:///:memory:")
