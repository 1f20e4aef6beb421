"""SoloQuest — a personal leveling game core."""

__version__ = "0.1.0"
