"""Allow running SoloQuest as a module: python -m soloquest."""

import logging

from .controller import PlayerController
from .database.db import init_db
from .progression import threshold_for
from .settings import load_settings


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    init_db()

    controller = PlayerController(settings=load_settings())
    player = controller.load()

    open_quests = sum(1 for q in player.quests if not q.is_done)
    print(
        f"SoloQuest ready! Level {player.level} "
        f"({player.experience}/{threshold_for(player.level)} XP), "
        f"{player.allocatable_points} points, {open_quests} open quests"
    )


if __name__ == "__main__":
    main()
