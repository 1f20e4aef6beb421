#!/usr/bin/env python3
"""SoloQuest — entry point.

Run with:
    python main.py
    python -m soloquest
"""

from soloquest.__main__ import main


if __name__ == "__main__":
    main()
