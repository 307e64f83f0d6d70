from __future__ import annotations

from pathlib import Path
from typing import Optional

from reversi.ai.computer import DEFAULT_DELAY
from reversi.ai.selector import DIFFICULTY_LEVELS, DifficultyLevel


class GuiArguments:
    def __init__(
        self, computer: Optional[str], difficulty: Optional[int], theme: Optional[str]
    ) -> None:
        self.computer = computer
        self.difficulty = difficulty
        self.theme = theme


class Arguments:
    def __init__(
        self,
        gui: GuiArguments,
        preferences_path: Path,
        ai_delay: float,
        levels: list[DifficultyLevel],
    ) -> None:
        self.gui = gui
        self.preferences_path = preferences_path
        self.ai_delay = ai_delay
        self.levels = levels

    @classmethod
    def empty(cls, preferences_path: Path) -> Arguments:
        return Arguments(
            GuiArguments(None, None, None),
            preferences_path,
            DEFAULT_DELAY,
            DIFFICULTY_LEVELS,
        )
