from __future__ import annotations

import logging
from pathlib import Path
from pydantic import BaseModel, ValidationError, field_validator
from typing import Optional

from reversi.othello.board import BLACK, WHITE

logger = logging.getLogger(__name__)

THEMES = ["light", "dark"]
COMPUTER_MODES = ["none", "B", "W"]
DIFFICULTIES = [0, 1, 2]


class Preferences(BaseModel):
    theme: str = "light"
    difficulty: int = 1
    computer: str = "none"

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        if v not in THEMES:
            raise ValueError(f'Unknown theme "{v}"')
        return v

    @field_validator("difficulty")
    @classmethod
    def validate_difficulty(cls, v: int) -> int:
        if v not in DIFFICULTIES:
            raise ValueError(f'Unknown difficulty "{v}"')
        return v

    @field_validator("computer")
    @classmethod
    def validate_computer(cls, v: str) -> str:
        if v not in COMPUTER_MODES:
            raise ValueError(f'Unknown computer mode "{v}"')
        return v

    def get_computer_color(self) -> Optional[int]:
        return {"none": None, "B": BLACK, "W": WHITE}[self.computer]

    def toggled_theme(self) -> Preferences:
        theme = THEMES[(THEMES.index(self.theme) + 1) % len(THEMES)]
        return self.model_copy(update={"theme": theme})

    def next_difficulty(self) -> Preferences:
        difficulty = (self.difficulty + 1) % len(DIFFICULTIES)
        return self.model_copy(update={"difficulty": difficulty})

    def next_computer(self) -> Preferences:
        index = (COMPUTER_MODES.index(self.computer) + 1) % len(COMPUTER_MODES)
        return self.model_copy(update={"computer": COMPUTER_MODES[index]})


class PreferenceStore:
    """Keeps Preferences in a JSON file. Broken files fall back to defaults."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Preferences:
        try:
            raw = self.path.read_text()
        except FileNotFoundError:
            return Preferences()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read preferences from %s: %s", self.path, e)
            return Preferences()

        try:
            return Preferences.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Ignoring invalid preferences in %s: %s", self.path, e)
            return Preferences()

    def save(self, preferences: Preferences) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(preferences.model_dump_json(indent=2))
        except OSError as e:
            logger.warning("Could not save preferences to %s: %s", self.path, e)
            return
        logger.debug("Saved preferences to %s", self.path)
