import logging
import pygame
from pygame.event import Event
from typing import Any

from reversi.ai.computer import ComputerPlayer
from reversi.arguments import Arguments
from reversi.mode.base import BaseMode
from reversi.othello.board import Board, Move, color_name
from reversi.othello.session import GameSession
from reversi.preferences import Preferences, PreferenceStore

logger = logging.getLogger(__name__)

COMPUTER_MODE_LABELS = {
    "none": "None (2 Players)",
    "B": "Computer as Black",
    "W": "Computer as White",
}


class GameMode(BaseMode):
    def __init__(self, args: Arguments) -> None:
        self.store = PreferenceStore(args.preferences_path)
        self.preferences = self._load_preferences(args)
        self.store.save(self.preferences)

        self.session = GameSession()
        self.computer = ComputerPlayer(
            self.preferences.get_computer_color(),
            self.preferences.difficulty,
            delay=args.ai_delay,
            levels=args.levels,
        )

    def _load_preferences(self, args: Arguments) -> Preferences:
        preferences = self.store.load()

        overrides = {
            "computer": args.gui.computer,
            "difficulty": args.gui.difficulty,
            "theme": args.gui.theme,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}

        # Validates the overrides as well.
        return Preferences(**{**preferences.model_dump(), **overrides})

    def on_event(self, event: Event) -> None:
        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_r:
            self.restart()
        elif event.key == pygame.K_t:
            self.set_preferences(self.preferences.toggled_theme())
        elif event.key == pygame.K_d:
            self.set_preferences(self.preferences.next_difficulty())
            self.computer.set_difficulty(self.preferences.difficulty)
        elif event.key == pygame.K_c:
            self.set_preferences(self.preferences.next_computer())
            self.computer.set_color(self.preferences.get_computer_color())

    def set_preferences(self, preferences: Preferences) -> None:
        self.preferences = preferences
        self.store.save(preferences)
        logger.info("Preferences changed: %s", preferences)

    def restart(self) -> None:
        self.computer.cancel()
        self.session.restart()

    def on_move(self, move: Move) -> None:
        if self.computer.is_to_move(self.session):
            # Clicks are ignored while the computer thinks.
            return

        row, col = move
        self.session.play(row, col)

    def on_frame(self, now: float) -> None:
        self.computer.request(self.session, now)
        self.computer.poll(self.session, now)

    def get_board(self) -> Board:
        return self.session.board

    def get_status_lines(self) -> list[str]:
        black, white = self.session.get_counts()

        lines = [
            f"Current Player: {color_name(self.session.turn)}"
            f"    Black: {black}    White: {white}",
        ]

        mode = COMPUTER_MODE_LABELS[self.preferences.computer]
        if self.preferences.computer == "none":
            lines.append(f"Mode: {mode}")
        else:
            difficulty = self.computer.levels[self.preferences.difficulty].label
            lines.append(f"Mode: {mode}    Difficulty: {difficulty}")

        if self.session.game_over:
            lines.append(f"Game Over - {self.session.get_result_text()}")

        return lines

    def get_ui_details(self) -> dict[str, Any]:
        return {
            "valid_moves": set(self.session.get_valid_moves()),
            "turn": self.session.turn,
            "status_lines": self.get_status_lines(),
            "theme": self.preferences.theme,
        }
