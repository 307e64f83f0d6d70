from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from reversi.ai.minimax import NO_MOVE, minimax
from reversi.othello.board import Board, Move
from reversi.othello.rules import get_valid_moves

logger = logging.getLogger(__name__)

EASY = 0
MEDIUM = 1
HARD = 2


class DifficultyLevel:
    def __init__(self, label: str, depth: int) -> None:
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.label = label
        self.depth = depth

    def __repr__(self) -> str:
        return f"DifficultyLevel({self.label!r}, {self.depth})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DifficultyLevel):
            return NotImplemented
        return (self.label, self.depth) == (other.label, other.depth)


# Easy picks a random move, its depth is never searched.
DIFFICULTY_LEVELS = [
    DifficultyLevel("Easy", 1),
    DifficultyLevel("Medium", 3),
    DifficultyLevel("Hard", 6),
]


def make_difficulty_levels(depths: Sequence[int]) -> list[DifficultyLevel]:
    if len(depths) != len(DIFFICULTY_LEVELS):
        raise ValueError(
            f"Expected {len(DIFFICULTY_LEVELS)} search depths, got {len(depths)}"
        )

    return [
        DifficultyLevel(level.label, depth)
        for level, depth in zip(DIFFICULTY_LEVELS, depths)
    ]


def get_ai_move(
    board: Board,
    player: int,
    difficulty: int,
    rng: Optional[random.Random] = None,
    levels: Optional[Sequence[DifficultyLevel]] = None,
) -> Optional[Move]:
    """
    Picks a move for `player`, or returns None if there is no legal move.
    """
    levels = levels or DIFFICULTY_LEVELS

    if difficulty not in range(len(levels)):
        raise ValueError(f'Unknown difficulty "{difficulty}"')

    valid_moves = get_valid_moves(board, player)
    if not valid_moves:
        return None

    if difficulty == EASY:
        return (rng or random).choice(valid_moves)

    depth = levels[difficulty].depth
    row, col, score = minimax(board, player, depth, True)

    if (row, col) == NO_MOVE:
        return valid_moves[0]

    logger.debug(
        "%s search at depth %d picked %s with score %d",
        levels[difficulty].label,
        depth,
        Board.move_to_field((row, col)),
        score,
    )
    return (row, col)
