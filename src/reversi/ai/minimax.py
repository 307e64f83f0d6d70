from __future__ import annotations

from typing import Optional

from reversi.othello.board import Board, Move, opponent
from reversi.othello.rules import get_valid_moves, make_move

NO_MOVE: Move = (-1, -1)


def evaluate(board: Board, player: int) -> int:
    """Material evaluation: disc difference from the point of view of `player`."""
    return board.count(player) - board.count(opponent(player))


def minimax(
    board: Board,
    player: int,
    depth: int,
    maximizing: bool,
    root_player: Optional[int] = None,
) -> tuple[int, int, int]:
    """
    Fixed-depth minimax without pruning. `player` is the side to move at this
    node. Leaves are always scored for `root_player`, the player of the
    top-level call, so only `maximizing` alternates between plies.

    Returns (row, col, score). Leaves and nodes without legal moves return
    NO_MOVE as move.
    """
    if root_player is None:
        root_player = player

    valid_moves = get_valid_moves(board, player)

    if depth == 0 or not valid_moves:
        return NO_MOVE[0], NO_MOVE[1], evaluate(board, root_player)

    best_move: Optional[Move] = None
    best_score = 0

    for row, col in valid_moves:
        child = make_move(board, row, col, player)
        _, _, score = minimax(
            child, opponent(player), depth - 1, not maximizing, root_player
        )

        if best_move is None:
            improved = True
        elif maximizing:
            improved = score > best_score
        else:
            improved = score < best_score

        if improved:
            best_move = (row, col)
            best_score = score

    assert best_move is not None
    return best_move[0], best_move[1], best_score
