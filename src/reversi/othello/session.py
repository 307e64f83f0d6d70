from __future__ import annotations

import logging
from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board, Move, color_name, opponent
from reversi.othello.rules import (
    count_pieces,
    create_initial_board,
    get_valid_moves,
    make_move,
)

logger = logging.getLogger(__name__)


class GameSession:
    """
    Turn order of a single game. The board only changes through play() and
    restart(), both of which bump `generation`.
    """

    def __init__(self, board: Optional[Board] = None, turn: int = BLACK) -> None:
        self.generation = 0
        self._reset(board or create_initial_board(), turn)

    def _reset(self, board: Board, turn: int) -> None:
        assert turn in [BLACK, WHITE]

        self.board = board
        self.turn = turn
        self.game_over = False
        self.moves: list[tuple[int, Move]] = []
        self.generation += 1

    def restart(self) -> None:
        self._reset(create_initial_board(), BLACK)
        logger.info("Game restarted")

    def get_valid_moves(self) -> list[Move]:
        if self.game_over:
            return []
        return get_valid_moves(self.board, self.turn)

    def is_valid_move(self, move: Move) -> bool:
        return move in self.get_valid_moves()

    def play(self, row: int, col: int) -> bool:
        """
        Plays a move for the player to act. Returns False without changing
        anything when the game is over or the move is not legal.
        """
        if self.game_over or not self.is_valid_move((row, col)):
            return False

        mover = self.turn
        self.board = make_move(self.board, row, col, mover)
        self.moves.append((mover, (row, col)))
        self.generation += 1

        logger.debug(
            "%s played %s", color_name(mover), Board.move_to_field((row, col))
        )

        if get_valid_moves(self.board, opponent(mover)):
            self.turn = opponent(mover)
        elif not get_valid_moves(self.board, mover):
            self.game_over = True
            black, white = self.get_counts()
            logger.info("Game over: black %d, white %d", black, white)
        else:
            logger.debug("%s has to pass", color_name(opponent(mover)))

        return True

    def get_counts(self) -> tuple[int, int]:
        return count_pieces(self.board)

    def get_winner(self) -> Optional[int]:
        black, white = self.get_counts()

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return None

    def get_result_text(self) -> str:
        winner = self.get_winner()
        if winner is None:
            return "Draw!"
        return f"{color_name(winner)} wins!"
