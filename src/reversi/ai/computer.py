from __future__ import annotations

import logging
import queue
import threading
from typing import Optional, Sequence

from reversi.ai.selector import DIFFICULTY_LEVELS, DifficultyLevel, get_ai_move
from reversi.othello.board import BLACK, WHITE, Board, Move, color_name
from reversi.othello.session import GameSession

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.5

SEARCH_THREAD_NAME = "reversi-search"


class ComputerMove:
    def __init__(self, request_id: int, generation: int, move: Optional[Move]) -> None:
        self.request_id = request_id
        self.generation = generation
        self.move = move


class ComputerPlayer:
    """
    Plays one color of a GameSession. The move is searched in a background
    thread and applied by poll() once the delay has passed. A result is
    dropped if the session generation changed while it was being computed, or
    if the request was cancelled. At most one search thread runs at a time.
    """

    def __init__(
        self,
        color: Optional[int],
        difficulty: int,
        delay: float = DEFAULT_DELAY,
        levels: Optional[Sequence[DifficultyLevel]] = None,
    ) -> None:
        assert color in [BLACK, WHITE, None]

        self.color = color
        self.difficulty = difficulty
        self.delay = delay
        self.levels = list(levels or DIFFICULTY_LEVELS)

        self.recv_queue: queue.Queue[ComputerMove] = queue.Queue()
        self._request_count = 0
        self._pending_request: Optional[int] = None
        self._pending_generation: Optional[int] = None
        self._due_time = 0.0
        self._ready: Optional[ComputerMove] = None
        self._thread: Optional[threading.Thread] = None

    def set_color(self, color: Optional[int]) -> None:
        assert color in [BLACK, WHITE, None]
        self.color = color
        self.cancel()

    def set_difficulty(self, difficulty: int) -> None:
        if difficulty not in range(len(self.levels)):
            raise ValueError(f'Unknown difficulty "{difficulty}"')
        self.difficulty = difficulty
        self.cancel()

    def is_to_move(self, session: GameSession) -> bool:
        return self.color is not None and not session.game_over and (
            session.turn == self.color
        )

    def is_pending(self) -> bool:
        return self._pending_request is not None

    def is_searching(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def cancel(self) -> None:
        if self._pending_request is not None:
            logger.debug("Cancelled computer move request %d", self._pending_request)
        self._pending_request = None
        self._pending_generation = None
        self._ready = None

    def request(self, session: GameSession, now: float) -> None:
        if not self.is_to_move(session):
            return

        if self._pending_generation == session.generation:
            return

        if self.is_searching():
            # A cancelled search is still running, request again once it ended.
            return

        self._request_count += 1
        request_id = self._request_count

        self._pending_request = request_id
        self._pending_generation = session.generation
        self._due_time = now + self.delay
        self._ready = None

        board = session.board
        color = session.turn
        generation = session.generation
        difficulty = self.difficulty

        logger.debug(
            "Requesting move %d for %s at generation %d",
            request_id,
            color_name(color),
            generation,
        )

        def search() -> None:
            move = self._search(board, color, difficulty)
            self.recv_queue.put(ComputerMove(request_id, generation, move))

        self._thread = threading.Thread(
            target=search, name=SEARCH_THREAD_NAME, daemon=True
        )
        self._thread.start()

    def _search(self, board: Board, color: int, difficulty: int) -> Optional[Move]:
        return get_ai_move(board, color, difficulty, levels=self.levels)

    def wait(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _process_recv_messages(self) -> None:
        while True:
            try:
                message = self.recv_queue.get_nowait()
            except queue.Empty:
                break

            if message.request_id != self._pending_request:
                logger.debug("Dropping stale computer move %d", message.request_id)
                continue

            self._ready = message

    def poll(self, session: GameSession, now: float) -> bool:
        """Applies the computer move if it is ready and due. Returns True if played."""
        self._process_recv_messages()

        ready = self._ready
        if ready is None:
            return False

        if ready.generation != session.generation or not self.is_to_move(session):
            logger.debug("Board changed, dropping computer move %d", ready.request_id)
            self.cancel()
            return False

        if now < self._due_time:
            return False

        self.cancel()

        if ready.move is None:
            return False

        row, col = ready.move
        played = session.play(row, col)

        if played:
            logger.info(
                "Computer (%s) played %s",
                color_name(session.moves[-1][0]),
                Board.move_to_field(ready.move),
            )
        return played
