import os
import random
import typer
from typing import Optional

from reversi.ai.selector import get_ai_move
from reversi.arguments import Arguments, GuiArguments
from reversi.config import (
    configure_logging,
    get_ai_delay,
    get_difficulty_levels,
    get_preferences_path,
)
from reversi.othello.board import BLACK, Board, color_name
from reversi.othello.session import GameSession

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.window import Window  # noqa:E402


def gui() -> None:
    def command(
        computer: Optional[str] = typer.Option(None, "-c"),
        difficulty: Optional[int] = typer.Option(None, "-d"),
        theme: Optional[str] = typer.Option(None, "-t"),
    ) -> None:
        configure_logging()

        gui_args = GuiArguments(computer, difficulty, theme)
        args = Arguments(
            gui_args, get_preferences_path(), get_ai_delay(), get_difficulty_levels()
        )

        Window(args).run()

    typer.run(command)


def play_selfplay(
    black_level: int, white_level: int, seed: Optional[int], quiet: bool
) -> GameSession:
    rng = random.Random(seed)
    levels = get_difficulty_levels()
    session = GameSession()

    while not session.game_over:
        difficulty = black_level if session.turn == BLACK else white_level
        move = get_ai_move(session.board, session.turn, difficulty, rng, levels)

        # A session that is not over always has a move for the player to act.
        assert move is not None

        mover = session.turn
        session.play(*move)

        if not quiet:
            print(f"{color_name(mover)} plays {Board.move_to_field(move)}")
            session.board.show(session.get_valid_moves())

    return session


def check_level(level: int) -> int:
    levels = get_difficulty_levels()
    if level not in range(len(levels)):
        raise typer.BadParameter(f"level must be between 0 and {len(levels) - 1}")
    return level


def selfplay() -> None:
    def command(
        black_level: int = typer.Option(1, "-b", callback=check_level),
        white_level: int = typer.Option(1, "-w", callback=check_level),
        seed: Optional[int] = typer.Option(None, "--seed"),
        quiet: bool = typer.Option(False, "--quiet"),
    ) -> None:
        configure_logging()

        session = play_selfplay(black_level, white_level, seed, quiet)
        black, white = session.get_counts()

        print(Board.moves_to_fields(move for _, move in session.moves))
        print(f"Black: {black}  White: {white}")
        print(session.get_result_text())

    typer.run(command)
