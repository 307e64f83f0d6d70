import pytest
import random

from reversi.ai.selector import (
    DIFFICULTY_LEVELS,
    EASY,
    HARD,
    MEDIUM,
    DifficultyLevel,
    get_ai_move,
    make_difficulty_levels,
)
from reversi.othello.board import BLACK, WHITE, Board
from reversi.othello.rules import create_initial_board, get_valid_moves

BOARD_SINGLE_MOVE = Board.from_strings(["BW......"] + ["........"] * 7)


def test_difficulty_levels() -> None:
    assert [level.label for level in DIFFICULTY_LEVELS] == ["Easy", "Medium", "Hard"]
    assert DIFFICULTY_LEVELS[MEDIUM].depth == 3
    assert DIFFICULTY_LEVELS[HARD].depth == 6


@pytest.mark.parametrize("difficulty", [EASY, MEDIUM, HARD])
def test_no_moves(difficulty: int) -> None:
    assert get_ai_move(Board.empty(), BLACK, difficulty) is None
    assert get_ai_move(BOARD_SINGLE_MOVE, WHITE, difficulty) is None


@pytest.mark.parametrize("difficulty", [EASY, MEDIUM, HARD])
def test_single_move(difficulty: int) -> None:
    assert get_ai_move(BOARD_SINGLE_MOVE, BLACK, difficulty) == (0, 2)


@pytest.mark.parametrize("seed", range(5))
def test_easy_picks_valid_move(seed: int) -> None:
    board = create_initial_board()
    move = get_ai_move(board, WHITE, EASY, random.Random(seed))
    assert move in get_valid_moves(board, WHITE)


def test_easy_uses_rng() -> None:
    board = create_initial_board()
    moves = get_valid_moves(board, BLACK)

    picked = {
        get_ai_move(board, BLACK, EASY, random.Random(seed)) for seed in range(50)
    }

    assert picked == set(moves)


def test_medium_opening() -> None:
    assert get_ai_move(create_initial_board(), BLACK, MEDIUM) == (2, 3)


@pytest.mark.parametrize("difficulty", [-1, 3])
def test_unknown_difficulty(difficulty: int) -> None:
    with pytest.raises(ValueError, match="Unknown difficulty"):
        get_ai_move(create_initial_board(), BLACK, difficulty)


def test_custom_levels() -> None:
    levels = make_difficulty_levels([1, 1, 2])
    assert levels[HARD] == DifficultyLevel("Hard", 2)
    assert get_ai_move(BOARD_SINGLE_MOVE, BLACK, HARD, levels=levels) == (0, 2)


@pytest.mark.parametrize(
    ["depths", "error_message"],
    [
        pytest.param([1, 3], "Expected 3 search depths, got 2", id="too-few"),
        pytest.param([1, 0, 6], "Search depth must be at least 1, got 0", id="zero"),
    ],
)
def test_make_difficulty_levels_error(depths: list[int], error_message: str) -> None:
    with pytest.raises(ValueError, match=error_message):
        make_difficulty_levels(depths)
