import pytest

from reversi.ai.minimax import NO_MOVE, evaluate, minimax
from reversi.othello.board import BLACK, WHITE, Board
from reversi.othello.rules import create_initial_board, make_move

BOARD_SINGLE_MOVE = Board.from_strings(["BW......"] + ["........"] * 7)


@pytest.mark.parametrize(
    ["board", "player", "expected"],
    [
        pytest.param(create_initial_board(), BLACK, 0, id="start"),
        pytest.param(Board.empty(), WHITE, 0, id="empty"),
        pytest.param(
            make_move(create_initial_board(), 2, 3, BLACK), BLACK, 3, id="black-ahead"
        ),
        pytest.param(
            make_move(create_initial_board(), 2, 3, BLACK), WHITE, -3, id="white-behind"
        ),
    ],
)
def test_evaluate(board: Board, player: int, expected: int) -> None:
    assert evaluate(board, player) == expected


def test_minimax_depth_zero() -> None:
    assert minimax(create_initial_board(), BLACK, 0, True) == (-1, -1, 0)


def test_minimax_no_moves() -> None:
    row, col, score = minimax(Board.empty(), BLACK, 3, True)
    assert (row, col) == NO_MOVE
    assert score == 0


@pytest.mark.parametrize("depth", [1, 2, 3, 6])
def test_minimax_single_move(depth: int) -> None:
    row, col, score = minimax(BOARD_SINGLE_MOVE, BLACK, depth, True)

    assert (row, col) == (0, 2)
    assert score == 3


def test_minimax_scores_leaves_for_root_player() -> None:
    # At depth 1 the leaves have white to move, but are scored for black.
    assert minimax(create_initial_board(), BLACK, 1, True) == (2, 3, 3)


def test_minimax_minimizing_keeps_first_move() -> None:
    assert minimax(create_initial_board(), BLACK, 1, False) == (2, 3, 3)


def test_minimax_depth_two() -> None:
    # Every white reply flips one disc back.
    assert minimax(create_initial_board(), BLACK, 2, True) == (2, 3, 0)


def test_minimax_prefers_bigger_capture() -> None:
    board = Board.from_strings(
        [
            "BW......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "BWW.....",
        ]
    )
    # c1 comes first in scan order, but d8 flips two discs.
    assert minimax(board, BLACK, 1, True) == (7, 3, 4)


def test_minimax_does_not_mutate_board() -> None:
    board = create_initial_board()
    minimax(board, BLACK, 3, True)
    assert board == create_initial_board()
