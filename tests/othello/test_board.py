import pytest
from typing import Iterable

from reversi.othello.board import BLACK, EMPTY, WHITE, Board, Move, opponent


@pytest.mark.parametrize(
    ["move", "expected"],
    [
        pytest.param((0, 0), "a1", id="top-left"),
        pytest.param((0, 7), "h1", id="top-right"),
        pytest.param((7, 0), "a8", id="bottom-left"),
        pytest.param((7, 7), "h8", id="bottom-right"),
        pytest.param((2, 1), "b3", id="b3"),
    ],
)
def test_move_to_field_ok(move: Move, expected: str) -> None:
    assert Board.move_to_field(move) == expected


@pytest.mark.parametrize(
    ["move"],
    [
        pytest.param((-1, 0), id="row-too-small"),
        pytest.param((8, 0), id="row-too-big"),
        pytest.param((0, 8), id="col-too-big"),
    ],
)
def test_move_to_field_error(move: Move) -> None:
    with pytest.raises(ValueError):
        Board.move_to_field(move)


@pytest.mark.parametrize(
    ["moves", "expected"],
    [
        pytest.param([], "", id="0-moves"),
        pytest.param([(0, 0)], "a1", id="1-move"),
        pytest.param([(0, 0), (0, 1)], "a1 b1", id="2-moves"),
    ],
)
def test_moves_to_fields(moves: Iterable[Move], expected: str) -> None:
    assert Board.moves_to_fields(moves) == expected


@pytest.mark.parametrize(
    ["field", "expected"],
    [
        pytest.param("a1", (0, 0), id="field-a1"),
        pytest.param("h1", (0, 7), id="field-h1"),
        pytest.param("a8", (7, 0), id="field-a8"),
        pytest.param("h8", (7, 7), id="field-h8"),
        pytest.param("B3", (2, 1), id="field-B3"),
    ],
)
def test_field_to_move_ok(field: str, expected: Move) -> None:
    assert Board.field_to_move(field) == expected


@pytest.mark.parametrize(
    ["field"],
    [
        pytest.param("", id="empty"),
        pytest.param("a", id="too-short"),
        pytest.param("aaa", id="too-long"),
        pytest.param("a9", id="invalid-row"),
        pytest.param("i8", id="invalid-column"),
    ],
)
def test_field_to_move_error(field: str) -> None:
    with pytest.raises(ValueError):
        Board.field_to_move(field)


def test_fields_to_moves() -> None:
    assert Board.fields_to_moves(["d3", "c4"]) == [(2, 3), (3, 2)]


def test_start_board() -> None:
    board = Board.start()
    assert board.get_square(3, 3) == WHITE
    assert board.get_square(3, 4) == BLACK
    assert board.get_square(4, 3) == BLACK
    assert board.get_square(4, 4) == WHITE
    assert board.count_discs() == 4
    assert board.count_empties() == 60


def test_empty_board() -> None:
    board = Board.empty()
    assert board.count_discs() == 0
    assert board.count_empties() == 64


def test_from_strings() -> None:
    rows = [
        "BW......",
        "........",
        "........",
        "...WB...",
        "...BW...",
        "........",
        "........",
        ".......W",
    ]
    board = Board.from_strings(rows)

    assert board.get_square(0, 0) == BLACK
    assert board.get_square(0, 1) == WHITE
    assert board.get_square(7, 7) == WHITE
    assert board.get_square(7, 6) == EMPTY
    assert board.count(BLACK) == 3
    assert board.count(WHITE) == 4
    assert board.to_strings() == rows


@pytest.mark.parametrize(
    ["rows"],
    [
        pytest.param(["........"] * 7, id="too-few-rows"),
        pytest.param(["......."] + ["........"] * 7, id="short-row"),
        pytest.param(["X......."] + ["........"] * 7, id="bad-square"),
    ],
)
def test_from_strings_error(rows: list[str]) -> None:
    with pytest.raises(ValueError):
        Board.from_strings(rows)


def test_set_squares_returns_new_board() -> None:
    board = Board.start()
    changed = board.set_squares([(0, 0), (7, 7)], BLACK)

    assert changed.get_square(0, 0) == BLACK
    assert changed.get_square(7, 7) == BLACK
    assert board.get_square(0, 0) == EMPTY
    assert board == Board.start()


def test_board_equality() -> None:
    board1 = Board.start()
    board2 = Board.start()
    board3 = Board.empty()

    assert board1 == board2
    assert board1 != board3
    assert hash(board1) == hash(board2)

    with pytest.raises(TypeError):
        board1 == "not a board"


def test_opponent() -> None:
    assert opponent(BLACK) == WHITE
    assert opponent(WHITE) == BLACK


def test_show(capsys: pytest.CaptureFixture[str]) -> None:
    Board.start().show([(2, 3)])
    lines = capsys.readouterr().out.split("\n")

    assert lines[0] == "+-a-b-c-d-e-f-g-h-+"
    assert lines[3] == "3       ·         |"
    assert lines[4] == "4       ● ○       |"
