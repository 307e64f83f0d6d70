from __future__ import annotations

from reversi.othello.board import BLACK, BOARD_SIZE, EMPTY, WHITE, Board, Move, opponent

DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def create_initial_board() -> Board:
    return Board.start()


def count_pieces(board: Board) -> tuple[int, int]:
    """Returns (black, white) disc counts."""
    return board.count(BLACK), board.count(WHITE)


def _get_run(
    board: Board, row: int, col: int, d_row: int, d_col: int, player: int
) -> list[Move]:
    """
    Walks from (row, col) in one direction, collecting opponent discs.
    Returns them only if the run is closed by a disc of `player`.
    """
    opp = opponent(player)
    run: list[Move] = []

    r, c = row + d_row, col + d_col
    while is_on_board(r, c) and board.get_square(r, c) == opp:
        run.append((r, c))
        r, c = r + d_row, c + d_col

    if run and is_on_board(r, c) and board.get_square(r, c) == player:
        return run
    return []


def get_flips(board: Board, row: int, col: int, player: int) -> list[Move]:
    if not is_on_board(row, col) or board.get_square(row, col) != EMPTY:
        return []

    flips: list[Move] = []
    for d_row, d_col in DIRECTIONS:
        flips += _get_run(board, row, col, d_row, d_col, player)
    return flips


def is_valid_move(board: Board, row: int, col: int, player: int) -> bool:
    if not is_on_board(row, col) or board.get_square(row, col) != EMPTY:
        return False

    return any(
        _get_run(board, row, col, d_row, d_col, player) for d_row, d_col in DIRECTIONS
    )


def get_valid_moves(board: Board, player: int) -> list[Move]:
    assert player in [BLACK, WHITE]

    return [
        (row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if is_valid_move(board, row, col, player)
    ]


def has_moves(board: Board, player: int) -> bool:
    return bool(get_valid_moves(board, player))


def make_move(board: Board, row: int, col: int, player: int) -> Board:
    # Illegal moves leave the board as it is, callers filter with get_valid_moves().
    flips = get_flips(board, row, col, player)

    if not flips:
        return board

    return board.set_squares(flips + [(row, col)], player)
