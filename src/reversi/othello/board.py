from __future__ import annotations

from typing import Iterable, Optional

BLACK = -1
WHITE = 1
EMPTY = 0

BOARD_SIZE = 8

Move = tuple[int, int]

SQUARE_CHARS = {BLACK: "B", WHITE: "W", EMPTY: "."}


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def color_name(color: int) -> str:
    assert color in [BLACK, WHITE]
    return "Black" if color == BLACK else "White"


class Board:
    """
    Immutable 8x8 grid of squares, addressed by (row, col).
    Methods that change the board return a new Board.
    """

    def __init__(self, squares: Iterable[Iterable[int]]) -> None:
        rows = tuple(tuple(row) for row in squares)

        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board must have {BOARD_SIZE}x{BOARD_SIZE} squares")

        for row in rows:
            for square in row:
                if square not in [BLACK, WHITE, EMPTY]:
                    raise ValueError(f'Invalid square "{square}"')

        self.squares = rows

    @classmethod
    def empty(cls) -> Board:
        return Board([[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def start(cls) -> Board:
        squares = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        squares[3][3] = WHITE
        squares[3][4] = BLACK
        squares[4][3] = BLACK
        squares[4][4] = WHITE
        return Board(squares)

    @classmethod
    def from_strings(cls, rows: list[str]) -> Board:
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

        squares: list[list[int]] = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise ValueError(f'Invalid row "{row}"')

            squares.append([cls._parse_square(char) for char in row])

        return Board(squares)

    @staticmethod
    def _parse_square(char: str) -> int:
        char = char.upper()
        if char == "B":
            return BLACK
        if char == "W":
            return WHITE
        if char in ".-":
            return EMPTY
        raise ValueError(f'Invalid square "{char}"')

    def to_strings(self) -> list[str]:
        return ["".join(SQUARE_CHARS[square] for square in row) for row in self.squares]

    def __repr__(self) -> str:
        return f"Board({'/'.join(self.to_strings())})"

    def __hash__(self) -> int:
        return hash(self.squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares

    def get_square(self, row: int, col: int) -> int:
        return self.squares[row][col]

    def set_squares(self, moves: Iterable[Move], color: int) -> Board:
        assert color in [BLACK, WHITE, EMPTY]

        squares = [list(row) for row in self.squares]
        for row, col in moves:
            squares[row][col] = color
        return Board(squares)

    def count(self, color: int) -> int:
        assert color in [WHITE, BLACK]
        return sum(row.count(color) for row in self.squares)

    def count_discs(self) -> int:
        return self.count(BLACK) + self.count(WHITE)

    def count_empties(self) -> int:
        return BOARD_SIZE * BOARD_SIZE - self.count_discs()

    def show(self, valid_moves: Optional[Iterable[Move]] = None) -> None:
        highlighted = set(valid_moves or [])

        print("+-a-b-c-d-e-f-g-h-+")
        for row in range(BOARD_SIZE):
            print("{} ".format(row + 1), end="")

            for col in range(BOARD_SIZE):
                square = self.get_square(row, col)

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif (row, col) in highlighted:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def move_to_field(cls, move: Move) -> str:
        row, col = move
        if row not in range(BOARD_SIZE) or col not in range(BOARD_SIZE):
            raise ValueError(f"Move {move} is not on the board")
        return "abcdefgh"[col] + "12345678"[row]

    @classmethod
    def moves_to_fields(cls, moves: Iterable[Move]) -> str:
        return " ".join(cls.move_to_field(move) for move in moves)

    @classmethod
    def field_to_move(cls, field: str) -> Move:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return (row, col)

    @classmethod
    def fields_to_moves(cls, fields: list[str]) -> list[Move]:
        return [cls.field_to_move(field) for field in fields]
