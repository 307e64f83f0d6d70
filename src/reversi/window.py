import logging
import pygame
import time
from pygame.event import Event

from reversi.arguments import Arguments
from reversi.mode.game import GameMode
from reversi.othello.board import BLACK, BOARD_SIZE, WHITE, Move

logger = logging.getLogger(__name__)

BOARD_WIDTH_PX = 600
BOARD_HEIGHT_PX = 600
STATUS_HEIGHT_PX = 100

SQUARE_SIZE = BOARD_WIDTH_PX // BOARD_SIZE
DISC_RADIUS = SQUARE_SIZE // 2 - 5
MOVE_INDICATOR_RADIUS = SQUARE_SIZE // 8

FONT_SIZE = 28
LINE_HEIGHT_PX = 30

FRAME_RATE = 60

Color = tuple[int, int, int]

THEMES: dict[str, dict[str, Color]] = {
    "light": {
        "background": (0xF3, 0xF3, 0xF3),
        "board": (0x19, 0x7D, 0x2B),
        "cell": (0x24, 0x9C, 0x3A),
        "cell_valid": (0x3F, 0xCF, 0x5A),
        "black": (0x22, 0x22, 0x22),
        "white": (0xFF, 0xFF, 0xFF),
        "text": (0x22, 0x22, 0x22),
    },
    "dark": {
        "background": (0x24, 0x24, 0x24),
        "board": (0x19, 0x7D, 0x2B),
        "cell": (0x24, 0x9C, 0x3A),
        "cell_valid": (0x3F, 0xCF, 0x5A),
        "black": (0x22, 0x22, 0x22),
        "white": (0xFF, 0xFF, 0xFF),
        "text": (0xFF, 0xFF, 0xFF),
    },
}


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = GameMode(args)

        self.screen = pygame.display.set_mode(
            (BOARD_WIDTH_PX, BOARD_HEIGHT_PX + STATUS_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()

        pygame.display.set_caption("Reversi")

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    move = self.get_move_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)
                else:
                    self.mode.on_move(move)

            self.mode.on_frame(time.monotonic())
            self.draw()
            self.clock.tick(FRAME_RATE)

        self.mode.computer.cancel()
        pygame.quit()

    def get_board_square_center(self, move: Move) -> tuple[int, int]:
        row, col = move

        x = col * SQUARE_SIZE + SQUARE_SIZE // 2
        y = row * SQUARE_SIZE + SQUARE_SIZE // 2

        return (x, y)

    def draw_square(self, move: Move, color: Color, border: Color) -> None:
        row, col = move
        rect = (col * SQUARE_SIZE, row * SQUARE_SIZE, SQUARE_SIZE, SQUARE_SIZE)
        pygame.draw.rect(self.screen, color, rect)
        pygame.draw.rect(self.screen, border, rect, 1)

    def draw_disc(self, move: Move, color: Color) -> None:
        center = self.get_board_square_center(move)
        pygame.draw.circle(self.screen, color, center, DISC_RADIUS)

    def draw_move_indicator(self, move: Move, color: Color) -> None:
        center = self.get_board_square_center(move)
        pygame.draw.circle(self.screen, color, center, MOVE_INDICATOR_RADIUS)

    def draw_status(self, lines: list[str], color: Color) -> None:
        font = pygame.font.Font(None, FONT_SIZE)

        for offset, line in enumerate(lines):
            text_surface = font.render(line, True, color)
            y = BOARD_HEIGHT_PX + 10 + offset * LINE_HEIGHT_PX
            self.screen.blit(text_surface, (10, y))

    def draw(self) -> None:
        board = self.mode.get_board()

        ui_details = self.mode.get_ui_details()
        valid_moves: set[Move] = ui_details.pop("valid_moves", set())
        turn: int = ui_details.pop("turn", BLACK)
        status_lines: list[str] = ui_details.pop("status_lines", [])
        theme = THEMES[ui_details.pop("theme", "light")]

        if ui_details:
            logger.warning(
                "found unused ui details key(s): %s", ", ".join(sorted(ui_details))
            )

        if turn == WHITE:
            turn_color = theme["white"]
        else:
            turn_color = theme["black"]

        self.screen.fill(theme["background"])

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                move = (row, col)
                square = board.get_square(row, col)

                if move in valid_moves:
                    self.draw_square(move, theme["cell_valid"], theme["board"])
                else:
                    self.draw_square(move, theme["cell"], theme["board"])

                if square == WHITE:
                    self.draw_disc(move, theme["white"])
                elif square == BLACK:
                    self.draw_disc(move, theme["black"])
                elif move in valid_moves:
                    self.draw_move_indicator(move, turn_color)

        self.draw_status(status_lines, theme["text"])

        pygame.display.flip()

    def get_move_from_event(self, event: Event) -> Move:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // SQUARE_SIZE
        row: int = y // SQUARE_SIZE

        if not (row in range(BOARD_SIZE) and col in range(BOARD_SIZE)):
            raise NonMoveEvent

        return (row, col)
