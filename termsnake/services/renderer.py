"""
Draws a SnakeGame onto the terminal.
"""

from termsnake.game import SnakeGame

BORDER_BLOCK = "█"
APPLE_GLYPH = "O"


def render(terminal, game: SnakeGame) -> None:
    """
    Redraw the whole frame:
      - full-block border on every edge
      - score over the bottom border
      - apple
      - snake segments, each showing the heading it was placed with

    The frame is flushed once at the end so it appears in one piece.
    """
    height, width = game.height, game.width
    terminal.clear_screen()

    top_border = BORDER_BLOCK * width
    terminal.move_cursor_to(0, 0)
    terminal.write(top_border)
    terminal.move_cursor_to(0, height - 1)
    terminal.write(top_border)

    terminal.move_cursor_to(0, height - 1)
    terminal.write(terminal.style("black_on_white", f"Score: {game.score}"))

    for row in range(1, height - 1):
        terminal.move_cursor_to(0, row)
        terminal.write(BORDER_BLOCK)
        terminal.move_cursor_to(width - 1, row)
        terminal.write(BORDER_BLOCK)

    terminal.move_cursor_to(game.apple.col, game.apple.row)
    terminal.write(terminal.style("red_on_black", APPLE_GLYPH))

    for segment in game.snake.body:
        terminal.move_cursor_to(segment.pos.col, segment.pos.row)
        terminal.write(terminal.style("green_on_white", str(segment)))

    terminal.flush()


def board_text(game: SnakeGame) -> str:
    """
    Plain-text picture of the board, one line per row. Handy in logs and
    test failures.
    """
    board = [[' ' for _ in range(game.width)] for _ in range(game.height)]
    for row in range(game.height):
        for col in range(game.width):
            if row in (0, game.height - 1) or col in (0, game.width - 1):
                board[row][col] = '#'
    board[game.apple.row][game.apple.col] = APPLE_GLYPH
    for segment in game.snake.body:
        board[segment.pos.row][segment.pos.col] = str(segment)
    return "\n".join("".join(line) for line in board)
