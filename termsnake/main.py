import argparse
import logging
import os
import queue
import random
import sys
from typing import List, Optional

from dotenv import load_dotenv

from termsnake.domain import Direction, GameState, TICK_SECONDS, RIGHT, is_opposite
from termsnake.game import SnakeGame
from termsnake.players import InputRelay, KeyboardPlayer, Player
from termsnake.services.renderer import board_text, render
from termsnake.services.terminal import Terminal

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def resolve_direction(heading: Direction, requested: Direction) -> Direction:
    """Keep going straight instead of reversing into the snake's own neck."""
    if is_opposite(heading, requested):
        return heading
    return requested


class GameLoop:
    """
    Fixed-tick loop: render, collect the player's move for the tick, guard
    against reversals, update the engine. Runs until the game is over or won.
    """

    def __init__(self, terminal, game: SnakeGame, player: Player, tick_seconds: float = TICK_SECONDS):
        self.terminal = terminal
        self.game = game
        self.player = player
        self.tick_seconds = tick_seconds
        self.pending = RIGHT

    def step(self) -> GameState:
        render(self.terminal, self.game)
        requested = self.player.get_move(self.pending, self.tick_seconds)
        self.pending = resolve_direction(self.game.snake.heading, requested)
        return self.game.update(self.pending)

    def run(self) -> GameState:
        state = self.step()
        while not state.finished:
            state = self.step()

        logger.debug("Final board:\n%s", board_text(self.game))
        self.announce(state)
        return state

    def announce(self, state: GameState) -> None:
        if state is GameState.WIN:
            msg = f"You Win: {self.game.score}"
        else:
            msg = f"Game Over: {self.game.score}"
        self.terminal.move_cursor_to(max(0, (self.game.width - len(msg)) // 2), self.game.height // 2)
        self.terminal.write(msg)
        self.terminal.flush()


def play(terminal, rng: Optional[random.Random] = None, tick_seconds: float = TICK_SECONDS) -> SnakeGame:
    """
    Run one game on the given terminal and return the finished engine.

    Grid size comes from the terminal at start-up. The input relay runs on
    its own daemon thread and only talks to the loop through a queue.
    """
    height, width = terminal.size()
    game = SnakeGame(height, width, rng=rng)

    commands: queue.Queue = queue.Queue()
    InputRelay(terminal, commands).start()

    GameLoop(terminal, game, KeyboardPlayer(commands), tick_seconds).run()
    return game


def configure_logging(log_file: Optional[str], level: str) -> None:
    # Anything printed to the terminal would be drawn over the board
    if log_file:
        logging.basicConfig(filename=log_file, level=level.upper(), format=LOG_FORMAT)
    else:
        logging.basicConfig(handlers=[logging.NullHandler()])


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Play Snake in the terminal. Steer with the arrow keys."
    )
    parser.add_argument("--log-file", type=str, default=os.getenv("TERMSNAKE_LOG_FILE"),
                        help="Write logs to this file (default: $TERMSNAKE_LOG_FILE, or no logging)")
    parser.add_argument("--log-level", type=str.upper, default=os.getenv("TERMSNAKE_LOG_LEVEL", "INFO"),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level (default: $TERMSNAKE_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    terminal = Terminal()
    try:
        with terminal.session():
            game = play(terminal)
    except KeyboardInterrupt:
        return 130
    except (OSError, ValueError) as e:
        logger.exception("Game aborted")
        print(f"termsnake: {e}", file=sys.stderr)
        return 1

    logger.info("Game ended: %s with score %d", game.state.value, game.score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
