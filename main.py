import argparse
import logging
import os
import random
import sys
import time
from typing import Callable, List, Optional, Tuple

from dotenv import load_dotenv

from domain.constants import Cell, Outcome, decode_key
from domain.grid import Grid
from domain.snake import Snake
from players import KeyboardPlayer, Player
from services import Renderer, TerminalRenderer

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 10
DEFAULT_ROWS = 10
DEFAULT_TICK_SECONDS = 0.02

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


class SnakeGame:
    """
    Runs one game from setup to its single Outcome.

    The game owns the Grid and the Snake. Input comes from a Player that
    reports held keys, output goes to a renderer with a ``render(grid)``
    method. A new command is only issued when the held-key list changes
    between two polls, so holding a key moves the snake once.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        player: Player,
        renderer: Renderer,
        rng: Optional[random.Random] = None,
        tick_seconds: float = 0.0,
        food_under_body: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.player = player
        self.renderer = renderer
        self.rng = rng or random.Random()
        self.tick_seconds = tick_seconds
        self.food_under_body = food_under_body
        self.sleep = sleep

        self.grid = Grid(columns, rows)
        self.snake = Snake.spawn(*self.grid.size(), rng=self.rng)

        self.prev_keys: List[str] = []
        self.tick_number = 0
        self.moves = 0
        self.food_eaten = 0
        self.outcome: Optional[Outcome] = None
        self.end_reason: Optional[str] = None

        self.grid.mark(self.snake.head, Cell.OCCUPIED)
        self._place_food()
        self.grid.sync(self.snake.positions)
        logger.info(f"New {columns}x{rows} game, snake at {self.snake.head}, food at {self.grid.food}")

    def set_snake(self, positions: List[Tuple[int, int]]):
        """
        Replace the snake with one occupying ``positions`` (head first).
        """
        for (x, y) in positions:
            if not self.grid.is_interior((x, y)):
                raise ValueError(f"Snake segment out of bounds at {(x, y)}.")
        if len(set(positions)) != len(positions):
            raise ValueError("Snake segments must not overlap.")

        for position in self.snake.positions:
            self.grid.mark(position, Cell.EMPTY)
        self.snake = Snake(positions, *self.grid.size())
        self.grid.sync(self.snake.positions)

    def set_food(self, position: Tuple[int, int]):
        """Move the food to ``position``, which must be an empty interior cell."""
        if not self.grid.is_interior(position):
            raise ValueError(f"Food out of bounds at {position}.")
        if self.grid.cell_at(position) is Cell.OCCUPIED:
            raise ValueError(f"Food cannot be set on the snake at {position}.")
        current = self.grid.food
        if current is not None:
            self.grid.mark(current, Cell.EMPTY)
        self.grid.mark(position, Cell.FOOD)

    def _place_food(self):
        avoid = None if self.food_under_body else self.snake.positions
        return self.grid.place_food(self.rng, avoid=avoid)

    def run_tick(self) -> Optional[Outcome]:
        """
        Execute one poll -> move -> render cycle.

        Returns:
            The Outcome if this tick ended the game, otherwise None.
        """
        if self.outcome is not None:
            logger.warning("Game is already over. No more ticks.")
            return self.outcome

        self.tick_number += 1
        held_keys = self.player.get_keys()

        # Only a change in the held keys issues a new command
        if not held_keys or held_keys == self.prev_keys:
            self.prev_keys = held_keys
            return None

        # Ignored keys and rejected moves leave prev_keys as is
        direction = decode_key(held_keys[0])
        if direction is None:
            logger.debug(f"Ignoring key {held_keys[0]!r}")
            return None

        prev = self.snake.tail
        if not self.snake.move(direction):
            logger.debug(f"Rejected {direction.value} from {self.snake.head}")
            return None

        self.snake.commit()
        self.prev_keys = held_keys
        self.moves += 1
        head = self.snake.head

        if self.grid.cell_at(head) is Cell.FOOD:
            self.snake.grow(prev)
            self.food_eaten += 1
            self._place_food()
        else:
            self.grid.mark(prev, Cell.EMPTY)

        # Checked before sync so the head is not mistaken for its own body
        collided = not self.grid.is_move_legal(head)
        self.grid.sync(self.snake.positions)
        logger.debug(f"Moved {direction.value} to {head}, length {len(self.snake)}")

        if collided:
            self.end_game(Outcome.LOSE, f"Ran into itself at {head}.")
        elif not self.grid.has_legal_move(head):
            self._end_when_stuck()

        self.renderer.render(self.grid)
        return self.outcome

    def _end_when_stuck(self):
        if self.grid.is_full():
            self.end_game(Outcome.WIN, "Grid is full.")
        else:
            self.end_game(Outcome.LOSE, f"No legal move from {self.snake.head}.")

    def end_game(self, outcome: Outcome, reason: str):
        self.outcome = outcome
        self.end_reason = reason
        logger.info(
            f"Game over after {self.tick_number} ticks: {outcome.value} ({reason}) "
            f"length={len(self.snake)} food={self.food_eaten}"
        )

    def play(self) -> Outcome:
        """
        Loop until the game ends and return its Outcome.

        Raises:
            RuntimeError: if this game has already produced its Outcome.
        """
        if self.outcome is not None:
            raise RuntimeError("Game is already over.")

        self.renderer.render(self.grid)
        if not self.grid.has_legal_move(self.snake.head):
            self._end_when_stuck()

        while self.outcome is None:
            self.run_tick()
            if self.outcome is None and self.tick_seconds > 0:
                self.sleep(self.tick_seconds)
        return self.outcome


def run(
    columns: int,
    rows: int,
    player: Optional[Player] = None,
    renderer: Optional[Renderer] = None,
    rng: Optional[random.Random] = None,
    tick_seconds: float = DEFAULT_TICK_SECONDS,
    food_under_body: bool = True,
) -> Outcome:
    """
    Play one game on a ``columns x rows`` playfield.

    Uses the keyboard and the terminal unless other collaborators are given.
    """
    game = SnakeGame(
        columns,
        rows,
        player=player or KeyboardPlayer(),
        renderer=renderer or TerminalRenderer(),
        rng=rng,
        tick_seconds=tick_seconds,
        food_under_body=food_under_body,
    )
    return game.play()


# -------------------------------
# Configuration helpers
# -------------------------------
def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Steer with W/A/S/D or the arrow keys."
    )
    parser.add_argument("--columns", type=int, default=_env_int("SNAKE_COLUMNS", DEFAULT_COLUMNS),
                        help="Playable width of the grid")
    parser.add_argument("--rows", type=int, default=_env_int("SNAKE_ROWS", DEFAULT_ROWS),
                        help="Playable height of the grid")
    parser.add_argument("--tick", type=float, default=_env_float("SNAKE_TICK_SECONDS", DEFAULT_TICK_SECONDS),
                        help="Seconds to wait between input polls")
    parser.add_argument("--seed", type=int, default=_env_int("SNAKE_SEED", None),
                        help="Seed for spawn and food placement")
    parser.add_argument("--no-food-under-body", dest="food_under_body", action="store_false",
                        default=_env_bool("SNAKE_FOOD_UNDER_BODY", True),
                        help="Only place food on cells the snake does not occupy")
    parser.add_argument("--log-level", type=str, default=os.getenv("SNAKE_LOG_LEVEL", "WARNING"),
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.columns < 1 or args.rows < 1:
        parser.error("--columns and --rows must be at least 1")

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        outcome = run(
            args.columns,
            args.rows,
            rng=rng,
            tick_seconds=args.tick,
            food_under_body=args.food_under_body,
        )
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 130

    if outcome is Outcome.WIN:
        print("You win! The grid is full.")
        return 0
    print("Game over.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
