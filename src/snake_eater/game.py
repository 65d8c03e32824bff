# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Protocol, Tuple
import logging
import random

from .config import CFG, Config
from .food import place_food
from .grid import Cell, Direction, center, step
from .snake import Snake

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class Timer(Protocol):
    def start(self) -> None: ...
    def stop(self) -> None: ...


# ---------- State ----------
@dataclass
class GameState:
    snake: Snake          # head at index 0
    direction: Direction
    food: Cell
    score: int


def new_game_state(rng: random.Random, config: Config = CFG) -> GameState:
    snake = Snake([center()])
    return GameState(
        snake=snake,
        direction=Direction.RIGHT,
        food=place_food(snake, rng, max_attempts=config.max_food_attempts),
        score=0,
    )


def idle_game_state() -> GameState:
    """Board shown before the first start; uses no randomness."""
    return GameState(
        snake=Snake([center()]),
        direction=Direction.RIGHT,
        food=(0, 0),
        score=0,
    )


# ---------- State machine ----------
class SnakeEaterGame:
    """
    The whole game rule set behind a small read/command interface.

    Front ends read state through the ``current_*`` accessors and push
    input through ``submit_direction``, ``submit_start``, ``submit_reset``
    and ``on_tick``. Commands that do not apply to the current phase are
    ignored.
    """

    def __init__(
        self,
        config: Config = CFG,
        rng: Optional[random.Random] = None,
        timer: Optional[Timer] = None,
        high_score: int = 0,
    ):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.timer = timer
        self.phase = GamePhase.NOT_STARTED
        self.state = idle_game_state()
        self._high_score = high_score

        # presentation hooks
        self.on_feed: Optional[Callable[[], None]] = None
        self.on_game_over: Optional[Callable[[int], None]] = None

    # ----- read side -----
    def current_phase(self) -> GamePhase:
        return self.phase

    def current_snake(self) -> Tuple[Cell, ...]:
        return self.state.snake.cells()

    def current_food(self) -> Cell:
        return self.state.food

    def current_direction(self) -> Direction:
        return self.state.direction

    def current_score(self) -> int:
        return self.state.score

    def high_score(self) -> int:
        return self._high_score

    # ----- commands -----
    def submit_start(self) -> None:
        if self.phase is not GamePhase.NOT_STARTED:
            logger.debug("Ignoring start in phase %s", self.phase.value)
            return
        self._begin()

    def submit_reset(self) -> None:
        if self.phase is not GamePhase.ENDED:
            logger.debug("Ignoring reset in phase %s", self.phase.value)
            return
        self._begin()

    def submit_direction(self, direction: Direction) -> None:
        if self.phase is not GamePhase.RUNNING:
            return
        if direction is self.state.direction.opposite:
            logger.debug("Ignoring reversal %s -> %s", self.state.direction.name, direction.name)
            return
        self.state.direction = direction

    def on_tick(self) -> None:
        """Advance one grid step: move, then collision check, then feeding."""
        if self.phase is not GamePhase.RUNNING:
            return

        st = self.state
        new_head = step(st.snake.head(), st.direction)
        grow = new_head == st.food
        st.snake.advance(new_head, grow)

        if new_head in st.snake.body_excluding_head():
            self._end()
            return

        if grow:
            st.score += self.config.feed_points
            st.food = place_food(
                st.snake, self.rng, fallback=st.food,
                max_attempts=self.config.max_food_attempts,
            )
            if self.on_feed is not None:
                self.on_feed()

    def load_state(
        self,
        snake: Iterable[Cell],
        direction: Direction,
        food: Cell,
        score: int = 0,
    ) -> None:
        """
        Replace the board of a RUNNING game. Ignored in other phases.
        Raises ValueError when the food lies on the snake.
        """
        if self.phase is not GamePhase.RUNNING:
            logger.debug("Ignoring load_state in phase %s", self.phase.value)
            return
        body = Snake(snake)
        food = tuple(food)
        if body.occupies(food):
            raise ValueError(f"food {food} lies on the snake")
        self.state = GameState(body, direction, food, score)

    # ----- transitions -----
    def _begin(self) -> None:
        self.state = new_game_state(self.rng, self.config)
        self.phase = GamePhase.RUNNING
        logger.info("Game started (high score %d)", self._high_score)
        if self.timer is not None:
            self.timer.start()

    def _end(self) -> None:
        self.phase = GamePhase.ENDED
        if self.timer is not None:
            self.timer.stop()
        self._high_score = max(self._high_score, self.state.score)
        logger.info("Game over: score=%d high=%d", self.state.score, self._high_score)
        if self.on_game_over is not None:
            self.on_game_over(self.state.score)
