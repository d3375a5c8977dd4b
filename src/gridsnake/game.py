# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple
import logging
import random
import threading

from .config import CFG, Config, KEY_ENTER, KEY_ESCAPE, KEY_KP_ENTER
from .direction import Direction, check_parallel, from_key
from .errors import EmptySnakeError, GridFullError
from .food import generate
from .geometry import Position, in_bounds, is_corner, is_edge
from .snake import Snake

logger = logging.getLogger(__name__)

RESTART_KEYS = (KEY_ENTER, KEY_KP_ENTER)


# ---------- Helpers ----------
def food_score(position: Position, speed: int, grid_size: int) -> int:
    """Points for eating at `position` while ticking every `speed` ms."""
    if is_corner(position, grid_size):
        return 1000 // speed * 4
    if is_edge(position, grid_size):
        return 1000 // speed * 2
    return 1000 // speed


class Command(Enum):
    NONE = "none"
    TURN = "turn"
    RESTART = "restart"
    QUIT = "quit"


# ---------- State ----------
@dataclass
class GameState:
    speed: int                   # current tick interval (ms)
    score: int = 0
    food_eaten: int = 0
    game_over: bool = False
    grid_full: bool = False      # game ended because food had nowhere to go
    move_pending: bool = False   # a turn was accepted since the last tick
    info_changed: bool = True    # score/speed panel needs a redraw


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer."""
    body: Tuple[Position, ...]
    direction: Direction
    food: Optional[Position]
    score: int
    food_eaten: int
    speed: int
    level: int
    game_over: bool
    grid_full: bool
    info_changed: bool
    grid_size: int

    @property
    def head(self) -> Optional[Position]:
        return self.body[0] if self.body else None


class Game:
    """
    Owns the snake, the food and the scalar game state.

    Two threads touch a Game: the clock calls tick(), the input handler calls
    handle_key() (or the narrower propose_direction / request_restart /
    request_quit). The heading and its move_pending flag sit behind their own
    lock so a key press never waits for a whole tick.
    """

    def __init__(self, cfg: Config = CFG, rng: Optional[random.Random] = None):
        self.cfg = cfg.validate()
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.snake = Snake()
        self.food: Optional[Position] = None
        self.state = GameState(speed=cfg.start_speed)
        self.quit_requested = threading.Event()
        self._direction_lock = threading.Lock()
        self._state_lock = threading.RLock()
        self.reset()

    # ---------- Lifecycle ----------
    def reset(self) -> None:
        with self._state_lock:
            with self._direction_lock:
                self.snake.reset()
                self.state = GameState(speed=self.cfg.start_speed)
            self._place_food()
        logger.info("New game: snake=%s food=%s", self.snake.parts, self.food)

    def request_restart(self) -> bool:
        """Start over, but only once the current game has ended."""
        with self._state_lock:
            if not self.state.game_over:
                return False
            self.reset()
            return True

    def request_quit(self) -> None:
        logger.info("Quit requested (score=%d)", self.state.score)
        self.quit_requested.set()

    @property
    def speed(self) -> int:
        return self.state.speed

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    # ---------- Input ----------
    def propose_direction(self, candidate: Direction) -> bool:
        """
        Turn the snake unless that would reverse it, the game is over, or a
        turn was already taken since the last tick. Returns True if applied.
        """
        with self._direction_lock:
            if self.state.game_over or self.state.move_pending:
                return False
            current = self.snake.direction
            if candidate is current or check_parallel(current, candidate):
                return False
            self.snake.direction = candidate
            self.state.move_pending = True
        logger.debug("Turn %s -> %s", current.name, candidate.name)
        return True

    def handle_key(self, code: int, key_up: bool = True) -> Command:
        """Translate a raw key scancode into a command and apply it."""
        if not key_up:
            return Command.NONE
        if code == KEY_ESCAPE:
            self.request_quit()
            return Command.QUIT
        if code in RESTART_KEYS:
            return Command.RESTART if self.request_restart() else Command.NONE
        direction = from_key(code)
        if direction is not None and self.propose_direction(direction):
            return Command.TURN
        return Command.NONE

    # ---------- Update ----------
    def tick(self) -> bool:
        """
        Advance the game by one step.
        Returns True if the snake moved or grew, False if the game is over.
        """
        with self._state_lock:
            if self.state.game_over:
                return False

            with self._direction_lock:
                direction = self.snake.direction
                self.state.move_pending = False

            head = self.snake.head
            if head is None:
                raise EmptySnakeError("tick on a snake with no body")
            new_head = direction.exec(head)

            # Wall collision
            if not in_bounds(new_head, self.cfg.grid_size):
                self._end(f"hit the wall at {tuple(new_head)}")
                return False

            # Self-bite shortens the snake instead of ending the game
            if self.snake.cut_if_snake(new_head):
                self._rescale_score()

            # Move / grow
            if new_head == self.food:
                self._eat(new_head)
            else:
                self.snake.move(direction)
            return not self.state.game_over

    def _rescale_score(self) -> None:
        st = self.state
        new_size = len(self.snake)
        old_size = self.snake.size
        if old_size > 0:
            st.score = st.score * new_size // old_size
        self.snake.size = new_size
        st.info_changed = True
        logger.info("Self-bite: size %d -> %d, score now %d", old_size, new_size, st.score)

    def _eat(self, position: Position) -> None:
        st = self.state
        st.score += food_score(position, st.speed, self.cfg.grid_size)
        self.snake.add(position)
        self.snake.size += 1
        st.food_eaten += 1
        st.speed = max(self.cfg.min_speed, st.speed - self.cfg.speed_step)
        st.info_changed = True
        logger.info(
            "Ate food at %s: score=%d eaten=%d speed=%dms",
            tuple(position), st.score, st.food_eaten, st.speed,
        )
        self._place_food()

    def _place_food(self) -> None:
        try:
            self.food = generate(
                self.snake, self.cfg.grid_size, self.rng, self.cfg.food_max_attempts
            )
        except GridFullError:
            self.food = None
            self.state.grid_full = True
            self._end("the snake fills the grid")

    def _end(self, reason: str) -> None:
        self.state.game_over = True
        self.state.info_changed = True
        logger.info("Game over: %s (score=%d)", reason, self.state.score)

    # ---------- Output ----------
    def snapshot(self) -> Snapshot:
        with self._state_lock:
            st = self.state
            with self._direction_lock:
                direction = self.snake.direction
            return Snapshot(
                body=tuple(self.snake.parts),
                direction=direction,
                food=self.food,
                score=st.score,
                food_eaten=st.food_eaten,
                speed=st.speed,
                level=self.cfg.start_speed - st.speed + self.cfg.speed_step,
                game_over=st.game_over,
                grid_full=st.grid_full,
                info_changed=st.info_changed,
                grid_size=self.cfg.grid_size,
            )

    def consume_info_changed(self) -> bool:
        """Return whether the info panel is stale and mark it fresh."""
        with self._state_lock:
            changed = self.state.info_changed
            self.state.info_changed = False
            return changed


class GameClock:
    """
    Calls game.tick() every game.speed milliseconds on a daemon thread.
    The interval is re-read after every tick, so eating speeds the clock up.
    """

    def __init__(self, game: Game, on_tick: Optional[Callable[[Snapshot], None]] = None):
        self.game = game
        self.on_tick = on_tick
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="snake-clock", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = 1.0) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stop.wait(self.game.speed / 1000):
            if self.game.quit_requested.is_set():
                break
            try:
                self.game.tick()
            except Exception:
                logger.exception("Tick failed; stopping the clock")
                break
            if self.on_tick is None:
                continue
            try:
                self.on_tick(self.game.snapshot())
            except Exception:
                logger.exception("Tick callback failed; stopping the clock")
                break
