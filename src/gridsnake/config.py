from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError

# ----- Window & grid -----
GRID_SIZE = 20
CELL_SIZE = 35
BOARD_PX = GRID_SIZE * CELL_SIZE
MARGIN = 15
PANEL_W = 300
WIDTH, HEIGHT = BOARD_PX + 2 * MARGIN + PANEL_W, BOARD_PX + 2 * MARGIN
FPS = 60

# ----- Colors -----
BG     = (38, 50, 56)
BOARD  = (120, 144, 156)
GRID   = (96, 125, 139)
SNAKE  = (0, 188, 212)
HEAD   = (77, 208, 225)
APPLE  = (255, 0, 0)
TEXT   = (76, 175, 80)
HINT   = (207, 216, 220)

# ----- Key scancodes (SDL) -----
KEY_RIGHT, KEY_LEFT, KEY_DOWN, KEY_UP = 79, 80, 81, 82
KEY_ENTER, KEY_ESCAPE, KEY_KP_ENTER = 40, 41, 88

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: int | None = None
    grid_size: int = GRID_SIZE
    start_speed: int = 300        # ms per tick at game start
    speed_step: int = 5           # ms shaved off per food
    min_speed: int = 50           # floor for the tick interval
    food_max_attempts: int = 1000 # random draws before scanning free cells

    def validate(self) -> "Config":
        if self.grid_size < 4:
            # the starting segment spans x = 1..3
            raise ConfigError(f"grid_size must be >= 4, got {self.grid_size}")
        if self.min_speed <= 0:
            raise ConfigError(f"min_speed must be positive, got {self.min_speed}")
        if self.start_speed < self.min_speed:
            raise ConfigError(
                f"start_speed ({self.start_speed}) is below min_speed ({self.min_speed})"
            )
        if self.speed_step < 0:
            raise ConfigError(f"speed_step must be >= 0, got {self.speed_step}")
        if self.food_max_attempts < 0:
            raise ConfigError(
                f"food_max_attempts must be >= 0, got {self.food_max_attempts}"
            )
        return self

CFG = Config()
