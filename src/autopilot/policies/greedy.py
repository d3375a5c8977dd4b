# src/autopilot/policies/greedy.py
import numpy as np # type: ignore
from gridsnake.direction import Direction
from gridsnake.geometry import Position


def best_move_toward_food(head: Position, food: Position):
    """
    Returns a preference ordering of directions, the ones that reduce
    Manhattan distance to food first. Does NOT check collisions.
    """
    prefs = []
    if food.x < head.x:
        prefs.append(Direction.LEFT)
    elif food.x > head.x:
        prefs.append(Direction.RIGHT)
    if food.y < head.y:
        prefs.append(Direction.DOWN)
    elif food.y > head.y:
        prefs.append(Direction.UP)
    # Remaining directions go last so the caller still has options when blocked.
    for d in Direction:
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def dir_to_action(direction: Direction) -> int:
    """Map a Direction to the env action id."""
    from autopilot.env import ACTIONS
    for a, d in ACTIONS.items():
        if d is direction:
            return a
    raise ValueError(f"No action for {direction}")


def decode_obs(obs: np.ndarray, grid_size: int):
    """
    Matches env.observe() layout (9 dims):
    [hx_n, hy_n, fx_n, fy_n, dx, dy, danger_ahead, danger_left, danger_right]
    Grid coords come back by multiplying by (grid_size - 1).
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    scale = max(grid_size - 1, 1)
    head = Position(int(round(hx_n * scale)), int(round(hy_n * scale)))
    food = Position(int(round(fx_n * scale)), int(round(fy_n * scale)))
    return head, food, (int(dx), int(dy)), bool(dan_f), bool(dan_l), bool(dan_r)


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on food distance with simple safety:
    - prefer actions that reduce Manhattan distance
    - avoid any move flagged dangerous if possible
    - if all moves look dangerous, keep going straight
    """
    from autopilot.env import left_of, right_of

    head, food, vector, dan_f, dan_l, dan_r = decode_obs(obs, env.cfg.grid_size)
    forward = next(d for d in Direction if d.vector == vector)

    # Danger flags are relative to the heading; going back is never allowed.
    danger = {
        forward: dan_f,
        left_of(forward): dan_l,
        right_of(forward): dan_r,
        forward.opposite: True,
    }

    for d in best_move_toward_food(head, food):
        if not danger[d]:
            return dir_to_action(d)

    # Boxed in
    return dir_to_action(forward)
