# src/autopilot/run.py
from __future__ import annotations
import argparse
import csv
import logging
import os
from typing import Tuple

import numpy as np  # type: ignore

from gridsnake.config import Config
from autopilot.env import SnakeEnv
from autopilot.policies import POLICIES


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, epsilon: float, max_steps: int = 10_000) -> Tuple[int, float, int]:
    """
    Run a single episode with a fixed policy (random, greedy, eps-greedy).

    Returns:
        steps: number of ticks taken
        total: total return (sum of rewards)
        score: final game score
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    choose = POLICIES[policy]

    obs = env.reset()
    total = 0.0
    steps = 0
    score = 0

    while True:
        a = choose(obs, env, epsilon)
        obs, r, done, info = env.step(a)
        total += r
        steps += 1

        if done or steps >= max_steps:
            score = info.get("score", 0)
            break

    return steps, total, score


def write_csv(rows, out_csv: str) -> None:
    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Let a simple policy play snake headlessly")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=sorted(POLICIES),
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy (ignored otherwise)",
    )
    parser.add_argument("--grid-size", type=int, default=Config.grid_size)
    parser.add_argument("--max-steps", type=int, default=10_000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV is saved here",
    )
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    np.random.seed(args.seed)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autopilot_{args.policy}.csv")

    env = SnakeEnv(cfg=Config(seed=args.seed, grid_size=args.grid_size))

    print(
        f"Running {args.episodes} episode(s) with "
        f"policy={args.policy} ε={args.epsilon}"
    )
    print("ep,steps,return,score")

    rows = [("ep", "steps", "return", "score")]
    for ep in range(1, args.episodes + 1):
        steps, ret, score = run_episode(env, args.policy, args.epsilon, args.max_steps)
        print(f"{ep},{steps},{ret:.3f},{score}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score))

    write_csv(rows, out_csv)
    print(f"\nSaved results → {out_csv}")
    return out_csv


if __name__ == "__main__":
    main()
