# src/wrapsnake/agents/autoplay.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional, Tuple

import numpy as np  # type: ignore

from wrapsnake.config import BOARD, Board
from wrapsnake.agents.env import SnakeEnv
from wrapsnake.agents.policies import POLICIES


class PacedRenderer:
    """Draws each step and waits for the next frame so episodes are watchable."""

    def __init__(self, window, clock):
        self.window = window
        self.clock = clock

    def draw(self, scene) -> None:
        import pygame  # type: ignore
        # closing the window ends the run, as in the interactive game
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise SystemExit
        self.window.draw(scene)
        self.clock.frame_time()


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, epsilon: float,
                max_steps: int = 10_000, seed: int | None = None) -> Tuple[int, float, int]:
    """
    Run a single episode with a fixed policy.

    Returns:
        steps: number of steps taken
        total: total return (sum of rewards)
        score: final score
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]

    obs = env.reset(seed)
    total = 0.0
    steps = 0
    info = {"score": 0}

    while True:
        a = act(obs, env, epsilon)
        obs, r, done, info = env.step(a)
        total += r
        steps += 1
        env.render()

        if done or steps >= max_steps:
            break

    return steps, total, info.get("score", 0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Let a fixed policy play wrap-around snake.")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--policy", type=str, default="greedy", choices=sorted(POLICIES))
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy (ignored otherwise)",
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--width", type=int, default=BOARD.width)
    parser.add_argument("--height", type=int, default=BOARD.height)
    parser.add_argument(
        "--max-steps",
        type=int,
        default=10_000,
        help="cut an episode off after this many ticks",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Watch the episodes in a pygame window.",
    )
    parser.add_argument("--fps", type=int, default=15)
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


# --------------------------
# Main
# --------------------------
def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")

    try:
        board = Board(width=args.width, height=args.height)
    except ValueError as exc:
        parser.error(str(exc))

    renderer = None
    if args.render:
        # pygame only needed for watching
        import pygame  # type: ignore
        from wrapsnake.display import PygameClock, PygameRenderer

        pygame.init()
        clock = PygameClock(args.fps)
        window = PygameRenderer(board, caption="Snake autoplay")

        renderer = PacedRenderer(window, clock)

    env = SnakeEnv(board=board, seed_value=args.seed, renderer=renderer)

    print(f"Running {args.episodes} episode(s) with policy={args.policy} ε={args.epsilon}")
    print("ep,steps,return,score")

    scores = []
    try:
        for ep in range(1, args.episodes + 1):
            # reseed per episode so runs are reproducible one by one
            steps, ret, score = run_episode(env, args.policy, args.epsilon,
                                            args.max_steps, seed=args.seed + ep)
            print(f"{ep},{steps},{ret:.3f},{score}")
            scores.append(score)
    finally:
        if args.render:
            pygame.quit()

    if scores:
        print(f"\nmean score {np.mean(scores):.2f}, best {int(np.max(scores))}")


if __name__ == "__main__":
    main()
