# main.py
import argparse
import logging
import time
from typing import List, Optional

import numpy as np # type: ignore
import pygame # type: ignore

from .config import BOARD, CFG, Board, Config
from .display import PygameClock, PygameInput, PygameRenderer
from .loop import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wrap-around snake.")
    parser.add_argument("--width", type=int, default=BOARD.width, help="board width in cells")
    parser.add_argument("--height", type=int, default=BOARD.height, help="board height in cells")
    parser.add_argument(
        "--tick", type=float, default=BOARD.tick_interval,
        help="seconds between snake moves",
    )
    parser.add_argument("--fps", type=int, default=CFG.fps)
    parser.add_argument(
        "--seed", type=int, default=CFG.seed,
        help="RNG seed for fruit placement (default: derived from the clock)",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="DEBUG shows the once-per-second frame report",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        board = Board(width=args.width, height=args.height, tick_interval=args.tick)
        cfg = Config(seed=args.seed, fps=args.fps)
    except ValueError as exc:
        parser.error(str(exc))

    seed = cfg.seed if cfg.seed is not None else time.time_ns() % (2**32)
    logger.info("Starting %dx%d board, tick=%.3fs, seed=%d",
                board.width, board.height, board.tick_interval, seed)
    rng = np.random.default_rng(seed)

    pygame.init()
    try:
        renderer = PygameRenderer(board)
        game = run(board, PygameInput(), renderer, PygameClock(cfg.fps), rng,
                   report_every=cfg.report_every)
        logger.info("Exiting with score %d", game.state.score)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
