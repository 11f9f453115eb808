from __future__ import annotations

import argparse
import logging

from . import config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nibbles", description="Grid snake with numbered targets.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for target placement.")
    parser.add_argument(
        "--cell-size",
        type=int,
        choices=range(6, 21),
        default=config.CELL_SIZE,
        metavar="{6..20}",
        help="Pixels per arena cell.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log captures and level-ups.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from .game import main as run_game

    score = run_game(seed=args.seed, cell=args.cell_size)
    print("Game Over! Score:", score)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
