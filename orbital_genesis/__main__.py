"""Entry point: ``python -m orbital_genesis [--seed N] [--debug]``."""

from __future__ import annotations

import argparse
import logging
import sys

from .constants import APP_VERSION, TITLE


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="orbital-genesis", description=f"{TITLE} {APP_VERSION}")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the first generated system")
    parser.add_argument("--debug", action="store_true", help="Verbose generation logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    # Imported late so --help works without opening a window
    from .game import App

    App(seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
