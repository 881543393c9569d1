import argparse
import logging
import sys

from war.game import GameEngine
from war.models import GameConfig, MissingSingleton

from .session import ConsoleSession, LOGGER


def main() -> None:
    parser = argparse.ArgumentParser(description="Play War in the terminal")
    parser.add_argument("--players", type=int, default=2)
    parser.add_argument("--seed", type=int, default=None, help="Seed for deck and pot shuffles")
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Advance without waiting for input until the game is over",
    )
    parser.add_argument("--max-rounds", type=int, default=10_000, help="Round limit in auto mode")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = GameConfig(players=args.players, seed=args.seed)
    try:
        engine = GameEngine(config)
    except ValueError as exc:
        parser.error(str(exc))

    session = ConsoleSession(engine, auto=args.auto, max_rounds=args.max_rounds)
    try:
        session.run()
    except MissingSingleton:
        LOGGER.exception("Engine misconfigured, stopping")
        sys.exit(1)
    except KeyboardInterrupt:
        LOGGER.warning("Interrupted by user")


if __name__ == "__main__":
    main()
