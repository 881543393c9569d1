#!/usr/bin/env python3
"""Play many seeded War games headlessly and report how long they ran.

Example:
    python scripts/war_soak.py --players 3 --games 200
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from war.game import GameEngine
from war.models import GameConfig, RoundState

LOGGER = logging.getLogger("war_soak")


@dataclass
class SoakStats:
    rounds: List[int] = field(default_factory=list)
    wins: Dict[Optional[int], int] = field(default_factory=dict)
    unfinished: int = 0


def play_game(engine: GameEngine, max_rounds: int) -> Optional[int]:
    """Advance one game to GAME_OVER. Returns the round count, or None if the limit hit first."""
    engine.advance()  # deal
    while engine.current_state() != RoundState.GAME_OVER:
        if engine.round_number >= max_rounds:
            return None
        engine.advance()
        engine.consume_events()
        if engine.total_cards() != 52:
            raise RuntimeError(f"Card count drifted to {engine.total_cards()} in round {engine.round_number}")
    return engine.round_number


def run_soak(args: argparse.Namespace) -> SoakStats:
    stats = SoakStats()
    seeds = random.Random(args.seed)
    for game_idx in range(args.games):
        seed = seeds.randrange(2**32)
        engine = GameEngine(GameConfig(players=args.players, seed=seed))
        rounds = play_game(engine, args.max_rounds)
        if rounds is None:
            stats.unfinished += 1
            LOGGER.warning("Game %d (seed %d) hit the %d round limit", game_idx, seed, args.max_rounds)
            continue
        stats.rounds.append(rounds)
        winner = engine.winner()
        stats.wins[winner] = stats.wins.get(winner, 0) + 1
        LOGGER.debug("Game %d (seed %d): player %s won in %d rounds", game_idx, seed, winner, rounds)
    return stats


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run many War games to check they terminate.")
    parser.add_argument("--games", type=int, default=100, help="Number of games to play.")
    parser.add_argument("--players", type=int, default=2, help="Players per game.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the per-game seeds.")
    parser.add_argument("--max-rounds", type=int, default=10_000, help="Round limit per game.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    stats = run_soak(args)

    LOGGER.info("Soak complete. Summary:")
    if stats.rounds:
        LOGGER.info(
            "  rounds -> min %d, mean %.1f, max %d",
            min(stats.rounds),
            sum(stats.rounds) / len(stats.rounds),
            max(stats.rounds),
        )
    for winner, count in sorted(stats.wins.items(), key=lambda item: (item[0] is None, item[0] or 0)):
        LOGGER.info("  %-10s -> %4d wins", f"Player {winner}" if winner else "nobody", count)
    LOGGER.info("  unfinished -> %d", stats.unfinished)


if __name__ == "__main__":
    main()
