from __future__ import annotations

from typing import Dict, Iterable, List, MutableSequence, Optional

from war.cards import parse_cards
from war.game import GameEngine
from war.models import GameConfig, RoundState


class NoShuffle:
    """Shuffle source that leaves every sequence in its current order."""

    def __init__(self) -> None:
        self.calls = 0

    def shuffle(self, x: MutableSequence) -> None:
        self.calls += 1


class ReverseShuffle:
    def shuffle(self, x: MutableSequence) -> None:
        x.reverse()


def create_engine(*, players: int = 2, seed: Optional[int] = 42, rng=None) -> GameEngine:
    """Instantiate an engine; pass ``rng`` to replace the seeded shuffle source."""
    return GameEngine(GameConfig(players=players, seed=seed), rng=rng)


def start_game(engine: GameEngine) -> GameEngine:
    """Advance from BEGIN (or GAME_OVER) into GAME_START so hands are dealt."""
    state = engine.advance()
    assert state == RoundState.GAME_START
    return engine


def set_hands(engine: GameEngine, hands: Dict[int, Iterable[str]]) -> None:
    """Replace player hands with scripted cards, given as labels like ``"10H"``."""
    for num, labels in hands.items():
        player = engine.players[num]
        player.clear_hand()
        player.append_to_hand(parse_cards(list(labels)))


def play_round(engine: GameEngine) -> RoundState:
    """Advance through DRAW and OUTCOME; returns the state after the outcome step."""
    assert engine.advance() == RoundState.DRAW
    return engine.advance()


def run_to_game_over(engine: GameEngine, max_advances: int = 100_000) -> List[int]:
    """Advance until GAME_OVER, returning the card total seen after every advance."""
    totals = []
    for _ in range(max_advances):
        if engine.current_state() == RoundState.GAME_OVER:
            return totals
        engine.advance()
        totals.append(engine.total_cards())
    raise AssertionError(f"Game did not finish within {max_advances} advances")
