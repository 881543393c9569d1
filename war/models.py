from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from .cards import Card, ShuffleSource


class InvalidPlayerCount(ValueError):
    """Raised before any state is touched when fewer than two players are requested."""


class MissingSingleton(RuntimeError):
    """Raised when the shared pot or status board is not attached to the engine."""


class RoundState(str, Enum):
    BEGIN = "BEGIN"
    GAME_START = "GAME_START"
    DRAW = "DRAW"
    OUTCOME = "OUTCOME"
    GAME_OVER = "GAME_OVER"


@dataclass
class GameConfig:
    players: int = 2
    seed: Optional[int] = None


@dataclass
class Player:
    num: int
    hand: List[Card] = field(default_factory=list)
    # Holds at most one card: the one revealed this round.
    in_play: List[Card] = field(default_factory=list)

    def clear_hand(self) -> None:
        self.hand.clear()

    def clear_in_play(self) -> None:
        self.in_play.clear()

    def append_to_hand(self, cards: Iterable[Card]) -> None:
        self.hand.extend(cards)

    def reveal_top(self) -> Optional[Card]:
        if not self.hand:
            return None
        card = self.hand.pop(0)
        self.in_play.append(card)
        return card

    @property
    def revealed(self) -> Optional[Card]:
        return self.in_play[0] if self.in_play else None


@dataclass
class Pot:
    cards: List[Card] = field(default_factory=list)

    def collect(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def claim(self, player: Player, rng: ShuffleSource) -> int:
        # Shuffling winnings keeps the same cards from meeting again in a fixed cycle.
        rng.shuffle(self.cards)
        won = len(self.cards)
        player.append_to_hand(self.cards)
        self.cards = []
        return won

    def clear(self) -> None:
        self.cards.clear()

    def __len__(self) -> int:
        return len(self.cards)


@dataclass
class StatusBoard:
    text: str = ""

    def show(self, text: str) -> None:
        self.text = text

    def clear(self) -> None:
        self.text = ""


@dataclass
class BattleResult:
    winner: Optional[int]
    is_draw: bool
    cards_won: int = 0
    pot_size: int = 0
