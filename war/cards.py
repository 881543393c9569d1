from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, MutableSequence, Protocol, Sequence

from .models import InvalidPlayerCount


class Suit(str, Enum):
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    SPADES = "Spades"


class Face(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


FACE_RANKS: Dict[Face, int] = {face: rank for rank, face in enumerate(Face, start=2)}
FACE_NAMES = {Face.JACK: "Jack", Face.QUEEN: "Queen", Face.KING: "King", Face.ACE: "Ace"}
SUIT_INITIALS = {suit.value[0]: suit for suit in Suit}


@dataclass(frozen=True)
class Card:
    suit: Suit
    face: Face
    rank: int = field(init=False)

    def __post_init__(self) -> None:
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise ValueError(f"Invalid suit: {self.suit}") from None
        try:
            face = Face(self.face)
        except ValueError:
            raise ValueError(f"Invalid face: {self.face}") from None
        object.__setattr__(self, "suit", suit)
        object.__setattr__(self, "face", face)
        object.__setattr__(self, "rank", FACE_RANKS[face])

    @property
    def label(self) -> str:
        return f"{self.face.value}{self.suit.value[0]}"


class ShuffleSource(Protocol):
    """Anything that permutes a sequence in place; ``random.Random`` qualifies."""

    def shuffle(self, x: MutableSequence) -> None:
        ...


def build_deck() -> List[Card]:
    return [Card(suit, face) for suit in Suit for face in Face]


def display_name(card: Card) -> str:
    face = FACE_NAMES.get(card.face, card.face.value)
    return f"{face} of {card.suit.value}"


def asset_key(card: Card) -> str:
    # Matches the card image names of the boardgame art pack, minus directory and extension.
    return f"card{card.suit.value}{card.face.value}"


def shuffle(deck: Sequence[Card], rng: ShuffleSource) -> List[Card]:
    cards = list(deck)
    rng.shuffle(cards)
    return cards


def distribute(deck: Sequence[Card], player_count: int) -> Dict[int, List[Card]]:
    """Deal round-robin: card ``i`` goes to player index ``i % player_count``."""
    if player_count < 2:
        raise InvalidPlayerCount(f"At least 2 players required, got {player_count}")
    hands: Dict[int, List[Card]] = {idx: [] for idx in range(player_count)}
    for idx, card in enumerate(deck):
        hands[idx % player_count].append(card)
    return hands


def parse_label(label: str) -> Card:
    if len(label) not in (2, 3):
        raise ValueError(f"Invalid card label: {label}")
    suit = SUIT_INITIALS.get(label[-1].upper())
    if suit is None:
        raise ValueError(f"Invalid suit: {label[-1]}")
    return Card(suit, label[:-1].upper())


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
