"""War card game engine: deck handling, round state machine and battle resolution."""

from .cards import Card, Face, Suit, asset_key, build_deck, display_name, distribute, shuffle
from .game import GameEngine
from .models import (
    BattleResult,
    GameConfig,
    InvalidPlayerCount,
    MissingSingleton,
    Player,
    Pot,
    RoundState,
    StatusBoard,
)

__all__ = [
    "Card",
    "Face",
    "Suit",
    "asset_key",
    "build_deck",
    "display_name",
    "distribute",
    "shuffle",
    "GameEngine",
    "BattleResult",
    "GameConfig",
    "InvalidPlayerCount",
    "MissingSingleton",
    "Player",
    "Pot",
    "RoundState",
    "StatusBoard",
]
