from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple

from .cards import Card, ShuffleSource, asset_key, build_deck, display_name, distribute, shuffle
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

LOGGER = logging.getLogger("war_engine")

# GameEngine keeps all table state in memory. Rendering and input polling live
# in the driver; the engine only moves cards and tracks the round state.

NEXT_STATE: Dict[RoundState, RoundState] = {
    RoundState.BEGIN: RoundState.GAME_START,
    RoundState.GAME_START: RoundState.DRAW,
    RoundState.DRAW: RoundState.OUTCOME,
    RoundState.OUTCOME: RoundState.DRAW,
    RoundState.GAME_OVER: RoundState.GAME_START,
}


class GameEngine:
    """War engine for a single table of two or more players."""

    def __init__(self, config: GameConfig, rng: Optional[ShuffleSource] = None) -> None:
        if config.players < 2:
            raise InvalidPlayerCount(f"At least 2 players required, got {config.players}")
        self.config = config
        self.rng: ShuffleSource = rng if rng is not None else random.Random(config.seed)
        # Ordered by player number; resolution and drawing scan in this order.
        self.players: Dict[int, Player] = {num: Player(num=num) for num in range(1, config.players + 1)}
        self.pot: Optional[Pot] = Pot()
        self.status: Optional[StatusBoard] = StatusBoard()
        self.state = RoundState.BEGIN
        self.round_number = 0
        self.games_started = 0
        self.last_result: Optional[BattleResult] = None
        self.events: List[Dict[str, object]] = []

    # State machine ---------------------------------------------------

    def advance(self) -> RoundState:
        """Run one transition, including its exit and entry actions, and return the new state."""
        target = NEXT_STATE[self.state]

        if self.state == RoundState.OUTCOME and self.check_end():
            target = RoundState.GAME_OVER

        if target == RoundState.GAME_START:
            self._start_game()
        elif target == RoundState.DRAW:
            self._draw()
        elif target == RoundState.OUTCOME:
            self.resolve_battle()
        elif target == RoundState.GAME_OVER:
            self._show_winner()

        self.state = target
        return target

    def current_state(self) -> RoundState:
        return self.state

    # Entry actions ---------------------------------------------------

    def _start_game(self) -> None:
        pot = self._require_pot()
        status = self._require_status()
        # The event log is scoped to one game; undrained events from the last game are dropped.
        self.events.clear()
        pot.clear()
        status.clear()
        for player in self.players.values():
            player.clear_hand()
            player.clear_in_play()

        deck = shuffle(build_deck(), self.rng)
        hands = distribute(deck, len(self.players))
        for idx, player in enumerate(self.players.values()):
            player.append_to_hand(hands[idx])

        self.round_number = 0
        self.games_started += 1
        self.last_result = None
        LOGGER.info("Game %d started with %d players", self.games_started, len(self.players))
        self.events.append(
            {"ev": "DEAL", "hands": {num: len(player.hand) for num, player in self.players.items()}}
        )

    def _draw(self) -> None:
        self._require_status().clear()
        for num, player in self.players.items():
            card = player.reveal_top()
            if card is None:
                continue
            self.events.append({"ev": "REVEAL", "player": num, "card": card.label})

    def resolve_battle(self) -> BattleResult:
        """Compare revealed cards, pool them, and hand the pot to a decisive winner."""
        pot = self._require_pot()
        status = self._require_status()

        greatest_rank = 0
        winner: Optional[int] = None
        is_draw = False
        revealed_by: List[int] = []
        for num, player in self.players.items():
            card = player.revealed
            if card is not None:
                revealed_by.append(num)
                if card.rank > greatest_rank:
                    greatest_rank = card.rank
                    winner = num
                    is_draw = False
                elif card.rank == greatest_rank:
                    is_draw = True
            pot.collect(player.in_play)
            player.clear_in_play()

        self.round_number += 1

        if is_draw or winner is None:
            status.show("Draw!")
            result = BattleResult(winner=None, is_draw=True, pot_size=len(pot))
            self.events.append({"ev": "DRAW", "pot": len(pot)})
        else:
            won = pot.claim(self.players[winner], self.rng)
            status.show(f"Player {winner} win!")
            result = BattleResult(winner=winner, is_draw=False, cards_won=won, pot_size=0)
            self.events.append({"ev": "ROUND_WIN", "player": winner, "cards": won})

        for num in revealed_by:
            if not self.players[num].hand:
                self.events.append({"ev": "ELIMINATED", "player": num})

        LOGGER.debug("Round %d: %s", self.round_number, status.text)
        self.last_result = result
        return result

    def _show_winner(self) -> None:
        status = self._require_status()
        ranking = self.ranking()
        winner = ranking[0][0] if ranking else None
        if winner is not None:
            status.show(f"Player {winner} wins! Play again?")
        LOGGER.info("Game %d over after %d rounds, winner: %s", self.games_started, self.round_number, winner)
        self.events.append({"ev": "GAME_OVER", "winner": winner, "ranking": [list(entry) for entry in ranking]})

    # End of game -----------------------------------------------------

    def check_end(self) -> bool:
        zero_card_players = [player for player in self.players.values() if not player.hand]
        return len(zero_card_players) >= len(self.players) - 1

    def ranking(self) -> List[Tuple[int, int]]:
        holding = [(num, len(player.hand)) for num, player in self.players.items() if player.hand]
        return sorted(holding, key=lambda entry: (-entry[1], entry[0]))

    def winner(self) -> Optional[int]:
        ranking = self.ranking()
        return ranking[0][0] if ranking else None

    # Accessors -------------------------------------------------------

    def hand_size(self, player_num: int) -> int:
        return len(self.players[player_num].hand)

    def revealed_card(self, player_num: int) -> Optional[Card]:
        return self.players[player_num].revealed

    def current_status_text(self) -> str:
        return self._require_status().text

    def total_cards(self) -> int:
        in_players = sum(len(player.hand) + len(player.in_play) for player in self.players.values())
        return in_players + len(self._require_pot())

    def consume_events(self) -> List[Dict[str, object]]:
        events = list(self.events)
        self.events.clear()
        return events

    def snapshot(self) -> Dict[str, object]:
        pot = self._require_pot()
        status = self._require_status()
        players = []
        for num, player in self.players.items():
            card = player.revealed
            players.append(
                {
                    "player": num,
                    "cards": len(player.hand),
                    "revealed": card.label if card else None,
                    "revealed_name": display_name(card) if card else None,
                    "asset": asset_key(card) if card else None,
                }
            )
        return {
            "state": self.state.value,
            "round": self.round_number,
            "status": status.text,
            "pot": len(pot),
            "players": players,
        }

    # Internals -------------------------------------------------------

    def _require_pot(self) -> Pot:
        if self.pot is None:
            raise MissingSingleton("Pot not attached to engine")
        return self.pot

    def _require_status(self) -> StatusBoard:
        if self.status is None:
            raise MissingSingleton("Status board not attached to engine")
        return self.status
