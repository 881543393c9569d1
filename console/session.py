from __future__ import annotations

import logging
from typing import Callable, List, Optional

from war.game import GameEngine
from war.models import RoundState

LOGGER = logging.getLogger("war_console")

PROMPTS = {
    RoundState.BEGIN: "Press Enter to deal",
    RoundState.GAME_START: "Press Enter to draw",
    RoundState.DRAW: "Press Enter to battle",
    RoundState.OUTCOME: "Press Enter to draw",
    RoundState.GAME_OVER: "Press Enter to play again",
}


def render(engine: GameEngine) -> List[str]:
    """Text rendering of a table snapshot, one line per player plus the status line."""
    snap = engine.snapshot()
    lines = []
    for entry in snap["players"]:
        revealed = entry["revealed_name"] or "-"
        lines.append(f"Player {entry['player']}  Cards: {entry['cards']:>2}  {revealed}")
    if snap["pot"]:
        lines.append(f"Pot: {snap['pot']}")
    if snap["status"]:
        lines.append(str(snap["status"]))
    return lines


class ConsoleSession:
    """Drives the engine from line input: Enter advances one state, "q" quits.

    In auto mode the session advances on its own until the game is over or
    ``max_rounds`` battles have been fought.
    """

    def __init__(
        self,
        engine: GameEngine,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        auto: bool = False,
        max_rounds: int = 10_000,
    ) -> None:
        self.engine = engine
        self.read = read
        self.write = write
        self.auto = auto
        self.max_rounds = max_rounds

    def step(self) -> RoundState:
        state = self.engine.advance()
        for event in self.engine.consume_events():
            LOGGER.debug("event %s", event)
        if not self.auto or state == RoundState.GAME_OVER:
            for line in render(self.engine):
                self.write(line)
        return state

    def run(self) -> Optional[int]:
        """Play until the user quits (or, in auto mode, one game finishes). Returns the winner."""
        if self.auto:
            return self._run_auto()

        while True:
            try:
                answer = self.read(f"{PROMPTS[self.engine.current_state()]} (q to quit): ")
            except EOFError:
                break
            if answer.strip().casefold() == "q":
                break
            self.step()
        return self.engine.winner() if self.engine.current_state() == RoundState.GAME_OVER else None

    def _run_auto(self) -> Optional[int]:
        while self.engine.current_state() != RoundState.GAME_OVER:
            if self.engine.round_number >= self.max_rounds:
                LOGGER.warning("Stopping after %d rounds without a winner", self.engine.round_number)
                return None
            self.step()
        winner = self.engine.winner()
        LOGGER.info("Game finished after %d rounds", self.engine.round_number)
        return winner
