"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from unoengine.engine import Action, DrawCard, GameState, PlayerView
from unoengine.orchestration.session import GameSession

logger = logging.getLogger(__name__)


class SeatAgent(Protocol):
    """Whatever picks actions for one seat."""

    @property
    def name(self) -> str:
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action:
        """Pick one of ``legal_actions``; only called when the list is non-empty."""
        ...


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]
    rejected: int = 0


class GameRunner:
    """Runs a single UNO game to completion, one agent per seat."""

    def __init__(
        self,
        agents: dict[str, SeatAgent],
        seed: Optional[int] = None,
        max_turns: int = 1000,
        after_action: Optional[Callable[[GameState], None]] = None,
    ):
        self._agents = agents
        self._seed = seed
        self._max_turns = max_turns
        self._after_action = after_action
        self.session: Optional[GameSession] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        player_ids = list(self._agents.keys())
        session = GameSession(player_ids, seed=self._seed)
        self.session = session
        num_turns = 0
        rejected = 0

        while session.state.winner is None and num_turns < self._max_turns:
            current = session.state.current_player
            if current is None:
                break
            pid = current.id
            legal = session.legal_actions(pid)
            if not legal:
                break

            action = self._agents[pid].get_action(session.view(pid), legal, pid)

            result = session.submit(pid, action)
            num_turns += 1
            if not result.ok:
                rejected += 1
                logger.warning("%s: %s", pid, result.error)
                # Nothing left to draw; the game cannot go on
                if isinstance(action, DrawCard):
                    break
                continue
            if self._after_action is not None:
                self._after_action(session.state)

        return GameResult(
            winner=session.state.winner,
            num_turns=num_turns,
            player_ids=tuple(player_ids),
            rejected=rejected,
        )
