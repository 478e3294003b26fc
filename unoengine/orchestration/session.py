"""A hosted game: one authoritative state, actions applied one at a time."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from unoengine.engine import (
    Action,
    ActionResult,
    GameState,
    PlayerView,
    apply_action,
    get_legal_actions,
    init_game,
    player_joined,
    player_left,
)

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the game state and the shared random source.

    Callers serialize their submissions; each call runs to completion before
    the next one is looked at.
    """

    def __init__(
        self,
        player_ids: List[str],
        seed: Optional[int] = None,
        on_game_over: Optional[Callable[[str], None]] = None,
        state: Optional[GameState] = None,
    ):
        self._rng = random.Random(seed)
        # A restored state skips setup
        self._state = state if state is not None else init_game(player_ids, rng=self._rng)
        self._on_game_over = on_game_over
        self._reported = self._state.winner is not None

    @classmethod
    def from_state(
        cls,
        state: GameState,
        seed: Optional[int] = None,
        on_game_over: Optional[Callable[[str], None]] = None,
    ) -> "GameSession":
        """Host an existing state, e.g. one restored from storage."""
        return cls(list(state.player_order), seed=seed, on_game_over=on_game_over, state=state)

    @property
    def state(self) -> GameState:
        return self._state

    def view(self, player_id: str) -> PlayerView:
        return PlayerView.from_state(self._state, player_id)

    def legal_actions(self, player_id: str) -> list[Action]:
        return get_legal_actions(self._state, player_id)

    def submit(self, player_id: str, action: Action) -> ActionResult:
        """Apply ``action`` on behalf of ``player_id``."""
        return self._commit(apply_action(self._state, player_id, action, self._rng))

    def player_joined(self, player_id: str) -> ActionResult:
        return self._commit(player_joined(self._state, player_id, self._rng))

    def player_left(self, player_id: str) -> ActionResult:
        return self._commit(player_left(self._state, player_id, self._rng))

    def _commit(self, result: ActionResult) -> ActionResult:
        if not result.ok:
            return result
        self._state = result.state
        winner = self._state.winner
        if winner is not None and not self._reported:
            self._reported = True
            logger.info("Game over, winner %s", winner)
            if self._on_game_over is not None:
                self._on_game_over(winner)
        return result
