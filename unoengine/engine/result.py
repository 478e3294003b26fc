"""All-or-nothing transitions and their result value."""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Optional

from unoengine.engine.errors import EngineError
from unoengine.engine.game_state import GameState

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Outcome of one transition.

    On success ``state`` is the new state. On rejection ``state`` is the
    original, untouched state and ``error`` says why.
    """

    state: GameState
    error: Optional[EngineError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_transition(
    state: GameState,
    rng: random.Random,
    handler: Callable[..., Any],
    *args: Any,
) -> ActionResult:
    """Run ``handler(candidate, *args)`` on a copy of ``state``.

    The copy is kept only if the handler finishes. A rejected transition
    also rewinds ``rng`` so later shuffles are unaffected by it.
    """
    candidate = state.copy()
    rng_state = rng.getstate()
    try:
        handler(candidate, *args)
    except EngineError as exc:
        rng.setstate(rng_state)
        logger.info("Rejected (%s): %s", type(exc).__name__, exc)
        return ActionResult(state=state, error=exc)
    return ActionResult(state=candidate)
