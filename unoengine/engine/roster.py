"""Players joining and leaving a game in progress."""

import logging
import random

from unoengine.engine.deck import draw_cards
from unoengine.engine.game_state import GameState, PlayerState
from unoengine.engine.result import ActionResult, run_transition
from unoengine.engine.rules import HAND_SIZE

logger = logging.getLogger(__name__)


def join(state: GameState, player_id: str, rng: random.Random) -> None:
    """Seat ``player_id`` at the end of the turn order.

    A returning player gets back the hand they left with; anyone else is
    dealt a fresh hand.
    """
    if state.find_player(player_id) is not None:
        return
    if player_id in state.departed_hands:
        hand = state.departed_hands.pop(player_id)
        description = f"{player_id} rejoined with {len(hand)} cards"
    else:
        hand = []
        draw_cards(state, hand, HAND_SIZE, rng)
        description = f"{player_id} joined"
    state.players.append(PlayerState(id=player_id, hand=hand))
    state.record(description)


def leave(state: GameState, player_id: str) -> None:
    """Remove ``player_id`` from the turn order, keeping their hand for a rejoin."""
    idx = state.player_index(player_id)
    if idx is None:
        return
    player = state.players.pop(idx)
    state.departed_hands[player_id] = player.hand

    if idx == state.current_player_index and state.drawn_card is not None:
        # The drawn card is forfeited to the bottom of the deck
        state.deck.insert(0, state.drawn_card)
        state.drawn_card = None
    if idx < state.current_player_index:
        state.current_player_index -= 1
    if state.players:
        state.current_player_index %= len(state.players)
    else:
        state.current_player_index = 0
    state.record(f"{player_id} left the game")


def player_joined(state: GameState, player_id: str, rng: random.Random) -> ActionResult:
    result = run_transition(state, rng, join, player_id, rng)
    if result.ok:
        logger.info("%s joined (%d players)", player_id, len(result.state.players))
    return result


def player_left(state: GameState, player_id: str, rng: random.Random) -> ActionResult:
    result = run_transition(state, rng, leave, player_id)
    if result.ok:
        logger.info("%s left (%d players)", player_id, len(result.state.players))
    return result
