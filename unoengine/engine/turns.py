"""Turn order: advancing, skips, reverses and the draw stack."""

from unoengine.engine.card import Card
from unoengine.engine.game_state import GameState

DRAW_PENALTIES = {"draw_two": 2, "wild_draw_four": 4}


def next_index(current: int, direction: int, num_players: int) -> int:
    """Index of the player after ``current``; 0 when nobody is seated."""
    if num_players == 0:
        return 0
    return (current + direction) % num_players


def advance(state: GameState, steps: int = 1) -> None:
    for _ in range(steps):
        state.current_player_index = next_index(
            state.current_player_index, state.direction, len(state.players)
        )


def apply_card_effect(state: GameState, card: Card) -> bool:
    """Apply the turn-order side effect of ``card``.

    Returns True when the next player is skipped. Draw cards only grow the
    draw stack here; the stack is resolved once the turn has moved on.
    """
    if card.value == "skip":
        return True
    if card.value == "reverse":
        # With two players a reverse hands the turn straight back
        if len(state.players) == 2:
            return True
        state.direction = -state.direction
        return False
    state.draw_stack += DRAW_PENALTIES.get(card.value, 0)
    return False
