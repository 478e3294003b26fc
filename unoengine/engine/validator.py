"""Move legality."""

from typing import Optional

from unoengine.engine.card import Card, Color


def is_legal(
    card: Card,
    top: Optional[Card],
    active_color: Color,
    penalty_phase: bool = False,
) -> bool:
    """Check if a card can be played on the current discard pile.

    While a draw stack is pending, draw cards are accepted on any top card;
    the stacking override sits here rather than in the play handler.
    The color a wild card takes is checked by the caller.
    """
    # Wild can always be played
    if card.is_wild:
        return True
    if top is None:
        return True
    if penalty_phase:
        # Stacking another draw card is always allowed
        if card.is_draw:
            return True
        # Otherwise a pending Draw Two/Four can only be answered by a draw card
        if top.is_draw:
            return False
    # Match by color
    if card.color == active_color:
        return True
    # Match by value
    return card.value == top.value
