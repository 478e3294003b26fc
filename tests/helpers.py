"""Builders for hand-made game states."""

from unoengine.engine import Card, Color, GameState, PlayerState
from unoengine.engine.deck import build_canonical_deck

RED, BLUE, GREEN, YELLOW = Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW


def card(color, value, card_id=None):
    return Card(color=color, value=value, id=card_id or f"{color.value if color else 'x'}-{value}")


def filler(n, prefix="d"):
    """Plain yellow sevens: never stackable, never a value match for the tests' tops."""
    return [Card(color=YELLOW, value="7", id=f"{prefix}-{i}") for i in range(n)]


def make_state(hands, top, deck=None, active_color=None, current=0, **kwargs):
    players = [PlayerState(id=pid, hand=list(cards)) for pid, cards in hands.items()]
    return GameState(
        deck=list(deck if deck is not None else filler(10)),
        discard_pile=[top],
        players=players,
        current_player_index=current,
        active_color=active_color or top.color,
        **kwargs,
    )


def pick(value, color=None, exclude=()):
    """Find a canonical card by value (and color)."""
    for c in build_canonical_deck():
        if c.value == value and (color is None or c.color == color) and c.id not in exclude:
            return c
    raise LookupError(value)


def rigged_deck(start, hands):
    """A deck that deals ``hands`` (in seat order) and then flips ``start``."""
    chosen = {c.id for hand in hands for c in hand} | {start.id}
    rest = [c for c in build_canonical_deck() if c.id not in chosen]
    tail = [c for hand in hands for c in hand]
    # Dealing pops from the end: seat 0 gets the last seven cards
    return rest + [start] + list(reversed(tail))


def plain_hands(num_players, exclude=()):
    """Seven number cards per seat, none of them stackable."""
    taken = set(exclude)
    hands = []
    for _ in range(num_players):
        hand = []
        for c in build_canonical_deck():
            if len(hand) == 7:
                break
            if c.value.isdigit() and c.id not in taken:
                hand.append(c)
                taken.add(c.id)
        hands.append(hand)
    return hands
