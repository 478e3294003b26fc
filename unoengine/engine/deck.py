"""Deck creation, shuffling and pile recycling."""

import logging
import random
from typing import List

from unoengine.engine.card import Card, Color
from unoengine.engine.errors import InsufficientCards
from unoengine.engine.game_state import GameState

logger = logging.getLogger(__name__)

CARD_VALUES_STANDARD = (
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    "skip", "reverse", "draw_two",
)

DECK_SIZE = 108


def build_canonical_deck() -> List[Card]:
    """Create the standard 108-card UNO deck, unshuffled.

    - 4 colors × (0-9, Skip, Reverse, Draw Two): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards

    Ids run ``c-0`` .. ``c-107`` in construction order.
    """
    cards: List[Card] = []

    def add(color, value):
        cards.append(Card(color=color, value=value, id=f"c-{len(cards)}"))

    for color in Color:
        # One zero per color
        add(color, "0")
        # Two of each 1-9 and action cards per color
        for value in CARD_VALUES_STANDARD[1:]:  # skip "0"
            add(color, value)
            add(color, value)

    for _ in range(4):
        add(None, "wild")
        add(None, "wild_draw_four")

    return cards


def shuffle(cards: List[Card], rng: random.Random) -> List[Card]:
    """Return a uniformly shuffled copy of ``cards`` (Fisher-Yates via ``rng``)."""
    shuffled = list(cards)
    rng.shuffle(shuffled)
    return shuffled


def create_deck(rng: random.Random) -> List[Card]:
    """Create a freshly shuffled deck."""
    return shuffle(build_canonical_deck(), rng)


def ensure_deck_not_empty(state: GameState, rng: random.Random) -> bool:
    """Refill an empty deck from the discard pile, keeping the pile's top card.

    Wild cards going back into circulation lose their bound color. Returns
    False when the deck is empty and there is nothing to recycle.
    """
    if state.deck:
        return True
    if len(state.discard_pile) <= 1:
        return False

    top = state.discard_pile.pop()
    recycled = [c.with_color(None) if c.is_wild else c for c in state.discard_pile]
    state.deck = shuffle(recycled, rng)
    state.discard_pile = [top]
    logger.info("Reshuffled %d cards from the discard pile into the deck", len(state.deck))
    return True


def draw_one(state: GameState, rng: random.Random) -> Card:
    """Take the top card of the deck, recycling the pile if needed."""
    if not ensure_deck_not_empty(state, rng):
        raise InsufficientCards("Deck and discard pile are exhausted")
    return state.deck.pop()


def draw_cards(state: GameState, hand: List[Card], count: int, rng: random.Random) -> None:
    """Move ``count`` cards from the deck into ``hand``."""
    for _ in range(count):
        hand.append(draw_one(state, rng))
    logger.debug("Dealt %d card(s); %d left in deck", count, len(state.deck))


def cards_conserved(state: GameState) -> bool:
    """True when the state holds exactly the canonical 108 cards, each once."""
    ids = sorted(c.id for c in state.all_cards())
    return ids == sorted(c.id for c in build_canonical_deck())
