"""UNO rules: setup, legal actions and state transitions."""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from unoengine.engine.card import Card, Color
from unoengine.engine.deck import create_deck, draw_cards, draw_one, shuffle
from unoengine.engine.errors import InvalidAction
from unoengine.engine.game_state import GameState, PlayerState
from unoengine.engine.result import ActionResult, run_transition
from unoengine.engine.turns import advance, apply_card_effect
from unoengine.engine.validator import is_legal

logger = logging.getLogger(__name__)

HAND_SIZE = 7
MIN_PLAYERS = 1
MAX_PLAYERS = 6
LOW_HAND_LIMIT = 2  # most cards a player may hold when declaring
CATCH_PENALTY = 2


@dataclass
class PlayCard:
    """Action: play a card from hand or the held drawn card. For wilds, chosen_color is required."""

    card_id: str
    chosen_color: Optional[Color] = None


@dataclass
class DrawCard:
    """Action: draw one card, or take the whole pending draw stack."""

    pass


@dataclass
class PassTurn:
    """Action: keep the drawn card and end the turn."""

    pass


@dataclass
class DeclareLowHand:
    """Action: announce that the next play leaves one card."""

    pass


Action = Union[PlayCard, DrawCard, PassTurn, DeclareLowHand]


def init_game(player_ids: List[str], rng: Optional[random.Random] = None) -> GameState:
    """Create initial game state: deal 7 cards each, flip a start card."""
    if not MIN_PLAYERS <= len(player_ids) <= MAX_PLAYERS:
        raise ValueError(
            f"Need {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(player_ids)}"
        )
    if len(set(player_ids)) != len(player_ids):
        raise ValueError("Player ids must be unique")
    rng = rng or random.Random()

    deck = create_deck(rng)
    players = [PlayerState(id=pid) for pid in player_ids]
    for player in players:
        for _ in range(HAND_SIZE):
            player.hand.append(deck.pop())

    # Wild Draw Four may never start the game
    start = deck.pop()
    while start.value == "wild_draw_four":
        deck.insert(0, start)
        deck = shuffle(deck, rng)
        start = deck.pop()

    if start.is_wild:
        start = start.with_color(Color.RED)
    state = GameState(
        deck=deck,
        discard_pile=[start],
        players=players,
        active_color=start.color,
    )

    description = f"Game started with {start}"
    skip = apply_card_effect(state, start)
    if skip:
        advance(state)
        description += f" ({players[0].id} skipped)"
    if state.draw_stack > 0:
        description += _resolve_draw_stack(state, rng)
    state.record(description)
    logger.info("New game for %s, start card %s", ", ".join(player_ids), start)
    return state


def _require_turn(state: GameState, player_id: str) -> PlayerState:
    if state.winner is not None:
        raise InvalidAction("The game is over")
    player = state.find_player(player_id)
    if player is None:
        raise InvalidAction(f"Unknown player {player_id}")
    if state.current_player is not player:
        raise InvalidAction(f"It is not {player_id}'s turn")
    return player


def _find_card(state: GameState, player: PlayerState, card_id: str) -> Tuple[Card, bool]:
    """Look up a card in hand, then in the held drawn card. Returns (card, from_hand)."""
    for card in player.hand:
        if card.id == card_id:
            return card, True
    if state.drawn_card is not None and state.drawn_card.id == card_id:
        return state.drawn_card, False
    raise InvalidAction(f"{player.id} does not hold card {card_id}")


def _resolve_draw_stack(state: GameState, rng: random.Random) -> str:
    """Make the player now on turn take the stack if they cannot add to it."""
    victim = state.current_player
    if victim is None or any(c.is_draw for c in victim.hand):
        return ""
    amount = state.draw_stack
    draw_cards(state, victim.hand, amount, rng)
    state.draw_stack = 0
    victim.declared_low_hand = False
    advance(state)
    return f" ({victim.id} draws {amount} cards)"


def play_card(state: GameState, player_id: str, action: PlayCard, rng: random.Random) -> None:
    player = _require_turn(state, player_id)
    card, from_hand = _find_card(state, player, action.card_id)

    if not is_legal(card, state.top_discard(), state.active_color, state.draw_stack > 0):
        raise InvalidAction(f"{card} cannot be played on {state.top_discard()}")
    chosen = None
    if card.is_wild:
        if action.chosen_color is None:
            raise InvalidAction(f"{card} requires a chosen color")
        try:
            chosen = Color(action.chosen_color)
        except ValueError:
            raise InvalidAction(f"Unknown color {action.chosen_color!r}") from None

    if from_hand:
        player.hand.remove(card)
    else:
        state.drawn_card = None

    state.discard_pile.append(card.with_color(chosen) if card.is_wild else card)
    state.active_color = chosen or card.color

    description = f"{player_id} played {card}"
    if chosen is not None:
        description += f" (chose {chosen.value})"

    # Check win; an unplayed drawn card stays in the held slot
    if not player.hand:
        state.winner = player_id
        state.record(f"{description} and WON!")
        logger.info("%s won the game", player_id)
        return

    # A card drawn this turn stays with the player
    if state.drawn_card is not None:
        player.hand.append(state.drawn_card)
        state.drawn_card = None

    if len(player.hand) == 1 and not player.declared_low_hand:
        draw_cards(state, player.hand, CATCH_PENALTY, rng)
        description += f" (did not declare low hand, draws {CATCH_PENALTY})"
    if len(player.hand) > 1:
        player.declared_low_hand = False

    skip = apply_card_effect(state, card)
    advance(state)
    if skip:
        description += f" ({state.current_player.id} skipped)"
        advance(state)

    if state.draw_stack > 0:
        description += _resolve_draw_stack(state, rng)

    state.drawn_card = None
    state.record(description)


def draw_card(state: GameState, player_id: str, action: DrawCard, rng: random.Random) -> None:
    player = _require_turn(state, player_id)

    if state.draw_stack > 0:
        amount = state.draw_stack
        draw_cards(state, player.hand, amount, rng)
        state.draw_stack = 0
        player.declared_low_hand = False
        advance(state)
        state.record(f"{player_id} drew {amount} cards (penalty)")
        return

    if state.drawn_card is not None:
        raise InvalidAction(f"{player_id} already drew a card this turn")
    state.drawn_card = draw_one(state, rng)
    player.declared_low_hand = False
    state.record(f"{player_id} drew a card")


def pass_turn(state: GameState, player_id: str, action: PassTurn, rng: random.Random) -> None:
    player = _require_turn(state, player_id)
    if state.drawn_card is None:
        raise InvalidAction(f"{player_id} must draw before passing")
    if state.draw_stack > 0:
        raise InvalidAction(f"{player_id} must resolve the draw stack first")

    player.hand.append(state.drawn_card)
    player.declared_low_hand = False
    state.drawn_card = None
    advance(state)
    state.record(f"{player_id} passed their turn")


def declare_low_hand(
    state: GameState, player_id: str, action: DeclareLowHand, rng: random.Random
) -> None:
    player = _require_turn(state, player_id)
    if len(player.hand) > LOW_HAND_LIMIT:
        raise InvalidAction(f"{player_id} holds {len(player.hand)} cards")
    player.declared_low_hand = True
    state.record(f"{player_id} declared a low hand!")


_HANDLERS = {
    PlayCard: play_card,
    DrawCard: draw_card,
    PassTurn: pass_turn,
    DeclareLowHand: declare_low_hand,
}


def _dispatch(state: GameState, player_id: str, action: Action, rng: random.Random) -> None:
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise InvalidAction(f"Unknown action {action!r}")
    handler(state, player_id, action, rng)


def apply_action(
    state: GameState,
    player_id: str,
    action: Action,
    rng: random.Random,
) -> ActionResult:
    """Apply an action and return the new game state, or the rejection."""
    result = run_transition(state, rng, _dispatch, player_id, action, rng)
    if result.ok:
        logger.info("%s", result.state.last_action)
    return result


def _plays_for(card: Card) -> List[Action]:
    if card.is_wild:
        return [PlayCard(card_id=card.id, chosen_color=color) for color in Color]
    return [PlayCard(card_id=card.id)]


def get_legal_actions(state: GameState, player_id: str) -> List[Action]:
    """Return all legal actions for the current player."""
    if state.winner is not None:
        return []
    player = state.current_player
    if player is None or player.id != player_id:
        return []

    top = state.top_discard()
    penalty = state.draw_stack > 0
    candidates = list(player.hand)
    if state.drawn_card is not None:
        candidates.append(state.drawn_card)

    actions: List[Action] = []
    for card in candidates:
        if is_legal(card, top, state.active_color, penalty):
            actions.extend(_plays_for(card))

    if state.drawn_card is None:
        actions.append(DrawCard())
    elif not penalty:
        actions.append(PassTurn())

    if len(player.hand) <= LOW_HAND_LIMIT and not player.declared_low_hand:
        actions.append(DeclareLowHand())

    return actions
