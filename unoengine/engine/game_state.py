"""Game state for UNO."""

import copy
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from unoengine.engine.card import Card, Color


@dataclass
class PlayerState:
    """A seated player: their hand and whether they declared a low hand."""

    id: str
    hand: List[Card] = field(default_factory=list)
    declared_low_hand: bool = False


@dataclass
class GameState:
    """Mutable UNO game state.

    Handlers mutate a private copy (see ``unoengine.engine.result``), so a
    state handed out by the engine is never changed underneath its holder.
    """

    deck: List[Card]  # top is last
    discard_pile: List[Card]  # top is last
    players: List[PlayerState]
    current_player_index: int = 0
    direction: int = 1  # 1 = clockwise, -1 = counter-clockwise
    active_color: Color = Color.RED
    winner: Optional[str] = None
    drawn_card: Optional[Card] = None  # drawn this turn, not yet played or passed
    last_action: Optional[str] = None
    draw_stack: int = 0  # accumulated Draw Two/Four
    departed_hands: Dict[str, List[Card]] = field(default_factory=dict)
    history: List[str] = field(default_factory=list)  # Log of events

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def player_order(self) -> tuple[str, ...]:
        return tuple(p.id for p in self.players)

    @property
    def current_player(self) -> Optional[PlayerState]:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    def player_index(self, player_id: str) -> Optional[int]:
        for i, player in enumerate(self.players):
            if player.id == player_id:
                return i
        return None

    def find_player(self, player_id: str) -> Optional[PlayerState]:
        idx = self.player_index(player_id)
        return None if idx is None else self.players[idx]

    def record(self, description: str) -> None:
        """Set the last-action description and append it to the history."""
        self.last_action = description
        self.history.append(description)

    def all_cards(self) -> List[Card]:
        """Every card the game holds, wherever it currently sits."""
        cards = list(self.deck) + list(self.discard_pile)
        for player in self.players:
            cards.extend(player.hand)
        for hand in self.departed_hands.values():
            cards.extend(hand)
        if self.drawn_card is not None:
            cards.append(self.drawn_card)
        return cards

    def copy(self) -> "GameState":
        return copy.deepcopy(self)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    my_hand: List[Card]
    drawn_card: Optional[Card]  # only set when the viewer is holding it
    top_discard: Optional[Card]
    current_player: Optional[str]
    direction: int
    active_color: Color
    draw_stack: int
    winner: Optional[str]
    player_order: tuple[str, ...]
    num_cards_per_player: Dict[str, int]  # player_id -> count
    declared_low_hand: Dict[str, bool]
    last_action: Optional[str]
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player_id: str) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        me = state.find_player(player_id)
        current = state.current_player
        holding = current is not None and current.id == player_id
        return cls(
            my_hand=list(me.hand) if me else [],
            drawn_card=state.drawn_card if holding else None,
            top_discard=state.top_discard(),
            current_player=current.id if current else None,
            direction=state.direction,
            active_color=state.active_color,
            draw_stack=state.draw_stack,
            winner=state.winner,
            player_order=state.player_order,
            num_cards_per_player={p.id: len(p.hand) for p in state.players},
            declared_low_hand={p.id: p.declared_low_hand for p in state.players},
            last_action=state.last_action,
            history=list(state.history[-10:]),  # Last 10 events
        )
