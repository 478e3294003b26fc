"""Game engine for UNO."""

from unoengine.engine.card import Card, Color
from unoengine.engine.deck import build_canonical_deck, create_deck, ensure_deck_not_empty, shuffle
from unoengine.engine.errors import EngineError, InsufficientCards, InvalidAction
from unoengine.engine.game_state import GameState, PlayerState, PlayerView
from unoengine.engine.result import ActionResult
from unoengine.engine.roster import player_joined, player_left
from unoengine.engine.rules import (
    Action,
    PlayCard,
    DrawCard,
    PassTurn,
    DeclareLowHand,
    get_legal_actions,
    apply_action,
    init_game,
)
from unoengine.engine.validator import is_legal

__all__ = [
    "Card",
    "Color",
    "build_canonical_deck",
    "create_deck",
    "ensure_deck_not_empty",
    "shuffle",
    "EngineError",
    "InsufficientCards",
    "InvalidAction",
    "GameState",
    "PlayerState",
    "PlayerView",
    "ActionResult",
    "player_joined",
    "player_left",
    "Action",
    "PlayCard",
    "DrawCard",
    "PassTurn",
    "DeclareLowHand",
    "get_legal_actions",
    "apply_action",
    "init_game",
    "is_legal",
]
