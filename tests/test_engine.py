"""Unit tests for the deck, setup, move validator and turn controller."""

import random
from collections import Counter

import pytest
from unoengine.engine import (
    Card,
    Color,
    build_canonical_deck,
    create_deck,
    init_game,
    is_legal,
    shuffle,
)
from unoengine.engine import rules
from unoengine.engine.deck import cards_conserved
from unoengine.engine.turns import advance, apply_card_effect, next_index

from helpers import BLUE, GREEN, RED, YELLOW, card, make_state, pick, plain_hands, rigged_deck


def test_canonical_deck_composition() -> None:
    deck = build_canonical_deck()
    assert len(deck) == 108
    assert len({c.id for c in deck}) == 108
    counts = Counter((c.color, c.value) for c in deck)
    for color in Color:
        assert counts[(color, "0")] == 1
        for value in ("1", "5", "9", "skip", "reverse", "draw_two"):
            assert counts[(color, value)] == 2
    assert counts[(None, "wild")] == 4
    assert counts[(None, "wild_draw_four")] == 4


def test_canonical_deck_is_deterministic() -> None:
    assert build_canonical_deck() == build_canonical_deck()
    assert build_canonical_deck()[0].id == "c-0"
    assert build_canonical_deck()[-1].id == "c-107"


def test_create_deck_reproducible() -> None:
    d1 = create_deck(random.Random(123))
    d2 = create_deck(random.Random(123))
    assert [c.id for c in d1] == [c.id for c in d2]


def test_shuffle_keeps_cards_and_input() -> None:
    cards = build_canonical_deck()
    shuffled = shuffle(cards, random.Random(7))
    assert cards == build_canonical_deck()
    assert sorted(c.id for c in shuffled) == sorted(c.id for c in cards)


def test_card_validation() -> None:
    with pytest.raises(ValueError):
        Card(color=None, value="5")
    with pytest.raises(ValueError):
        Card(color=RED, value="eleven")
    with pytest.raises(ValueError):
        card(RED, "5").with_color(BLUE)
    wild = Card(color=None, value="wild", id="w")
    bound = wild.with_color(GREEN)
    assert bound.id == "w"
    assert str(bound) == "green_wild"


def test_init_game() -> None:
    state = init_game(["p1", "p2", "p3"], rng=random.Random(1))
    assert len(state.players) == 3
    assert len(state.discard_pile) == 1
    assert state.winner is None
    assert state.drawn_card is None
    assert state.top_discard().value != "wild_draw_four"
    assert cards_conserved(state)
    if state.top_discard().value != "draw_two":
        assert all(len(p.hand) == 7 for p in state.players)
        assert len(state.deck) == 108 - 7 * 3 - 1


@pytest.mark.parametrize("player_ids", [[], [f"p{i}" for i in range(7)], ["p1", "p1"]])
def test_init_game_rejects_bad_rosters(player_ids) -> None:
    with pytest.raises(ValueError):
        init_game(player_ids, rng=random.Random(0))


def test_init_game_never_starts_with_wild_draw_four() -> None:
    for seed in range(200):
        state = init_game(["p1", "p2"], rng=random.Random(seed))
        assert state.top_discard().value != "wild_draw_four"
        assert state.active_color in Color


def _rigged_game(monkeypatch, start, num_players, hands=None):
    hands = hands or plain_hands(num_players, exclude={start.id})
    deck = rigged_deck(start, hands)
    monkeypatch.setattr(rules, "create_deck", lambda rng: list(deck))
    return init_game([f"p{i}" for i in range(num_players)], rng=random.Random(0))


def test_start_reverse_two_players_acts_as_skip(monkeypatch) -> None:
    state = _rigged_game(monkeypatch, pick("reverse", RED), 2)
    assert state.current_player_index == 1
    assert state.direction == 1
    assert state.active_color == RED


def test_start_reverse_three_players_flips_direction(monkeypatch) -> None:
    state = _rigged_game(monkeypatch, pick("reverse", BLUE), 3)
    assert state.current_player_index == 0
    assert state.direction == -1


def test_start_skip(monkeypatch) -> None:
    state = _rigged_game(monkeypatch, pick("skip", GREEN), 3)
    assert state.current_player_index == 1


def test_start_draw_two_without_stackable_card(monkeypatch) -> None:
    state = _rigged_game(monkeypatch, pick("draw_two", YELLOW), 3)
    assert len(state.players[0].hand) == 9
    assert state.draw_stack == 0
    assert state.current_player_index == 1
    assert cards_conserved(state)


def test_start_draw_two_with_stackable_card(monkeypatch) -> None:
    start = pick("draw_two", YELLOW)
    hands = plain_hands(2, exclude={start.id})
    hands[0][0] = pick("draw_two", RED)
    state = _rigged_game(monkeypatch, start, 2, hands)
    assert state.draw_stack == 2
    assert state.current_player_index == 0
    assert len(state.players[0].hand) == 7


def test_start_wild_defaults_to_red(monkeypatch) -> None:
    state = _rigged_game(monkeypatch, pick("wild"), 2)
    assert state.active_color == RED
    assert state.top_discard().color == RED
    assert state.current_player_index == 0


def test_start_wild_draw_four_is_replaced(monkeypatch) -> None:
    state = _rigged_game(monkeypatch, pick("wild_draw_four"), 2)
    assert state.top_discard().value != "wild_draw_four"
    assert cards_conserved(state)


def test_wild_is_always_legal() -> None:
    wild = card(None, "wild")
    assert is_legal(wild, card(RED, "3"), RED)
    assert is_legal(wild, card(RED, "draw_two"), RED, penalty_phase=True)
    assert is_legal(card(None, "wild_draw_four"), card(BLUE, "draw_two"), BLUE, penalty_phase=True)


def test_color_and_value_matching() -> None:
    top = card(BLUE, "5")
    assert is_legal(card(BLUE, "9"), top, BLUE)
    assert is_legal(card(RED, "5"), top, BLUE)
    assert not is_legal(card(RED, "6"), top, BLUE)
    # After a wild the chosen color counts, not the top card's printed color
    wild_top = card(None, "wild", "w").with_color(GREEN)
    assert is_legal(card(GREEN, "1"), wild_top, GREEN)
    assert not is_legal(card(RED, "1"), wild_top, GREEN)


def test_penalty_phase_only_accepts_draw_cards() -> None:
    top = card(RED, "draw_two")
    assert not is_legal(card(RED, "5"), top, RED, penalty_phase=True)
    assert not is_legal(card(GREEN, "skip"), top, RED, penalty_phase=True)
    assert is_legal(card(GREEN, "draw_two"), top, RED, penalty_phase=True)
    # Without a pending stack the same top card is matched normally
    assert is_legal(card(RED, "5"), top, RED)


def test_penalty_phase_allows_stacking_on_non_draw_top() -> None:
    top = card(None, "wild", "w").with_color(BLUE)
    assert is_legal(card(RED, "draw_two"), top, BLUE, penalty_phase=True)
    assert is_legal(card(BLUE, "5"), top, BLUE, penalty_phase=True)
    assert not is_legal(card(RED, "5"), top, BLUE, penalty_phase=True)


def test_next_index() -> None:
    assert next_index(0, 1, 3) == 1
    assert next_index(2, 1, 3) == 0
    assert next_index(0, -1, 3) == 2
    assert next_index(0, 1, 0) == 0
    assert next_index(0, 1, 1) == 0


def test_two_reverses_restore_direction() -> None:
    state = make_state({"p1": [], "p2": [], "p3": []}, card(RED, "1"))
    assert apply_card_effect(state, card(RED, "reverse")) is False
    assert state.direction == -1
    apply_card_effect(state, card(BLUE, "reverse"))
    assert state.direction == 1


def test_reverse_with_two_players_skips() -> None:
    state = make_state({"p1": [], "p2": []}, card(RED, "1"))
    assert apply_card_effect(state, card(RED, "reverse")) is True
    assert state.direction == 1


def test_draw_cards_grow_stack() -> None:
    state = make_state({"p1": [], "p2": []}, card(RED, "1"))
    apply_card_effect(state, card(RED, "draw_two"))
    apply_card_effect(state, card(None, "wild_draw_four"))
    assert state.draw_stack == 6
    assert apply_card_effect(state, card(RED, "skip")) is True


def test_advance_with_empty_roster() -> None:
    state = make_state({}, card(RED, "1"))
    advance(state)
    assert state.current_player_index == 0
