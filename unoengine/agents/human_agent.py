"""Human agent - reads actions from terminal."""

from unoengine.engine import Action, PlayerView
from unoengine.engine.rules import DeclareLowHand, DrawCard, PassTurn, PlayCard


def describe_action(action: Action, view: PlayerView) -> str:
    if isinstance(action, DrawCard):
        if view.draw_stack:
            return f"DRAW {view.draw_stack} (penalty)"
        return "DRAW"
    if isinstance(action, PassTurn):
        return "PASS (keep drawn card)"
    if isinstance(action, DeclareLowHand):
        return "DECLARE LOW HAND"
    cards = list(view.my_hand)
    if view.drawn_card is not None:
        cards.append(view.drawn_card)
    card = next((c for c in cards if c.id == action.card_id), action.card_id)
    extra = f" (choose color: {action.chosen_color.value})" if action.chosen_color else ""
    return f"PLAY {card}{extra}"


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action:
        print(f"\n--- {self._name}'s turn ({player_id}) ---")
        if player_view.last_action:
            print("Last action:", player_view.last_action)
        print("Your hand:", " ".join(str(c) for c in player_view.my_hand))
        if player_view.drawn_card is not None:
            print("Drawn card:", player_view.drawn_card)
        print("Top discard:", player_view.top_discard)
        print("Color to match:", player_view.active_color.value)
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a, player_view)}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            print("Invalid. Try again.")
