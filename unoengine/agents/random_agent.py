"""Random agent - picks any legal action, used to exercise the engine."""

import random
from typing import Optional

from unoengine.engine import Action, PlayerView
from unoengine.engine.rules import DeclareLowHand, PlayCard


class RandomAgent:
    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action:
        # Declare most of the time so both sides of the catch rule get hit
        if any(isinstance(a, DeclareLowHand) for a in legal_actions) and self._rng.random() < 0.7:
            return DeclareLowHand()

        # Prefer playing over drawing to make game progress
        play_actions = [a for a in legal_actions if isinstance(a, PlayCard)]
        if play_actions:
            return self._rng.choice(play_actions)
        return self._rng.choice(legal_actions)
