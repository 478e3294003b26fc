"""Simulate a game with random agents and print how it went."""

import logging

from unoengine.agents.random_agent import RandomAgent
from unoengine.engine.deck import cards_conserved
from unoengine.orchestration.game_runner import GameRunner


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    agents = {
        "p1": RandomAgent("Bot1", seed=1),
        "p2": RandomAgent("Bot2", seed=2),
        "p3": RandomAgent("Bot3", seed=3),
        "p4": RandomAgent("Bot4", seed=4),
    }

    def after_action(state):
        assert cards_conserved(state), state.last_action

    runner = GameRunner(agents, seed=42, after_action=after_action)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    for event in runner.session.state.history[-10:]:
        print(f"> {event}")


if __name__ == "__main__":
    main()
