"""Built-in agents."""

from unoengine.agents.human_agent import HumanAgent
from unoengine.agents.random_agent import RandomAgent

__all__ = ["HumanAgent", "RandomAgent"]
