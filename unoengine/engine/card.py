"""Card and Color types for UNO."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


CARD_VALUES = (
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    "skip", "reverse", "draw_two",
    "wild", "wild_draw_four",
)

WILD_VALUES = ("wild", "wild_draw_four")
DRAW_VALUES = ("draw_two", "wild_draw_four")


@dataclass(frozen=True)
class Card:
    """A UNO card.

    For number/action cards: color is set, value is "0"-"9", "skip", "reverse", "draw_two".
    For wild cards: color is None while the card is in the deck or a hand. A wild
    on the discard pile is bound to the color chosen when it was played.
    """

    color: Optional[Color]
    value: str
    id: str = ""

    def __post_init__(self) -> None:
        if self.value not in CARD_VALUES:
            raise ValueError(f"Invalid card value: {self.value}")
        if self.value not in WILD_VALUES and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @property
    def is_wild(self) -> bool:
        return self.value in WILD_VALUES

    @property
    def is_draw(self) -> bool:
        return self.value in DRAW_VALUES

    def with_color(self, color: Optional[Color]) -> "Card":
        """Return the same card (same id) bound to ``color``; wilds only."""
        if not self.is_wild:
            raise ValueError(f"Only wild cards can change color, got {self}")
        return replace(self, color=color)

    def __str__(self) -> str:
        if self.color is None:
            return self.value
        return f"{self.color.value}_{self.value}"
