"""Faults raised by the rule engine."""


class EngineError(Exception):
    """Base class for anything that rejects a transition."""


class InvalidAction(EngineError):
    """The submitted action breaks a rule; the state is left untouched."""


class InsufficientCards(EngineError):
    """A required draw found no card in the deck or the recyclable pile."""
