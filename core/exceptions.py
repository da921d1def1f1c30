"""Exceptions raised by the blackjack engine.

Busts and blackjacks are not errors; they come back from a deal as
``DealOutcome`` values. The classes here signal caller misuse.
"""


class BlackjackError(Exception):
    """Base class for blackjack engine errors."""


class EmptyDeckError(BlackjackError, IndexError):
    """A card was drawn from a deck with no cards left."""

    def __init__(self) -> None:
        super().__init__("Cannot draw from empty deck")


class PrematureScoreAccess(BlackjackError, RuntimeError):
    """A score was requested while the participant was still drawing."""

    def __init__(self, participant: object) -> None:
        self.participant = participant
        super().__init__(f"Score was accessed before {participant} was done.")
