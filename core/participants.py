"""Dealer and player: one hand each, a draw policy, and deal outcomes."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from core.cards import Card
from core.exceptions import PrematureScoreAccess
from core.hand import Hand
from core.rules import TableRules


class ParticipantState(Enum):
    """Where a participant is in the current round."""

    PLAYING = auto()
    STANDING = auto()
    BUST = auto()
    BLACKJACK = auto()

    @property
    def is_terminal(self) -> bool:
        """Bust or blackjack ends the round immediately."""
        return self in (ParticipantState.BUST, ParticipantState.BLACKJACK)

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Continue:
    """The deal did not end the round."""


@dataclass(frozen=True)
class Bust:
    """The participant's hand went over 21."""

    participant: "Participant"

    def __str__(self) -> str:
        return f"{self.participant} bust!"


@dataclass(frozen=True)
class Blackjack:
    """The player hit blackjack and the dealer did not."""

    participant: "Participant"

    def __str__(self) -> str:
        return f"{self.participant} blackjacked!"


DealOutcome = Continue | Bust | Blackjack


class Participant(Protocol):
    """Anything that can be dealt to and asked whether it wants a card."""

    name: str
    hand: Hand

    @property
    def state(self) -> ParticipantState: ...

    def receive(self, card: Card) -> DealOutcome: ...

    def wants_another_card(self) -> bool: ...

    def stand(self) -> None: ...

    def final_score(self) -> int | None: ...


def _has_blackjack(hand: Hand, rules: TableRules) -> bool:
    return hand.is_natural if rules.strict_blackjack else hand.is_blackjack


class Dealer:
    """The house: draws to a fixed total and shows its first card."""

    def __init__(self, rules: TableRules | None = None, name: str = "Dealer") -> None:
        self.name = name
        self.rules = rules or TableRules()
        self.hand = Hand()
        self._state = ParticipantState.PLAYING

    @property
    def state(self) -> ParticipantState:
        return self._state

    @property
    def has_blackjack(self) -> bool:
        return _has_blackjack(self.hand, self.rules)

    def showing_card(self) -> Card | None:
        """Return the first card dealt, the one the player can see."""
        return self.hand.cards[0] if self.hand.cards else None

    def receive(self, card: Card) -> DealOutcome:
        """Take a card; only a bust ends the round for the dealer."""
        self.hand.add_card(card)
        if self.hand.is_bust:
            self._state = ParticipantState.BUST
            return Bust(self)
        return Continue()

    def wants_another_card(self) -> bool:
        if self._state is not ParticipantState.PLAYING:
            return False
        best = self.hand.best_value()
        return best is not None and best < self.rules.dealer_stands_on

    def stand(self) -> None:
        if self._state is ParticipantState.PLAYING:
            self._state = ParticipantState.STANDING

    def final_score(self) -> int | None:
        """Return the best total once the dealer has stopped drawing."""
        if self.wants_another_card() and not self.hand.is_bust and not self.has_blackjack:
            raise PrematureScoreAccess(self)
        return self.hand.best_value()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Dealer({self.name!r}, {self.hand!r}, state={self._state.name})"


class Player:
    """
    The player, seated against one dealer.

    The dealer reference is read-only: it is consulted for the showing
    card when deciding to draw, and for a dealer blackjack when the
    player's own blackjack would otherwise end the round.
    """

    def __init__(
        self,
        dealer: Dealer,
        rules: TableRules | None = None,
        name: str = "Player",
    ) -> None:
        self.name = name
        self.rules = rules or dealer.rules
        self.hand = Hand()
        self._dealer = dealer
        self._state = ParticipantState.PLAYING

    @property
    def dealer(self) -> Dealer:
        return self._dealer

    @property
    def state(self) -> ParticipantState:
        return self._state

    @property
    def has_blackjack(self) -> bool:
        return _has_blackjack(self.hand, self.rules)

    def receive(self, card: Card) -> DealOutcome:
        """
        Take a card and report whether it ended the round.

        Returns:
            Bust if the hand went over, Blackjack if the player has one
            and the dealer does not, otherwise Continue.
        """
        self.hand.add_card(card)
        if self.hand.is_bust:
            self._state = ParticipantState.BUST
            return Bust(self)
        if self.has_blackjack and not self._dealer.has_blackjack:
            self._state = ParticipantState.BLACKJACK
            return Blackjack(self)
        return Continue()

    def wants_another_card(self) -> bool:
        """
        Simple draw heuristic:

        * best total below 16
        * best total below 19 and holding an ace
        * best total below 19 and the dealer is showing an ace
        """
        if self._state is not ParticipantState.PLAYING:
            return False
        best = self.hand.best_value()
        if best is None:
            return False
        if best < self.rules.player_hits_below:
            return True
        if best < self.rules.player_soft_hits_below:
            if self.hand.has_ace:
                return True
            showing = self._dealer.showing_card()
            if showing is not None and showing.is_ace:
                return True
        return False

    def stand(self) -> None:
        if self._state is ParticipantState.PLAYING:
            self._state = ParticipantState.STANDING

    def final_score(self) -> int | None:
        """
        Return the best total once the player is done.

        Raises:
            PrematureScoreAccess: the player would still draw
        """
        if self.wants_another_card() and not self.hand.is_bust and not self.has_blackjack:
            raise PrematureScoreAccess(self)
        return self.hand.best_value()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Player({self.name!r}, {self.hand!r}, state={self._state.name})"
