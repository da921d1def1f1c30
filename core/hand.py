"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from core.cards import Card

BLACKJACK = 21


@dataclass
class Hand:
    """Cards dealt to one participant, in the order received."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def possible_values(self) -> list[int]:
        """
        Every total the hand can be counted as, sorted and unique.

        An ace forks each running total into ``total + 11`` and
        ``total + 1``, so n aces give up to 2**n combinations before
        duplicates are removed.
        """
        totals = {0}
        for card in self.cards:
            value = card.value
            if isinstance(value, tuple):
                totals = {total + v for total in totals for v in value}
            else:
                totals = {total + value for total in totals}
        return sorted(totals)

    @property
    def is_bust(self) -> bool:
        """Check if every possible total is over 21."""
        return all(value > BLACKJACK for value in self.possible_values())

    @property
    def is_blackjack(self) -> bool:
        """
        Check for one ace and one ten-valued card.

        The whole hand is scanned, so A-K-2-3 also counts. Use
        ``is_natural`` to require exactly two cards.
        """
        aces = sum(1 for card in self.cards if card.is_ace)
        tens = sum(1 for card in self.cards if card.is_ten_value)
        return aces == 1 and tens == 1

    @property
    def is_natural(self) -> bool:
        """Check for a two-card blackjack."""
        return len(self.cards) == 2 and self.is_blackjack

    @property
    def has_ace(self) -> bool:
        return any(card.is_ace for card in self.cards)

    def best_value(self) -> int | None:
        """Return the highest total not over 21, or None if bust."""
        legal = [value for value in self.possible_values() if value <= BLACKJACK]
        return max(legal) if legal else None

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_bust:
            value_str = "(BUST)"
        else:
            value_str = f"({self.best_value()})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, values={self.possible_values()})"
