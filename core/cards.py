"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator

from core.exceptions import EmptyDeckError

# Ace counts as either of these, soft value first
ACE_VALUES: tuple[int, int] = (11, 1)

CardValue = int | tuple[int, int]


class Suit(Enum):
    """Card suits."""

    HEARTS = auto()
    DIAMONDS = auto()
    SPADES = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, ordered two through ace."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> CardValue:
        """Return the point value; an ace returns both of its values."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return ACE_VALUES
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Ten, jack, queen and king."""
        return self.blackjack_value == 10


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> CardValue:
        """Return the point value, ``(11, 1)`` for an ace."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        return self.rank.is_ten_value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Deck:
    """A standard 52-card deck that deals uniformly at random."""

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Restore all 52 cards."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def draw(self) -> Card:
        """Remove and return a random remaining card."""
        if not self._cards:
            raise EmptyDeckError()
        return self._cards.pop(self._rng.randrange(len(self._cards)))

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
