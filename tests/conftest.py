"""Pytest fixtures for blackjack simulator tests."""

import pytest
from hypothesis import strategies as st
from random import Random

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.participants import Dealer, Player
from core.rules import TableRules
from core.game import RoundSimulator


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A full deck drawing from the seeded source."""
    return Deck(rng=rng)


@pytest.fixture
def five():
    return Card(Rank.FIVE, Suit.HEARTS)


@pytest.fixture
def seven():
    return Card(Rank.SEVEN, Suit.HEARTS)


@pytest.fixture
def jack():
    return Card(Rank.JACK, Suit.HEARTS)


@pytest.fixture
def ace():
    return Card(Rank.ACE, Suit.HEARTS)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def rules():
    """Default table thresholds."""
    return TableRules()


@pytest.fixture
def dealer(rules):
    """A dealer with no cards."""
    return Dealer(rules)


@pytest.fixture
def player(dealer):
    """A player seated against the dealer fixture."""
    return Player(dealer)


@pytest.fixture
def reports():
    """Collects every message a simulator reports."""
    return []


@pytest.fixture
def simulator(rng, reports):
    """A simulator with a seeded source and a capturing report sink."""
    return RoundSimulator(rng=rng, report=reports.append)


def cards(*codes: str) -> list[Card]:
    """Build cards from strings like 'AS', '10H', 'K♥'."""
    return [Card.from_string(code) for code in codes]


def hand_of(*codes: str) -> Hand:
    """Build a hand from card strings."""
    return Hand(cards(*codes))


class StackedDeck(Deck):
    """A deck that deals a fixed sequence first, for scripting whole rounds."""

    def __init__(self, order: list[Card]) -> None:
        super().__init__()
        self._order = list(order)

    def draw(self) -> Card:
        if not self._order:
            return super().draw()
        card = self._order.pop(0)
        self._cards.remove(card)
        return card


def stacked(*codes: str):
    """Deck factory for RoundSimulator that deals the given cards first."""
    return lambda rng: StackedDeck(cards(*codes))


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=1, max_cards=6):
    """Generate a random hand."""
    return Hand(draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards)))
