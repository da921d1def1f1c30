"""Tests for Card and Deck classes."""

import pytest
from random import Random

from core.cards import ACE_VALUES, Card, Deck, Rank, Suit
from core.exceptions import BlackjackError, EmptyDeckError


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        card = Card(Rank.TEN, Suit.HEARTS)
        assert card.suit == Suit.HEARTS
        assert card.rank == Rank.TEN
        assert card.value == 10

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_values(self):
        """Number cards score face value, court cards ten."""
        assert Card(Rank.TWO, Suit.CLUBS).value == 2
        assert Card(Rank.NINE, Suit.CLUBS).value == 9
        for rank in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING):
            assert Card(rank, Suit.CLUBS).value == 10

    def test_ace_has_two_values(self):
        ace = Card(Rank.ACE, Suit.DIAMONDS)
        assert ace.value == ACE_VALUES
        assert set(ace.value) == {11, 1}
        assert ace.is_ace
        assert not ace.is_ten_value

    def test_card_is_ten_value(self):
        assert Card(Rank.JACK, Suit.SPADES).is_ten_value
        assert not Card(Rank.NINE, Suit.SPADES).is_ten_value

    def test_card_from_string(self):
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("10d") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("TD") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("K♥") == Card(Rank.KING, Suit.HEARTS)

    @pytest.mark.parametrize("text", ["", "A", "1S", "AX", "11H"])
    def test_card_from_string_invalid(self, text):
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_card_str(self):
        assert str(Card(Rank.QUEEN, Suit.CLUBS)) == "Q♣"

    def test_card_hash(self):
        """Equal cards collapse in a set."""
        cards = {Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}
        assert len(cards) == 1


class TestDeck:
    """Tests for the Deck class."""

    def test_new_deck_has_52_cards(self, deck):
        assert len(deck) == 52
        assert deck.cards_remaining == 52

    def test_deck_has_all_cards(self, deck):
        """Every suit and rank appears exactly once."""
        cards = list(deck)
        assert len(set(cards)) == 52
        assert {card.suit for card in cards} == set(Suit)
        assert {card.rank for card in cards} == set(Rank)

    def test_drawn_card_not_in_deck(self, deck):
        card = deck.draw()
        assert isinstance(card, Card)
        assert len(deck) == 51
        assert card not in deck

    def test_draw_never_repeats(self, deck):
        drawn = [deck.draw() for _ in range(52)]
        assert len(set(drawn)) == 52
        assert len(deck) == 0

    def test_draw_is_random(self):
        """Different seeds pick different cards from the same ordered deck."""
        first = [Deck(rng=Random(seed)).draw() for seed in range(10)]
        assert len(set(first)) > 1

    def test_same_seed_same_draws(self):
        a, b = Deck(rng=Random(7)), Deck(rng=Random(7))
        assert [a.draw() for _ in range(5)] == [b.draw() for _ in range(5)]

    def test_draw_empty_raises(self, deck):
        for _ in range(52):
            deck.draw()

        with pytest.raises(EmptyDeckError):
            deck.draw()

    def test_empty_deck_error_hierarchy(self):
        assert issubclass(EmptyDeckError, BlackjackError)
        assert issubclass(EmptyDeckError, IndexError)

    def test_deck_reset(self, deck):
        deck.draw()
        deck.draw()
        assert len(deck) == 50

        deck.reset()
        assert len(deck) == 52
        assert len(set(deck)) == 52
