"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.exceptions import BlackjackError, EmptyDeckError, PrematureScoreAccess
from core.hand import Hand
from core.participants import Blackjack, Bust, Continue, Dealer, ParticipantState, Player
from core.rules import TableRules

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Dealer",
    "Player",
    "ParticipantState",
    "Continue",
    "Bust",
    "Blackjack",
    "TableRules",
    "BlackjackError",
    "EmptyDeckError",
    "PrematureScoreAccess",
]
