"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, DeckEmptyError, Rank, Suit
from core.hand import Hand, Outcome, evaluate_hands
from core.players import Player, Role

__all__ = [
    "Card",
    "Deck",
    "DeckEmptyError",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "evaluate_hands",
    "Player",
    "Role",
]
