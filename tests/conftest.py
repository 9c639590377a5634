"""Pytest fixtures for console blackjack tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.game import BlackjackGame


def scripted(*tokens):
    """Decision source answering with the given tokens in order."""
    answers = iter(tokens)
    return lambda: next(answers)


def stacked_game(cards, *tokens):
    """
    Build a game dealing ``cards`` in order.

    The initial deal takes cards 0-3 as player, dealer, player, dealer.
    """
    return BlackjackGame(decide=scripted(*tokens), deck=Deck.stacked(cards))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def bust_hand():
    """A busted hand."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    hand.add_card(Card(Rank.KING, Suit.CLUBS))
    return hand


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw, ranks=tuple(Rank)):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(ranks)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=0, max_cards=8, ranks=tuple(Rank)):
    """Generate a random hand."""
    cards = draw(
        st.lists(card_strategy(ranks=ranks), min_size=min_cards, max_size=max_cards)
    )
    return Hand(cards=list(cards))
