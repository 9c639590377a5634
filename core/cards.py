"""Card and Deck classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, valued by their printed label."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def point(self) -> int:
        """Return the point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self in (Rank.KING, Rank.QUEEN, Rank.JACK):
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


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
    def point(self) -> int:
        """Return the point value before any ace adjustment."""
        return self.rank.point

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str == "T":
            rank_str = "10"

        suit_map = {
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        try:
            rank = Rank(rank_str)
        except ValueError:
            raise ValueError(f"Invalid rank: {rank_str}") from None
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank, suit_map[suit_str])


class DeckEmptyError(IndexError):
    """Raised when drawing from a deck with no cards left."""


class Deck:
    """A standard 52-card deck, shuffled once when it is built."""

    def __init__(self, rng: Random | None = None) -> None:
        """
        Build and shuffle a full deck.

        Args:
            rng: Random number generator for shuffling (seed it for
                reproducible games)
        """
        self._rng = rng or Random()
        self._cards: list[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled a new deck of %d cards", len(self._cards))

    @classmethod
    def stacked(cls, cards: Iterable[Card | str]) -> "Deck":
        """
        Build a deck that deals the given cards in order.

        The first card of ``cards`` is the first one drawn. Strings are
        parsed with ``Card.from_string``.
        """
        deck = cls.__new__(cls)
        deck._rng = Random()
        deck._cards = [
            Card.from_string(card) if isinstance(card, str) else card
            for card in cards
        ]
        deck._cards.reverse()
        return deck

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise DeckEmptyError("Cannot draw from empty deck")
        card = self._cards.pop()
        logger.debug("Drew %r, %d cards remaining", card, len(self._cards))
        return card

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
