"""Hand scoring and outcome rules for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from core.cards import Card

BUST_LIMIT = 21


class Outcome(Enum):
    """Result of a hand, seen from the player's side."""

    WIN = 1
    LOSS = -1
    PUSH = 0

    def __str__(self) -> str:
        return self.name.title()


@dataclass
class Hand:
    """An ordered collection of cards with blackjack scoring."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def points(self) -> int:
        """
        Calculate the hand total.

        Aces count 11 and are reduced to 1, one at a time, only while the
        total is over 21.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            total += card.point

        while total > BUST_LIMIT and aces > 0:
            total -= 10
            aces -= 1

        return total

    def busted(self) -> bool:
        """Check if the hand has busted (total over 21)."""
        return self.points() > BUST_LIMIT

    @property
    def is_soft(self) -> bool:
        """Check if the hand has an ace still counted as 11."""
        if not any(card.is_ace for card in self.cards):
            return False
        total_hard = sum(1 if card.is_ace else card.point for card in self.cards)
        return total_hard + 10 <= BUST_LIMIT

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.busted():
            return f"{cards_str} (BUST)"
        if self.is_soft:
            return f"{cards_str} (soft {self.points()})"
        return f"{cards_str} ({self.points()})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, points={self.points()})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare player and dealer hands.

    Precedence, first match wins: player bust loses, dealer bust wins,
    then the higher total wins and equal totals push.
    """
    if player_hand.busted():
        return Outcome.LOSS

    if dealer_hand.busted():
        return Outcome.WIN

    player_points = player_hand.points()
    dealer_points = dealer_hand.points()

    if player_points > dealer_points:
        return Outcome.WIN
    if player_points < dealer_points:
        return Outcome.LOSS
    return Outcome.PUSH
