"""Table participants. The dealer is a role, not a separate class."""

from dataclasses import dataclass, field
from enum import Enum, auto

from core.cards import Card
from core.hand import Hand


class Role(Enum):
    """Seat at the table."""

    PLAYER = auto()
    DEALER = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Player:
    """A participant owning exactly one hand."""

    role: Role = Role.PLAYER
    hand: Hand = field(default_factory=Hand)

    @classmethod
    def dealer(cls) -> "Player":
        """Create a participant seated as the dealer."""
        return cls(role=Role.DEALER)

    @property
    def is_dealer(self) -> bool:
        """Check if this participant may hide its second card."""
        return self.role == Role.DEALER

    def hit(self, card: Card) -> None:
        """Take one more card."""
        self.hand.add_card(card)

    def show_one_card(self) -> Card:
        """
        Return the dealer's face-up card (the first one dealt).

        Raises:
            ValueError: if called for a non-dealer or before any card is dealt
        """
        if not self.is_dealer:
            raise ValueError("Only the dealer shows a single card")
        if not self.hand.cards:
            raise ValueError("No card has been dealt to the dealer yet")
        return self.hand.cards[0]
