"""Tests for table participants."""

import pytest

from core.cards import Card, Rank, Suit
from core.players import Player, Role


class TestPlayer:
    """Tests for the Player class."""

    def test_starts_with_empty_hand(self):
        """Test a new participant holds no cards."""
        player = Player()
        assert player.role == Role.PLAYER
        assert len(player.hand) == 0

    def test_hit_grows_hand_by_one(self):
        """Test hitting adds exactly one card."""
        player = Player()
        player.hit(Card(Rank.TEN, Suit.SPADES))
        player.hit(Card(Rank.NINE, Suit.HEARTS))
        assert len(player.hand) == 2
        assert player.hand.points() == 19

    def test_hands_are_not_shared(self):
        """Test each participant owns its own hand."""
        player = Player()
        dealer = Player.dealer()
        player.hit(Card(Rank.TEN, Suit.SPADES))
        assert len(dealer.hand) == 0

    def test_player_cannot_show_one_card(self):
        """Test that only the dealer has a partial reveal."""
        player = Player()
        player.hit(Card(Rank.TEN, Suit.SPADES))
        assert not player.is_dealer
        with pytest.raises(ValueError, match="Only the dealer"):
            player.show_one_card()


class TestDealer:
    """Tests for the dealer role."""

    def test_dealer_role(self):
        """Test dealer factory sets the role."""
        dealer = Player.dealer()
        assert dealer.role == Role.DEALER
        assert dealer.is_dealer
        assert str(dealer.role) == "dealer"

    def test_show_one_card_returns_first_card(self):
        """Test the visible card is the first one dealt."""
        dealer = Player.dealer()
        dealer.hit(Card(Rank.SEVEN, Suit.CLUBS))
        dealer.hit(Card(Rank.KING, Suit.HEARTS))
        dealer.hit(Card(Rank.TWO, Suit.HEARTS))
        assert dealer.show_one_card() == Card(Rank.SEVEN, Suit.CLUBS)

    def test_show_one_card_before_deal_raises(self):
        """Test the partial reveal needs a dealt card."""
        with pytest.raises(ValueError, match="No card"):
            Player.dealer().show_one_card()
