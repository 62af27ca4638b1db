"""Tests for the opponent strategy."""

import pytest

from crazy_eights.models.card import Card, Rank, Suit
from crazy_eights.strategy import (
    DrawAction,
    PlayAction,
    SimpleStrategy,
    Strategy,
    choose_wild_suit,
    opponent_turn_policy,
)


def card(rank: str, suit: str) -> Card:
    return Card(suit=Suit(suit), rank=Rank(rank))


class TestChooseWildSuit:
    """Tests for the suit picked after an eight."""

    def test_most_common(self):
        """Test that the most held suit wins."""
        hand = [card("2", "spades"), card("3", "spades"), card("4", "hearts")]
        assert choose_wild_suit(hand) == Suit.SPADES

    def test_tie_goes_to_canonical_order(self):
        """Test that ties resolve to the earliest suit."""
        hand = [card("2", "spades"), card("3", "hearts")]
        assert choose_wild_suit(hand) == Suit.HEARTS

    def test_tie_between_later_suits(self):
        """Test that clubs beats spades on a tie."""
        hand = [
            card("2", "spades"),
            card("3", "clubs"),
            card("4", "spades"),
            card("5", "clubs"),
            card("6", "hearts"),
        ]
        assert choose_wild_suit(hand) == Suit.CLUBS

    def test_single_card(self):
        """Test a one-card hand."""
        assert choose_wild_suit([card("K", "diamonds")]) == Suit.DIAMONDS

    def test_empty_hand(self):
        """Test that an empty hand does not fail."""
        assert choose_wild_suit([]) == Suit.HEARTS

    def test_counts_other_eights(self):
        """Test that remaining eights count towards their suit."""
        hand = [card("8", "clubs"), card("8", "spades"), card("2", "spades")]
        assert choose_wild_suit(hand) == Suit.SPADES


class TestOpponentTurnPolicy:
    """Tests for the per-turn decision."""

    def test_prefers_non_eight(self):
        """Test that an eight is kept when another card fits."""
        hand = [card("8", "hearts"), card("5", "diamonds"), card("6", "diamonds")]
        action = opponent_turn_policy(hand, Suit.DIAMONDS, card("K", "diamonds"))
        assert action == PlayAction(card=card("5", "diamonds"))

    def test_rank_match(self):
        """Test playing on the top card's rank."""
        hand = [card("2", "clubs"), card("K", "spades")]
        action = opponent_turn_policy(hand, Suit.DIAMONDS, card("K", "diamonds"))
        assert action == PlayAction(card=card("K", "spades"))

    def test_eight_when_nothing_else(self):
        """Test that an eight is played with the best remaining suit."""
        hand = [card("2", "clubs"), card("8", "hearts"), card("3", "clubs")]
        action = opponent_turn_policy(hand, Suit.DIAMONDS, card("K", "diamonds"))

        assert isinstance(action, PlayAction)
        assert action.card == card("8", "hearts")
        assert action.suit == Suit.CLUBS

    def test_first_eight_in_hand_order(self):
        """Test which eight is used when several are held."""
        hand = [card("8", "spades"), card("8", "hearts"), card("2", "hearts")]
        action = opponent_turn_policy(hand, Suit.DIAMONDS, card("K", "diamonds"))

        assert action.card == card("8", "spades")
        assert action.suit == Suit.HEARTS

    def test_last_card_eight(self):
        """Test playing a final eight with no cards left to count."""
        action = opponent_turn_policy(
            [card("8", "clubs")], Suit.DIAMONDS, card("K", "diamonds")
        )
        assert action == PlayAction(card=card("8", "clubs"), suit=Suit.HEARTS)

    def test_draw_when_stuck(self):
        """Test drawing when nothing fits."""
        hand = [card("2", "clubs"), card("3", "spades")]
        action = opponent_turn_policy(hand, Suit.DIAMONDS, card("K", "diamonds"))
        assert action == DrawAction()

    def test_deterministic(self):
        """Test that the same input always gives the same action."""
        hand = [card("8", "hearts"), card("2", "clubs"), card("4", "clubs")]
        actions = {
            opponent_turn_policy(hand, Suit.DIAMONDS, card("K", "diamonds"))
            for _ in range(20)
        }
        assert len(actions) == 1


class TestSimpleStrategy:
    """Tests for the SimpleStrategy wrapper."""

    @pytest.fixture
    def strategy(self):
        return SimpleStrategy()

    def test_is_strategy(self, strategy):
        """Test the interface."""
        assert isinstance(strategy, Strategy)

    def test_select_action(self, strategy):
        """Test that select_action follows the policy."""
        hand = [card("5", "diamonds")]
        assert strategy.select_action(hand, Suit.DIAMONDS, card("K", "diamonds")) == (
            PlayAction(card=card("5", "diamonds"))
        )

    def test_select_suit(self, strategy):
        """Test that select_suit follows the suit policy."""
        assert strategy.select_suit([card("2", "clubs")]) == Suit.CLUBS

    def test_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            Strategy()
