"""Simple opponent strategy.

- Play: first playable non-eight in hand order; an eight only when nothing
  else fits; draw when no card is playable.
- Suit after an eight: the suit held most often in the remaining hand,
  ties going to the earliest suit in canonical order.

Both decisions are deterministic.
"""

from typing import Sequence

from crazy_eights.game.rules import can_play
from crazy_eights.models.card import Card, Suit

from .base import Action, DrawAction, PlayAction, Strategy

# Suit named for an empty hand
DEFAULT_SUIT = next(iter(Suit))


def choose_wild_suit(hand: Sequence[Card]) -> Suit:
    """Pick the most represented suit in a hand.

    Args:
        hand: Cards left after the eight was played

    Returns:
        Suit with the highest count; the earliest of tied suits
    """
    if not hand:
        return DEFAULT_SUIT

    counts = {suit: 0 for suit in Suit}
    for card in hand:
        counts[card.suit] += 1

    best = DEFAULT_SUIT
    for suit in Suit:
        # Strictly greater keeps the earlier suit on ties
        if counts[suit] > counts[best]:
            best = suit
    return best


def opponent_turn_policy(
    hand: Sequence[Card],
    active_suit: Suit | None,
    top_discard: Card | None,
) -> Action:
    """Decide the opponent's action for one turn."""
    playable = [card for card in hand if can_play(card, active_suit, top_discard)]
    if not playable:
        return DrawAction()

    for card in playable:
        if not card.is_wild:
            return PlayAction(card=card)

    eight = playable[0]
    remaining = [card for card in hand if card != eight]
    return PlayAction(card=eight, suit=choose_wild_suit(remaining))


class SimpleStrategy(Strategy):
    """Default opponent: keeps eights for when nothing else fits."""

    def select_action(
        self,
        hand: Sequence[Card],
        active_suit: Suit | None,
        top_discard: Card | None,
    ) -> Action:
        return opponent_turn_policy(hand, active_suit, top_discard)

    def select_suit(self, hand: Sequence[Card]) -> Suit:
        return choose_wild_suit(hand)
