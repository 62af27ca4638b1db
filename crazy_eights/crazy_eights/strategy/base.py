"""Base strategy class for the computer opponent.

Defines the interface that every opponent policy must implement. A
strategy only ever sees its own hand and the public table (active suit
and top of discard), never the human's hand.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Union

from crazy_eights.models.card import Card, Suit


@dataclass(frozen=True)
class PlayAction:
    """Play a card. ``suit`` is the suit named when the card is an eight."""

    card: Card
    suit: Suit | None = None


@dataclass(frozen=True)
class DrawAction:
    """Draw from the pile (or forfeit the turn if it is empty)."""


Action = Union[PlayAction, DrawAction]


class Strategy(ABC):
    """Abstract base class for opponent strategies."""

    @abstractmethod
    def select_action(
        self,
        hand: Sequence[Card],
        active_suit: Suit | None,
        top_discard: Card | None,
    ) -> Action:
        """Choose what to do on the opponent's turn.

        Args:
            hand: Opponent's hand, in order
            active_suit: Suit that must be followed
            top_discard: Top of the discard pile

        Returns:
            PlayAction with a playable card, or DrawAction
        """
        pass

    @abstractmethod
    def select_suit(self, hand: Sequence[Card]) -> Suit:
        """Name a suit after playing an eight.

        Args:
            hand: Opponent's hand with the eight already removed

        Returns:
            Suit to make active
        """
        pass
