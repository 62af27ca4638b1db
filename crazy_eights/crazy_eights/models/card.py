"""Card model and deck helpers."""

import random
from enum import Enum
from typing import Sequence

from pydantic import BaseModel


class Suit(str, Enum):
    """Card suit.

    Declaration order is the canonical order used for tie-breaking:
    hearts, diamonds, clubs, spades.
    """

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Rank(str, Enum):
    """Card rank, declared in deck order (A low, K high)."""

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


# Display value of each rank (A=1 ... K=13)
RANK_VALUES = {rank: value for value, rank in enumerate(Rank, start=1)}

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

# Rank that can be played on anything and lets its player name the suit
WILD_RANK = Rank.EIGHT

DECK_SIZE = len(Suit) * len(Rank)


class Card(BaseModel, frozen=True):
    """Single playing card.

    A standard deck holds each suit/rank pair once, so two equal cards
    are the same physical card.
    """

    suit: Suit
    rank: Rank

    @property
    def value(self) -> int:
        """Display value derived from the rank."""
        return RANK_VALUES[self.rank]

    @property
    def is_wild(self) -> bool:
        """Check if this card is an eight."""
        return self.rank == WILD_RANK

    def __str__(self) -> str:
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"


def build_deck() -> list[Card]:
    """Create a full 52-card deck in canonical suit/rank order."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def shuffle(cards: Sequence[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a uniformly shuffled copy of the cards.

    Args:
        cards: Cards to shuffle. Never modified.
        rng: Random source. Uses the module-level generator if omitted.

    Returns:
        New list holding a permutation of the input.
    """
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled
