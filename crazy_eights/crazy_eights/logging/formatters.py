"""Formatters for round log output."""

from typing import Iterable

from crazy_eights.models.card import Card, Suit
from crazy_eights.models.game_state import GameState, Side

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Suit code followed by rank (e.g., "H7", "D10").
        Empty string if no card.
    """
    if card is None:
        return ""
    return f"{SUIT_CODES[card.suit]}{card.rank.value}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to comma-separated string, keeping their order."""
    return ",".join(format_card(c) for c in cards)


def format_hands(state: GameState) -> dict[str, str]:
    """Format both hands to dict keyed by side name."""
    return {side.value: format_cards(state.hand(side)) for side in Side}
