"""Game models."""

from .card import Card, Rank, Suit, build_deck, shuffle
from .event import EventKind, GameEvent
from .game_state import GameState, Phase, Side

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "build_deck",
    "shuffle",
    "EventKind",
    "GameEvent",
    "GameState",
    "Phase",
    "Side",
]
