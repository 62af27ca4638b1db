"""Transition events emitted by the engine."""

from enum import Enum

from pydantic import BaseModel

from .card import Card, Suit
from .game_state import GameState, Side


class EventKind(str, Enum):
    """Kind of accepted transition."""

    ROUND_STARTED = "round_started"
    CARD_PLAYED = "card_played"
    SUIT_CHOSEN = "suit_chosen"
    CARD_DRAWN = "card_drawn"
    TURN_FORFEITED = "turn_forfeited"  # Draw attempted on an empty pile
    ROUND_ENDED = "round_ended"


class GameEvent(BaseModel, frozen=True):
    """A single transition, with the state it produced."""

    kind: EventKind
    round_id: int
    state: GameState
    side: Side | None = None
    card: Card | None = None
    suit: Suit | None = None

    def __str__(self) -> str:
        parts = [f"[{self.round_id}] {self.kind.value}"]
        if self.side:
            parts.append(self.side.value)
        if self.card:
            parts.append(str(self.card))
        if self.suit:
            parts.append(f"-> {self.suit.value}")
        return " ".join(parts)
