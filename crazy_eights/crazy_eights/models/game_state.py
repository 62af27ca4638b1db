"""Game state models."""

from enum import Enum

from pydantic import BaseModel

from .card import Card, Suit


class Side(str, Enum):
    """Seat at the table."""

    PLAYER = "player"  # Human
    OPPONENT = "opponent"  # Computer

    @property
    def other(self) -> "Side":
        """The side that moves after this one."""
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class Phase(str, Enum):
    """Round phase."""

    IDLE = "idle"  # No round started yet
    PLAYING = "playing"
    AWAITING_SUIT_CHOICE = "awaiting-suit-choice"  # Human played an eight
    WON = "won"  # Human emptied their hand
    LOST = "lost"  # Opponent emptied its hand
    DRAW = "draw"  # Draw pile empty and nobody can play

    @property
    def is_terminal(self) -> bool:
        """Check if no further moves are accepted in this phase."""
        return self in TERMINAL_PHASES


TERMINAL_PHASES = frozenset({Phase.WON, Phase.LOST, Phase.DRAW})

HAND_FIELDS = {
    Side.PLAYER: "player_hand",
    Side.OPPONENT: "opponent_hand",
}


class GameState(BaseModel, frozen=True):
    """Immutable snapshot of a round.

    Transitions never modify a snapshot; they build a new one with
    ``model_copy(update=...)``.
    """

    player_hand: tuple[Card, ...] = ()
    opponent_hand: tuple[Card, ...] = ()
    draw_pile: tuple[Card, ...] = ()  # Top is the last element
    discard_pile: tuple[Card, ...] = ()  # Top is the last element
    active_suit: Suit | None = None
    turn: Side = Side.PLAYER
    phase: Phase = Phase.IDLE

    round_id: int = 0
    turn_number: int = 0

    @property
    def top_discard(self) -> Card | None:
        """Most recently played card."""
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def is_terminal(self) -> bool:
        """Check if the round is over."""
        return self.phase.is_terminal

    def hand(self, side: Side) -> tuple[Card, ...]:
        """Get the hand held by a side."""
        return getattr(self, HAND_FIELDS[side])

    def all_cards(self) -> list[Card]:
        """Every card in hands and piles (for integrity checks)."""
        return [
            *self.player_hand,
            *self.opponent_hand,
            *self.draw_pile,
            *self.discard_pile,
        ]

    def __str__(self) -> str:
        if self.phase == Phase.IDLE:
            return "Round not started"
        suit = self.active_suit.value if self.active_suit else "-"
        return (
            f"Round {self.round_id}, Turn {self.turn_number} "
            f"[{self.phase.value}] {self.turn.value} to act, "
            f"top {self.top_discard}, suit {suit}"
        )
