"""Move validation for attempted actions."""

from dataclasses import dataclass

from crazy_eights.models.card import Card
from crazy_eights.models.game_state import GameState, Phase, Side

from .errors import CardNotInHand, InvalidPhase, NotYourTurn, RejectedAction, UnplayableCard
from .rules import is_playable


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error: RejectedAction | None = None

    @property
    def error_message(self) -> str:
        return str(self.error) if self.error else ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def reject(cls, error: RejectedAction) -> "ValidationResult":
        return cls(is_valid=False, error=error)


class MoveValidator:
    """Validates actions against the current state.

    Checks run in a fixed order: phase, turn, hand membership, then
    playability. Only the first failure is reported.
    """

    def validate_turn(self, state: GameState, side: Side) -> ValidationResult:
        """Validate that a side may take a play or draw action.

        Args:
            state: Current game state
            side: Side attempting to act

        Returns:
            ValidationResult
        """
        if state.phase != Phase.PLAYING:
            return ValidationResult.reject(
                InvalidPhase(f"Cannot act while phase is {state.phase.value}")
            )
        if state.turn != side:
            return ValidationResult.reject(
                NotYourTurn(f"It is the {state.turn.value}'s turn, not the {side.value}'s")
            )
        return ValidationResult.ok()

    def validate_play(self, state: GameState, side: Side, card: Card) -> ValidationResult:
        """Validate playing a card.

        Args:
            state: Current game state
            side: Side playing the card
            card: Card being played

        Returns:
            ValidationResult
        """
        result = self.validate_turn(state, side)
        if not result.is_valid:
            return result

        if card not in state.hand(side):
            return ValidationResult.reject(
                CardNotInHand(f"{card} is not in the {side.value}'s hand")
            )

        if not is_playable(card, state):
            suit = state.active_suit.value if state.active_suit else "-"
            return ValidationResult.reject(
                UnplayableCard(
                    f"{card} matches neither {suit} nor the rank of {state.top_discard}"
                )
            )

        return ValidationResult.ok()

    def validate_draw(self, state: GameState, side: Side) -> ValidationResult:
        """Validate drawing a card."""
        return self.validate_turn(state, side)

    def validate_suit_choice(self, state: GameState) -> ValidationResult:
        """Validate choosing a suit after the human's eight."""
        if state.phase != Phase.AWAITING_SUIT_CHOICE:
            return ValidationResult.reject(
                InvalidPhase(f"No suit to choose while phase is {state.phase.value}")
            )
        return ValidationResult.ok()
