"""Game logic.

The engine facade lives in ``crazy_eights.game.engine``.
"""

from .errors import CardNotInHand, InvalidPhase, NotYourTurn, RejectedAction, UnplayableCard
from .rules import can_play, is_playable
from .validator import MoveValidator, ValidationResult

__all__ = [
    "CardNotInHand",
    "InvalidPhase",
    "NotYourTurn",
    "RejectedAction",
    "UnplayableCard",
    "can_play",
    "is_playable",
    "MoveValidator",
    "ValidationResult",
]
