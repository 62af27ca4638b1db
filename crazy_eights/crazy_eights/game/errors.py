"""Rejected-action errors.

All of these are usage errors raised by the engine facade. The state is
left untouched whenever one is raised.
"""


class RejectedAction(Exception):
    """Base class for actions the engine refuses to apply."""

    reason = "rejected"


class NotYourTurn(RejectedAction):
    """The acting side does not hold the turn."""

    reason = "not_your_turn"


class InvalidPhase(RejectedAction):
    """The current phase does not allow the action."""

    reason = "invalid_phase"


class CardNotInHand(RejectedAction):
    """The card is not in the acting side's hand."""

    reason = "card_not_in_hand"


class UnplayableCard(RejectedAction):
    """The card matches neither the active suit nor the top rank."""

    reason = "unplayable_card"
