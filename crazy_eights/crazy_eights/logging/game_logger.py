"""Round logger for step-by-step replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from crazy_eights.models.card import Card, Suit
from crazy_eights.models.game_state import GameState, Side

from .formatters import format_card, format_hands


class GameLogConfig(BaseModel):
    """Configuration for round logging."""

    enabled: bool = False
    output_path: str = "round_log.jsonl"


def _table(state: GameState) -> dict[str, Any]:
    """Public table fields shared by several records."""
    return {
        "discard": format_card(state.top_discard),
        "active_suit": state.active_suit.value if state.active_suit else "",
        "draw_pile": len(state.draw_pile),
    }


class GameLogger:
    """Logger for round events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of a round.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize round logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_round_start(self, state: GameState) -> None:
        """Log a freshly dealt round.

        Args:
            state: State right after dealing.
        """
        self._write({
            "type": "round_start",
            "timestamp": datetime.now().isoformat(),
            "round": state.round_id,
            "hands": format_hands(state),
            **_table(state),
            "turn": state.turn.value,
        })

    def log_turn(
        self,
        side: Side,
        action: str,
        state: GameState,
        card: Card | None = None,
        suit: Suit | None = None,
    ) -> None:
        """Log one accepted transition.

        Args:
            side: Side that acted.
            action: "play", "choose_suit" or "draw".
            state: State after the transition.
            card: Card played or drawn (None for a forfeited draw).
            suit: Suit named with an eight.
        """
        self._write({
            "type": "turn",
            "round": state.round_id,
            "turn": state.turn_number,
            "side": side.value,
            "action": action,
            "card": format_card(card),
            "suit": suit.value if suit else "",
            "hands": format_hands(state),
            **_table(state),
            "next_turn": state.turn.value,
            "phase": state.phase.value,
        })

    def log_rejected(
        self,
        round_id: int,
        side: Side | None,
        action: str,
        reason: str,
        message: str,
    ) -> None:
        """Log an action the engine refused.

        Args:
            round_id: Current round.
            side: Side that attempted the action (None for suit choice).
            action: "play", "choose_suit" or "draw".
            reason: Stable rejection code (e.g., "not_your_turn").
            message: Human-readable explanation.
        """
        self._write({
            "type": "rejected",
            "round": round_id,
            "side": side.value if side else "",
            "action": action,
            "reason": reason,
            "message": message,
        })

    def log_round_end(self, state: GameState) -> None:
        """Log round end with the result.

        Args:
            state: Terminal state.
        """
        self._write({
            "type": "round_end",
            "round": state.round_id,
            "result": state.phase.value,
            "turn": state.turn_number,
            "hands": format_hands(state),
        })
