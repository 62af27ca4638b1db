"""Game engine facade for Crazy Eights."""

from __future__ import annotations

import logging
import random
from typing import Callable

from crazy_eights.config import Config
from crazy_eights.logging import GameLogger
from crazy_eights.models.card import Card, Suit
from crazy_eights.models.event import EventKind, GameEvent
from crazy_eights.models.game_state import GameState, Phase, Side
from crazy_eights.strategy import DrawAction, SimpleStrategy, Strategy

from . import rules
from .validator import MoveValidator, ValidationResult

logger = logging.getLogger(__name__)


class GameEngine:
    """Single entry point for the presentation layer.

    Owns the current GameState, validates every command, applies it via
    the rules and notifies listeners. Rejected commands raise a
    ``RejectedAction`` subclass and leave the state untouched.
    """

    def __init__(
        self,
        config: Config | None = None,
        strategy: Strategy | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            strategy: Opponent policy (SimpleStrategy if not provided)
            game_logger: GameLogger instance for the round log
            rng: Random source for shuffling (seeded from config if not provided)
        """
        self.config = config or Config()
        self.strategy = strategy or SimpleStrategy()
        self.game_logger = game_logger
        self.rng = rng or random.Random(self.config.game.seed)

        self.validator = MoveValidator()
        self._state = GameState()

        self._on_event: Callable[[GameEvent], None] | None = None
        self._on_round_end: Callable[[int, Phase], None] | None = None

    @property
    def state(self) -> GameState:
        """Current snapshot."""
        return self._state

    @property
    def round_id(self) -> int:
        return self._state.round_id

    def current_state(self) -> GameState:
        """Get the current snapshot (read-only)."""
        return self._state

    def set_callbacks(
        self,
        on_event: Callable[[GameEvent], None] | None = None,
        on_round_end: Callable[[int, Phase], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_event: Called after each accepted transition
            on_round_end: Called when a round ends (round_id, phase)
        """
        self._on_event = on_event
        self._on_round_end = on_round_end

    # Queries

    def is_playable(self, card: Card) -> bool:
        """Check a card against the current table."""
        return rules.is_playable(card, self._state)

    def playable_cards(self, side: Side | str) -> list[Card]:
        """Cards in a hand that could be played right now."""
        side = Side(side)
        return [c for c in self._state.hand(side) if self.is_playable(c)]

    # Commands

    def start_round(self) -> GameState:
        """Deal a new round, replacing any previous one."""
        state = rules.start_round(self.rng, round_id=self._state.round_id + 1)
        self._state = state

        logger.info(
            f"Round {state.round_id} started, starter {state.top_discard}, "
            f"{len(state.draw_pile)} cards to draw"
        )

        if self.game_logger:
            self.game_logger.log_round_start(state)

        self._emit(EventKind.ROUND_STARTED)
        return state

    def play_card(self, side: Side | str, card: Card) -> GameState:
        """Play a card from a side's hand.

        When the opponent plays an eight its strategy names the suit in
        the same transition.

        Raises:
            RejectedAction: If the play is not allowed
        """
        side = Side(side)
        self._check(self.validator.validate_play(self._state, side, card), side, "play")

        suit = None
        if card.is_wild and side == Side.OPPONENT:
            remaining = [c for c in self._state.opponent_hand if c != card]
            suit = self.strategy.select_suit(remaining)

        return self._play(side, card, suit)

    def choose_suit(self, suit: Suit | str) -> GameState:
        """Name the suit after the human's eight.

        Raises:
            RejectedAction: If no suit choice is pending
        """
        suit = Suit(suit)
        self._check(self.validator.validate_suit_choice(self._state), None, "choose_suit")

        state = rules.choose_suit(self._state, suit)
        return self._commit(state, Side.PLAYER, "choose_suit", EventKind.SUIT_CHOSEN, suit=suit)

    def draw_card(self, side: Side | str) -> GameState:
        """Draw the top card, or forfeit the turn when the pile is empty.

        Raises:
            RejectedAction: If the draw is not allowed
        """
        side = Side(side)
        self._check(self.validator.validate_draw(self._state, side), side, "draw")

        drawn = self._state.draw_pile[-1] if self._state.draw_pile else None
        state = rules.draw_card(self._state, side)

        if drawn is None:
            logger.debug(f"{side.value} found the draw pile empty and passes")
            kind = EventKind.TURN_FORFEITED
        else:
            kind = EventKind.CARD_DRAWN
        return self._commit(state, side, "draw", kind, card=drawn)

    def run_opponent_turn(self, round_id: int | None = None) -> GameState | None:
        """Let the computer take its turn.

        Args:
            round_id: Round the invocation was scheduled for. A value that
                no longer matches the current round is discarded.

        Returns:
            New state, or None when the invocation was stale

        Raises:
            RejectedAction: If it is not the opponent's turn
        """
        if round_id is not None and round_id != self._state.round_id:
            logger.debug(
                f"Discarding opponent turn for round {round_id} "
                f"(current round {self._state.round_id})"
            )
            return None

        self._check(
            self.validator.validate_turn(self._state, Side.OPPONENT),
            Side.OPPONENT,
            "opponent_turn",
        )

        action = self.strategy.select_action(
            self._state.opponent_hand,
            self._state.active_suit,
            self._state.top_discard,
        )

        if isinstance(action, DrawAction):
            return self.draw_card(Side.OPPONENT)

        self._check(
            self.validator.validate_play(self._state, Side.OPPONENT, action.card),
            Side.OPPONENT,
            "play",
        )
        suit = action.suit
        if action.card.is_wild and suit is None:
            remaining = [c for c in self._state.opponent_hand if c != action.card]
            suit = self.strategy.select_suit(remaining)
        return self._play(Side.OPPONENT, action.card, suit)

    # Internals

    def _play(self, side: Side, card: Card, suit: Suit | None) -> GameState:
        state = rules.play_card(self._state, side, card, declared_suit=suit)
        return self._commit(state, side, "play", EventKind.CARD_PLAYED, card=card, suit=suit)

    def _check(self, result: ValidationResult, side: Side | None, action: str) -> None:
        """Raise the validation error, logging it first."""
        if result.is_valid:
            return

        error = result.error
        who = side.value if side else "player"
        logger.warning(f"Rejected {action} by {who}: {result.error_message}")

        if self.game_logger:
            self.game_logger.log_rejected(
                self._state.round_id,
                side,
                action,
                error.reason,
                result.error_message,
            )

        raise error

    def _commit(
        self,
        state: GameState,
        side: Side,
        action: str,
        kind: EventKind,
        card: Card | None = None,
        suit: Suit | None = None,
    ) -> GameState:
        """Install a new state and notify listeners."""
        self._state = state

        detail = f" {card}" if card else ""
        if suit:
            detail += f" -> {suit.value}"
        logger.debug(f"Turn {state.turn_number}: {side.value} {action}{detail}; {state}")

        if self.game_logger:
            self.game_logger.log_turn(side, action, state, card=card, suit=suit)

        self._emit(kind, side=side, card=card, suit=suit)

        if state.is_terminal:
            self._finish_round()

        return state

    def _finish_round(self) -> None:
        state = self._state
        logger.info(f"Round {state.round_id} over: {state.phase.value}")

        if self.game_logger:
            self.game_logger.log_round_end(state)

        self._emit(EventKind.ROUND_ENDED)

        if self._on_round_end:
            self._on_round_end(state.round_id, state.phase)

    def _emit(
        self,
        kind: EventKind,
        side: Side | None = None,
        card: Card | None = None,
        suit: Suit | None = None,
    ) -> None:
        if self._on_event:
            self._on_event(
                GameEvent(
                    kind=kind,
                    round_id=self._state.round_id,
                    state=self._state,
                    side=side,
                    card=card,
                    suit=suit,
                )
            )
