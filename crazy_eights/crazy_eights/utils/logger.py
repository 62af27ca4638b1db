"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from crazy_eights.models.card import Card
    from crazy_eights.models.game_state import GameState


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Logs go to stderr so they do not interleave with the board on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


RESULT_MESSAGES = {
    "won": "YOU WIN! You emptied your hand.",
    "lost": "GAME OVER. The computer emptied its hand first.",
    "draw": "DRAW GAME. The draw pile is empty and nobody can play.",
}


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_opponent_hand: bool = False):
        """Initialize display.

        Args:
            show_opponent_hand: Whether to reveal the computer's cards
        """
        self.show_opponent_hand = show_opponent_hand

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_round_start(self, round_id: int) -> None:
        """Print round start message."""
        self.print_separator()
        print(f"CRAZY EIGHTS - ROUND {round_id}")
        self.print_separator()

    def print_table(self, state: "GameState", playable: Sequence["Card"] = ()) -> None:
        """Print piles, hands and whose turn it is.

        Args:
            state: Current state
            playable: Player cards to mark as playable
        """
        suit = state.active_suit.value if state.active_suit else "-"
        print(
            f"\nDiscard: {state.top_discard}   Suit: {suit}   "
            f"Draw pile: {len(state.draw_pile)}"
        )

        if self.show_opponent_hand:
            opponent = " ".join(str(c) for c in state.opponent_hand)
            print(f"Computer: {opponent}")
        else:
            print(f"Computer: {len(state.opponent_hand)} cards")

        print("Your hand:")
        for index, card in enumerate(state.player_hand, start=1):
            marker = "*" if card in playable else " "
            print(f"  {index:>2}{marker} {card}")

    def print_event(self, text: str) -> None:
        """Print a one-line action summary."""
        print(f"  -> {text}")

    def print_rejected(self, message: str) -> None:
        """Print a rejected action as user feedback."""
        print(f"  !! {message}")

    def print_result(self, phase: str) -> None:
        """Print the round outcome."""
        self.print_separator()
        print(RESULT_MESSAGES.get(phase, phase))
        self.print_separator()

    def print_help(self) -> None:
        """Print the command list."""
        print("Commands:")
        print("  <n>  play card number n (* marks playable cards)")
        print("  d    draw a card")
        print("  n    start a new round")
        print("  h    show this help")
        print("  q    quit")
