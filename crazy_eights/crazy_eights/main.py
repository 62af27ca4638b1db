"""Terminal front end for Crazy Eights."""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from crazy_eights.config import load_config
from crazy_eights.game.engine import GameEngine
from crazy_eights.game.errors import RejectedAction
from crazy_eights.logging import GameLogConfig, GameLogger
from crazy_eights.models.card import Suit
from crazy_eights.models.event import EventKind, GameEvent
from crazy_eights.models.game_state import Phase, Side
from crazy_eights.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

SUIT_ALIASES = {suit.value[0]: suit for suit in Suit} | {suit.value: suit for suit in Suit}

SIDE_NAMES = {
    Side.PLAYER: "You",
    Side.OPPONENT: "Computer",
}


@dataclass(frozen=True)
class Command:
    """A parsed line of user input."""

    kind: str  # "play", "draw", "new", "help" or "quit"
    index: int = 0  # 1-based card position for "play"


def parse_command(text: str) -> Command | None:
    """Parse a command typed at the prompt.

    Returns:
        Command, or None if the text is not understood
    """
    text = text.strip().lower()
    if text.isdigit():
        return Command("play", int(text))
    if text in ("d", "draw"):
        return Command("draw")
    if text in ("n", "new"):
        return Command("new")
    if text in ("h", "help", "?"):
        return Command("help")
    if text in ("q", "quit", "exit"):
        return Command("quit")
    return None


def parse_suit(text: str) -> Suit | None:
    """Parse a suit name or its first letter."""
    return SUIT_ALIASES.get(text.strip().lower())


def describe_event(event: GameEvent) -> str:
    """One-line description of a transition, hiding the computer's draws."""
    who = SIDE_NAMES.get(event.side, "")

    if event.kind == EventKind.ROUND_STARTED:
        return f"Round {event.round_id} dealt, starter {event.state.top_discard}"
    if event.kind == EventKind.CARD_PLAYED:
        text = f"{who} played {event.card}"
        if event.suit:
            text += f" and changed the suit to {event.suit.value}"
        return text
    if event.kind == EventKind.SUIT_CHOSEN:
        return f"{who} changed the suit to {event.suit.value}"
    if event.kind == EventKind.CARD_DRAWN:
        if event.side == Side.PLAYER:
            return f"You drew {event.card}"
        return "Computer drew a card"
    if event.kind == EventKind.TURN_FORFEITED:
        return f"{who} could not draw (pile empty) and passed"
    return f"Round over: {event.state.phase.value}"


def generate_log_filename(log_dir: str) -> str:
    """Generate a timestamped round log filename inside a directory."""
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_crazy_eights.jsonl")


class TerminalSession:
    """Read commands, forward them to the engine and render the results."""

    def __init__(
        self,
        engine: GameEngine,
        display: GameDisplay,
        delay: float = 0.0,
        input_fn: Callable[[str], str] = input,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        self.engine = engine
        self.display = display
        self.delay = delay
        self.input_fn = input_fn
        self.sleep_fn = sleep_fn

        engine.set_callbacks(on_event=self._on_event)

    def _on_event(self, event: GameEvent) -> None:
        if event.kind == EventKind.ROUND_STARTED:
            self.display.print_round_start(event.round_id)
        self.display.print_event(describe_event(event))
        if event.kind == EventKind.ROUND_ENDED:
            self.display.print_result(event.state.phase.value)

    def _prompt(self, text: str) -> str | None:
        try:
            return self.input_fn(text)
        except EOFError:
            return None

    def run(self) -> None:
        """Play rounds until the user quits."""
        self.engine.start_round()

        while True:
            state = self.engine.state

            if state.is_terminal:
                answer = self._prompt("Play again? [y/N] ")
                if answer is None or answer.strip().lower() not in ("y", "yes"):
                    return
                self.engine.start_round()
                continue

            if state.phase == Phase.AWAITING_SUIT_CHOICE:
                answer = self._prompt("Choose a suit [h/d/c/s]: ")
                if answer is None:
                    return
                suit = parse_suit(answer)
                if suit is None:
                    self.display.print_rejected(f"Unknown suit: {answer.strip()!r}")
                    continue
                self.engine.choose_suit(suit)
                continue

            if state.turn == Side.OPPONENT:
                # Keyed to the round so a restart during the pause is ignored
                round_id = state.round_id
                self.sleep_fn(self.delay)
                self.engine.run_opponent_turn(round_id)
                continue

            self.display.print_table(state, self.engine.playable_cards(Side.PLAYER))
            answer = self._prompt("> ")
            if answer is None:
                return
            if not self._handle(answer):
                return

    def _handle(self, text: str) -> bool:
        """Run one command. Returns False when the user quits."""
        command = parse_command(text)
        if command is None:
            self.display.print_rejected(f"Unknown command: {text.strip()!r} (h for help)")
            return True

        if command.kind == "quit":
            return False
        if command.kind == "help":
            self.display.print_help()
            return True
        if command.kind == "new":
            self.engine.start_round()
            return True

        try:
            if command.kind == "draw":
                self.engine.draw_card(Side.PLAYER)
            else:
                hand = self.engine.state.player_hand
                if not 1 <= command.index <= len(hand):
                    self.display.print_rejected(f"Pick a card between 1 and {len(hand)}")
                    return True
                self.engine.play_card(Side.PLAYER, hand[command.index - 1])
        except RejectedAction as e:
            self.display.print_rejected(str(e))

        return True


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Crazy Eights: play a round against the computer"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        help="Seconds before the computer moves (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-opponent-hand",
        action="store_true",
        help="Reveal the computer's hand",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for round log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.delay is not None:
        config.game.opponent_delay = args.delay
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_opponent_hand:
        config.logging.show_opponent_hand = True

    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = GameDisplay(show_opponent_hand=config.logging.show_opponent_hand)

    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Round log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(config, game_logger=game_logger)
            session = TerminalSession(engine, display, delay=config.game.opponent_delay)
            display.print_help()
            session.run()
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
