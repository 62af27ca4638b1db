"""Round logging module."""

from .formatters import format_card, format_cards, format_hands
from .game_logger import GameLogConfig, GameLogger
from .replay import ReplayFrame, build_frames, load_events

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "ReplayFrame",
    "build_frames",
    "format_card",
    "format_cards",
    "format_hands",
    "load_events",
]
