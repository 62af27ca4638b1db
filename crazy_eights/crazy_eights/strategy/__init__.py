"""Opponent strategies."""

from crazy_eights.strategy.base import Action, DrawAction, PlayAction, Strategy
from crazy_eights.strategy.simple import SimpleStrategy, choose_wild_suit, opponent_turn_policy

__all__ = [
    "Action",
    "DrawAction",
    "PlayAction",
    "Strategy",
    "SimpleStrategy",
    "choose_wild_suit",
    "opponent_turn_policy",
]
