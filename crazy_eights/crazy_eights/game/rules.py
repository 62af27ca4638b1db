"""Round setup, legality and state transitions.

Every transition takes a snapshot and returns a new one. Preconditions are
checked by ``MoveValidator``; the functions here assume a legal move.
"""

import logging
import random
from typing import Sequence

from crazy_eights.models.card import DECK_SIZE, Card, Suit, build_deck, shuffle
from crazy_eights.models.game_state import HAND_FIELDS, GameState, Phase, Side

logger = logging.getLogger(__name__)

HAND_SIZE = 8


def can_play(card: Card, active_suit: Suit | None, top_card: Card | None) -> bool:
    """Check if a card may be played on the given table.

    Args:
        card: Card to check
        active_suit: Suit that must be followed
        top_card: Top of the discard pile

    Returns:
        True for an eight, a suit match or a rank match
    """
    if card.is_wild:
        return True
    if card.suit == active_suit:
        return True
    return top_card is not None and card.rank == top_card.rank


def is_playable(card: Card, state: GameState) -> bool:
    """Check a card against the current state."""
    return can_play(card, state.active_suit, state.top_discard)


def has_playable_card(hand: Sequence[Card], state: GameState) -> bool:
    """Check if any card in the hand can be played."""
    return any(is_playable(card, state) for card in hand)


def deal_round(deck: Sequence[Card], round_id: int = 1) -> GameState:
    """Deal a round from an already ordered deck.

    The first eight cards go to the player, the next eight to the
    opponent, the next one starts the discard pile and the rest form the
    draw pile.
    """
    if len(deck) != DECK_SIZE:
        raise ValueError(f"Expected {DECK_SIZE} cards, got {len(deck)}")

    cards = list(deck)
    seed_index = 2 * HAND_SIZE
    seed = cards[seed_index]

    return GameState(
        player_hand=tuple(cards[:HAND_SIZE]),
        opponent_hand=tuple(cards[HAND_SIZE:seed_index]),
        discard_pile=(seed,),
        draw_pile=tuple(cards[seed_index + 1 :]),
        active_suit=seed.suit,
        turn=Side.PLAYER,
        phase=Phase.PLAYING,
        round_id=round_id,
        turn_number=0,
    )


def start_round(rng: random.Random | None = None, round_id: int = 1) -> GameState:
    """Shuffle a fresh deck and deal a new round."""
    state = deal_round(shuffle(build_deck(), rng), round_id)
    logger.debug(f"Round {round_id} dealt, starter {state.top_discard}")
    return state


def play_card(
    state: GameState,
    side: Side,
    card: Card,
    declared_suit: Suit | None = None,
) -> GameState:
    """Move a card from a hand to the discard pile.

    Args:
        state: Current state
        side: Side playing the card
        card: Card to play
        declared_suit: Suit named by the opponent when it plays an eight

    Returns:
        New state, with the outcome resolved
    """
    hand = tuple(c for c in state.hand(side) if c != card)
    update = {
        HAND_FIELDS[side]: hand,
        "discard_pile": state.discard_pile + (card,),
        "turn_number": state.turn_number + 1,
    }

    if not card.is_wild:
        update["active_suit"] = card.suit
        update["turn"] = side.other
    elif side == Side.PLAYER:
        # Turn stays with the human until a suit is chosen
        update["phase"] = Phase.AWAITING_SUIT_CHOICE
    else:
        if declared_suit is None:
            raise ValueError("Opponent must declare a suit when playing an eight")
        update["active_suit"] = declared_suit
        update["turn"] = side.other

    return resolve_outcome(state.model_copy(update=update))


def choose_suit(state: GameState, suit: Suit) -> GameState:
    """Apply the human's suit choice after an eight."""
    new_state = state.model_copy(
        update={
            "active_suit": suit,
            "phase": Phase.PLAYING,
            "turn": Side.OPPONENT,
        }
    )
    return resolve_outcome(new_state)


def draw_card(state: GameState, side: Side) -> GameState:
    """Take the top card of the draw pile and pass the turn.

    With an empty draw pile nothing moves but the turn still passes.
    """
    update: dict = {
        "turn": side.other,
        "turn_number": state.turn_number + 1,
    }
    if state.draw_pile:
        update["draw_pile"] = state.draw_pile[:-1]
        update[HAND_FIELDS[side]] = state.hand(side) + (state.draw_pile[-1],)

    return resolve_outcome(state.model_copy(update=update))


def resolve_outcome(state: GameState) -> GameState:
    """Detect the end of a round.

    Checked in order: player out of cards, opponent out of cards, then
    the stuck condition (empty draw pile and nobody can play).
    """
    if state.phase != Phase.PLAYING:
        return state

    if not state.player_hand:
        phase = Phase.WON
    elif not state.opponent_hand:
        phase = Phase.LOST
    elif (
        not state.draw_pile
        and not has_playable_card(state.player_hand, state)
        and not has_playable_card(state.opponent_hand, state)
    ):
        phase = Phase.DRAW
    else:
        return state

    return state.model_copy(update={"phase": phase})
