"""Rebuild displayable frames from a JSONL round log."""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path


@dataclass
class ReplayFrame:
    """Table as it looked after one logged event."""

    round: int = 0
    turn: int = 0
    hands: dict[str, str] = field(default_factory=dict)
    discard: str = ""
    active_suit: str = ""
    draw_pile: int = 0
    to_act: str = ""
    phase: str = "idle"
    last_action: str = ""


def load_events(path: Path | str) -> list[dict]:
    """Load all events from JSONL file."""
    events = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events


def _describe_turn(event: dict) -> str:
    side = event.get("side", "")
    action = event.get("action", "")
    card = event.get("card", "")
    suit = event.get("suit", "")

    if action == "play":
        text = f"{side} played {card}"
        if suit:
            text += f" and named {suit}"
        return text
    if action == "choose_suit":
        return f"{side} named {suit}"
    if card:
        return f"{side} drew {card}"
    return f"{side} could not draw and passed"


def build_frames(events: list[dict]) -> list[ReplayFrame]:
    """Build one frame per recognised event.

    Args:
        events: Records as written by GameLogger.

    Returns:
        Frames in log order. Unknown record types are skipped.
    """
    frames: list[ReplayFrame] = []
    current = ReplayFrame()

    for event in events:
        event_type = event.get("type")

        if event_type == "round_start":
            current = ReplayFrame(
                round=event.get("round", 0),
                hands=event.get("hands", {}),
                discard=event.get("discard", ""),
                active_suit=event.get("active_suit", ""),
                draw_pile=event.get("draw_pile", 0),
                to_act=event.get("turn", ""),
                phase="playing",
                last_action="Round dealt",
            )

        elif event_type == "turn":
            current = replace(
                current,
                round=event.get("round", current.round),
                turn=event.get("turn", current.turn),
                hands=event.get("hands", current.hands),
                discard=event.get("discard", current.discard),
                active_suit=event.get("active_suit", current.active_suit),
                draw_pile=event.get("draw_pile", current.draw_pile),
                to_act=event.get("next_turn", current.to_act),
                phase=event.get("phase", current.phase),
                last_action=_describe_turn(event),
            )

        elif event_type == "rejected":
            current = replace(
                current,
                last_action=(
                    f"Rejected {event.get('action', '')} by "
                    f"{event.get('side') or 'player'}: {event.get('message', '')}"
                ),
            )

        elif event_type == "round_end":
            result = event.get("result", "")
            current = replace(
                current,
                hands=event.get("hands", current.hands),
                phase=result,
                last_action=f"Round over: {result}",
            )

        else:
            continue

        frames.append(current)

    return frames


def find_round_start(frames: list[ReplayFrame], round_id: int) -> int | None:
    """Find the frame index where a round was dealt."""
    for i, frame in enumerate(frames):
        if frame.round == round_id and frame.turn == 0:
            return i
    return None


def find_turn(frames: list[ReplayFrame], turn: int, round_id: int) -> int | None:
    """Find the first frame of a turn within a round."""
    for i, frame in enumerate(frames):
        if frame.round == round_id and frame.turn == turn:
            return i
    return None
