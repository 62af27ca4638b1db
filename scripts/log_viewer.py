#!/usr/bin/env python3
"""Interactive viewer for Crazy Eights round logs.

Usage:
    python scripts/log_viewer.py logs/20260101T120000_crazy_eights.jsonl

Keys:
    n: Next step
    p: Previous step
    c: Continuous playback (1 sec interval), any key to stop
    r: Jump to round number
    t: Jump to turn number
    q: Quit
"""

import argparse
import curses
import sys
from pathlib import Path

from crazy_eights.logging.replay import (
    ReplayFrame,
    build_frames,
    find_round_start,
    find_turn,
    load_events,
)

SIDE_LABELS = {
    "player": "You",
    "opponent": "Computer",
}


def draw_screen(stdscr, frame: ReplayFrame, step: int, total: int) -> None:
    """Draw the current frame to the screen."""
    stdscr.clear()
    height, width = stdscr.getmaxyx()
    width = min(width, 100)

    line = 0
    sep = "=" * 80

    # Header
    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    round_info = f"Round {frame.round} / Turn {frame.turn}  [{frame.phase}]"
    step_info = f"Step {step + 1}/{total}"
    middle_space = 80 - len(round_info) - len(step_info)
    header = f"{round_info}{' ' * max(middle_space, 1)}{step_info}"
    stdscr.addnstr(line, 0, header, width - 1)
    line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 2

    # Table
    suit = frame.active_suit or "-"
    table_line = (
        f"Discard: {frame.discard or '-'}   Suit: {suit}   Draw pile: {frame.draw_pile}"
    )
    stdscr.addnstr(line, 0, table_line, width - 1)
    line += 1

    stdscr.addnstr(line, 0, f"Last: {frame.last_action}", width - 1)
    line += 2

    dash_sep = "-" * 80
    stdscr.addnstr(line, 0, dash_sep, width - 1)
    line += 1

    for side, label in SIDE_LABELS.items():
        marker = " <<<" if frame.to_act == side and frame.phase == "playing" else ""
        hand = frame.hands.get(side, "")
        count = len(hand.split(",")) if hand else 0

        stdscr.addnstr(line, 0, f"{label} ({count} cards){marker}", width - 1)
        line += 1
        stdscr.addnstr(line, 0, f"  {hand}", width - 1)
        line += 1
        stdscr.addnstr(line, 0, dash_sep, width - 1)
        line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    help_line = "[n]ext [p]rev [c]ontinuous [r]ound [t]urn [q]uit"
    stdscr.addnstr(line, 0, help_line, width - 1)

    stdscr.refresh()


def input_number(stdscr, prompt: str) -> int | None:
    """Get a number from the user."""
    height, width = stdscr.getmaxyx()
    stdscr.addnstr(height - 2, 0, prompt, width - 1)
    stdscr.clrtoeol()
    stdscr.refresh()

    curses.echo()
    curses.curs_set(1)
    try:
        inp = stdscr.getstr(height - 2, len(prompt), 10).decode("utf-8")
        return int(inp) if inp.strip() else None
    except (ValueError, curses.error):
        return None
    finally:
        curses.noecho()
        curses.curs_set(0)


def main_loop(stdscr, frames: list[ReplayFrame]) -> None:
    """Main event loop."""
    curses.curs_set(0)
    stdscr.nodelay(False)
    stdscr.timeout(-1)

    step = 0
    total = len(frames)

    while True:
        draw_screen(stdscr, frames[step], step, total)

        try:
            key = stdscr.getch()
        except curses.error:
            continue

        if key == ord("q"):
            break
        elif key == ord("n"):
            if step < total - 1:
                step += 1
        elif key == ord("p"):
            if step > 0:
                step -= 1
        elif key == ord("c"):
            # Continuous playback
            stdscr.nodelay(True)
            stdscr.timeout(1000)
            while step < total - 1:
                step += 1
                draw_screen(stdscr, frames[step], step, total)
                try:
                    k = stdscr.getch()
                    if k != -1:
                        break
                except curses.error:
                    pass
            stdscr.nodelay(False)
            stdscr.timeout(-1)
        elif key == ord("r"):
            num = input_number(stdscr, "Jump to round: ")
            if num is not None:
                idx = find_round_start(frames, num)
                if idx is not None:
                    step = idx
        elif key == ord("t"):
            num = input_number(stdscr, "Jump to turn: ")
            if num is not None:
                idx = find_turn(frames, num, frames[step].round)
                if idx is not None:
                    step = idx


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive viewer for Crazy Eights round logs"
    )
    parser.add_argument("logfile", type=Path, help="Path to round log file (JSONL)")
    args = parser.parse_args()

    if not args.logfile.exists():
        print(f"Error: File not found: {args.logfile}", file=sys.stderr)
        return 1

    print(f"Loading {args.logfile}...")
    events = load_events(args.logfile)
    print(f"Loaded {len(events)} events")

    frames = build_frames(events)
    print(f"Built {len(frames)} displayable frames")

    if not frames:
        print("Error: No frames to display", file=sys.stderr)
        return 1

    curses.wrapper(lambda stdscr: main_loop(stdscr, frames))
    return 0


if __name__ == "__main__":
    sys.exit(main())
