"""Tests for the round log and replay."""

import json
import random

import pytest

from crazy_eights.game.engine import GameEngine
from crazy_eights.game.errors import NotYourTurn
from crazy_eights.logging import (
    GameLogConfig,
    GameLogger,
    build_frames,
    format_card,
    format_cards,
    format_hands,
    load_events,
)
from crazy_eights.logging.replay import find_round_start, find_turn
from crazy_eights.models.card import Card, Rank, Suit
from crazy_eights.models.game_state import GameState, Phase, Side


def card(rank: str, suit: str) -> Card:
    return Card(suit=Suit(suit), rank=Rank(rank))


def read_lines(path) -> list[dict]:
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


class TestFormatters:
    """Tests for card formatting."""

    def test_format_card(self):
        """Test suit code plus rank."""
        assert format_card(card("7", "hearts")) == "H7"
        assert format_card(card("10", "diamonds")) == "D10"
        assert format_card(card("Q", "spades")) == "SQ"

    def test_format_none(self):
        """Test that a missing card formats as empty."""
        assert format_card(None) == ""

    def test_format_cards(self):
        """Test that order is kept."""
        cards = [card("K", "clubs"), card("2", "hearts")]
        assert format_cards(cards) == "CK,H2"
        assert format_cards([]) == ""

    def test_format_hands(self):
        """Test both hands keyed by side."""
        state = GameState(
            player_hand=(card("A", "hearts"),),
            opponent_hand=(card("8", "clubs"), card("3", "spades")),
        )
        assert format_hands(state) == {"player": "HA", "opponent": "C8,S3"}


class TestGameLogger:
    """Tests for the JSONL writer."""

    @pytest.fixture
    def log_path(self, tmp_path):
        return tmp_path / "logs" / "round.jsonl"

    def test_disabled_writes_nothing(self, log_path):
        """Test that a disabled logger creates no file."""
        with GameLogger(GameLogConfig(enabled=False, output_path=str(log_path))) as game_logger:
            engine = GameEngine(game_logger=game_logger, rng=random.Random(5))
            engine.start_round()

        assert not log_path.exists()

    def test_round_start_record(self, log_path):
        """Test the record written when a round is dealt."""
        with GameLogger(GameLogConfig(enabled=True, output_path=str(log_path))) as game_logger:
            engine = GameEngine(game_logger=game_logger, rng=random.Random(5))
            state = engine.start_round()

        [record] = read_lines(log_path)
        assert record["type"] == "round_start"
        assert record["round"] == 1
        assert record["hands"] == format_hands(state)
        assert record["discard"] == format_card(state.top_discard)
        assert record["active_suit"] == state.active_suit.value
        assert record["draw_pile"] == 35
        assert record["turn"] == "player"
        assert "timestamp" in record

    def test_turn_and_rejected_records(self, log_path):
        """Test the records for accepted and refused actions."""
        with GameLogger(GameLogConfig(enabled=True, output_path=str(log_path))) as game_logger:
            engine = GameEngine(game_logger=game_logger, rng=random.Random(5))
            state = engine.start_round()
            drawn = state.draw_pile[-1]

            with pytest.raises(NotYourTurn):
                engine.draw_card(Side.OPPONENT)
            engine.draw_card(Side.PLAYER)

        _, rejected, turn = read_lines(log_path)

        assert rejected["type"] == "rejected"
        assert rejected["side"] == "opponent"
        assert rejected["action"] == "draw"
        assert rejected["reason"] == "not_your_turn"
        assert rejected["message"]

        assert turn["type"] == "turn"
        assert turn["turn"] == 1
        assert turn["side"] == "player"
        assert turn["action"] == "draw"
        assert turn["card"] == format_card(drawn)
        assert turn["suit"] == ""
        assert turn["draw_pile"] == 34
        assert turn["next_turn"] == "opponent"
        assert turn["phase"] == "playing"

    def test_round_end_record(self, log_path):
        """Test the record written for a finished round."""
        game_logger = GameLogger(GameLogConfig(enabled=True, output_path=str(log_path)))
        with game_logger:
            game_logger.log_round_end(
                GameState(
                    player_hand=(),
                    opponent_hand=(card("3", "spades"),),
                    discard_pile=(card("7", "diamonds"),),
                    active_suit=Suit.DIAMONDS,
                    phase=Phase.WON,
                    round_id=4,
                    turn_number=12,
                )
            )

        [record] = read_lines(log_path)
        assert record == {
            "type": "round_end",
            "round": 4,
            "result": "won",
            "turn": 12,
            "hands": {"player": "", "opponent": "S3"},
        }

    def test_appends(self, log_path):
        """Test that reopening the log keeps earlier rounds."""
        config = GameLogConfig(enabled=True, output_path=str(log_path))
        for seed in (1, 2):
            with GameLogger(config) as game_logger:
                GameEngine(game_logger=game_logger, rng=random.Random(seed)).start_round()

        assert len(read_lines(log_path)) == 2


class TestReplay:
    """Tests for rebuilding frames from a log."""

    @pytest.fixture
    def events(self):
        return [
            {
                "type": "round_start",
                "round": 1,
                "hands": {"player": "H8,C2", "opponent": "S3,D4"},
                "discard": "D9",
                "active_suit": "diamonds",
                "draw_pile": 35,
                "turn": "player",
            },
            {
                "type": "rejected",
                "round": 1,
                "side": "",
                "action": "choose_suit",
                "reason": "invalid_phase",
                "message": "No suit choice is pending",
            },
            {
                "type": "turn",
                "round": 1,
                "turn": 1,
                "side": "player",
                "action": "play",
                "card": "H8",
                "suit": "",
                "hands": {"player": "C2", "opponent": "S3,D4"},
                "discard": "H8",
                "active_suit": "diamonds",
                "draw_pile": 35,
                "next_turn": "player",
                "phase": "awaiting-suit-choice",
            },
            {
                "type": "turn",
                "round": 1,
                "turn": 1,
                "side": "player",
                "action": "choose_suit",
                "card": "",
                "suit": "clubs",
                "hands": {"player": "C2", "opponent": "S3,D4"},
                "discard": "H8",
                "active_suit": "clubs",
                "draw_pile": 35,
                "next_turn": "opponent",
                "phase": "playing",
            },
            {"type": "unknown"},
            {
                "type": "turn",
                "round": 1,
                "turn": 2,
                "side": "opponent",
                "action": "draw",
                "card": "",
                "suit": "",
                "hands": {"player": "C2", "opponent": "S3,D4"},
                "discard": "H8",
                "active_suit": "clubs",
                "draw_pile": 0,
                "next_turn": "player",
                "phase": "playing",
            },
            {
                "type": "round_end",
                "round": 1,
                "result": "draw",
                "turn": 2,
                "hands": {"player": "C2", "opponent": "S3,D4"},
            },
        ]

    def test_frame_per_event(self, events):
        """Test that unknown records are skipped."""
        assert len(build_frames(events)) == 6

    def test_round_start_frame(self, events):
        """Test the frame for a dealt round."""
        frame = build_frames(events)[0]
        assert frame.round == 1
        assert frame.turn == 0
        assert frame.discard == "D9"
        assert frame.to_act == "player"
        assert frame.phase == "playing"
        assert frame.last_action == "Round dealt"

    def test_rejected_keeps_table(self, events):
        """Test that a refused action only changes the description."""
        frames = build_frames(events)
        assert frames[1].hands == frames[0].hands
        assert frames[1].last_action == (
            "Rejected choose_suit by player: No suit choice is pending"
        )

    def test_turn_descriptions(self, events):
        """Test the text for each kind of turn."""
        frames = build_frames(events)
        assert frames[2].last_action == "player played H8"
        assert frames[2].phase == "awaiting-suit-choice"
        assert frames[3].last_action == "player named clubs"
        assert frames[3].active_suit == "clubs"
        assert frames[4].last_action == "opponent could not draw and passed"

    def test_round_end_frame(self, events):
        """Test the final frame."""
        frame = build_frames(events)[-1]
        assert frame.phase == "draw"
        assert frame.last_action == "Round over: draw"
        assert frame.turn == 2

    def test_find_round_start(self, events):
        """Test locating the dealt round."""
        frames = build_frames(events)
        assert find_round_start(frames, 1) == 0
        assert find_round_start(frames, 2) is None

    def test_find_turn(self, events):
        """Test locating the first frame of a turn."""
        frames = build_frames(events)
        assert find_turn(frames, 1, 1) == 2
        assert find_turn(frames, 2, 1) == 4
        assert find_turn(frames, 9, 1) is None

    def test_load_events(self, tmp_path, events):
        """Test reading a log back, ignoring blank lines."""
        path = tmp_path / "round.jsonl"
        lines = [json.dumps(e) for e in events]
        path.write_text("\n".join(lines) + "\n\n", encoding="utf-8")

        assert load_events(path) == events

    def test_logged_round_replays(self, tmp_path):
        """Test that a log written by the engine rebuilds its own frames."""
        path = tmp_path / "round.jsonl"
        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            engine = GameEngine(game_logger=game_logger, rng=random.Random(11))
            engine.start_round()
            engine.draw_card(Side.PLAYER)
            state = engine.run_opponent_turn(engine.round_id)

        frames = build_frames(load_events(path))
        last = frames[-1]
        assert last.hands == format_hands(state)
        assert last.draw_pile == len(state.draw_pile)
        assert last.to_act == state.turn.value
