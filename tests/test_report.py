"""Tests for epdrunner.report module."""

from unittest.mock import patch

import pytest

from epdrunner.constants import CONTROL_GREEN, CONTROL_GREY, CONTROL_RED, CONTROL_RESET
from epdrunner.epd import RunOutcome
from epdrunner.parser import EpdParser
from epdrunner.report import Scoreboard

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@pytest.fixture
def positions():
    parser = EpdParser()
    return [
        parser.parse_line('rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - bm e4 d4; id "open";'),
        parser.parse_line("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - bm e4;"),
    ]


def outcome(position, move, think_time=0.12):
    return RunOutcome(
        position_id=position.id,
        think_time=think_time,
        move_found=move,
        passed=position.accepts(move),
    )


class TestRecord:
    """Tests for Scoreboard.record."""

    def test_pass_line(self, positions):
        board = Scoreboard(positions, colour=False)
        line = board.record(positions[0], outcome(positions[0], "e2e4"))
        assert line == f"[open      ] {START_FEN} PASS [e4, d4] 0.1s"

    def test_fail_line_shows_engine_move(self, positions):
        board = Scoreboard(positions, colour=False)
        line = board.record(positions[1], outcome(positions[1], "g1f3", think_time=1.04))
        assert line == f"[position 1] {START_FEN} FAIL [e4] 1.0s program chose Nf3"

    def test_illegal_engine_move_is_shown_raw(self, positions):
        board = Scoreboard(positions, colour=False)
        line = board.record(positions[1], outcome(positions[1], "a1a8"))
        assert line.endswith("program chose a1a8")

    def test_counts(self, positions):
        board = Scoreboard(positions, colour=False)
        board.record(positions[0], outcome(positions[0], "d2d4"))
        board.record(positions[1], outcome(positions[1], "g1f3"))
        assert board.passed == 1
        assert board.total == 2
        assert board.passed == sum(1 for o in board.outcomes if o.passed)

    def test_failures_kept_in_order(self, positions):
        board = Scoreboard(positions, colour=False)
        first = board.record(positions[0], outcome(positions[0], "c2c4"))
        board.record(positions[1], outcome(positions[1], "e2e4"))
        second = board.record(positions[1], outcome(positions[1], "b1c3"))
        assert board.failures == [first, second]

    def test_colour_highlights_engine_move(self, positions):
        board = Scoreboard(positions, colour=True)
        line = board.record(positions[0], outcome(positions[0], "d2d4"))
        assert f"{CONTROL_GREEN}PASS{CONTROL_RESET}" in line
        assert f"[{CONTROL_GREY}e4{CONTROL_RESET}, d4]" in line

    def test_colour_marks_failure(self, positions):
        board = Scoreboard(positions, colour=True)
        line = board.record(positions[1], outcome(positions[1], "g1f3"))
        assert f"{CONTROL_RED}FAIL{CONTROL_RESET}" in line
        assert f"program chose {CONTROL_RED}Nf3{CONTROL_RESET}" in line


class TestSummary:
    """Tests for Scoreboard.summary."""

    def test_all_passed(self, positions):
        board = Scoreboard(positions, colour=False)
        board.record(positions[0], outcome(positions[0], "e2e4"))
        board.record(positions[1], outcome(positions[1], "e2e4"))
        lines = board.summary()
        assert len(lines) == 2
        assert lines[0].startswith("2 positions in ")
        assert lines[0].endswith("s")
        assert lines[1] == "2/2 passed"

    def test_failures_listed(self, positions):
        board = Scoreboard(positions, colour=False)
        board.record(positions[0], outcome(positions[0], "e2e4"))
        failed = board.record(positions[1], outcome(positions[1], "g1f3"))
        lines = board.summary()
        assert lines[1] == "1/2 passed"
        assert lines[2] == "FAILURES:"
        assert lines[3:] == [failed]

    def test_elapsed_time_format(self, positions):
        board = Scoreboard(positions, colour=False)
        board.elapsed = lambda: 12.3456
        assert board.summary()[0] == "0 positions in 12.345s"

    def test_empty_suite(self):
        board = Scoreboard([], colour=False)
        assert board.summary()[1] == "0/0 passed"


class TestStart:
    """Tests for Scoreboard.start."""

    def test_restarts_run_clock(self, positions):
        """Time spent before start() is not part of the run."""
        with patch("epdrunner.report.time.perf_counter", side_effect=[10.0, 50.0, 52.5]):
            board = Scoreboard(positions, colour=False)
            board.start()
            assert board.elapsed() == 2.5


class TestVerboseLine:
    """Tests for Scoreboard.verbose_line."""

    def test_pads_id(self, positions):
        board = Scoreboard(positions, colour=False)
        assert board.verbose_line(positions[0], "info depth 1 pv e2e4\n") == "[open      ] info depth 1 pv e2e4"
