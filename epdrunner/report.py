"""
Scoring and result reporting for suite runs.
"""

import time

from epdrunner.constants import (
    CONTROL_GREEN,
    CONTROL_GREY,
    CONTROL_RED,
    CONTROL_RESET,
)
from epdrunner.epd import EpdPosition, RunOutcome
from epdrunner.notation import parse_board, uci_to_san


class Scoreboard:
    """
    Accumulates RunOutcomes in the order the positions were searched.

    Column widths are taken from the full list of positions up front so that
    every per-position line lines up. The run clock starts on construction
    and is restarted with start() once the engine is ready.
    """

    def __init__(self, positions: list[EpdPosition], colour: bool = True):
        self.colour = colour
        self.id_width = max((len(p.id) for p in positions), default=0)
        self.fen_width = max((len(p.fen) for p in positions), default=0)
        self.passed = 0
        self.total = 0
        self.outcomes: list[RunOutcome] = []
        self.failures: list[str] = []
        self.start_time = time.perf_counter()

    def _paint(self, text: str, control: str) -> str:
        if not self.colour:
            return text
        return f"{control}{text}{CONTROL_RESET}"

    def start(self):
        """Restart the run clock, e.g. once the engine is ready to search."""
        self.start_time = time.perf_counter()

    def elapsed(self) -> float:
        """Wall-clock seconds since the run clock was started."""
        return time.perf_counter() - self.start_time

    def verbose_line(self, position: EpdPosition, line: str) -> str:
        """Format an engine output line for verbose echo."""
        return f"[{self._paint(f'{position.id:<{self.id_width}}', CONTROL_GREY)}] {line.strip()}"

    def format_result(self, position: EpdPosition, outcome: RunOutcome) -> str:
        """
        Format one position's result.

        Best moves are shown in SAN; the one the engine played is left
        unhighlighted, the rest are greyed out. Failures also show the
        engine's move.
        """
        board = parse_board(position.fen)
        best_move_sans = [uci_to_san(board, mv) for mv in position.best_moves]
        engine_san = uci_to_san(board, outcome.move_found)

        moves = ", ".join(
            san if san == engine_san else self._paint(san, CONTROL_GREY)
            for san in best_move_sans
        )
        status = self._paint("PASS", CONTROL_GREEN) if outcome.passed else self._paint("FAIL", CONTROL_RED)
        info = f" {self._paint(f'{outcome.think_time:.1f}s', CONTROL_GREY)}"
        if not outcome.passed:
            info += f" program chose {self._paint(engine_san, CONTROL_RED)}"

        pos_id = self._paint(f"{position.id:<{self.id_width}}", CONTROL_GREY)
        return f"[{pos_id}] {position.fen:<{self.fen_width}} {status} [{moves}]{info}"

    def record(self, position: EpdPosition, outcome: RunOutcome) -> str:
        """Score an outcome and return its formatted result line."""
        line = self.format_result(position, outcome)
        self.outcomes.append(outcome)
        self.total += 1
        if outcome.passed:
            self.passed += 1
        else:
            self.failures.append(line)
        return line

    def summary(self) -> list[str]:
        """Final report lines: timing, pass count and any failures."""
        elapsed = self.elapsed()
        lines = [
            f"{self.total} positions in {int(elapsed)}.{int(elapsed * 1000) % 1000:03d}s",
            f"{self.passed}/{self.total} passed",
        ]
        if self.failures:
            lines.append(f"{self._paint('FAILURES', CONTROL_RED)}:")
            lines.extend(self.failures)
        return lines
