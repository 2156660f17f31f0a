"""
EPD (Extended Position Description) data classes for suite runs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EpdPosition:
    """A parsed EPD record: board, accepted moves and a display id."""
    fen: str
    id: str
    best_moves: tuple[str, ...] = ()  # UCI notation, in file order

    def accepts(self, move: str) -> bool:
        """True if `move` (UCI notation) is one of the accepted best moves."""
        return move in self.best_moves


@dataclass(frozen=True)
class RunOutcome:
    """Result of asking the engine to search a single EPD position."""
    position_id: str
    think_time: float  # seconds from `go` until the search loop ended
    move_found: str  # UCI notation
    passed: bool
    early_pass: bool = False  # decided from a PV line before the search finished
