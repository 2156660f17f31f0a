"""Shared fixtures: a scripted UCI engine that lives in memory."""

import pytest

from epdrunner.driver import UciSession
from epdrunner.parser import EpdParser

START_EPD = 'rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - bm e4; id "open";'


class ScriptedEngine:
    """
    Stands in for both pipes of an engine process.

    `responses` maps a command word (the first token of a line the tool
    sends) to the lines the engine emits in reply. Everything crossing the
    pipes is recorded in order in `transcript` as ("tool", line) or
    ("engine", line) pairs. When no lines are queued, readline() returns ""
    just like a closed pipe.
    """

    def __init__(self, responses: dict[str, list[str]]):
        self.responses = responses
        self.queue: list[str] = []
        self.transcript: list[tuple[str, str]] = []
        self.closed = False

    def write(self, text: str) -> int:
        for line in text.splitlines():
            self.transcript.append(("tool", line))
            command = line.split()[0] if line.split() else ""
            self.queue.extend(self.responses.get(command, []))
        return len(text)

    def flush(self):
        pass

    def readline(self) -> str:
        if not self.queue:
            return ""
        line = self.queue.pop(0)
        self.transcript.append(("engine", line))
        return f"{line}\n"

    def close(self):
        self.closed = True

    @property
    def sent(self) -> list[str]:
        """Commands the tool has sent, in order."""
        return [line for side, line in self.transcript if side == "tool"]


@pytest.fixture
def scripted_engine():
    """Factory for ScriptedEngine instances."""
    return ScriptedEngine


@pytest.fixture
def session_for():
    """Build a UciSession reading from and writing to a ScriptedEngine."""
    def make(engine: ScriptedEngine, **kwargs) -> UciSession:
        return UciSession(engine, engine, **kwargs)
    return make


@pytest.fixture
def start_position():
    """The initial position with 1.e4 as the only best move."""
    return EpdParser().parse_line(START_EPD)
