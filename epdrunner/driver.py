"""
UCI protocol driver.

Drives one engine through the UCI handshake and then through one search
per EPD position. The session works on two already-open text streams, so
a real engine process and a scripted test double look the same to it.
"""

import sys
import time
from contextlib import suppress
from typing import Callable, TextIO

from epdrunner.constants import (
    DEFAULT_GO_COMMAND,
    UCI_BESTMOVE_TOKEN,
    UCI_PV_TOKEN,
    UCI_READY_TOKEN,
)
from epdrunner.epd import EpdPosition, RunOutcome
from epdrunner.errors import ConfigurationError, EngineProtocolError


def parse_option(option: str) -> tuple[str, str]:
    """
    Split a NAME=VALUE option string on the first '='.

    Raises:
        ConfigurationError: if there is no '='
    """
    name, sep, value = option.partition("=")
    if not sep:
        raise ConfigurationError(f"Invalid option: {option}")
    return name, value


def _token_after(tokens: list[str], marker: str) -> str | None:
    """Return the token following `marker`, or None if absent."""
    try:
        idx = tokens.index(marker)
    except ValueError:
        return None
    if idx + 1 >= len(tokens):
        return None
    return tokens[idx + 1]


class UciSession:
    """
    A UCI conversation with one engine.

    Args:
        reader: engine output stream (anything with readline())
        writer: engine input stream (anything with write() and flush())
        debug: echo all protocol traffic to stderr
        on_line: called as on_line(position, line) for every engine line
            read during a search
    """

    def __init__(self, reader: TextIO, writer: TextIO, debug: bool = False,
                 on_line: Callable[[EpdPosition, str], None] | None = None):
        self.reader = reader
        self.writer = writer
        self.debug = debug
        self.on_line = on_line

    def __enter__(self) -> "UciSession":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Release both streams."""
        # The engine may already be gone, in which case flushing the last
        # buffered command fails
        with suppress(BrokenPipeError):
            self.writer.close()
        self.reader.close()

    def send(self, command: str, context: str = "sending command"):
        """Write one command line to the engine."""
        try:
            self.writer.write(f"{command}\n")
            self.writer.flush()
        except OSError as e:
            raise EngineProtocolError(f"Failed to write to engine while {context}: {e}") from e
        if self.debug:
            print(f"[?] TOOL -> ENGINE: {command}", file=sys.stderr)

    def read_line(self, context: str) -> str:
        """
        Block until the engine sends a line.

        Raises:
            EngineProtocolError: if the stream is closed or unreadable
        """
        try:
            line = self.reader.readline()
        except OSError as e:
            raise EngineProtocolError(f"Failed to read from engine while {context}: {e}") from e
        if not line:
            raise EngineProtocolError(f"Engine closed its output while {context}")
        line = line.rstrip("\r\n")
        if self.debug:
            print(f"[?] ENGINE -> TOOL: {line}", file=sys.stderr)
        return line

    def initialize(self):
        """Identify the engine and wait until it reports ready."""
        self.send("uci", "initializing")
        self.send("isready", "initializing")
        # id/option lines come first and are not needed
        while UCI_READY_TOKEN not in self.read_line("waiting for readyok"):
            pass

    def set_options(self, options: list[str]):
        """Send `setoption` for every NAME=VALUE string."""
        for option in options:
            name, value = parse_option(option)
            self.send(f"setoption name {name} value {value}", "setting options")

    def quit(self):
        """Ask the engine to exit."""
        self.send("quit", "quitting")

    def solve(self, position: EpdPosition, go_command: str = DEFAULT_GO_COMMAND,
              early_pass: bool = False) -> RunOutcome:
        """
        Search one position and score the engine's answer.

        The engine is reset with `ucinewgame`, given the position and told to
        `go`. The search ends on the engine's `bestmove` line. With
        `early_pass`, a PV whose first move is an accepted best move passes
        the position at once: `stop` is sent and the remaining output is
        drained up to `bestmove`, whose move is then ignored.

        Args:
            position: the EPD position to search
            go_command: parameters passed with `go`, forwarded unchecked
            early_pass: accept a matching PV move without waiting for bestmove

        Returns:
            RunOutcome for this position

        Raises:
            EngineProtocolError: if the engine stream ends before bestmove
        """
        context = f"searching {position.id}"
        self.send("ucinewgame", context)
        self.send(f"position fen {position.fen}", context)
        self.send(f"go {go_command}", context)
        think_start = time.perf_counter()

        move_found = None
        early = False
        while move_found is None:
            line = self.read_line(context)
            if self.on_line:
                self.on_line(position, line)
            tokens = line.split()

            if UCI_BESTMOVE_TOKEN in tokens:
                move_found = _token_after(tokens, UCI_BESTMOVE_TOKEN)
                if move_found is None:
                    raise EngineProtocolError(f"Failed to parse engine response while {context}: {line!r}")
                break

            if early_pass and UCI_PV_TOKEN in tokens:
                choice = _token_after(tokens, UCI_PV_TOKEN)
                if choice is not None and position.accepts(choice):
                    self.send("stop", context)
                    self._drain_until_bestmove(position)
                    move_found = choice
                    early = True

        think_time = time.perf_counter() - think_start
        return RunOutcome(
            position_id=position.id,
            think_time=think_time,
            move_found=move_found,
            passed=position.accepts(move_found),
            early_pass=early,
        )

    def _drain_until_bestmove(self, position: EpdPosition):
        """Discard engine output until the search's bestmove line."""
        while True:
            line = self.read_line(f"stopping the search of {position.id}")
            if self.on_line:
                self.on_line(position, line)
            if UCI_BESTMOVE_TOKEN in line.split():
                return
