"""
Exceptions raised by the EPD test-suite runner.

Every error is fatal to a run: they propagate to the command line entry
point, which prints the message and exits with a non-zero status.
"""


class EpdRunnerError(Exception):
    """Base class for all runner errors."""


class ConfigurationError(EpdRunnerError):
    """Invalid operator-supplied configuration (e.g. a malformed UCI option)."""


class EpdParseError(EpdRunnerError):
    """An EPD record could not be turned into a position."""

    def __init__(self, message: str, line: str | None = None, line_num: int | None = None):
        self.reason = message
        self.line = line
        self.line_num = line_num
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.reason
        where = f"line {self.line_num}: " if self.line_num is not None else ""
        return f"{where}{self.reason} in {self.line!r}"

    def at_line(self, line_num: int) -> "EpdParseError":
        """Attach a line number to the error and refresh its message."""
        self.line_num = line_num
        self.args = (self._format(),)
        return self


class MalformedBoard(EpdParseError):
    """The leading four fields do not describe a valid board."""


class MissingBestMove(EpdParseError):
    """The record has no `bm` opcode (or an empty one)."""


class UnterminatedBestMoveList(EpdParseError):
    """The `bm` opcode is not terminated by a semicolon."""


class IllegalBestMove(EpdParseError):
    """A `bm` move cannot be parsed or is illegal in the position."""

    def __init__(self, token: str, message: str | None = None, line: str | None = None):
        self.token = token
        super().__init__(message or f"illegal best move {token!r}", line)


class MalformedId(EpdParseError):
    """The record has an `id` opcode without a quoted label."""


class EngineProtocolError(EpdRunnerError):
    """The engine stream closed or broke before the expected response."""
