"""
EPD record parsing.

EPD format: four FEN fields followed by opcodes.
Example: 2rr3k/pp3pp1/1nnqbN1p/3pN3/2pP4/2P3Q1/PPB4P/R4RK1 w - - bm Qg6; id "WAC.001";

Only `bm` (best moves) and `id` are interpreted; other opcodes are ignored.
"""

import re
from pathlib import Path

from epdrunner.constants import NEUTRAL_COUNTERS
from epdrunner.epd import EpdPosition
from epdrunner.errors import (
    ConfigurationError,
    EpdParseError,
    IllegalBestMove,
    MalformedBoard,
    MalformedId,
    MissingBestMove,
    UnterminatedBestMoveList,
)
from epdrunner.notation import parse_board, san_to_uci

# Opcodes must start a token, so a `bm` inside an id label is not matched
# before the real opcode
BEST_MOVE_OPCODE = re.compile(r"(?:^|[\s;])bm(?=\s|;|$)")
ID_OPCODE = re.compile(r"(?:^|[\s;])id(?=\s|;|\"|$)")
QUOTED_LABEL = re.compile(r'\s*"([^"]*)"')


def load_epd_file(epd_file: Path) -> str:
    """
    Read an EPD document as UTF-8 text.

    Raises:
        ConfigurationError: if the file cannot be read or is not UTF-8
    """
    try:
        with open(epd_file, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read EPD file {epd_file}: {e}") from e


class EpdParser:
    """
    Parses EPD records into EpdPosition objects.

    The parser owns the counter used to synthesize ids for records without
    an `id` opcode. It is incremented once per parse attempt, so ids stay
    unique for one parsing pass even if records are later filtered. Use a
    fresh parser for each pass.
    """

    def __init__(self):
        self.counter = 0

    def parse_line(self, line: str) -> EpdPosition:
        """
        Parse a single EPD line.

        Raises:
            MalformedBoard: the first four fields are not a legal position
            MissingBestMove: no `bm` opcode, or an empty one
            UnterminatedBestMoveList: the `bm` moves are not followed by `;`
            IllegalBestMove: a best move is not legal in the position
            MalformedId: an `id` opcode without a quoted label
        """
        counter = self.counter
        self.counter += 1

        # A record without `bm` is reported as such whatever else is wrong with it
        bm_match = BEST_MOVE_OPCODE.search(line)
        if bm_match is None:
            raise MissingBestMove("no best move found", line)

        parts = line.split()
        if len(parts) < 4:
            raise MalformedBoard("expected four FEN fields", line)

        fen = f"{' '.join(parts[:4])} {NEUTRAL_COUNTERS}"
        try:
            board = parse_board(fen)
        except MalformedBoard as e:
            raise MalformedBoard(e.reason, line) from e

        best_moves_text = line[bm_match.end():]
        end_of_best_moves = best_moves_text.find(";")
        if end_of_best_moves == -1:
            raise UnterminatedBestMoveList("no end of best moves found", line)

        sans = best_moves_text[:end_of_best_moves].split()
        if not sans:
            raise MissingBestMove("empty best move list", line)

        best_moves = []
        for san in sans:
            try:
                best_moves.append(san_to_uci(board, san))
            except IllegalBestMove as e:
                raise IllegalBestMove(san, e.reason, line) from e

        return EpdPosition(fen=fen, id=self._parse_id(line, counter), best_moves=tuple(best_moves))

    def _parse_id(self, line: str, counter: int) -> str:
        id_match = ID_OPCODE.search(line)
        if id_match is None:
            return f"position {counter}"
        label = QUOTED_LABEL.match(line, id_match.end())
        if label is None:
            raise MalformedId("no quoted id found", line)
        return label.group(1)

    def parse_text(self, text: str) -> list[EpdPosition]:
        """
        Parse every line of an EPD document, stopping at the first bad record.

        Blank lines are not skipped: a malformed suite is an error, not
        something to run partially.
        """
        positions = []
        for line_num, line in enumerate(text.splitlines(), 1):
            try:
                positions.append(self.parse_line(line))
            except EpdParseError as e:
                e.at_line(line_num)
                raise
        return positions
