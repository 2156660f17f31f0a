"""
Move notation helpers built on python-chess.

EPD files express best moves in SAN relative to a board; engines answer in
UCI long algebraic notation. Everything that needs board knowledge goes
through these functions so the rules library stays behind one seam.
"""

import chess

from epdrunner.errors import IllegalBestMove, MalformedBoard


def parse_board(fen: str) -> chess.Board:
    """
    Build a board from a FEN string.

    Raises:
        MalformedBoard: if the FEN does not parse or the position is not legal
            (missing kings, pawns on the back rank, side not to move in check...)
    """
    try:
        board = chess.Board(fen)
    except ValueError as e:
        raise MalformedBoard(f"invalid fen {fen!r}: {e}") from e

    if not board.is_valid():
        raise MalformedBoard(f"illegal position {fen!r}: {board.status()!r}")
    return board


def san_to_uci(board: chess.Board, san: str) -> str:
    """Convert a SAN move to UCI notation, raising IllegalBestMove if it is not legal."""
    try:
        move = board.parse_san(san)
    except ValueError as e:
        # python-chess raises InvalidMoveError, IllegalMoveError and
        # AmbiguousMoveError, all ValueError subclasses
        raise IllegalBestMove(san, f"{san!r} is not a legal move in {board.fen()}: {e}") from e
    # parse_san accepts null move tokens (--, Z0, 0000, @@@@) without a legality check
    if not move or move not in board.legal_moves:
        raise IllegalBestMove(san, f"{san!r} is not a legal move in {board.fen()}")
    return move.uci()


def uci_to_move(board: chess.Board, uci: str) -> chess.Move | None:
    """Return the legal move for a UCI string, or None if it is not legal here."""
    try:
        move = chess.Move.from_uci(uci)
    except ValueError:
        return None
    if move not in board.legal_moves:
        return None
    return move


def uci_to_san(board: chess.Board, uci: str) -> str:
    """Render a UCI move as SAN for display, falling back to the raw string."""
    move = uci_to_move(board, uci)
    if move is None:
        return uci
    return board.san(move)
