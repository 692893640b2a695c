"""
Evaluator Module
================

Static evaluation: material plus piece-square bonuses for pawns and knights.

The score is always from White's point of view (positive = White better) and
does not depend on the side to move. Bishops, rooks, queens and the king are
scored by material alone.
"""

import chess
from opponent.config import CONFIG

_PIECE_NAMES = {
    chess.PAWN: "PAWN",
    chess.KNIGHT: "KNIGHT",
    chess.BISHOP: "BISHOP",
    chess.ROOK: "ROOK",
    chess.QUEEN: "QUEEN",
    chess.KING: "KING",
}


class Evaluator:
    def __init__(self):
        self.cfg = CONFIG.eval
        self.values = {pt: self.cfg.piece_values[name] for pt, name in _PIECE_NAMES.items()}
        self.tables = {
            chess.PAWN: self.cfg.PST_PAWN,
            chess.KNIGHT: self.cfg.PST_KNIGHT,
        }

    def piece_value(self, piece: chess.Piece, sq: chess.Square) -> int:
        """Unsigned value of ``piece`` standing on ``sq``."""
        value = self.values[piece.piece_type]
        table = self.tables.get(piece.piece_type)
        if table is not None:
            # tables are laid out a8..h1; flip the rank for White
            pst_sq = sq ^ 56 if piece.color == chess.WHITE else sq
            value += table[pst_sq]
        return value

    def evaluate(self, board: chess.Board) -> int:
        score = 0
        for sq, piece in board.piece_map().items():
            value = self.piece_value(piece, sq)
            score += value if piece.color == chess.WHITE else -value
        return score


_default = None


def evaluate_board(board: chess.Board) -> int:
    """Evaluate with a shared default Evaluator."""
    global _default
    if _default is None:
        _default = Evaluator()
    return _default.evaluate(board)
