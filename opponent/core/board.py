"""Rules-engine adapter over python-chess with checked push/pop pairing."""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

import chess


@contextmanager
def applied(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    """Push ``move`` for the duration of the block and pop it on every exit path."""
    depth = len(board.move_stack)
    board.push(move)
    try:
        yield board
    finally:
        assert len(board.move_stack) == depth + 1, "unbalanced push/pop inside applied()"
        board.pop()


def legal_moves(board: chess.Board) -> List[chess.Move]:
    """Legal moves in the generator's order, materialised before any push."""
    return list(board.legal_moves)


def is_terminal(board: chess.Board, claim_draw: bool = False) -> bool:
    return board.is_game_over(claim_draw=claim_draw)


def position_key(board: chess.Board) -> Tuple:
    """Everything push/pop must restore: occupancy, turn, special-move rights, clocks."""
    return (
        board.board_fen(),
        board.turn,
        board.castling_rights,
        board.ep_square,
        board.halfmove_clock,
        board.fullmove_number,
        tuple(board.move_stack),
    )


class ChessBoard:
    def __init__(self, fen: Optional[str] = None):
        """Start a game from ``fen`` or the standard starting position."""
        self.start_fen = fen or chess.STARTING_FEN
        self.board = chess.Board(self.start_fen)
        self.move_history: List[str] = []

    def reset(self):
        """Back to the position this game started from."""
        self.board.set_fen(self.start_fen)
        self.move_history.clear()

    def get_fen(self) -> str:
        return self.board.fen()

    def make_move(self, move_str: str) -> bool:
        """Push a UCI move (e.g. 'e2e4'). Returns True if legal."""
        try:
            move = chess.Move.from_uci(move_str)
        except ValueError:
            return False
        if move not in self.board.legal_moves:
            return False
        self.board.push(move)
        self.move_history.append(move_str)
        return True

    def undo_move(self):
        """Pop the last move."""
        if self.move_history:
            self.board.pop()
            self.move_history.pop()

    def get_legal_moves(self) -> List[str]:
        return [m.uci() for m in self.board.legal_moves]

    def is_game_over(self, claim_draw: bool = False) -> bool:
        return is_terminal(self.board, claim_draw)
