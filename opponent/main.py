from typing import List, Optional

from opponent.core.board import ChessBoard
from opponent.difficulty import TierLike, calculate_points, resolve_tier
from opponent.selector import MoveSelector


class Engine:
    """A game against the computer: one board, one difficulty tier."""

    def __init__(self, tier: TierLike = None, fen: Optional[str] = None, selector: Optional[MoveSelector] = None):
        self.tier = resolve_tier(tier)
        self.board = ChessBoard(fen)
        self.selector = selector or MoveSelector()

    def get_best_move(self) -> Optional[str]:
        move = self.selector.select_move(self.board.board, self.tier)
        return move.uci() if move else None

    def make_move(self, move_uci: str) -> bool:
        return self.board.make_move(move_uci)

    def play(self) -> Optional[str]:
        """Select and play the computer's move; None when the game is over."""
        if self.board.is_game_over(self.selector.search.claim_draw):
            return None
        move = self.get_best_move()
        if move is not None:
            self.board.make_move(move)
        return move

    def take_back(self):
        """Undo the last move, whoever played it."""
        self.board.undo_move()

    def rematch(self):
        self.board.reset()

    def legal_moves(self) -> List[str]:
        return self.board.get_legal_moves()

    def fen(self) -> str:
        return self.board.get_fen()

    def points(self, won: bool) -> int:
        return calculate_points(self.tier, won)
