from typing import Optional

import chess

from opponent.config import CONFIG
from opponent.core.board import applied, is_terminal, legal_moves
from opponent.core.evaluator import Evaluator

INF = 10**9


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, claim_draw: Optional[bool] = None):
        """
        evaluator.evaluate(board) must return an int (centipawns),
        positive if White is better, negative if Black is better.
        """
        self.evaluator = evaluator or Evaluator()
        self.claim_draw = CONFIG.search.claim_draw if claim_draw is None else claim_draw
        self.nodes = 0

    def minimax(self, board: chess.Board, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        """
        Depth-limited minimax with alpha-beta pruning.

        Moves are tried in the order python-chess generates them. The board is
        handed back exactly as received; every push is undone before returning.
        """
        assert alpha <= beta, f"alpha {alpha} > beta {beta} on node entry"
        self.nodes += 1

        if depth == 0 or is_terminal(board, self.claim_draw):
            return self.evaluator.evaluate(board)

        entry_stack = len(board.move_stack)

        if maximizing:
            best = -INF
            for move in legal_moves(board):
                with applied(board, move):
                    value = self.minimax(board, depth - 1, alpha, beta, False)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
        else:
            best = INF
            for move in legal_moves(board):
                with applied(board, move):
                    value = self.minimax(board, depth - 1, alpha, beta, True)
                best = min(best, value)
                beta = min(beta, value)
                if beta <= alpha:
                    break

        assert len(board.move_stack) == entry_stack, "search left the move stack unbalanced"
        return best
