"""Move selection for the computer opponent."""

import logging
import random
import threading
import time
from dataclasses import dataclass
from typing import Optional

import chess

from opponent.config import CONFIG
from opponent.core.board import applied, legal_moves
from opponent.core.search import INF, SearchEngine
from opponent.core.utils import log_search_info
from opponent.difficulty import TierLike, get_difficulty_settings, resolve_tier

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    move: Optional[chess.Move]
    score: Optional[int]  # None when the move was random or there was no move
    randomized: bool
    depth: int
    nodes: int


class MoveSelector:
    def __init__(self, search: Optional[SearchEngine] = None, rng: Optional[random.Random] = None):
        self.search = search or SearchEngine()
        self.rng = rng or random.Random(CONFIG.search.seed)
        # guards the shared node counter and rng
        self._lock = threading.Lock()

    def select(self, board: chess.Board, tier: TierLike = None) -> Selection:
        """
        Pick a move for the side to move.

        With the tier's randomness probability a uniformly random legal move is
        returned without searching. Otherwise every root move is scored by a
        ``depth - 1`` search assuming the best reply, and the first move with
        the best score (for the side to move) wins ties.
        """
        with self._lock:
            return self._select(board, tier)

    def _select(self, board: chess.Board, tier: TierLike) -> Selection:
        resolved = resolve_tier(tier)
        settings = get_difficulty_settings(resolved)
        moves = legal_moves(board)
        if not moves:
            return Selection(None, None, False, settings.depth, 0)

        if self.rng.random() < settings.randomness:
            move = self.rng.choice(moves)
            log_search_info(log, resolved.value, settings.depth, move, None, 0, 0, randomized=True)
            return Selection(move, None, True, settings.depth, 0)

        white_to_move = board.turn == chess.WHITE
        sign = 1 if white_to_move else -1
        self.search.nodes = 0
        start = time.time()
        entry_stack = len(board.move_stack)

        best_move = None
        best_value = -INF
        best_score = None
        for move in moves:
            with applied(board, move):
                score = self.search.minimax(board, settings.depth - 1, -INF, INF, not white_to_move)
            if sign * score > best_value:
                best_value = sign * score
                best_score = score
                best_move = move

        assert len(board.move_stack) == entry_stack, "selector left the move stack unbalanced"
        log_search_info(log, resolved.value, settings.depth, best_move, best_score,
                        self.search.nodes, time.time() - start)
        return Selection(best_move, best_score, False, settings.depth, self.search.nodes)

    def select_move(self, board: chess.Board, tier: TierLike = None) -> Optional[chess.Move]:
        return self.select(board, tier).move


_default_selector: Optional[MoveSelector] = None


def _selector() -> MoveSelector:
    global _default_selector
    if _default_selector is None:
        _default_selector = MoveSelector()
    return _default_selector


def select_move(board: chess.Board, tier: TierLike = None) -> Optional[chess.Move]:
    """Best move for the side to move at ``tier``, or None if there is no legal move."""
    return _selector().select_move(board, tier)


def get_ai_move(fen: str, difficulty: TierLike = "intermediate") -> Optional[str]:
    """
    Choose a move for the position in ``fen`` and return it in SAN.

    Raises ValueError for a malformed FEN.
    """
    board = chess.Board(fen)
    move = select_move(board, difficulty)
    return board.san(move) if move else None
