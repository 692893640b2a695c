"""Core engine components: board adapter, evaluator, and search."""

from .board import ChessBoard, applied
from .evaluator import Evaluator, evaluate_board
from .search import INF, SearchEngine
