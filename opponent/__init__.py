"""Computer opponent: difficulty-scaled minimax move selection on python-chess boards."""

from .difficulty import (
    DifficultySettings,
    DifficultyTier,
    calculate_points,
    get_difficulty_settings,
    points_for_win,
)
from .selector import MoveSelector, Selection, get_ai_move, select_move
