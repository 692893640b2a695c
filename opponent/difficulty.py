"""
Difficulty tiers and their strength settings.

Each tier bundles a search depth (plies), the probability of playing a random
legal move instead of searching, and the points awarded for beating it.
Lookups never fail: anything that is not a known tier resolves to
``intermediate``.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class DifficultyTier(str, Enum):
    BEGINNER = "beginner"
    AMATEUR = "amateur"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"
    MASTER = "master"


@dataclass(frozen=True)
class DifficultySettings:
    depth: int
    randomness: float
    win_points: int


DEFAULT_TIER = DifficultyTier.INTERMEDIATE

DIFFICULTY_SETTINGS: Mapping[DifficultyTier, DifficultySettings] = MappingProxyType({
    DifficultyTier.BEGINNER: DifficultySettings(depth=1, randomness=0.5, win_points=10),
    DifficultyTier.AMATEUR: DifficultySettings(depth=2, randomness=0.3, win_points=25),
    DifficultyTier.INTERMEDIATE: DifficultySettings(depth=3, randomness=0.15, win_points=50),
    DifficultyTier.EXPERT: DifficultySettings(depth=4, randomness=0.05, win_points=100),
    DifficultyTier.MASTER: DifficultySettings(depth=5, randomness=0.0, win_points=200),
})

TierLike = Union[DifficultyTier, str, None]


def resolve_tier(tier: TierLike) -> DifficultyTier:
    """Map a tier or its string value to a DifficultyTier, defaulting to intermediate."""
    if isinstance(tier, DifficultyTier):
        return tier
    try:
        return DifficultyTier(tier)
    except ValueError:
        return DEFAULT_TIER


def get_difficulty_settings(tier: TierLike) -> DifficultySettings:
    return DIFFICULTY_SETTINGS[resolve_tier(tier)]


def points_for_win(tier: TierLike) -> int:
    return get_difficulty_settings(tier).win_points


def calculate_points(tier: TierLike, won: bool) -> int:
    """Points earned for a finished game against ``tier``: win points on a win, else 0."""
    return points_for_win(tier) if won else 0
