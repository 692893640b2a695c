# opponent/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import logging
import os
import tomllib

log = logging.getLogger(__name__)

# Base material (centipawns)
PIECE_VALUES = {
    "PAWN": 100,
    "KNIGHT": 320,
    "BISHOP": 330,
    "ROOK": 500,
    "QUEEN": 900,
    "KING": 20000,
}

# Piece-square tables, index 0 = a8 ... 63 = h1 (white's point of view).
PST_PAWN: Tuple[int, ...] = (
      0,   0,   0,   0,   0,   0,   0,   0,
     50,  50,  50,  50,  50,  50,  50,  50,
     10,  10,  20,  30,  30,  20,  10,  10,
      5,   5,  10,  25,  25,  10,   5,   5,
      0,   0,   0,  20,  20,   0,   0,   0,
      5,  -5, -10,   0,   0, -10,  -5,   5,
      5,  10,  10, -20, -20,  10,  10,   5,
      0,   0,   0,   0,   0,   0,   0,   0,
)

PST_KNIGHT: Tuple[int, ...] = (
    -50, -40, -30, -30, -30, -30, -40, -50,
    -40, -20,   0,   0,   0,   0, -20, -40,
    -30,   0,  10,  15,  15,  10,   0, -30,
    -30,   5,  15,  20,  20,  15,   5, -30,
    -30,   0,  15,  20,  20,  15,   0, -30,
    -30,   5,  10,  15,  15,  10,   5, -30,
    -40, -20,   0,   5,   5,   0, -20, -40,
    -50, -40, -30, -30, -30, -30, -40, -50,
)


@dataclass
class SearchConfig:
    claim_draw: bool = False  # treat claimable draws (threefold, 50-move) as terminal
    seed: Optional[int] = None  # seed for the selector's random source


@dataclass(frozen=True)
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())
    PST_PAWN: Tuple[int, ...] = PST_PAWN
    PST_KNIGHT: Tuple[int, ...] = PST_KNIGHT


@dataclass
class ApiConfig:
    title: str = "Computer Opponent"
    default_difficulty: str = "intermediate"


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # evaluation tables are fixed; only search/api/log settings merge
        for section in ("search", "api"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    log.warning("Unknown config key %s.%s in %s", section, k, path)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OPPONENT_CONFIG_TOML", "config.toml"))

override_seed = os.environ.get("OPPONENT_SEED")
if override_seed:
    try:
        CONFIG.search.seed = int(override_seed)
    except ValueError:
        log.warning("Ignoring non-integer OPPONENT_SEED=%r", override_seed)

override_level = os.environ.get("OPPONENT_LOG_LEVEL")
if override_level:
    CONFIG.log_level = override_level.upper()
