# chesslogic/config.py
from dataclasses import dataclass, field
from typing import Dict
import os
import tomllib

# Defaults (centipawns)
PIECE_VALUES = {
    "PAWN": 100,
    "KNIGHT": 320,
    "BISHOP": 330,
    "ROOK": 500,
    "QUEEN": 900,
    "KING": 20000,
}

@dataclass
class SearchConfig:
    depth: int = 3
    extend_captures: bool = False  # captures don't consume depth when enabled
    max_extensions: int = 2        # per line, only used with extend_captures
    score_terminal: bool = False   # decided games score as mate/draw instead of static eval

@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())
    max_phase: int = 24

@dataclass
class UIConfig:
    engine_name: str = "ChessLogic"
    engine_author: str = "ChessLogic developers"
    human_color: str = "white"

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = raw["log_level"]
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("CHESSLOGIC_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
try:
    override_depth = os.environ.get("CHESSLOGIC_SEARCH_DEPTH")
    if override_depth:
        CONFIG.search.depth = int(override_depth)
except ValueError:
    pass
