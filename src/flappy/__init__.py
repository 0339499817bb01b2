"""
Single-player Flappy Bird: a fixed-step simulation engine with a pygame front end.
"""

from .config import GameConfig
from .data_models import Bird, Frame, GameState, Pipe
from .engine import GameEngine
from .score_db import MemoryScoreStore, ScoreDatabase, ScoreStore
from .theme import DAY_THEME, NIGHT_THEME, Theme, get_theme

__all__ = [
    "GameConfig", "Bird", "Frame", "GameState", "Pipe", "GameEngine",
    "MemoryScoreStore", "ScoreDatabase", "ScoreStore",
    "DAY_THEME", "NIGHT_THEME", "Theme", "get_theme",
]
