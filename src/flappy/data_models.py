"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import BIRD_X, SPAWN_Y


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


@dataclass
class Bird:
    """The player's bird. Only y, velocity and rotation change after spawn."""
    x: float = BIRD_X
    y: float = SPAWN_Y
    velocity: float = 0.0
    rotation: float = 0.0           # Degrees, derived from velocity


@dataclass
class Pipe:
    """A pipe pair; the opening spans top_height .. top_height + gap."""
    x: float
    top_height: float
    gap: float
    id: int
    passed: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.top_height + self.gap


@dataclass(frozen=True)
class Frame:
    """Immutable view of one tick, handed to the renderer."""
    bird: Bird
    pipes: Tuple[Pipe, ...]
    score: int
    high_score: int
    state: GameState
    new_record: bool = False
