"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable, Tuple

from .config import GameConfig
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Stateless per-tick physics used by the game engine.
    All geometry comes from the GameConfig it is built with.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """Moves by the current velocity, then accelerates by gravity."""
        y += velocity
        velocity += self.config.gravity
        return y, velocity

    def rotation_for(self, velocity: float) -> float:
        # Clamped nose-down only; nose-up is bounded by the impulse in practice.
        return min(velocity * self.config.rotation_gain, self.config.max_rotation)

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.jump_impulse

    def gap_top(self, sample: float) -> float:
        """Maps a uniform sample in [0, 1) to a gap top-edge offset."""
        cfg = self.config
        span = cfg.pipe_top_range - cfg.pipe_gap - cfg.pipe_top_margin
        return sample * span + cfg.pipe_top_margin

    def hits_ground(self, y: float) -> bool:
        return y + self.config.bird_size >= self.config.ground_y

    def hits_ceiling(self, y: float) -> bool:
        return y <= 0

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        size = self.config.bird_size
        overlaps = bird.x + size > pipe.x and bird.x < pipe.x + self.config.pipe_width
        if not overlaps:
            return False
        return bird.y < pipe.top_height or bird.y + size > pipe.gap_bottom

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe]) -> bool:
        """Checks for collisions with floor, ceiling, or pipes."""

        # 1. Floor/Ceiling Collision
        if self.hits_ground(bird.y) or self.hits_ceiling(bird.y):
            return True

        # 2. Pipe Collision
        return any(self.hits_pipe(bird, pipe) for pipe in pipes)
