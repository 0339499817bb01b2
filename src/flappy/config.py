"""
config.py: Typed, validated access to the game constants.
"""

from dataclasses import dataclass

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_HEIGHT, BIRD_X, SPAWN_Y, BIRD_SIZE,
    PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_SPACING, PIPE_TOP_RANGE,
    PIPE_TOP_MARGIN, GRAVITY, JUMP_IMPULSE, JUMP_ROTATION, ROTATION_GAIN,
    MAX_ROTATION,
)


@dataclass(frozen=True)
class GameConfig:
    """Playfield geometry and physics parameters for one engine."""
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    ground_height: int = GROUND_HEIGHT
    bird_x: float = BIRD_X
    spawn_y: float = SPAWN_Y
    bird_size: int = BIRD_SIZE
    pipe_width: int = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    pipe_spacing: int = PIPE_SPACING
    pipe_top_range: int = PIPE_TOP_RANGE
    pipe_top_margin: int = PIPE_TOP_MARGIN
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    jump_rotation: float = JUMP_ROTATION
    rotation_gain: float = ROTATION_GAIN
    max_rotation: float = MAX_ROTATION

    @property
    def ground_y(self) -> int:
        """Y coordinate of the top of the ground strip."""
        return self.height - self.ground_height

    def validate(self) -> "GameConfig":
        """Raises ValueError if the geometry cannot produce a playable pipe."""
        for name in ("width", "height", "bird_size", "pipe_width", "pipe_gap"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.pipe_speed <= 0:
            raise ValueError(f"pipe_speed must be positive, got {self.pipe_speed}")
        if not 0 <= self.ground_height < self.height:
            raise ValueError("ground_height must lie inside the playfield")
        if self.pipe_gap >= self.ground_y:
            raise ValueError(
                f"pipe_gap ({self.pipe_gap}) must be smaller than the playfield "
                f"above the ground ({self.ground_y})")
        if self.pipe_top_margin < 0:
            raise ValueError("pipe_top_margin must not be negative")
        if self.pipe_top_range - self.pipe_gap - self.pipe_top_margin < 0:
            raise ValueError("pipe_top_range leaves no room for the gap and margin")
        if self.pipe_top_range > self.ground_y:
            raise ValueError("pipe_top_range must not reach below the ground")
        return self
