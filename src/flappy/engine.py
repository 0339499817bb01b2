"""
engine.py: The authoritative single-player world simulation.
"""

import itertools
import random
from dataclasses import replace
from typing import List, Optional

from .config import GameConfig
from .data_models import Bird, Frame, GameState, Pipe
from .physics_core import PhysicsCore
from .score_db import MemoryScoreStore, ScoreStore


class GameEngine(PhysicsCore):
    """
    The engine managing one bird, its pipes, the score and the session state.
    Inherits core physics and collision from PhysicsCore.

    The engine never schedules itself: a driver calls tick() once per frame
    and forwards every flap input to jump().
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 store: Optional[ScoreStore] = None,
                 rng: Optional[random.Random] = None):
        super().__init__((config or GameConfig()).validate())
        self.store = store if store is not None else MemoryScoreStore()
        self.rng = rng or random.Random()
        self.high_score = self.store.get_best()
        self._ids = itertools.count(1)

        self.bird = Bird()
        self.pipes: List[Pipe] = []
        self.score = 0
        self.state = GameState.IDLE
        self.new_record = False
        self.reset()

    # -------- Session control --------

    def reset(self, start: bool = False):
        """Puts the bird back on its spawn pose and clears the session."""
        self.bird = Bird(x=self.config.bird_x, y=self.config.spawn_y)
        self.pipes = []
        self.score = 0
        self.new_record = False
        self.state = GameState.RUNNING if start else GameState.IDLE

    def jump(self):
        """Flap. Starts a fresh session first when idle or over."""
        if self.state is not GameState.RUNNING:
            self.reset(start=True)

        self.bird.velocity = self.flap()
        self.bird.rotation = self.config.jump_rotation

    def is_game_over(self) -> bool:
        return self.state is GameState.OVER

    def get_score(self) -> int:
        return self.score

    # -------- Simulation --------

    def _spawn_pipe(self):
        """Generates a new pipe at the right edge of the playfield."""
        top = self.gap_top(self.rng.random())
        self.pipes.append(Pipe(
            x=float(self.config.width),
            top_height=top,
            gap=self.config.pipe_gap,
            id=next(self._ids),
        ))

    def _step_bird(self):
        bird = self.bird
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)
        bird.rotation = self.rotation_for(bird.velocity)

    def _step_pipes(self):
        for pipe in self.pipes:
            pipe.x -= self.config.pipe_speed

        self.pipes = [p for p in self.pipes if p.x + self.config.pipe_width > 0]

        if not self.pipes or self.pipes[-1].x < self.config.width - self.config.pipe_spacing:
            self._spawn_pipe()

    def _update_score(self):
        for pipe in self.pipes:
            if not pipe.passed and pipe.x + self.config.pipe_width < self.bird.x:
                pipe.passed = True
                self.score += 1

    def _game_over(self):
        self.state = GameState.OVER
        if self.score > self.high_score:
            self.high_score = self.score
            self.new_record = True
            self.store.set_best(self.score)

    def tick(self) -> Frame:
        """
        The main simulation step. Does nothing unless the session is running.
        Returns the snapshot for the renderer.
        """
        if self.state is not GameState.RUNNING:
            return self.snapshot()

        # 1. Bird physics
        self._step_bird()

        # 2. Scroll, recycle and spawn pipes
        self._step_pipes()

        # 3. Score Update
        self._update_score()

        # 4. Collisions end the session
        if self.check_collision(self.bird, self.pipes):
            self._game_over()

        return self.snapshot()

    def snapshot(self) -> Frame:
        """Copies the current state so the renderer cannot mutate it."""
        return Frame(
            bird=replace(self.bird),
            pipes=tuple(replace(p) for p in self.pipes),
            score=self.score,
            high_score=self.high_score,
            state=self.state,
            new_record=self.new_record,
        )
