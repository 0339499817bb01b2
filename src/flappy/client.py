#!/usr/bin/env python3
"""
client.py

Single-player entry point: composes config, theme, score store and engine,
then drives the engine with a pygame frame loop.
"""

import sys
from typing import List, Optional

import pygame

from .config import GameConfig
from .constants import DB_FILE, RENDER_FPS
from .data_models import Frame, GameState
from .engine import GameEngine
from .renderer import Renderer
from .score_db import ScoreDatabase
from .theme import Theme, get_theme


class FlappyClient:
    """Owns the window and the frame driver; the engine owns the game."""

    def __init__(self, engine: GameEngine, theme: Theme):
        pygame.init()
        self.engine = engine
        self.theme = theme
        cfg = engine.config
        self.screen = pygame.display.set_mode((cfg.width, cfg.height))
        pygame.display.set_caption(f"Flappy Bird ({theme.name})")

        self.renderer = Renderer(self.screen, theme, cfg)
        self.clock = pygame.time.Clock()
        self.last_state = engine.state

    def handle_event(self, event) -> bool:
        """Maps one pygame event onto the engine. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.engine.jump()
            elif event.key == pygame.K_r and self.engine.is_game_over():
                self.engine.reset()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.engine.jump()
        return True

    def _report(self, frame: Frame):
        """Prints session transitions."""
        if frame.state is self.last_state:
            return
        if frame.state is GameState.RUNNING:
            print("Session started.")
        elif frame.state is GameState.OVER:
            print(f"Game over. Score: {frame.score}, best: {frame.high_score}")
            if frame.new_record:
                print("New high score!")
        self.last_state = frame.state

    def run(self):
        """The main client execution loop: one tick and one render per frame."""
        print(f"Starting with theme '{self.theme.name}', best score {self.engine.high_score}.")
        running = True
        try:
            while running:
                self.clock.tick(RENDER_FPS)

                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False

                frame = self.engine.tick()
                self._report(frame)

                self.renderer.draw(frame)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[List[str]] = None):
    """Usage: flappy [theme] [database]"""
    argv = sys.argv[1:] if argv is None else argv
    theme = get_theme(argv[0] if argv else None)
    db_file = argv[1] if len(argv) > 1 else DB_FILE

    with ScoreDatabase(db_file) as store:
        print(f"Best scores loaded from {db_file}.")
        engine = GameEngine(GameConfig(), store=store)
        FlappyClient(engine, theme).run()


if __name__ == "__main__":
    main()
