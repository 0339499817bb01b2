"""
renderer.py: Pygame drawing of a simulation Frame. No game logic lives here.
"""

from typing import List, Optional, Sequence

import pygame

from .config import GameConfig
from .data_models import Frame, GameState, Pipe
from .theme import Color, Theme

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BIRD_BODY = (255, 215, 0)
BIRD_BEAK = (255, 140, 0)
SCORE_RED = (231, 76, 60)
RECORD_GREEN = (39, 174, 96)
RECORD_ORANGE = (243, 156, 18)
MENU_TEXT = (102, 102, 102)
PIPE_CAP_HEIGHT = 30
PIPE_CAP_OVERHANG = 5


def _lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(round(a[i] + (b[i] - a[i]) * t) for i in range(3))


def gradient_surface(size, stops: Sequence[Color]) -> pygame.Surface:
    """Vertical gradient through evenly spaced color stops."""
    width, height = size
    surface = pygame.Surface(size)
    if not stops:
        surface.fill(BLACK)
        return surface
    if len(stops) == 1:
        surface.fill(stops[0][:3])
        return surface

    segments = len(stops) - 1
    for row in range(height):
        pos = row / max(height - 1, 1) * segments
        index = min(int(pos), segments - 1)
        color = _lerp_color(stops[index], stops[index + 1], pos - index)
        pygame.draw.line(surface, color, (0, row), (width - 1, row))
    return surface


class Renderer:
    """Paints frames onto a pygame surface using a Theme."""

    def __init__(self, screen: pygame.Surface, theme: Theme,
                 config: Optional[GameConfig] = None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.screen = screen
        self.theme = theme
        self.config = config or GameConfig()
        self.background = gradient_surface(
            (self.config.width, self.config.height), theme.background)

        self.large_font = pygame.font.Font(None, 64)
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 24)

    def draw(self, frame: Frame):
        """Renders one frame. The caller flips the display."""
        self.screen.blit(self.background, (0, 0))
        self._draw_environment()

        for pipe in frame.pipes:
            self._draw_pipe(pipe)

        if self.theme.ground_color:
            ground_y = self.config.ground_y
            pygame.draw.rect(self.screen, self.theme.ground_color[:3],
                             (0, ground_y, self.config.width, self.config.ground_height))

        self._draw_bird(frame)

        if frame.state is GameState.RUNNING:
            self._draw_score(frame.score)
        else:
            self._draw_menu(frame)

    # -------- Environment --------

    def _draw_environment(self):
        cfg, theme = self.config, self.theme

        if theme.cloud_color and theme.clouds:
            overlay = pygame.Surface((cfg.width, cfg.height), pygame.SRCALPHA)
            base_alpha = theme.cloud_color[3] if len(theme.cloud_color) == 4 else 255
            for cloud in theme.clouds:
                color = (*theme.cloud_color[:3], round(base_alpha * cloud.opacity))
                x, y = cloud.x * cfg.width, cloud.y * cfg.height
                w = cloud.width
                pygame.draw.circle(overlay, color, (x, y), w / 2)
                pygame.draw.circle(overlay, color, (x + w / 3, y), w / 3)
                pygame.draw.circle(overlay, color, (x - w / 3, y), w / 3)
            self.screen.blit(overlay, (0, 0))

        if theme.has_stars:
            for star in theme.stars:
                pygame.draw.circle(self.screen, WHITE,
                                   (star.x * cfg.width, star.y * cfg.height),
                                   max(star.size / 2, 1))

        if theme.sun_color:
            pygame.draw.circle(self.screen, theme.sun_color[:3], (cfg.width - 80, 80), 30)

    def _draw_pipe(self, pipe: Pipe):
        cfg, theme = self.config, self.theme
        body = theme.pipe_color[:3] if theme.pipe_color else None
        cap = theme.pipe_border_color[:3] if theme.pipe_border_color else None
        bottom_y = pipe.gap_bottom
        bottom_height = cfg.height - bottom_y - cfg.ground_height
        cap_width = cfg.pipe_width + 2 * PIPE_CAP_OVERHANG

        if body:
            pygame.draw.rect(self.screen, body, (pipe.x, 0, cfg.pipe_width, pipe.top_height))
            pygame.draw.rect(self.screen, body, (pipe.x, bottom_y, cfg.pipe_width, bottom_height))
        if cap:
            pygame.draw.rect(self.screen, cap, (pipe.x - PIPE_CAP_OVERHANG,
                                                pipe.top_height - PIPE_CAP_HEIGHT,
                                                cap_width, PIPE_CAP_HEIGHT))
            pygame.draw.rect(self.screen, cap, (pipe.x - PIPE_CAP_OVERHANG, bottom_y,
                                                cap_width, PIPE_CAP_HEIGHT))

    def _draw_bird(self, frame: Frame):
        size = self.config.bird_size
        half = size // 2
        sprite = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
        centre = (size, size)

        pygame.draw.circle(sprite, BIRD_BODY, centre, half)
        pygame.draw.circle(sprite, BLACK, (size - 5, size - 5), 3)
        pygame.draw.polygon(sprite, BIRD_BEAK, [
            (size + half - 5, size),
            (size + half + 5, size),
            (size + half - 2, size + 5),
        ])

        # Screen y grows downwards, pygame rotates counter-clockwise.
        rotated = pygame.transform.rotate(sprite, -frame.bird.rotation)
        rect = rotated.get_rect(center=(frame.bird.x + half, frame.bird.y + half))
        self.screen.blit(rotated, rect)

    # -------- HUD --------

    def _text_color(self) -> Color:
        return self.theme.text_color[:3] if self.theme.text_color else WHITE

    def _draw_score(self, score: int):
        shadow = self.large_font.render(str(score), True, BLACK)
        text = self.large_font.render(str(score), True, self._text_color())
        x = self.config.width // 2 - text.get_width() // 2
        self.screen.blit(shadow, (x + 2, 22))
        self.screen.blit(text, (x, 20))

    def _menu_lines(self, frame: Frame) -> List[pygame.Surface]:
        lines = [self.large_font.render("Flappy Bird", True, (51, 51, 51))]
        if frame.state is GameState.OVER:
            lines.append(self.large_font.render(str(frame.score), True, SCORE_RED))
            lines.append(self.font.render(f"High Score: {frame.high_score}", True, RECORD_GREEN))
            if frame.new_record and frame.score > 0:
                lines.append(self.small_font.render("New High Score!", True, RECORD_ORANGE))
            prompt = "SPACE / Click = Play Again | R = Menu"
        else:
            lines.append(self.font.render(f"High Score: {frame.high_score}", True, MENU_TEXT))
            prompt = "Click or press SPACE to flap"
        lines.append(self.small_font.render(prompt, True, MENU_TEXT))
        lines.append(self.small_font.render(
            f"Environment: {self.theme.name.upper()}", True, (170, 170, 170)))
        return lines

    def _draw_menu(self, frame: Frame):
        cfg = self.config
        shade = pygame.Surface((cfg.width, cfg.height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 178))
        self.screen.blit(shade, (0, 0))

        lines = self._menu_lines(frame)
        padding, spacing = 40, 12
        box_w = max(line.get_width() for line in lines) + 2 * padding
        box_h = sum(line.get_height() for line in lines) + spacing * (len(lines) - 1) + 2 * padding
        box = pygame.Rect(0, 0, box_w, box_h)
        box.center = (cfg.width // 2, cfg.height // 2)
        pygame.draw.rect(self.screen, WHITE, box, border_radius=16)

        y = box.top + padding
        for line in lines:
            self.screen.blit(line, (cfg.width // 2 - line.get_width() // 2, y))
            y += line.get_height() + spacing
