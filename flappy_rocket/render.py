"""Drawing the world onto a pygame surface.

:meth:`Renderer.draw` reads the world and never changes it.
"""

import logging
import os
from collections import namedtuple

import pygame

from .world import GameOverReason, Phase

logger = logging.getLogger(__name__)

ROCKET_SPRITE = "rocket.png"
PICKUP_SPRITE = "fuel.png"

FUEL_BAR_WIDTH = 100
FUEL_BAR_HEIGHT = 10
FUEL_BAR_MARGIN = 20

REASON_TEXT = {
    GameOverReason.FLOOR: "You hit the ground",
    GameOverReason.CEILING: "You flew off the top",
    GameOverReason.FUEL: "Out of fuel",
    GameOverReason.OBSTACLE: "You crashed",
}

Sprites = namedtuple("Sprites", ["rocket", "pickup"])
NO_SPRITES = Sprites(None, None)


def _load_sprite(path, size):
    if not os.path.isfile(path):
        logger.warning("Sprite %s not found, drawing a solid rectangle instead", path)
        return None
    try:
        image = pygame.image.load(path)
    except pygame.error as e:
        logger.warning("Could not load sprite %s (%s), drawing a solid rectangle instead", path, e)
        return None
    return pygame.transform.scale(image, size)


def load_sprites(asset_dir, config):
    """Loads the rocket and fuel sprites from ``asset_dir``.

    A missing directory or file degrades to solid rectangles.
    """
    if asset_dir is None:
        return NO_SPRITES

    return Sprites(
        rocket=_load_sprite(os.path.join(asset_dir, ROCKET_SPRITE), (config.ROCKET_WIDTH, config.ROCKET_HEIGHT)),
        pickup=_load_sprite(os.path.join(asset_dir, PICKUP_SPRITE), (config.PICKUP_SIZE, config.PICKUP_SIZE)),
    )


class Renderer:
    def __init__(self, config, sprites=NO_SPRITES):
        pygame.font.init()
        self.config = config
        self.sprites = sprites
        self.font_ui = pygame.font.Font(None, 28)
        self.font_big = pygame.font.Font(None, 64)

    def draw(self, surface, world):
        surface.fill(self.config.COLOR_BG)
        self._render_stars(surface, world)
        self._render_rocket(surface, world)
        self._render_obstacles(surface, world)
        self._render_pickups(surface, world)
        self._render_fuel_bar(surface, world)

        if world.phase is Phase.NOT_STARTED:
            self._render_start_prompt(surface)
        elif world.phase is Phase.GAME_OVER:
            self._render_game_over(surface, world)

    def _render_stars(self, surface, world):
        for star in world.stars:
            pygame.draw.circle(surface, self.config.COLOR_STAR, (star.x, star.y), star.size)

    def _render_rocket(self, surface, world):
        r = world.rocket
        if self.sprites.rocket is not None:
            surface.blit(self.sprites.rocket, (r.x, r.y))
        else:
            pygame.draw.rect(surface, self.config.COLOR_ROCKET, pygame.Rect(r.x, r.y, r.width, r.height))

    def _render_obstacles(self, surface, world):
        cfg = self.config
        for obstacle in world.obstacles:
            top = pygame.Rect(obstacle.x, 0, cfg.OBSTACLE_WIDTH, obstacle.top_height)
            bottom = pygame.Rect(obstacle.x, obstacle.bottom_y, cfg.OBSTACLE_WIDTH, cfg.HEIGHT - obstacle.bottom_y)
            pygame.draw.rect(surface, cfg.COLOR_OBSTACLE, top)
            pygame.draw.rect(surface, cfg.COLOR_OBSTACLE, bottom)

    def _render_pickups(self, surface, world):
        size = self.config.PICKUP_SIZE
        for pickup in world.pickups:
            if self.sprites.pickup is not None:
                surface.blit(self.sprites.pickup, (pickup.x, pickup.y))
            else:
                pygame.draw.rect(surface, self.config.COLOR_PICKUP, pygame.Rect(pickup.x, pickup.y, size, size))

    def _render_fuel_bar(self, surface, world):
        cfg = self.config
        bar_x = cfg.WIDTH - FUEL_BAR_WIDTH - FUEL_BAR_MARGIN
        bar_y = FUEL_BAR_MARGIN
        fuel_width = world.rocket.fuel / cfg.MAX_FUEL * FUEL_BAR_WIDTH

        pygame.draw.rect(surface, cfg.COLOR_FUEL_TRACK, (bar_x, bar_y, FUEL_BAR_WIDTH, FUEL_BAR_HEIGHT))
        if fuel_width > 0:
            pygame.draw.rect(surface, cfg.COLOR_FUEL, (bar_x, bar_y, fuel_width, FUEL_BAR_HEIGHT))

    def _render_start_prompt(self, surface):
        text_surf = self.font_ui.render("Press SPACE or tap to launch", True, self.config.COLOR_TEXT)
        text_rect = text_surf.get_rect(center=(self.config.WIDTH / 2, self.config.HEIGHT / 2 + 60))
        surface.blit(text_surf, text_rect)

    def _render_game_over(self, surface, world):
        cfg = self.config
        overlay = pygame.Surface((cfg.WIDTH, cfg.HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))

        title = self.font_big.render("GAME OVER", True, cfg.COLOR_GAME_OVER)
        overlay.blit(title, title.get_rect(center=(cfg.WIDTH / 2, cfg.HEIGHT / 2 - 30)))

        if world.reason is not None:
            reason = self.font_ui.render(REASON_TEXT[world.reason], True, cfg.COLOR_TEXT)
            overlay.blit(reason, reason.get_rect(center=(cfg.WIDTH / 2, cfg.HEIGHT / 2 + 15)))

        hint = self.font_ui.render("Press R to restart", True, cfg.COLOR_TEXT)
        overlay.blit(hint, hint.get_rect(center=(cfg.WIDTH / 2, cfg.HEIGHT / 2 + 45)))

        surface.blit(overlay, (0, 0))
