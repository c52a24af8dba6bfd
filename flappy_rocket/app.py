"""Interactive pygame front end.

One update and one redraw per display frame. The two spawn timers are armed
with ``pygame.time.set_timer`` and arrive as events, so spawning keeps its
own cadence whatever the frame rate is.
"""

import logging

import numpy as np
import pygame

from .config import DEFAULT_CONFIG
from .controls import restart, thrust
from .physics import tick
from .render import NO_SPRITES, Renderer
from .spawner import spawn_obstacle, spawn_pickup
from .world import new_world

logger = logging.getLogger(__name__)

SPAWN_OBSTACLE_EVENT = pygame.USEREVENT + 1
SPAWN_PICKUP_EVENT = pygame.USEREVENT + 2

THRUST_KEYS = (pygame.K_SPACE, pygame.K_UP)


class FlappyRocketApp:
    def __init__(self, config=None, seed=None, sprites=NO_SPRITES, caption="Flappy Rocket"):
        self.config = config or DEFAULT_CONFIG
        self.world = new_world(self.config, np.random.default_rng(seed))
        self.renderer = Renderer(self.config, sprites)
        self.caption = caption
        self.screen = None
        self.timers_armed = False
        self.running = False

    def arm_timers(self):
        pygame.time.set_timer(SPAWN_OBSTACLE_EVENT, self.config.OBSTACLE_SPAWN_MS)
        pygame.time.set_timer(SPAWN_PICKUP_EVENT, self.config.PICKUP_SPAWN_MS)
        self.timers_armed = True

    def disarm_timers(self):
        pygame.time.set_timer(SPAWN_OBSTACLE_EVENT, 0)
        pygame.time.set_timer(SPAWN_PICKUP_EVENT, 0)
        self.timers_armed = False

    def sync_timers(self):
        """Timers run exactly while the world is running."""
        if self.world.running and not self.timers_armed:
            self.arm_timers()
        elif not self.world.running and self.timers_armed:
            self.disarm_timers()

    def handle_event(self, event):
        world = self.world

        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == SPAWN_OBSTACLE_EVENT:
            if world.running:
                spawn_obstacle(world)
        elif event.type == SPAWN_PICKUP_EVENT:
            if world.running:
                spawn_pickup(world)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_r:
                restart(world)
            elif event.key in THRUST_KEYS:
                thrust(world)
        elif event.type == pygame.FINGERDOWN or (event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False)):
            # A tap restarts a finished run and thrusts otherwise. Mouse events
            # synthesized from touches are skipped so one tap acts once.
            if world.game_over:
                restart(world)
            else:
                thrust(world)

    def frame(self):
        for event in pygame.event.get():
            self.handle_event(event)
        self.sync_timers()

        tick(self.world)
        self.sync_timers()

        self.renderer.draw(self.screen, self.world)
        pygame.display.flip()

    def run(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.config.WIDTH, self.config.HEIGHT))
        pygame.display.set_caption(self.caption)
        clock = pygame.time.Clock()

        self.running = True
        try:
            while self.running:
                self.frame()
                clock.tick(self.config.FPS)
        finally:
            self.disarm_timers()
            pygame.quit()
