"""World state: the rocket, the scrolling entities and the run's phase.

Everything the update, render and input functions touch lives on a
:class:`World` instance; nothing is kept at module level.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np

from .config import DEFAULT_CONFIG, GameConfig
from .timers import IntervalTimer

logger = logging.getLogger(__name__)


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameOverReason(Enum):
    FLOOR = "floor"
    CEILING = "ceiling"
    FUEL = "fuel"
    OBSTACLE = "obstacle"


@dataclass
class Rocket:
    x: float
    y: float
    width: int
    height: int
    dy: float = 0.0
    fuel: float = 100.0


@dataclass
class Obstacle:
    """A top/bottom rectangle pair around a vertical gap.

    The top rectangle spans ``0..top_height`` and the bottom one spans
    ``bottom_y..HEIGHT``; the width is a config constant.
    """
    x: float
    top_height: int
    bottom_y: int


@dataclass
class FuelPickup:
    x: float
    y: float


@dataclass
class Star:
    x: float
    y: float
    size: float
    speed: float


@dataclass
class World:
    config: GameConfig
    rng: np.random.Generator
    rocket: Rocket
    obstacles: List[Obstacle] = field(default_factory=list)
    pickups: List[FuelPickup] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    phase: Phase = Phase.NOT_STARTED
    reason: Optional[GameOverReason] = None
    steps: int = 0
    obstacle_timer: Optional[IntervalTimer] = None
    pickup_timer: Optional[IntervalTimer] = None

    def __post_init__(self):
        if self.obstacle_timer is None:
            self.obstacle_timer = IntervalTimer(self.config.OBSTACLE_SPAWN_MS)
        if self.pickup_timer is None:
            self.pickup_timer = IntervalTimer(self.config.PICKUP_SPAWN_MS)

    @property
    def running(self):
        return self.phase is Phase.RUNNING

    @property
    def game_over(self):
        return self.phase is Phase.GAME_OVER

    def start(self):
        if self.phase is Phase.NOT_STARTED:
            self.phase = Phase.RUNNING
            logger.info("Run started")

    def end(self, reason):
        # The first terminal condition of a run is the one reported.
        if self.phase is Phase.GAME_OVER:
            return
        self.phase = Phase.GAME_OVER
        self.reason = reason
        logger.info("Game over (%s) after %d ticks, fuel %.1f", reason.value, self.steps, self.rocket.fuel)


def new_rocket(config):
    return Rocket(
        x=config.ROCKET_X,
        y=config.HEIGHT / 2,
        width=config.ROCKET_WIDTH,
        height=config.ROCKET_HEIGHT,
        dy=0.0,
        fuel=config.MAX_FUEL,
    )


def make_stars(config, rng):
    return [
        Star(
            x=float(rng.uniform(0, config.WIDTH)),
            y=float(rng.uniform(0, config.HEIGHT)),
            size=float(rng.uniform(1, 3)),
            speed=float(rng.uniform(1, 3)),
        )
        for _ in range(config.NUM_STARS)
    ]


def new_world(config=None, rng=None):
    """Builds a fresh world, waiting for the first thrust unless the config says otherwise."""
    config = config or DEFAULT_CONFIG
    if rng is None:
        rng = np.random.default_rng()

    world = World(
        config=config,
        rng=rng,
        rocket=new_rocket(config),
        stars=make_stars(config, rng),
    )
    if not config.WAIT_FOR_START:
        world.start()
    return world
