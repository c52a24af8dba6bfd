"""Obstacle and fuel pickup spawning.

Spawning runs on two independent interval timers (see :class:`IntervalTimer`)
and only while the run is in progress.
"""

import logging

from .world import FuelPickup, Obstacle

logger = logging.getLogger(__name__)


def spawn_obstacle(world):
    """Appends a new obstacle past the right edge.

    The gap top is a uniform integer in ``[OBSTACLE_MIN_HEIGHT, max_gap_top]``
    and the obstacle sits ``OBSTACLE_SPACING_MIN..OBSTACLE_SPACING_MAX`` pixels
    after the newest one. Returns the obstacle, or None when the newest
    obstacle has not scrolled onto the screen yet.
    """
    cfg = world.config
    rng = world.rng

    if world.obstacles:
        newest_x = world.obstacles[-1].x
        if newest_x > cfg.WIDTH:
            logger.debug("Skipping obstacle spawn, previous one is still off screen at x=%.1f", newest_x)
            return None
    else:
        newest_x = cfg.WIDTH

    spacing = rng.uniform(cfg.OBSTACLE_SPACING_MIN, cfg.OBSTACLE_SPACING_MAX)
    top_height = int(rng.integers(cfg.OBSTACLE_MIN_HEIGHT, cfg.max_gap_top, endpoint=True))

    obstacle = Obstacle(
        x=float(max(cfg.WIDTH, newest_x + spacing)),
        top_height=top_height,
        bottom_y=top_height + cfg.OBSTACLE_GAP,
    )
    world.obstacles.append(obstacle)
    logger.debug("Spawned obstacle at x=%.1f with gap %d..%d", obstacle.x, obstacle.top_height, obstacle.bottom_y)
    return obstacle


def spawn_pickup(world):
    cfg = world.config
    pickup = FuelPickup(
        x=float(cfg.WIDTH),
        y=float(world.rng.integers(0, cfg.HEIGHT - cfg.PICKUP_SIZE)),
    )
    world.pickups.append(pickup)
    logger.debug("Spawned fuel pickup at y=%.0f", pickup.y)
    return pickup


def advance_spawn_timers(world, elapsed_ms):
    """Feeds ``elapsed_ms`` to both spawn timers and spawns for every interval that passed.

    Time only counts while the run is in progress. Returns the number of
    (obstacles, pickups) spawned.
    """
    if not world.running:
        return 0, 0

    obstacles = 0
    for _ in range(world.obstacle_timer.advance(elapsed_ms)):
        if spawn_obstacle(world) is not None:
            obstacles += 1

    pickups = 0
    for _ in range(world.pickup_timer.advance(elapsed_ms)):
        spawn_pickup(world)
        pickups += 1

    return obstacles, pickups
