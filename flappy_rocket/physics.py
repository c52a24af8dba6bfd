"""One simulated frame of Flappy Rocket.

:func:`tick` is the update step. The helpers it calls are public so each
rule can be exercised on its own.
"""

import logging

from .world import GameOverReason

logger = logging.getLogger(__name__)

# Fuel is rounded after every change so repeated 0.1 drains land on whole values.
FUEL_PRECISION = 9


def overlaps(ax, ay, aw, ah, bx, by, bw, bh):
    """Axis-aligned bounding-box test; touching edges do not count as overlap."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def clamp_fuel(fuel, max_fuel):
    return min(max(round(fuel, FUEL_PRECISION), 0.0), max_fuel)


def apply_gravity(world):
    cfg = world.config
    rocket = world.rocket
    rocket.dy = min(rocket.dy + cfg.GRAVITY, cfg.MAX_FALL_SPEED)
    rocket.y += rocket.dy


def drain_fuel(world):
    rocket = world.rocket
    rocket.fuel = clamp_fuel(rocket.fuel - world.config.FUEL_DRAIN, world.config.MAX_FUEL)
    if rocket.fuel <= 0:
        rocket.fuel = 0.0
        world.end(GameOverReason.FUEL)


def clamp_to_bounds(world):
    """Keeps the rocket on screen; touching the floor or ceiling ends the run."""
    rocket = world.rocket
    floor = world.config.HEIGHT - rocket.height

    if rocket.y > floor:
        rocket.y = floor
        rocket.dy = 0.0
        world.end(GameOverReason.FLOOR)

    if rocket.y < 0:
        rocket.y = 0.0
        rocket.dy = 0.0
        world.end(GameOverReason.CEILING)


def scroll(world):
    """Moves obstacles and pickups left and drops the ones that left the screen."""
    cfg = world.config
    for obstacle in world.obstacles:
        obstacle.x -= cfg.SCROLL_SPEED
    for pickup in world.pickups:
        pickup.x -= cfg.SCROLL_SPEED

    # Sequences are in spawn order, so only the head can be off screen.
    while world.obstacles and world.obstacles[0].x + cfg.OBSTACLE_WIDTH < 0:
        world.obstacles.pop(0)
    while world.pickups and world.pickups[0].x + cfg.PICKUP_SIZE < 0:
        world.pickups.pop(0)


def hits_obstacle(world, obstacle):
    cfg = world.config
    r = world.rocket
    top = overlaps(r.x, r.y, r.width, r.height, obstacle.x, 0, cfg.OBSTACLE_WIDTH, obstacle.top_height)
    bottom = overlaps(
        r.x, r.y, r.width, r.height,
        obstacle.x, obstacle.bottom_y, cfg.OBSTACLE_WIDTH, cfg.HEIGHT - obstacle.bottom_y,
    )
    return top or bottom


def check_obstacle_collisions(world):
    for obstacle in world.obstacles:
        if hits_obstacle(world, obstacle):
            world.end(GameOverReason.OBSTACLE)
            return True
    return False


def collect_pickups(world):
    """Removes every pickup the rocket touches and refuels; returns how many were taken."""
    cfg = world.config
    r = world.rocket
    kept = []
    collected = 0
    for pickup in world.pickups:
        if overlaps(r.x, r.y, r.width, r.height, pickup.x, pickup.y, cfg.PICKUP_SIZE, cfg.PICKUP_SIZE):
            collected += 1
        else:
            kept.append(pickup)

    if collected:
        world.pickups = kept
        r.fuel = clamp_fuel(r.fuel + collected * cfg.FUEL_BONUS, cfg.MAX_FUEL)
        logger.debug("Collected %d fuel pickup(s), fuel now %.1f", collected, r.fuel)
    return collected


def update_stars(world):
    cfg = world.config
    for star in world.stars:
        star.x -= star.speed
        if star.x < 0:
            star.x = cfg.WIDTH
            star.y = float(world.rng.uniform(0, cfg.HEIGHT))


def tick(world):
    """Advances the world by one frame.

    Stars drift whenever the run is not over. Everything else waits for the
    run to start: gravity, fuel drain, bounds, scrolling, then collisions.
    """
    if world.game_over:
        return

    update_stars(world)
    if not world.running:
        return

    world.steps += 1
    apply_gravity(world)
    drain_fuel(world)
    clamp_to_bounds(world)
    scroll(world)

    if world.running:
        check_obstacle_collisions(world)
    if world.running:
        collect_pickups(world)
