"""Player input: thrust and restart."""

import logging

from .world import Phase, new_rocket

logger = logging.getLogger(__name__)


def thrust(world):
    """Applies the upward impulse and starts the run if it was waiting.

    Returns False when the input was ignored because the run is over.
    """
    if world.game_over:
        return False

    world.rocket.dy = world.config.THRUST
    world.start()
    return True


def restart(world):
    """Puts the world back to the start of a run, keeping the star field."""
    cfg = world.config
    world.rocket = new_rocket(cfg)
    world.obstacles.clear()
    world.pickups.clear()
    world.obstacle_timer.reset()
    world.pickup_timer.reset()
    world.steps = 0
    world.reason = None
    world.phase = Phase.NOT_STARTED
    logger.info("Restarted")
    if not cfg.WAIT_FOR_START:
        world.start()
