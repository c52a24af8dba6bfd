"""Flappy Rocket: steer a falling rocket through gaps and keep it fuelled.

The simulation (``world``, ``physics``, ``spawner``, ``controls``) is plain
Python and numpy. ``render`` draws with pygame, ``env`` wraps the game as a
gymnasium environment and ``app`` runs it in a window.
"""

from .config import DEFAULT_CONFIG, GameConfig
from .world import FuelPickup, GameOverReason, Obstacle, Phase, Rocket, Star, World, new_world

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "FuelPickup",
    "GameConfig",
    "GameOverReason",
    "Obstacle",
    "Phase",
    "Rocket",
    "Star",
    "World",
    "new_world",
]
