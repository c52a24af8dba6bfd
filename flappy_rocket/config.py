"""Tunable constants for Flappy Rocket.

Every number the simulation, spawner and renderer use lives on
:class:`GameConfig`. Units are pixels, pixels per tick and milliseconds.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameConfig:
    # Surface
    WIDTH: int = 640
    HEIGHT: int = 400
    FPS: int = 60

    # Physics
    GRAVITY: float = 0.65
    THRUST: float = -10.0
    MAX_FALL_SPEED: float = 10.0
    SCROLL_SPEED: float = 2.0

    # Rocket
    ROCKET_X: float = 50.0
    ROCKET_WIDTH: int = 50
    ROCKET_HEIGHT: int = 50

    # Obstacles
    OBSTACLE_WIDTH: int = 50
    OBSTACLE_GAP: int = 150
    OBSTACLE_MIN_HEIGHT: int = 50
    OBSTACLE_SPACING_MIN: float = 300.0
    OBSTACLE_SPACING_MAX: float = 500.0
    OBSTACLE_SPAWN_MS: int = 2000

    # Fuel
    MAX_FUEL: float = 100.0
    FUEL_DRAIN: float = 0.1
    FUEL_BONUS: float = 20.0
    PICKUP_SIZE: int = 20
    PICKUP_SPAWN_MS: int = 3000

    # Background
    NUM_STARS: int = 100

    # Gravity, scrolling, drain and spawning wait for the first thrust
    WAIT_FOR_START: bool = True

    # Colors
    COLOR_BG: tuple = (0, 0, 0)
    COLOR_STAR: tuple = (255, 255, 255)
    COLOR_ROCKET: tuple = (255, 0, 0)
    COLOR_OBSTACLE: tuple = (128, 128, 128)
    COLOR_PICKUP: tuple = (255, 255, 0)
    COLOR_FUEL_TRACK: tuple = (128, 128, 128)
    COLOR_FUEL: tuple = (255, 255, 0)
    COLOR_TEXT: tuple = (220, 220, 240)
    COLOR_GAME_OVER: tuple = (220, 50, 50)

    def __post_init__(self):
        if self.WIDTH <= 0 or self.HEIGHT <= 0:
            raise ValueError(f"Surface must have a positive size, got {self.WIDTH}x{self.HEIGHT}")
        if self.FPS <= 0:
            raise ValueError(f"FPS must be positive, got {self.FPS}")
        if self.ROCKET_WIDTH <= 0 or self.ROCKET_HEIGHT <= 0:
            raise ValueError("Rocket must have a positive size")
        if self.ROCKET_HEIGHT > self.HEIGHT:
            raise ValueError("Rocket is taller than the surface")
        if self.OBSTACLE_WIDTH <= 0 or self.PICKUP_SIZE <= 0:
            raise ValueError("Obstacle width and pickup size must be positive")
        if self.PICKUP_SIZE >= self.HEIGHT:
            raise ValueError("Pickup is taller than the surface")
        if self.OBSTACLE_GAP <= 0 or self.OBSTACLE_MIN_HEIGHT < 0:
            raise ValueError("Obstacle gap must be positive and its margin non-negative")
        if self.max_gap_top < self.OBSTACLE_MIN_HEIGHT:
            raise ValueError(
                f"Gap of {self.OBSTACLE_GAP}px with {self.OBSTACLE_MIN_HEIGHT}px margins "
                f"does not fit in a {self.HEIGHT}px surface"
            )
        if not 0 <= self.OBSTACLE_SPACING_MIN <= self.OBSTACLE_SPACING_MAX:
            raise ValueError(
                f"Invalid spacing range [{self.OBSTACLE_SPACING_MIN}, {self.OBSTACLE_SPACING_MAX}]"
            )
        if self.OBSTACLE_SPAWN_MS <= 0 or self.PICKUP_SPAWN_MS <= 0:
            raise ValueError("Spawn intervals must be positive")
        if self.MAX_FUEL <= 0:
            raise ValueError(f"MAX_FUEL must be positive, got {self.MAX_FUEL}")
        if self.FUEL_DRAIN < 0 or self.FUEL_BONUS < 0:
            raise ValueError("FUEL_DRAIN and FUEL_BONUS must not be negative")
        if self.MAX_FALL_SPEED <= 0:
            raise ValueError(f"MAX_FALL_SPEED must be positive, got {self.MAX_FALL_SPEED}")
        if self.NUM_STARS < 0:
            raise ValueError(f"NUM_STARS must not be negative, got {self.NUM_STARS}")

    @property
    def max_gap_top(self):
        """Largest top-rectangle height that still leaves a full gap above the bottom margin."""
        return self.HEIGHT - self.OBSTACLE_GAP - self.OBSTACLE_MIN_HEIGHT

    @property
    def frame_ms(self):
        return 1000.0 / self.FPS

    def replace(self, **changes):
        return replace(self, **changes)


DEFAULT_CONFIG = GameConfig()
