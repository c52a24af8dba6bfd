import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame
import os

from .config import DEFAULT_CONFIG
from .controls import thrust
from .physics import tick
from .render import NO_SPRITES, Renderer
from .spawner import advance_spawn_timers
from .world import new_world

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = (
        "Controls: Press SPACE (or ↑) to fire the rocket's thruster. Press R to restart after a crash."
    )

    game_description = (
        "Fly a rocket through gaps in the asteroid field and grab fuel cells before your tank runs dry."
    )

    auto_advance = True

    MAX_STEPS = 10000

    # Rewards
    REWARD_ALIVE = 0.1
    REWARD_CRASH = -10.0

    def __init__(self, render_mode="rgb_array", config=None, sprites=NO_SPRITES):
        super().__init__()
        self.render_mode = render_mode
        self.config = config or DEFAULT_CONFIG
        cfg = self.config

        # --- Spaces ---
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(cfg.HEIGHT, cfg.WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # --- Pygame Setup ---
        pygame.init()
        self.screen = pygame.Surface((cfg.WIDTH, cfg.HEIGHT))
        self.renderer = Renderer(cfg, sprites)

        # --- State Variables (initialized in reset) ---
        self.world = None
        self.steps = 0
        self.prev_space_held = False
        self.prev_up_held = False

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.world = new_world(self.config, self.np_random)
        self.steps = 0
        self.prev_space_held = False
        self.prev_up_held = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        world = self.world
        if world.game_over:
            truncated = self.steps >= self.MAX_STEPS
            return self._get_observation(), 0, True, truncated, self._get_info()

        movement, space_held = action[0], action[1] == 1
        up_held = movement == 1

        # --- Handle Input ---
        # Thrust fires on a press, not while the key is held.
        if (space_held and not self.prev_space_held) or (up_held and not self.prev_up_held):
            thrust(world)
        self.prev_space_held = space_held
        self.prev_up_held = up_held

        self.steps += 1
        was_running = world.running

        # --- Update World ---
        tick(world)
        advance_spawn_timers(world, self.config.frame_ms)

        # --- Rewards and Termination ---
        reward = 0.0
        if world.game_over:
            reward = self.REWARD_CRASH
        elif was_running:
            reward = self.REWARD_ALIVE

        terminated = world.game_over
        truncated = self.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.screen, self.world)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        world = self.world
        return {
            "steps": self.steps,
            "ticks": world.steps,
            "fuel": world.rocket.fuel,
            "phase": world.phase.value,
            "reason": world.reason.value if world.reason is not None else None,
            "obstacles": len(world.obstacles),
            "pickups": len(world.pickups),
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.config.HEIGHT, self.config.WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.config.HEIGHT, self.config.WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.config.HEIGHT, self.config.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)


if __name__ == '__main__':
    # Automated smoke run with random actions; use `python -m flappy_rocket` to play
    env = GameEnv()
    env.validate_implementation()
    obs, info = env.reset(seed=0)
    for i in range(1000):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        if i % 100 == 0:
            print(f"Step {i}: Reward={reward}, Info={info}")
        if terminated or truncated:
            print(f"Episode finished after {info['ticks']} ticks: {info['reason']}")
            obs, info = env.reset()
    env.close()
