"""
env.py - Gymnasium environment driving a GameState

Each action is a column index handed to GameState.drop_piece(). The
observation is the seat grid (0 empty, 1 first player, 2 second player).
Rewards are given from the point of view of the player who just moved.
"""

from typing import Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.rules import GameState, Outcome, Placed, Player
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same env; info['current_player'] says whose
    turn it is.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 player1: Optional[Player] = None, player2: Optional[Player] = None,
                 render_mode: Optional[str] = None):
        """
        Args:
            height: Number of rows
            width: Number of columns
            player1: First player (defaults to "red")
            player2: Second player (defaults to "blue")
            render_mode: One of metadata['render_modes'] or None
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.game = GameState(height, width,
                              player1 or Player.create("red"),
                              player2 or Player.create("blue"))
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        super().reset(seed=seed)
        self.game.reset_game()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.game.drop_piece(int(action))

        if not isinstance(result, Placed):
            debug.warning(f"Invalid action {action}: {result.reason.name}", "env")
            info = self._get_info()
            info['rejected'] = result.reason
            return self._get_observation(), self.reward_invalid_move, False, True, info

        terminated = result.outcome != Outcome.CONTINUE
        if result.outcome == Outcome.WON:
            reward = self.reward_win
        elif result.outcome == Outcome.TIED:
            reward = self.reward_draw
        else:
            reward = self.reward_step

        if self.render_mode == "human":
            self.render()

        info = self._get_info()
        info['placed'] = (result.row, result.column)
        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.render()

        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.grid()

    def _get_info(self) -> Dict:
        return {
            'valid_moves': self.game.valid_columns(),
            'current_player': self.game.current_seat,
            'status': self.game.status.name,
            'winner': self.game.winner_seat or None,
            'moves_made': self.game.move_count,
            'winning_line': self.game.winning_line(),
            'last_move': self.game.last_move,
        }
