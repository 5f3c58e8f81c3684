from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from hexgame.core import Board, Cell, Player, Won, derive_state, legal_move_mask
from hexgame.display import render_board

DEFAULT_BOARD_SIZE = 14


class HexEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, *, render_mode: Optional[str] = None) -> None:
        super().__init__()
        if size < 1:
            raise ValueError("Board size must be at least 1.")
        self.size = size
        self.render_mode = render_mode
        self.observation_space = spaces.Box(low=0, high=2, shape=(size, size), dtype=np.int8)
        self.action_space = spaces.Discrete(size * size)
        self._board = Board(size)

    @property
    def board(self) -> Board:
        return self._board

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._board = Board(self.size)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if derive_state(self._board).is_terminal:
            raise ValueError("Cannot step a finished game; call reset().")

        cell = Cell.from_index(int(action_index), self.size)
        self._board.apply_move(cell)
        state = derive_state(self._board)

        reward = 0.0
        terminated = isinstance(state, Won)
        if terminated:
            reward = 1.0 if state.winner == Player.FIRST else -1.0
        return self._build_observation(), reward, terminated, False, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        return legal_move_mask(self._board)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return render_board(self._board.snapshot())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return self._board.cells.copy()

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": self._board.active_player,
        }
