from .gym_env import DEFAULT_BOARD_SIZE, HexEnv

__all__ = ["DEFAULT_BOARD_SIZE", "HexEnv"]
