"""
Termsweeper game module.

Provides the cursor-driven board engine: grid and cell state, mine
placement, flood-fill reveal and the game state machine.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .game import Game, GameState, Direction, Command, KEY_BINDINGS
from .environment import TermsweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "Game",
    "GameState",
    "Direction",
    "Command",
    "KEY_BINDINGS",
    "TermsweeperEnv",
    "make_vec_env",
]
