"""
Gymnasium environment wrapper for Termsweeper.

Exposes the cursor commands of a game as a standard RL interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .game import Command, Game


COMMANDS = list(Command)

SYMBOL_HIDDEN = "?"
SYMBOL_MARKED = "X"
SYMBOL_MINE = "*"


# ============================================================================
# Termsweeper Environment
# ============================================================================

class TermsweeperEnv(gym.Env):
    """
    Gymnasium environment for Termsweeper.

    Observation:
        Dict with:
        - board: 2D array (-1 hidden, -2 marked, 0-8 count, 9 mine)
        - cursor: (row, column) of the cursor

    Actions:
        Discrete action space of size 6, one per Command in
        declaration order (left, down, up, right, mark, reveal).

    Rewards:
        - +1 for every cell uncovered by a reveal
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a command that changed nothing
        - 0 for a cursor move or a mark toggle
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Termsweeper environment.

        Args:
            config: Board configuration (default: 45x18 with 75 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=-2,
                    high=9,
                    shape=(self.config.rows, self.config.columns),
                    dtype=np.int8,
                ),
                "cursor": spaces.MultiDiscrete(
                    [self.config.rows, self.config.columns]
                ),
            }
        )
        self.action_space = spaces.Discrete(len(COMMANDS))

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Start a new match.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(2**31 - 1))
        self.game = Game(self.config, rng=random.Random(game_seed))
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, np.ndarray], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one command.

        Args:
            action: Index into COMMANDS.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        command = COMMANDS[int(action)]
        self._steps += 1

        reward = self._apply(command)
        terminated = self.game.is_over

        return (
            self._get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def _apply(self, command: Command) -> float:
        """Run a command on the game and score the outcome."""
        hidden_before = self.game.fields_left_to_reveal
        if not self.game.execute(command):
            return -0.1
        if self.game.is_lost:
            return -10.0
        if self.game.is_won:
            return 10.0
        if command == Command.REVEAL:
            return float(hidden_before - self.game.fields_left_to_reveal)
        return 0.0

    def _get_observation(self) -> Dict[str, np.ndarray]:
        return {
            "board": self.game.get_observation(),
            "cursor": np.array(self.game.cursor, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = int(np.count_nonzero(self.game.get_observation() >= 0))
        return {
            "steps": self._steps,
            "revealed": revealed,
            "fields_left": self.game.fields_left_to_reveal,
            "game_state": self.game.game_state.name,
            "cursor": self.game.cursor,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as text, with the cursor cell in brackets."""
        lines = []
        obs = self.game.get_observation()
        cursor_row, cursor_col = self.game.cursor

        for row in range(self.config.rows):
            row_str = ""
            for col in range(self.config.columns):
                symbol = _symbol(obs[row, col])
                if self.game.is_playing and (row, col) == (cursor_row, cursor_col):
                    row_str += f"[{symbol}]"
                else:
                    row_str += f" {symbol} "
            lines.append(row_str.rstrip())

        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of commands that would change the game.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.game.is_playing:
            return mask

        row, col = self.game.cursor
        cell = self.game.get_cell(row, col)
        mask[COMMANDS.index(Command.MOVE_LEFT)] = col > 0
        mask[COMMANDS.index(Command.MOVE_DOWN)] = row < self.config.rows - 1
        mask[COMMANDS.index(Command.MOVE_UP)] = row > 0
        mask[COMMANDS.index(Command.MOVE_RIGHT)] = col < self.config.columns - 1
        mask[COMMANDS.index(Command.TOGGLE_MARK)] = not cell.revealed
        mask[COMMANDS.index(Command.REVEAL)] = not (cell.revealed or cell.marked)
        return mask


def _symbol(value: int) -> str:
    if value == -1:
        return SYMBOL_HIDDEN
    if value == -2:
        return SYMBOL_MARKED
    if value == 9:
        return SYMBOL_MINE
    if value == 0:
        return " "
    return str(value)


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for batch rollouts.

    Args:
        n_envs: Number of environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> TermsweeperEnv:
        return TermsweeperEnv(config=config)

    return gym.vector.SyncVectorEnv([make_env for _ in range(n_envs)])
