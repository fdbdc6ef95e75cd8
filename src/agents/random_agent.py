"""
Random agent for Termsweeper.

Serves as a baseline by wandering the grid and issuing random commands.
"""
from typing import Dict, Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects commands uniformly at random.

    This provides a baseline for the evaluation command of the CLI.
    """

    def __init__(
        self,
        rows: int = 18,
        columns: int = 45,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            rows: Number of rows in the board.
            columns: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(rows, columns)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: Dict[str, np.ndarray],
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid command.

        Args:
            observation: Dict with the board array and the cursor.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions)[0]

        if len(valid_indices) == 0:
            # Nothing changes the game any more; any command is a no-op
            return 0

        return int(self.rng.choice(valid_indices))
