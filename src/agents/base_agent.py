"""
Base agent interface for Termsweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

import numpy as np

from termsweeper.game import Command


COMMANDS = list(Command)


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Termsweeper agents.

    Agents steer the cursor: every action is the index of a Command,
    matching the action space of TermsweeperEnv.
    """

    def __init__(self, rows: int, columns: int) -> None:
        """
        Initialize the agent.

        Args:
            rows: Number of rows in the board.
            columns: Number of columns in the board.
        """
        self.rows = rows
        self.columns = columns

    @abstractmethod
    def select_action(
        self,
        observation: Dict[str, np.ndarray],
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: Dict with the board array and the cursor.
            valid_actions: Optional mask of commands that change the game.

        Returns:
            Command index.
        """

    def action_to_command(self, action: int) -> Command:
        """Convert an action index to its Command."""
        return COMMANDS[action]

    def command_to_action(self, command: Command) -> int:
        """Convert a Command to its action index."""
        return COMMANDS.index(command)

    def get_valid_actions_from_obs(
        self, observation: Dict[str, np.ndarray]
    ) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: Dict with the board array and the cursor.

        Returns:
            Boolean mask where True = valid action.
        """
        board = observation["board"]
        row, col = (int(value) for value in observation["cursor"])
        value = board[row, col]

        mask = np.zeros(len(COMMANDS), dtype=bool)
        mask[self.command_to_action(Command.MOVE_LEFT)] = col > 0
        mask[self.command_to_action(Command.MOVE_DOWN)] = row < self.rows - 1
        mask[self.command_to_action(Command.MOVE_UP)] = row > 0
        mask[self.command_to_action(Command.MOVE_RIGHT)] = col < self.columns - 1
        mask[self.command_to_action(Command.TOGGLE_MARK)] = value < 0
        mask[self.command_to_action(Command.REVEAL)] = value == -1
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
