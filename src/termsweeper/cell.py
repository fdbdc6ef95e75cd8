"""
Cell module for Termsweeper.

Represents individual grid positions with their visibility flags
(revealed/marked) and content (mine/adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Display state of a cell as seen by the player."""

    HIDDEN = auto()
    MARKED = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single position in the Termsweeper grid.

    A revealed cell may still carry the mark it had before it was
    uncovered by flood fill or by the end of the game. The stale mark is
    kept for display only and never blocks revealing or winning.

    Attributes:
        revealed: Whether the content of the cell is shown.
        marked: Whether the player placed a mark on the cell.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    revealed: bool = False
    marked: bool = False
    is_mine: bool = False
    adjacent_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell, ignoring any mark it carries.

        Returns:
            True if the cell was hidden before, False otherwise.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    def toggle_mark(self) -> bool:
        """
        Toggle the mark on this cell.

        Returns:
            True if the mark was toggled, False if cell is revealed.
        """
        if self.revealed:
            return False
        self.marked = not self.marked
        return True

    @property
    def state(self) -> CellState:
        """Display state; revealed takes precedence over a stale mark."""
        if self.revealed:
            return CellState.REVEALED
        if self.marked:
            return CellState.MARKED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor marked."""
        return self.state == CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            -2: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if not self.revealed:
            return -2 if self.marked else -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
