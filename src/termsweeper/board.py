"""
Board module for Termsweeper.

Implements the grid model with the adjacency resolver, deferred mine
placement, flood-fill revealing and the observation array.
"""
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Termsweeper board.

    The mine count is a request: if it does not fit around the first
    revealed cell it is reduced when the mines are laid.

    Attributes:
        columns: Number of columns.
        rows: Number of rows.
        number_of_mines: Mines requested for the match.
    """

    columns: int = 45
    rows: int = 18
    number_of_mines: int = 75

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Board dimensions must be positive")
        if self.number_of_mines < 0:
            raise ValueError("Number of mines cannot be negative")

    @property
    def total_cells(self) -> int:
        return self.columns * self.rows


# Preset board sizes
DEFAULT = BoardConfig(45, 18, 75)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS = {
    "default": DEFAULT,
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Termsweeper grid.

    Owns the cells, lays the mines once and performs flood-fill reveals.
    It keeps count of the non-mine cells that are still hidden; cursor
    handling and win/loss decisions belong to the game on top of it.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines_laid: bool = False
    _mine_count: int = 0
    _fields_left_to_reveal: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._grid = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]
        self._fields_left_to_reveal = self.config.total_cells

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for neighbors inside the grid.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def _cell(self, row: int, col: int) -> Cell:
        if not self.is_valid_position(row, col):
            raise IndexError(f"Position ({row}, {col}) is outside the board")
        return self._grid[row][col]

    # ========================================================================
    # Mine Placement (Mid-level)
    # ========================================================================

    def safe_zone(self, origin: Position) -> Set[Position]:
        """Origin cell plus its neighbors."""
        return {origin, *self.neighbors(*origin)}

    def place_mines(
        self, origin: Position, rng: Optional[random.Random] = None
    ) -> int:
        """
        Place mines randomly around a mine-free origin.

        The requested count is reduced to the number of cells outside the
        safe zone when it does not fit.

        Args:
            origin: (row, col) position whose safe zone stays mine-free.
            rng: Random generator (module-level generator if omitted).

        Returns:
            Number of mines actually placed.
        """
        rng = rng or random
        excluded = self.safe_zone(origin)
        eligible = [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.columns)
            if (row, col) not in excluded
        ]
        count = min(self.config.number_of_mines, len(eligible))
        self.lay_mines(rng.sample(eligible, count))
        return count

    def lay_mines(self, positions: Iterable[Position]) -> None:
        """
        Put mines at the given positions and tally adjacent counts.

        Raises:
            RuntimeError: If mines were already laid on this board.
        """
        if self._mines_laid:
            raise RuntimeError("Mines have already been laid")

        mines = set(positions)
        for row, col in mines:
            self._cell(row, col).is_mine = True

        for row in range(self.config.rows):
            for col in range(self.config.columns):
                self._grid[row][col].adjacent_mines = sum(
                    1 for r, c in self.neighbors(row, col)
                    if self._grid[r][c].is_mine
                )

        revealed_safe = sum(
            1 for cell in self._cells()
            if cell.revealed and not cell.is_mine
        )
        self._mine_count = len(mines)
        self._fields_left_to_reveal = (
            self.config.total_cells - self._mine_count - revealed_safe
        )
        self._mines_laid = True

    # ========================================================================
    # Revealing (Mid-level)
    # ========================================================================

    def reveal_region(self, origin: Position) -> int:
        """
        Reveal a non-mine cell and flood-fill across zero-count cells.

        Marked cells reached by the fill are revealed as well and keep
        their mark.

        Args:
            origin: (row, col) of a hidden, non-mine cell.

        Returns:
            Number of cells revealed.
        """
        cell = self._cell(*origin)
        if not cell.reveal():
            return 0
        revealed = 1
        self._fields_left_to_reveal -= 1
        if cell.adjacent_mines != 0:
            return revealed

        pending = self.neighbors(*origin)
        while pending:
            row, col = pending.pop()
            neighbor = self._grid[row][col]
            if not neighbor.reveal():
                continue
            revealed += 1
            self._fields_left_to_reveal -= 1
            if neighbor.adjacent_mines == 0:
                pending.extend(self.neighbors(row, col))
        return revealed

    def reveal_mine(self, origin: Position) -> None:
        """Reveal the mine the player stepped on."""
        self._cell(*origin).reveal()

    def reveal_all(self) -> None:
        """Reveal every cell for display at the end of a game."""
        for cell in self._cells():
            cell.revealed = True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def _cells(self) -> Iterable[Cell]:
        for row in self._grid:
            yield from row

    @property
    def mines_laid(self) -> bool:
        """Check if the mine layout exists yet."""
        return self._mines_laid

    @property
    def mine_count(self) -> int:
        """Number of mines placed (0 before placement)."""
        return self._mine_count

    @property
    def fields_left_to_reveal(self) -> int:
        """Number of non-mine cells that are still hidden."""
        return self._fields_left_to_reveal

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the live cell at position; raises IndexError if invalid."""
        return self._cell(row, col)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_positions(self) -> Set[Position]:
        """Positions of all mines."""
        return {
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.columns)
            if self._grid[row][col].is_mine
        }

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs
