"""
Game module for Termsweeper.

Drives a board with a cursor: lazy mine placement on the first reveal,
cursor movement, marking and the Playing -> GameOver | Won state machine.
"""
import copy
import random
from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, Position
from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a match."""

    PLAYING = auto()
    GAME_OVER = auto()
    WON = auto()


class Direction(Enum):
    """Cursor directions as (row, column) offsets."""

    LEFT = (0, -1)
    DOWN = (1, 0)
    UP = (-1, 0)
    RIGHT = (0, 1)


class Command(Enum):
    """Discrete player actions accepted by a game."""

    MOVE_LEFT = auto()
    MOVE_DOWN = auto()
    MOVE_UP = auto()
    MOVE_RIGHT = auto()
    TOGGLE_MARK = auto()
    REVEAL = auto()


_MOVES = {
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_RIGHT: Direction.RIGHT,
}

# Vim keys and arrows for movement, m/enter to mark, space to reveal
KEY_BINDINGS: Dict[str, Command] = {
    "h": Command.MOVE_LEFT,
    "left": Command.MOVE_LEFT,
    "j": Command.MOVE_DOWN,
    "down": Command.MOVE_DOWN,
    "k": Command.MOVE_UP,
    "up": Command.MOVE_UP,
    "l": Command.MOVE_RIGHT,
    "right": Command.MOVE_RIGHT,
    "m": Command.TOGGLE_MARK,
    "enter": Command.TOGGLE_MARK,
    " ": Command.REVEAL,
}


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Termsweeper match.

    Every command returns whether it changed anything so the caller can
    decide whether to redraw. Once the match is lost or won, commands are
    no-ops.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize a match.

        Args:
            config: Board configuration (default: 45x18 with 75 mines).
            rng: Random generator used to lay the mines.
            seed: Seed for a new generator when rng is not given.
        """
        self.config = config or BoardConfig()
        self._board = Board(self.config)
        self._rng = rng or random.Random(seed)
        self._cursor: Position = (0, 0)
        self._state = GameState.PLAYING

    # ========================================================================
    # Commands
    # ========================================================================

    def move(self, direction: Direction) -> bool:
        """
        Move the cursor one cell.

        Returns:
            True if the cursor moved, False at the edge or after the end.
        """
        if self._state != GameState.PLAYING:
            return False
        delta_row, delta_col = direction.value
        row = self._cursor[0] + delta_row
        col = self._cursor[1] + delta_col
        if not self._board.is_valid_position(row, col):
            return False
        self._cursor = (row, col)
        return True

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_down(self) -> bool:
        return self.move(Direction.DOWN)

    def move_up(self) -> bool:
        return self.move(Direction.UP)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def toggle_mark(self) -> bool:
        """
        Toggle the mark on the cursor cell.

        Returns:
            True if the mark changed, False for revealed cells.
        """
        if self._state != GameState.PLAYING:
            return False
        return self._board.cell_at(*self._cursor).toggle_mark()

    def reveal(self) -> bool:
        """
        Reveal the cursor cell.

        The first effective reveal lays the mines so that the cursor cell
        and its neighbors are mine-free. Revealing a mine loses the game;
        revealing the last safe cell wins it. Either way the whole board
        is uncovered.

        Returns:
            True if anything changed, False for marked or revealed cells.
        """
        if self._state != GameState.PLAYING:
            return False
        cell = self._board.cell_at(*self._cursor)
        if cell.marked or cell.revealed:
            return False

        if not self._board.mines_laid:
            self._board.place_mines(self._cursor, self._rng)

        if cell.is_mine:
            self._board.reveal_mine(self._cursor)
            self._state = GameState.GAME_OVER
            self._board.reveal_all()
            return True

        self._board.reveal_region(self._cursor)
        if self._board.fields_left_to_reveal == 0:
            self._state = GameState.WON
            self._board.reveal_all()
        return True

    def execute(self, command: Command) -> bool:
        """Run a command if the match is still being played."""
        if self._state != GameState.PLAYING:
            return False
        if command in _MOVES:
            return self.move(_MOVES[command])
        if command == Command.TOGGLE_MARK:
            return self.toggle_mark()
        return self.reveal()

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key name through KEY_BINDINGS.

        Returns:
            True if the key was bound and its command changed the game.
        """
        command = KEY_BINDINGS.get(key.lower())
        if command is None:
            return False
        return self.execute(command)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def cursor(self) -> Position:
        """Current (row, column) of the cursor."""
        return self._cursor

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.GAME_OVER

    @property
    def is_over(self) -> bool:
        return self._state != GameState.PLAYING

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def dimensions(self) -> Tuple[int, int]:
        """(rows, columns) of the grid."""
        return self.config.rows, self.config.columns

    @property
    def initialized(self) -> bool:
        """Check if the mines have been laid."""
        return self._board.mines_laid

    @property
    def mine_count(self) -> int:
        return self._board.mine_count

    @property
    def fields_left_to_reveal(self) -> int:
        return self._board.fields_left_to_reveal

    @property
    def board(self) -> Board:
        """Underlying board, for inspection and scripted layouts."""
        return self._board

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get a copy of the cell at position, or None if invalid."""
        cell = self._board.get_cell(row, col)
        return copy.copy(cell) if cell is not None else None

    def get_observation(self) -> np.ndarray:
        """Board state as an int8 array (see Board.get_observation)."""
        return self._board.get_observation()
