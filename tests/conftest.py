"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termsweeper import Board, BoardConfig, Cell, Game, TermsweeperEnv


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a 45x18 game with 75 mines."""
    return Game(seed=7)


@pytest.fixture
def beginner_game() -> Game:
    """Create a beginner difficulty game."""
    return Game(BoardConfig(9, 9, 10), seed=11)


@pytest.fixture
def empty_game() -> Game:
    """Create a game with no mines for cascade testing."""
    return Game(BoardConfig(5, 5, 0), seed=0)


@pytest.fixture
def corner_mine_game() -> Game:
    """
    5x5 game with a single mine in the bottom-right corner.

    Layout (M = mine):
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 M
    """
    game = Game(BoardConfig(5, 5, 1), seed=0)
    game.board.lay_mines([(4, 4)])
    return game


@pytest.fixture
def wall_game() -> Game:
    """
    5x5 game with a wall of mines in column 2.

    Revealing on the left only floods the two leftmost columns.
    """
    game = Game(BoardConfig(5, 5, 5), seed=0)
    game.board.lay_mines([(row, 2) for row in range(5)])
    return game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with no mines laid yet."""
    return Board(BoardConfig(3, 3, 1))


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def small_env() -> TermsweeperEnv:
    """Environment on a 5x5 board with 3 mines."""
    return TermsweeperEnv(BoardConfig(5, 5, 3), render_mode="ansi")
