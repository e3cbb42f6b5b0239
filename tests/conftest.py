"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import BoardConfig, Cell, CellValue, GameState


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> GameState:
    """Create a seeded medium game."""
    return GameState(seed=1234)


@pytest.fixture
def easy_game() -> GameState:
    """Create a seeded 8x8 game with 10 mines."""
    return GameState(BoardConfig(8, 8, 10), seed=42)


@pytest.fixture
def strip_game() -> GameState:
    """Create a 1x3 board laid out as [mine, 1, 0]."""
    return GameState.with_mines(3, 1, [(0, 0)])


@pytest.fixture
def corner_game() -> GameState:
    """
    Create a 5x5 board with a single mine in the bottom-right corner.

    Counts:
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 *
    """
    return GameState.with_mines(5, 5, [(4, 4)])


@pytest.fixture
def empty_game() -> GameState:
    """Create a 2x2 board with no mines."""
    return GameState.new(2, 2, 0)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def unchecked_cell() -> Cell:
    """Create an unchecked empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(CellValue.mine())


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(CellValue.empty(3))
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
