"""
Game state module for Minesweeper.

Implements grid generation with mine placement, adjacency counts,
cell revealing with flood fill, flagging, cursor movement, and
win/lose detection.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, CellValue


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

ADJACENT_DELTAS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Outcome(Enum):
    """Possible outcomes of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 16
    height: int = 16
    num_mines: int = 40

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


# Preset difficulty levels
EASY = BoardConfig(8, 8, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(30, 16, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Game State
# ============================================================================

class GameState:
    """
    A single game of Minesweeper.

    Owns the hidden mine grid, the visible grid, the cursor and the
    progress counters. Every mutating operation returns True when it
    changed something and False when it was a no-op; none of them
    raise for in-bounds input.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        mines: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Create a new game.

        Args:
            config: Board configuration (default: medium difficulty).
            seed: Seed for this game's random generator.
            mines: Explicit mine positions. When given, their count
                replaces config.num_mines and no random placement runs.
        """
        config = config or MEDIUM
        self._rng = random.Random(seed)

        if mines is None:
            self._mines = self._sample_mines(config)
        else:
            self._mines = self._check_mines(config, mines)
            config = BoardConfig(config.width, config.height, len(self._mines))

        self.config = config
        self._grid = self._build_grid()
        self._cursor: Position = (0, 0)
        self._revealed_count = 0
        self._flagged_count = 0
        self._outcome = Outcome.PLAYING

        logger.debug(
            "New %dx%d game with %d mines",
            config.width, config.height, config.num_mines,
        )

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        num_mines: int,
        seed: Optional[int] = None,
    ) -> "GameState":
        """Create a randomly mined game of the given size."""
        return cls(BoardConfig(width, height, num_mines), seed=seed)

    @classmethod
    def with_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "GameState":
        """Create a game with mines at exactly the given positions."""
        mines = list(mines)
        return cls(BoardConfig(width, height, len(mines)), mines=mines)

    # ========================================================================
    # Grid Generation (Low-level)
    # ========================================================================

    def _sample_mines(self, config: BoardConfig) -> Tuple[Position, ...]:
        """Pick distinct mine positions uniformly without replacement."""
        indices = self._rng.sample(range(config.total_cells), config.num_mines)
        return tuple(divmod(index, config.width) for index in indices)

    @staticmethod
    def _check_mines(
        config: BoardConfig, mines: Iterable[Position]
    ) -> Tuple[Position, ...]:
        positions = tuple((int(row), int(col)) for row, col in mines)
        for row, col in positions:
            if not (0 <= row < config.height and 0 <= col < config.width):
                raise ValueError(f"Mine position out of bounds: {(row, col)}")
        if len(set(positions)) != len(positions):
            raise ValueError("Mine positions must be distinct")
        return positions

    def _build_grid(self) -> List[List[Cell]]:
        """Create the grid and precompute adjacency counts."""
        mine_set = set(self._mines)
        grid = []
        for row in range(self.config.height):
            cells = []
            for col in range(self.config.width):
                if (row, col) in mine_set:
                    value = CellValue.mine()
                else:
                    count = sum(
                        1 for neighbor in self._neighbors(row, col)
                        if neighbor in mine_set
                    )
                    value = CellValue.empty(count)
                cells.append(Cell(value))
            grid.append(cells)
        return grid

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get in-bounds neighboring positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, edges clipped rather than wrapped.
        """
        neighbors = []
        for delta_row, delta_col in ADJACENT_DELTAS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Cursor
    # ========================================================================

    def move_cursor(self, row_delta: int, col_delta: int) -> bool:
        """
        Shift the cursor, leaving it in place if the move would leave
        the board.
        """
        row, col = self._cursor
        new_row, new_col = row + row_delta, col + col_delta
        if not self._is_valid_position(new_row, new_col):
            return False
        self._cursor = (new_row, new_col)
        return True

    def move_up(self) -> bool:
        return self.move_cursor(-1, 0)

    def move_down(self) -> bool:
        return self.move_cursor(1, 0)

    def move_left(self) -> bool:
        return self.move_cursor(0, -1)

    def move_right(self) -> bool:
        return self.move_cursor(0, 1)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def select(self) -> bool:
        """Reveal the cell under the cursor."""
        return self.reveal(*self._cursor)

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        A mine ends the game and exposes every mine. A cell with no
        adjacent mines floods outwards. Flagged cells are protected
        and must be unflagged first.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the board changed, False otherwise.
        """
        if not self._can_act(row, col):
            return False
        cell = self._grid[row][col]
        if not cell.is_unchecked:
            return False

        if cell.is_mine:
            self._lose(row, col)
            return True

        cell.reveal()
        self._revealed_count += 1
        if cell.adjacent_mines == 0:
            self.flood_reveal(row, col)

        self._check_win_condition()
        return True

    def flood_reveal(self, row: int, col: int) -> int:
        """
        Breadth-first reveal outwards from a revealed zero-count cell.

        Unchecked non-mine neighbours are revealed; those with no
        adjacent mines are expanded in turn. Mines and flags are never
        touched.

        Args:
            row: Row index of the source cell.
            col: Column index of the source cell.

        Returns:
            Number of cells newly revealed.
        """
        if not self._can_act(row, col):
            return 0
        source = self._grid[row][col]
        if not source.is_revealed or source.adjacent_mines != 0:
            return 0

        revealed = 0
        queue = deque([(row, col)])
        while queue:
            current_row, current_col = queue.popleft()
            for neighbor_row, neighbor_col in self._neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if not neighbor.reveal():
                    continue
                revealed += 1
                if neighbor.adjacent_mines == 0:
                    queue.append((neighbor_row, neighbor_col))

        self._revealed_count += revealed
        if revealed:
            self._check_win_condition()
        return revealed

    def toggle_flag(self) -> bool:
        """Toggle the flag on the cell under the cursor."""
        return self.flag(*self._cursor)

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        A flag is only placed while fewer than max_flags cells are
        flagged; removing a flag always works.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self._can_act(row, col):
            return False
        cell = self._grid[row][col]
        was_flagged = cell.is_flagged
        if not cell.toggle_flag(self._flagged_count < self.max_flags):
            return False

        self._flagged_count += -1 if was_flagged else 1
        self._check_win_condition()
        return True

    def _can_act(self, row: int, col: int) -> bool:
        """Check if the board may still be mutated at a position."""
        if self._outcome != Outcome.PLAYING:
            return False
        return self._is_valid_position(row, col)

    # ========================================================================
    # Terminal States
    # ========================================================================

    def _lose(self, row: int, col: int) -> None:
        """Expose every mine and end the game."""
        for mine_row, mine_col in self._mines:
            cell = self._grid[mine_row][mine_col]
            if cell.is_flagged:
                self._flagged_count -= 1
            cell.show_mine()
        self._outcome = Outcome.LOST
        logger.info("Mine hit at %s, game lost", (row, col))

    def _check_win_condition(self) -> None:
        """Check if every cell is revealed or flagged."""
        if self._outcome != Outcome.PLAYING:
            return
        if self._revealed_count + self._flagged_count != self.config.total_cells:
            return
        for cells in self._grid:
            for cell in cells:
                cell.mark_won()
        self._outcome = Outcome.WON
        logger.info(
            "Game won with %d revealed and %d flagged cells",
            self._revealed_count, self._flagged_count,
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def max_flags(self) -> int:
        return self.config.num_mines

    @property
    def mines(self) -> Tuple[Position, ...]:
        """Mine positions in the order they were placed."""
        return self._mines

    @property
    def cursor(self) -> Position:
        return self._cursor

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def outcome(self) -> Outcome:
        """Get current outcome."""
        return self._outcome

    @property
    def game_over(self) -> bool:
        return self._outcome != Outcome.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._outcome == Outcome.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._outcome == Outcome.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._outcome == Outcome.LOST

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def visible_grid(self) -> List[List[CellState]]:
        """Get the visible state of every cell, row by row."""
        return [[cell.state for cell in cells] for cells in self._grid]

    def get_observation(self) -> np.ndarray:
        """
        Get visible board as a numpy array.

        Returns:
            2D int8 array of Cell.to_observation codes.
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs
