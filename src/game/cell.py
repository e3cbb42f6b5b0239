"""
Cell module for Minesweeper game.

Separates what a cell hides (mine or adjacency count, fixed when the
board is generated) from what the player sees (unchecked, revealed,
flagged, or one of the end-of-game markers).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MAX_ADJACENT = 8

# Observation codes for non-numeric visible states
UNCHECKED_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9
WON_CODE = 10


class CellState(Enum):
    """Possible visible states of a cell."""

    UNCHECKED = auto()
    REVEALED = auto()
    FLAGGED = auto()
    REVEALED_MINE = auto()
    WON = auto()


# ============================================================================
# Hidden Value
# ============================================================================

@dataclass(frozen=True)
class CellValue:
    """
    Ground-truth content of a cell.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Always 0 for mines.
    """

    is_mine: bool = False
    adjacent_mines: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.adjacent_mines <= MAX_ADJACENT:
            raise ValueError(
                f"Adjacent mine count must be in [0, {MAX_ADJACENT}]"
            )
        if self.is_mine and self.adjacent_mines:
            raise ValueError("Mines do not carry an adjacent count")

    @classmethod
    def mine(cls) -> "CellValue":
        return cls(is_mine=True)

    @classmethod
    def empty(cls, count: int = 0) -> "CellValue":
        return cls(is_mine=False, adjacent_mines=count)


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        value: Hidden content, never changed after board generation.
        state: Current visible state.
    """

    value: CellValue = CellValue()
    state: CellState = CellState.UNCHECKED

    def reveal(self) -> bool:
        """
        Reveal this non-mine cell.

        Returns:
            True if the cell was unchecked and is now revealed, False
            if it was already revealed or flagged, or holds a mine.
        """
        if self.state != CellState.UNCHECKED or self.value.is_mine:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self, can_place: bool = True) -> bool:
        """
        Toggle flag on this cell.

        Args:
            can_place: Whether another flag may be placed. Removing a
                flag is always allowed.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self.state == CellState.FLAGGED:
            self.state = CellState.UNCHECKED
            return True
        if self.state == CellState.UNCHECKED and can_place:
            self.state = CellState.FLAGGED
            return True
        return False

    def show_mine(self) -> None:
        """Expose the mine in this cell after a loss."""
        self.state = CellState.REVEALED_MINE

    def mark_won(self) -> None:
        self.state = CellState.WON

    @property
    def is_mine(self) -> bool:
        return self.value.is_mine

    @property
    def adjacent_mines(self) -> int:
        return self.value.adjacent_mines

    @property
    def is_unchecked(self) -> bool:
        """Check if cell has not been revealed or flagged."""
        return self.state == CellState.UNCHECKED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert visible state to a numeric code.

        Returns:
            -1: Unchecked cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (after a loss)
            10: Won marker (after a win)
        """
        if self.state == CellState.UNCHECKED:
            return UNCHECKED_CODE
        if self.state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.state == CellState.REVEALED_MINE:
            return MINE_CODE
        if self.state == CellState.WON:
            return WON_CODE
        return self.value.adjacent_mines
