"""
Unit tests for Cell, CellValue and CellState.
"""
import pytest
from game import Cell, CellState, CellValue


# ============================================================================
# Cell Value Tests
# ============================================================================

class TestCellValue:
    """Test hidden cell values."""

    def test_mine_has_no_count(self) -> None:
        value = CellValue.mine()
        assert value.is_mine is True
        assert value.adjacent_mines == 0

    def test_empty_keeps_count(self) -> None:
        value = CellValue.empty(5)
        assert value.is_mine is False
        assert value.adjacent_mines == 5

    @pytest.mark.parametrize("count", [-1, 9])
    def test_count_out_of_range_raises_error(self, count: int) -> None:
        with pytest.raises(ValueError, match="Adjacent mine count"):
            CellValue.empty(count)

    def test_value_is_immutable(self) -> None:
        value = CellValue.empty(2)
        with pytest.raises(AttributeError):
            value.adjacent_mines = 3


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_unchecked(self, unchecked_cell: Cell) -> None:
        """New cell should be unchecked."""
        assert unchecked_cell.state == CellState.UNCHECKED
        assert unchecked_cell.is_unchecked is True

    def test_default_cell_is_not_mine(self, unchecked_cell: Cell) -> None:
        assert unchecked_cell.is_mine is False
        assert unchecked_cell.adjacent_mines == 0


# ============================================================================
# Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_unchecked_cell(self, unchecked_cell: Cell) -> None:
        assert unchecked_cell.reveal() is True
        assert unchecked_cell.is_revealed is True

    def test_reveal_twice_returns_false(self, unchecked_cell: Cell) -> None:
        unchecked_cell.reveal()
        assert unchecked_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(
        self, unchecked_cell: Cell
    ) -> None:
        """Flagged cells are protected from reveal."""
        unchecked_cell.toggle_flag()
        assert unchecked_cell.reveal() is False
        assert unchecked_cell.is_flagged is True

    def test_reveal_mine_returns_false(self, mine_cell: Cell) -> None:
        """Mines are exposed through show_mine, never reveal."""
        assert mine_cell.reveal() is False
        assert mine_cell.is_unchecked is True


# ============================================================================
# Flag Tests
# ============================================================================

class TestCellFlag:
    """Test flag toggling."""

    def test_flag_unchecked_cell(self, unchecked_cell: Cell) -> None:
        assert unchecked_cell.toggle_flag() is True
        assert unchecked_cell.is_flagged is True

    def test_unflag_cell(self, unchecked_cell: Cell) -> None:
        unchecked_cell.toggle_flag()
        assert unchecked_cell.toggle_flag() is True
        assert unchecked_cell.is_unchecked is True

    def test_cannot_flag_revealed_cell(self, numbered_cell: Cell) -> None:
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_revealed is True

    def test_flag_limit_blocks_placement(self, unchecked_cell: Cell) -> None:
        assert unchecked_cell.toggle_flag(can_place=False) is False
        assert unchecked_cell.is_unchecked is True

    def test_flag_limit_allows_removal(self, unchecked_cell: Cell) -> None:
        unchecked_cell.toggle_flag()
        assert unchecked_cell.toggle_flag(can_place=False) is True
        assert unchecked_cell.is_unchecked is True


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test numeric observation codes."""

    def test_unchecked_observation(self, unchecked_cell: Cell) -> None:
        assert unchecked_cell.to_observation() == -1

    def test_flagged_observation(self, unchecked_cell: Cell) -> None:
        unchecked_cell.toggle_flag()
        assert unchecked_cell.to_observation() == -2

    def test_numbered_observation(self, numbered_cell: Cell) -> None:
        assert numbered_cell.to_observation() == 3

    def test_revealed_mine_observation(self, mine_cell: Cell) -> None:
        mine_cell.show_mine()
        assert mine_cell.state == CellState.REVEALED_MINE
        assert mine_cell.to_observation() == 9

    def test_won_observation(self, numbered_cell: Cell) -> None:
        numbered_cell.mark_won()
        assert numbered_cell.state == CellState.WON
        assert numbered_cell.to_observation() == 10
