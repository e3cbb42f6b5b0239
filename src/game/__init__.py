"""
Minesweeper game module.

Provides the core game state and the adapters that drive it.
"""
from .cell import Cell, CellState, CellValue
from .state import (
    BoardConfig,
    GameState,
    Outcome,
    EASY,
    MEDIUM,
    HARD,
    DIFFICULTIES,
)
from .actions import Action, apply_action
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellValue",
    "BoardConfig",
    "GameState",
    "Outcome",
    "EASY",
    "MEDIUM",
    "HARD",
    "DIFFICULTIES",
    "Action",
    "apply_action",
    "MinesweeperEnv",
]
