"""
Gymnasium environment wrapper for Minesweeper.

Lets agents play through the same abstract actions as the keyboard.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .actions import Action, MOVEMENT_DELTAS, apply_action
from .cell import FLAGGED_CODE, WON_CODE
from .state import BoardConfig, GameState


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        Dict with:
        - board: 2D array of cell observation codes
          (-1 unchecked, -2 flagged, 0-8 count, 9 mine, 10 won)
        - cursor: (row, col) of the cursor

    Actions:
        Discrete action space over Action (move, select, flag, quit).

    Rewards:
        - +10 for winning the game
        - -10 for hitting a mine
        - +1 for a select that reveals cells
        - -0.1 for a select or flag that changes nothing
        - 0 for cursor moves
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: medium difficulty).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.state = GameState(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Dict({
            "board": spaces.Box(
                low=FLAGGED_CODE,
                high=WON_CODE,
                shape=(self.config.height, self.config.width),
                dtype=np.int8,
            ),
            "cursor": spaces.MultiDiscrete(
                [self.config.height, self.config.width]
            ),
        })
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(2**31))
        self.state = GameState(self.config, seed=game_seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, np.ndarray], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Index into Action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action = Action(int(action))
        self._steps += 1

        reward = self._apply(action)
        terminated = self.state.game_over
        truncated = action == Action.QUIT

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _apply(self, action: Action) -> float:
        """Apply an action and score its effect."""
        was_playing = self.state.is_playing
        revealed_before = self.state.revealed_count
        changed = apply_action(self.state, action)

        if was_playing and self.state.is_won:
            return 10.0
        if was_playing and self.state.is_lost:
            return -10.0
        if action == Action.SELECT and self.state.revealed_count > revealed_before:
            return 1.0
        if action in (Action.SELECT, Action.TOGGLE_FLAG) and not changed:
            return -0.1
        return 0.0

    def _get_obs(self) -> Dict[str, np.ndarray]:
        return {
            "board": self.state.get_observation(),
            "cursor": np.array(self.state.cursor, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.state.revealed_count,
            "flagged": self.state.flagged_count,
            "game_state": self.state.outcome.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as text with the cursor cell bracketed."""
        lines = []
        obs = self.state.get_observation()
        cursor = self.state.cursor

        for row in range(self.state.height):
            row_str = ""
            for col in range(self.state.width):
                val = obs[row, col]
                if val == -1:
                    char = "."
                elif val == -2:
                    char = "F"
                elif val == 9:
                    char = "*"
                elif val == 10:
                    char = "#"
                elif val == 0:
                    char = " "
                else:
                    char = str(val)
                if (row, col) == cursor:
                    row_str += f"[{char}]"
                else:
                    row_str += f" {char} "
            lines.append(row_str)

        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        row, col = self.state.cursor

        for action, (delta_row, delta_col) in MOVEMENT_DELTAS.items():
            mask[action] = (
                0 <= row + delta_row < self.state.height
                and 0 <= col + delta_col < self.state.width
            )

        if self.state.is_playing:
            cell = self.state.get_cell(row, col)
            mask[Action.SELECT] = cell.is_unchecked
            mask[Action.TOGGLE_FLAG] = cell.is_flagged or (
                cell.is_unchecked
                and self.state.flagged_count < self.state.max_flags
            )

        mask[Action.QUIT] = True
        return mask
