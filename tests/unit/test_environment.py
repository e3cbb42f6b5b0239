"""
Unit tests for the Gymnasium environment.
"""
import pytest
import numpy as np
from game import Action, BoardConfig, GameState, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    environment = MinesweeperEnv(BoardConfig(5, 5, 3), render_mode="ansi")
    environment.reset(seed=0)
    return environment


def use_game(env: MinesweeperEnv, game: GameState) -> None:
    """Swap in a hand-built game."""
    env.state = game


class TestEnvironmentSpaces:
    """Test space definitions and reset."""

    def test_action_space_covers_actions(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == len(Action)

    def test_reset_observation(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=1)
        assert obs["board"].shape == (5, 5)
        assert np.all(obs["board"] == -1)
        assert tuple(obs["cursor"]) == (0, 0)
        assert info["game_state"] == "PLAYING"
        assert env.observation_space.contains(obs)

    def test_reset_seed_is_reproducible(self, env: MinesweeperEnv) -> None:
        env.reset(seed=3)
        first = env.state.mines
        env.reset(seed=3)
        assert env.state.mines == first


class TestEnvironmentStep:
    """Test rewards and termination."""

    def test_move_has_zero_reward(self, env: MinesweeperEnv) -> None:
        obs, reward, terminated, truncated, _ = env.step(Action.MOVE_DOWN)
        assert reward == 0.0
        assert tuple(obs["cursor"]) == (1, 0)
        assert terminated is False
        assert truncated is False

    def test_safe_select_rewards(self, env: MinesweeperEnv) -> None:
        use_game(env, GameState.with_mines(5, 5, [(4, 4)]))
        env.step(Action.MOVE_DOWN)
        env.step(Action.MOVE_DOWN)
        env.step(Action.MOVE_DOWN)
        env.step(Action.MOVE_RIGHT)
        env.step(Action.MOVE_RIGHT)
        env.step(Action.MOVE_RIGHT)
        _, reward, terminated, _, info = env.step(Action.SELECT)
        assert reward == 1.0
        assert terminated is False
        assert info["revealed"] == 1

    def test_repeat_select_is_penalized(self, env: MinesweeperEnv) -> None:
        use_game(env, GameState.with_mines(5, 5, [(4, 4)]))
        env.step(Action.TOGGLE_FLAG)
        _, reward, _, _, _ = env.step(Action.SELECT)
        assert reward == pytest.approx(-0.1)

    def test_mine_select_terminates(self, env: MinesweeperEnv) -> None:
        use_game(env, GameState.with_mines(3, 1, [(0, 0)]))
        _, reward, terminated, _, info = env.step(Action.SELECT)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_win_terminates(self, env: MinesweeperEnv) -> None:
        use_game(env, GameState.new(2, 2, 0))
        _, reward, terminated, _, info = env.step(Action.SELECT)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"

    def test_quit_truncates(self, env: MinesweeperEnv) -> None:
        _, reward, terminated, truncated, _ = env.step(Action.QUIT)
        assert reward == 0.0
        assert terminated is False
        assert truncated is True


class TestEnvironmentHelpers:
    """Test rendering and action masks."""

    def test_render_brackets_cursor(self, env: MinesweeperEnv) -> None:
        use_game(env, GameState.with_mines(3, 1, [(0, 0)]))
        env.step(Action.MOVE_RIGHT)
        env.step(Action.MOVE_RIGHT)
        env.step(Action.SELECT)
        assert env.render() == " .  1 [ ]"

    def test_initial_action_mask(self, env: MinesweeperEnv) -> None:
        mask = env.get_action_mask()
        assert mask[Action.MOVE_UP] == False
        assert mask[Action.MOVE_LEFT] == False
        assert mask[Action.MOVE_DOWN] == True
        assert mask[Action.MOVE_RIGHT] == True
        assert mask[Action.SELECT] == True
        assert mask[Action.TOGGLE_FLAG] == True
        assert mask[Action.QUIT] == True

    def test_mask_after_game_over(self, env: MinesweeperEnv) -> None:
        use_game(env, GameState.with_mines(3, 1, [(0, 0)]))
        env.step(Action.SELECT)
        mask = env.get_action_mask()
        assert mask[Action.SELECT] == False
        assert mask[Action.TOGGLE_FLAG] == False
        assert mask[Action.MOVE_RIGHT] == True
