"""
Abstract player actions.

Input adapters (keyboard, agents) produce these; apply_action routes
each one to the matching GameState operation.
"""
from enum import IntEnum
from typing import Callable, Dict

from .state import GameState


class Action(IntEnum):
    """Actions a player may take."""

    MOVE_UP = 0
    MOVE_DOWN = 1
    MOVE_LEFT = 2
    MOVE_RIGHT = 3
    SELECT = 4
    TOGGLE_FLAG = 5
    QUIT = 6


MOVEMENT_DELTAS = {
    Action.MOVE_UP: (-1, 0),
    Action.MOVE_DOWN: (1, 0),
    Action.MOVE_LEFT: (0, -1),
    Action.MOVE_RIGHT: (0, 1),
}

_HANDLERS: Dict[Action, Callable[[GameState], bool]] = {
    Action.SELECT: GameState.select,
    Action.TOGGLE_FLAG: GameState.toggle_flag,
}


def apply_action(state: GameState, action: Action) -> bool:
    """
    Apply one action to a game.

    Args:
        state: Game to act on.
        action: Action to apply. QUIT leaves the game untouched.

    Returns:
        True if the game changed, False otherwise.
    """
    action = Action(action)
    if action in MOVEMENT_DELTAS:
        return state.move_cursor(*MOVEMENT_DELTAS[action])
    handler = _HANDLERS.get(action)
    if handler is None:
        return False
    return handler(state)
