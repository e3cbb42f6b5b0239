"""
Control loop for the terminal game.

The loop is the only code that mutates the game: it waits on the action
queue, applies each action and repaints before taking the next one.
"""
import curses
import logging
import queue
import threading
from typing import Optional

from game import Action, BoardConfig, GameState, apply_action

from .controls import InputListener
from .renderer import Renderer, init_colors


logger = logging.getLogger(__name__)


class ControlLoop:
    """Consumes actions and keeps the screen in sync with the game."""

    def __init__(
        self,
        state: GameState,
        renderer: Renderer,
        actions: "queue.Queue[Optional[Action]]",
    ) -> None:
        self.state = state
        self.renderer = renderer
        self.actions = actions

    def run(self) -> GameState:
        """
        Run until a QUIT action arrives.

        Returns:
            The game in its final state.
        """
        self.renderer.draw(self.state)
        while True:
            action = self.actions.get()
            if action == Action.QUIT:
                logger.debug("Quit requested")
                break
            if action is not None:
                changed = apply_action(self.state, action)
                logger.debug("%s -> changed=%s", action.name, changed)
            self.renderer.draw(self.state)
        return self.state


def _play(window, state: GameState) -> GameState:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    use_color = curses.has_colors()
    if use_color:
        init_colors()

    curses_lock = threading.Lock()
    actions: "queue.Queue[Optional[Action]]" = queue.Queue()
    listener = InputListener(window, actions, curses_lock)
    listener.start()
    try:
        renderer = Renderer(window, use_color, curses_lock)
        return ControlLoop(state, renderer, actions).run()
    finally:
        listener.stop()
        listener.join()


def play(config: BoardConfig, seed: Optional[int] = None) -> GameState:
    """
    Play one game in the terminal.

    Args:
        config: Board configuration.
        seed: Seed for mine placement.

    Returns:
        The game in its final state.
    """
    state = GameState(config, seed=seed)
    logger.info(
        "Starting %dx%d game with %d mines",
        config.width, config.height, config.num_mines,
    )
    return curses.wrapper(_play, state)
