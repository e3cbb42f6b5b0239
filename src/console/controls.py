"""
Keyboard input for the terminal game.

Translates curses key codes into abstract actions and reads them on a
background thread, handing them to the control loop through a queue.
"""
import curses
import logging
import queue
import threading
from typing import Dict, Optional

from game import Action


logger = logging.getLogger(__name__)

# Milliseconds a read blocks before the listener rechecks its stop flag
READ_TIMEOUT_MS = 100

KEY_BINDINGS: Dict[int, Action] = {
    curses.KEY_UP: Action.MOVE_UP,
    curses.KEY_DOWN: Action.MOVE_DOWN,
    curses.KEY_LEFT: Action.MOVE_LEFT,
    curses.KEY_RIGHT: Action.MOVE_RIGHT,
    curses.KEY_ENTER: Action.SELECT,
    ord("\n"): Action.SELECT,
    ord("\r"): Action.SELECT,
    ord(" "): Action.SELECT,
}

LETTER_BINDINGS = (
    ("w", Action.MOVE_UP),
    ("s", Action.MOVE_DOWN),
    ("a", Action.MOVE_LEFT),
    ("d", Action.MOVE_RIGHT),
    ("f", Action.TOGGLE_FLAG),
    ("q", Action.QUIT),
)

KEY_BINDINGS.update({
    ord(key): action
    for char, action in LETTER_BINDINGS
    for key in (char, char.upper())
})


def translate_key(key: int) -> Optional[Action]:
    """Map a curses key code to an action, or None if unbound."""
    return KEY_BINDINGS.get(key)


class InputListener(threading.Thread):
    """
    Producer thread feeding actions to the control loop.

    Puts an Action for every bound key and None when the terminal is
    resized (a repaint request). Never touches the game itself. Reads
    hold the shared curses lock so they never overlap a repaint.
    """

    def __init__(
        self,
        window,
        actions: "queue.Queue[Optional[Action]]",
        lock: Optional[threading.Lock] = None,
    ) -> None:
        super().__init__(name="input-listener", daemon=True)
        self._window = window
        self._actions = actions
        self._lock = lock or threading.Lock()
        self._stop_event = threading.Event()

    def stop(self) -> None:
        self._stop_event.set()

    def run(self) -> None:
        with self._lock:
            self._window.keypad(True)
            self._window.timeout(READ_TIMEOUT_MS)

        while not self._stop_event.is_set():
            try:
                with self._lock:
                    key = self._window.getch()
            except curses.error as error:
                logger.error("Input source failed: %s", error)
                self._actions.put(Action.QUIT)
                return

            if key == -1:
                continue
            if key == curses.KEY_RESIZE:
                self._actions.put(None)
                continue

            action = translate_key(key)
            if action is None:
                continue
            self._actions.put(action)
            if action == Action.QUIT:
                return
