"""Curses rendering of the visible board."""
import curses
import threading
from typing import Optional, Tuple

from game import GameState, Outcome
from game.cell import FLAGGED_CODE, MINE_CODE, UNCHECKED_CODE, WON_CODE


TOO_SMALL_MESSAGE = "Terminal is too small. Please resize."

# Color pair ids
COLOR_UNCHECKED = 1
COLOR_EMPTY = 2
COLOR_NUMBER = 3
COLOR_FLAG = 4
COLOR_MINE = 5
COLOR_WON = 6
COLOR_STATUS = 7

# Each cell is drawn two columns wide
CELL_WIDTH = 2
STATUS_LINES = 2


def init_colors() -> None:
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_UNCHECKED, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_EMPTY, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_NUMBER, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_FLAG, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_MINE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_WON, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_STATUS, curses.COLOR_WHITE, -1)


def cell_glyph(code: int) -> Tuple[str, int]:
    """Map an observation code to the character and color pair to draw."""
    if code == UNCHECKED_CODE:
        return ".", COLOR_UNCHECKED
    if code == FLAGGED_CODE:
        return "F", COLOR_FLAG
    if code == MINE_CODE:
        return "*", COLOR_MINE
    if code == WON_CODE:
        return "#", COLOR_WON
    if code == 0:
        return " ", COLOR_EMPTY
    return str(code), COLOR_NUMBER


def status_text(state: GameState) -> str:
    flags = f"Flags: {state.flagged_count}/{state.max_flags}"
    if state.outcome == Outcome.WON:
        return f"{flags}  You win! Press q to quit."
    if state.outcome == Outcome.LOST:
        return f"{flags}  Boom! Press q to quit."
    return f"{flags}  Arrows/WASD move, Enter select, f flag, q quit"


class Renderer:
    """
    Draws a GameState onto a curses window.

    Each repaint holds the lock shared with the input thread.
    """

    def __init__(
        self,
        window,
        use_color: bool = True,
        lock: Optional[threading.Lock] = None,
    ) -> None:
        self._window = window
        self._use_color = use_color
        self._lock = lock or threading.Lock()

    def _attr(self, color: int) -> int:
        if not self._use_color:
            return 0
        return curses.color_pair(color)

    def _addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        """addstr that ignores curses errors at screen edges."""
        try:
            self._window.addstr(y, x, text, attr)
        except curses.error:
            pass

    def draw(self, state: GameState) -> None:
        """Repaint the whole board, the cursor and the status line."""
        with self._lock:
            self._draw(state)

    def _draw(self, state: GameState) -> None:
        self._window.erase()
        screen_height, screen_width = self._window.getmaxyx()

        if (
            state.width * CELL_WIDTH > screen_width
            or state.height + STATUS_LINES > screen_height
        ):
            self._addstr(0, 0, TOO_SMALL_MESSAGE)
            self._window.refresh()
            return

        obs = state.get_observation()
        cursor = state.cursor
        for row in range(state.height):
            for col in range(state.width):
                char, color = cell_glyph(int(obs[row, col]))
                attr = self._attr(color)
                if (row, col) == cursor:
                    attr |= curses.A_REVERSE
                self._addstr(row, col * CELL_WIDTH, char, attr)

        self._addstr(
            state.height + 1, 0, status_text(state),
            self._attr(COLOR_STATUS) | curses.A_BOLD,
        )
        self._window.move(cursor[0], cursor[1] * CELL_WIDTH)
        self._window.refresh()
