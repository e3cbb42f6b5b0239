"""
Terminal front end.

Curses rendering, keyboard input and the control loop that ties them
to a GameState.
"""
from .controls import InputListener, translate_key
from .renderer import Renderer, cell_glyph
from .runner import ControlLoop, play

__all__ = [
    "InputListener",
    "translate_key",
    "Renderer",
    "cell_glyph",
    "ControlLoop",
    "play",
]
