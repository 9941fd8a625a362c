"""Terminal front ends for the Gopher client."""

from .curses_terminal import CursesTerminal, translate_key

__all__ = ["CursesTerminal", "translate_key"]
