"""Curses-based terminal front end."""

import curses
import logging

from ..interfaces import Frame, Segment, Style, Terminal

logger = logging.getLogger(__name__)

SPECIAL_KEYS = {
    curses.KEY_UP: "UP",
    curses.KEY_DOWN: "DOWN",
    curses.KEY_PPAGE: "PAGE_UP",
    curses.KEY_NPAGE: "PAGE_DOWN",
    curses.KEY_RESIZE: "RESIZE",
}

CONTROL_KEYS = {
    "\x1b": "ESC",
    "\t": "TAB",
    "\x03": "CTRL_C",
    "\x11": "CTRL_Q",
}


def translate_key(key: int | str) -> str:
    """
    Convert a curses get_wch() result into a key name.

    Printable characters are returned unchanged.
    """
    if isinstance(key, int):
        return SPECIAL_KEYS.get(key, f"KEY_{key}")
    return CONTROL_KEYS.get(key, key)


class CursesTerminal(Terminal):
    """Terminal drawing frames into a curses window.

    Meant to be created inside curses.wrapper(), which owns setup and
    teardown of the screen.
    """

    # Color pair numbers
    _PAIR_BLUE = 1
    _PAIR_RED = 2

    def __init__(self, screen):
        """
        Initialize on a curses window.

        Args:
            screen: The window passed in by curses.wrapper().
        """
        self.screen = screen
        # Raw mode so Ctrl-C and Ctrl-Q arrive as keys
        curses.raw()
        self.screen.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        self._styles = self._init_styles()

    def _init_styles(self) -> dict[Style, int]:
        blue = red = 0
        if curses.has_colors():
            curses.init_pair(self._PAIR_BLUE, curses.COLOR_WHITE, curses.COLOR_BLUE)
            curses.init_pair(self._PAIR_RED, curses.COLOR_WHITE, curses.COLOR_RED)
            blue = curses.color_pair(self._PAIR_BLUE)
            red = curses.color_pair(self._PAIR_RED)

        return {
            Style.NORMAL: curses.A_NORMAL,
            Style.BUTTON: curses.A_BOLD,
            Style.DIRECTORY: curses.A_BOLD | blue,
            Style.UNKNOWN: curses.A_BOLD | red,
            Style.LINK: curses.A_UNDERLINE,
            Style.NOTE: blue,
            Style.STATUS: blue,
            Style.ERROR: curses.A_BOLD | red,
        }

    def height(self) -> int:
        rows, _ = self.screen.getmaxyx()
        return rows

    def draw(self, frame: Frame) -> None:
        self.screen.erase()
        rows, _ = self.screen.getmaxyx()

        for y, row in enumerate(frame.rows):
            self._draw_row(y, row)

        if frame.note is not None and rows >= 2:
            self._draw_row(rows - 2, (Segment(frame.note, Style.NOTE),))
        if frame.status is not None and rows >= 1:
            self._draw_row(rows - 1, (Segment(frame.status, Style.STATUS),))

        self.screen.refresh()

    def _draw_row(self, y: int, row: tuple[Segment, ...]) -> None:
        _, width = self.screen.getmaxyx()
        x = 0
        for segment in row:
            room = width - x
            if room <= 0:
                break
            try:
                self.screen.addnstr(y, x, segment.text, room, self._styles[segment.style])
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen
                pass
            x += len(segment.text)

    def read_key(self) -> str:
        return translate_key(self.screen.get_wch())
