"""Key parser for interpreting terminal key presses."""

from abc import ABC
from dataclasses import dataclass

# Selection keys, in the order items are numbered on screen
MENU_KEYS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ!@#$%^&*()-+_="


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class ActivateCommand(Command):
    """Command to open the n-th selectable item on screen."""

    index: int


@dataclass(frozen=True)
class BackCommand(Command):
    """Command to return to the previous view."""

    pass


@dataclass(frozen=True)
class ScrollCommand(Command):
    """Command to scroll the current view."""

    amount: int


@dataclass(frozen=True)
class QuitCommand(Command):
    """Command to leave the client."""

    pass


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Represents a key with no binding."""

    key: str
    reason: str = "Unbound key"


class KeyParser:
    """Parses key names from the terminal into Command objects."""

    BACK_KEYS = {"ESC", "TAB"}
    QUIT_KEYS = {"CTRL_C", "CTRL_Q"}

    def __init__(self, page_size: int = 10):
        """
        Initialize the parser.

        Args:
            page_size: Rows scrolled by page up / page down.
        """
        self.page_size = page_size
        self._scroll_keys = {
            "UP": -1,
            "DOWN": 1,
            "PAGE_UP": -page_size,
            "PAGE_DOWN": page_size,
        }

    def parse(self, key: str) -> Command:
        """
        Parse a key into a Command object.

        Args:
            key: A single printable character, or a key name such as
                "ESC" or "PAGE_DOWN" as returned by Terminal.read_key().

        Returns:
            A Command object representing the key.
        """
        if not key:
            return InvalidCommand(key=key, reason="Empty key")

        if key in self.QUIT_KEYS:
            return QuitCommand()

        if key in self.BACK_KEYS:
            return BackCommand()

        if key in self._scroll_keys:
            return ScrollCommand(amount=self._scroll_keys[key])

        # Single characters select menu entries
        if len(key) == 1:
            index = MENU_KEYS.find(key)
            if index >= 0:
                return ActivateCommand(index=index)

        return InvalidCommand(key=key)
