"""Abstract interface for the terminal front end."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class Style(Enum):
    """How a piece of text should be drawn."""

    NORMAL = "normal"
    BUTTON = "button"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"
    LINK = "link"
    NOTE = "note"
    STATUS = "status"
    ERROR = "error"


@dataclass(frozen=True)
class Segment:
    """A run of text drawn in one style."""

    text: str
    style: Style = Style.NORMAL


@dataclass(frozen=True)
class Frame:
    """One screenful of output.

    Attributes:
        rows: Body rows, top to bottom. Each row is a tuple of segments.
        note: Scroll indicator drawn above the status line, if any.
        status: Status line drawn on the last row, if any.
    """

    rows: tuple[tuple[Segment, ...], ...] = field(default_factory=tuple)
    note: str | None = None
    status: str | None = None

    def row_text(self, index: int) -> str:
        """Get the plain text of a body row."""
        return "".join(segment.text for segment in self.rows[index])


class Terminal(ABC):
    """Abstract interface for drawing frames and reading keys."""

    @abstractmethod
    def height(self) -> int:
        """Number of rows available, including the note and status rows."""
        pass

    @abstractmethod
    def draw(self, frame: Frame) -> None:
        """Clear the screen and draw a frame."""
        pass

    @abstractmethod
    def read_key(self) -> str:
        """Block until a key is pressed.

        Returns:
            The character itself for printable keys, or a key name
            such as "ESC", "UP" or "PAGE_DOWN".
        """
        pass
