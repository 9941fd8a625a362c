"""Directory listing wire format.

A listing is a sequence of lines of the form::

    <type><display name>\\t<selector>\\t<host>\\t<port>

terminated by a line holding a single ".". The terminator is optional
when reading and always written when formatting.
"""

from dataclasses import dataclass, field

from ..errors import DirectoryParseError, ItemParseError
from .item_type import ItemType, UnknownType

DEFAULT_PORT = 70
TERMINATOR = "."

# Many servers emit "fake" items to put plain text into a listing.
INFO_TYPE = "i"
FAKE_MARKER = "fake"


@dataclass(frozen=True)
class DirectoryItem:
    """One line of a directory listing."""

    type: ItemType | UnknownType
    display_name: str
    selector: str
    host: str
    port: int = DEFAULT_PORT

    def is_informational(self) -> bool:
        """
        Check whether this line is annotation text rather than a link.

        This is a heuristic and shouldn't really be relied upon.
        """
        return (
            self.type.as_char() == INFO_TYPE
            or self.selector.endswith(FAKE_MARKER)
            or self.display_name == FAKE_MARKER
            or self.host == FAKE_MARKER
        )


@dataclass(frozen=True)
class Directory:
    """An ordered Gopher directory listing."""

    items: tuple[DirectoryItem, ...] = field(default_factory=tuple)

    def __init__(self, items: list[DirectoryItem] | tuple[DirectoryItem, ...] | None = None):
        object.__setattr__(self, "items", tuple(items) if items else ())

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> DirectoryItem:
        return self.items[index]

    def navigable_items(self) -> list[DirectoryItem]:
        """Get the items a user can select, in listing order."""
        return [item for item in self.items if is_navigable(item)]


def is_navigable(item: DirectoryItem) -> bool:
    """Check whether an item can be selected (is not informational)."""
    return not item.is_informational()


def _parse_port(field_text: str) -> int:
    """Parse the leading digits of a port field, falling back to 70."""
    digits = ""
    for char in field_text:
        if char not in "0123456789":
            break
        digits += char
    return int(digits) if digits else DEFAULT_PORT


def split_lines(text: str) -> list[str]:
    """Split on LF only, dropping a CR before it and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_item(line: str) -> DirectoryItem:
    """
    Parse a single directory line.

    Args:
        line: One line of a listing, without its line ending.

    Returns:
        The parsed DirectoryItem.

    Raises:
        ItemParseError: If the line is too short or lacks the four
            tab separated fields.
    """
    if len(line) <= 1:
        raise ItemParseError(line)

    fields = line[1:].split("\t")
    if len(fields) < 4:
        raise ItemParseError(line)

    # Anything after the port (e.g. a Gopher+ "+") is ignored
    name, selector, host, port = fields[:4]

    return DirectoryItem(
        type=ItemType.from_char(line[0]),
        display_name=name,
        selector=selector,
        host=host,
        port=_parse_port(port),
    )


def parse_directory(text: str) -> Directory:
    """
    Parse a full directory listing.

    Parsing stops at the "." terminator line, or at the end of the text
    when the terminator is missing.

    Args:
        text: The raw response text.

    Returns:
        The parsed Directory, items in source order.

    Raises:
        DirectoryParseError: If any line before the terminator is not a
            valid item. No partial listing is returned.
    """
    items = []
    for line in split_lines(text):
        if line == TERMINATOR:
            break
        try:
            items.append(parse_item(line))
        except ItemParseError as e:
            raise DirectoryParseError(line) from e
    return Directory(items)


def format_item(item: DirectoryItem) -> str:
    """Format an item back into its wire form (no line ending)."""
    return (
        f"{item.type.as_char()}{item.display_name}\t{item.selector}"
        f"\t{item.host}\t{item.port}"
    )


def format_directory(directory: Directory) -> str:
    """Format a listing into its wire form, always ending with the terminator."""
    lines = [f"{format_item(item)}\n" for item in directory]
    return "".join(lines) + TERMINATOR
