"""View renderer turning navigation views into screen frames."""

from ..interfaces import Frame, Segment, Style
from ..protocol import Directory, ItemType, UnknownType, is_navigable, split_lines
from .key_parser import MENU_KEYS
from .view import FailureView, ListingView, MessageView, TextView, View

# Rows kept free at the bottom for the scroll note and the status line
RESERVED_ROWS = 2


class ViewRenderer:
    """Renders views as frames for a Terminal, or as plain text."""

    def __init__(self, keys: str = MENU_KEYS):
        self.keys = keys

    def render(self, view: View, height: int) -> Frame:
        """
        Render a view into a frame of at most height rows.

        Selectable items are labelled with keys by their rank among the
        selectable items on screen, the same numbering Session.activate()
        uses.

        Args:
            view: The view to draw.
            height: Total terminal rows, including note and status rows.

        Returns:
            The frame to draw.
        """
        capacity = max(0, height - RESERVED_ROWS)

        if isinstance(view, ListingView):
            rows = self._listing_rows(view.directory, view.scroll, capacity)
            note = self._note(view.scroll, len(view.directory))
            return Frame(rows=rows, note=note, status=view.location)

        if isinstance(view, TextView):
            lines = split_lines(view.body)
            rows = self._text_rows(lines[view.scroll:], capacity)
            note = self._note(view.scroll, len(lines))
            return Frame(rows=rows, note=note, status=view.location)

        if isinstance(view, MessageView):
            return Frame(rows=self._text_rows(split_lines(view.text), capacity))

        if isinstance(view, FailureView):
            lines = split_lines(f"Error: {view.error}")
            rows = self._text_rows(lines, capacity, Style.ERROR)
            return Frame(rows=rows)

        raise TypeError(f"Unknown view type: {type(view).__name__}")

    def _listing_rows(
        self, directory: Directory, scroll: int, capacity: int
    ) -> tuple[tuple[Segment, ...], ...]:
        rows = []
        rank = 0
        for item in directory.items[scroll:scroll + capacity]:
            if not is_navigable(item) or rank >= len(self.keys):
                rows.append((Segment(item.display_name),))
                continue

            rows.append((
                Segment(f"[{self.keys[rank]}]", Style.BUTTON),
                Segment(" "),
                self._type_marker(item.type),
                Segment(" "),
                Segment(item.display_name, Style.LINK),
            ))
            rank += 1
        return tuple(rows)

    @staticmethod
    def _type_marker(item_type: ItemType | UnknownType) -> Segment:
        if isinstance(item_type, UnknownType):
            return Segment(item_type.char, Style.UNKNOWN)
        if item_type.is_directory():
            return Segment("/", Style.DIRECTORY)
        return Segment(" ")

    @staticmethod
    def _text_rows(
        lines: list[str], capacity: int, style: Style = Style.NORMAL
    ) -> tuple[tuple[Segment, ...], ...]:
        return tuple((Segment(line, style),) for line in lines[:capacity])

    @staticmethod
    def _note(scroll: int, total: int) -> str | None:
        if scroll == 0:
            return None
        return f"[{scroll}/{total}]"

    def dump(self, view: View) -> str:
        """
        Render a view as plain text, for printing outside the terminal UI.

        Listings show one line per item with its type label and address;
        informational items show only their text.
        """
        if isinstance(view, ListingView):
            lines = []
            for item in view.directory:
                if not is_navigable(item):
                    lines.append(item.display_name)
                else:
                    lines.append(
                        f"{item.type.label:4} {item.display_name:60} "
                        f"{item.host}:{item.port} {item.selector}".rstrip()
                    )
            return "\n".join(lines)

        if isinstance(view, TextView):
            return view.body

        if isinstance(view, MessageView):
            return view.text

        if isinstance(view, FailureView):
            return f"Error: {view.error}"

        raise TypeError(f"Unknown view type: {type(view).__name__}")
