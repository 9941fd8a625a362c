"""Navigation session: a stack of views with back and scroll."""

import logging
from dataclasses import replace

from ..errors import FetchError
from ..interfaces import ResourceFetcher
from ..protocol import Directory, DirectoryItem, is_navigable
from .resource_loader import format_location, read_directory_or_resource
from .view import FailureView, ListingView, MessageView, SCROLLABLE_VIEWS, TextView, View

logger = logging.getLogger(__name__)

NO_SUCH_ITEM = "No such item"
NOT_IN_DIRECTORY = "Not in a directory"


class Session:
    """Navigation history for one running client.

    The bottom view is the initial fetch and is never popped, so the
    stack always holds at least one view.
    """

    def __init__(self, fetcher: ResourceFetcher, root: View):
        """
        Initialize with an already built root view.

        Use Session.open() to start a session from a server address.

        Args:
            fetcher: Transport used for every later fetch.
            root: The view at the bottom of the stack.
        """
        self.fetcher = fetcher
        self._views: list[View] = [root]

    @classmethod
    def open(cls, fetcher: ResourceFetcher, host: str, port: int, selector: str) -> "Session":
        """
        Start a session by fetching the initial resource.

        A failed fetch does not raise; it becomes the root view.
        """
        logger.info(f"Opening {format_location(host, port, selector)}")
        return cls(fetcher, load_view(fetcher, host, port, selector))

    @property
    def views(self) -> tuple[View, ...]:
        """The whole stack, root first."""
        return tuple(self._views)

    @property
    def depth(self) -> int:
        return len(self._views)

    def current_view(self) -> View:
        """Get the view on top of the stack."""
        if not self._views:
            raise RuntimeError("Lost root view: session stack is empty")
        return self._views[-1]

    def go_back(self) -> None:
        """Return to the previous view. The root view is kept."""
        if len(self._views) > 1:
            popped = self._views.pop()
            logger.debug(f"Back from {type(popped).__name__}, depth {len(self._views)}")
        else:
            logger.debug("Already at root view")

    def scroll(self, delta: int) -> None:
        """
        Scroll the current listing or text by delta rows.

        The offset never goes below 0 but may run past the end of the
        content. Messages and failures don't scroll.
        """
        view = self.current_view()
        if not isinstance(view, SCROLLABLE_VIEWS):
            return
        new_scroll = max(0, view.scroll + delta)
        self._views[-1] = replace(view, scroll=new_scroll)

    def activate(self, index: int) -> View:
        """
        Open the index-th selectable item visible in the current listing.

        Indexing counts only navigable items from the scroll offset on,
        matching the keys drawn next to on-screen rows. Always pushes
        exactly one view, even when nothing could be fetched.

        Args:
            index: Zero-based rank among visible navigable items.

        Returns:
            The view that was pushed.
        """
        view = self.current_view()

        if not isinstance(view, ListingView):
            logger.debug(f"Activate {index} outside a directory")
            new_view = MessageView(NOT_IN_DIRECTORY)
        else:
            item = visible_item(view.directory, view.scroll, index)
            if item is None:
                logger.debug(f"No item {index} after scroll {view.scroll}")
                new_view = MessageView(NO_SUCH_ITEM)
            else:
                logger.info(f"Selected [{index}]: {item.display_name}")
                new_view = load_view(self.fetcher, item.host, item.port, item.selector)

        self._views.append(new_view)
        return new_view


def visible_item(directory: Directory, scroll: int, index: int) -> DirectoryItem | None:
    """Get the index-th navigable item at or after scroll, or None."""
    if index < 0:
        return None
    candidates = [item for item in directory.items[scroll:] if is_navigable(item)]
    if index >= len(candidates):
        return None
    return candidates[index]


def load_view(fetcher: ResourceFetcher, host: str, port: int, selector: str) -> View:
    """Fetch a resource and wrap it in a listing, text or failure view."""
    location = format_location(host, port, selector)
    try:
        resource = read_directory_or_resource(fetcher, host, port, selector)
    except FetchError as e:
        logger.warning(f"Fetch failed for {location}: {e.reason}")
        return FailureView(e)

    if isinstance(resource, Directory):
        return ListingView(location, resource, 0)
    return TextView(location, resource, 0)
