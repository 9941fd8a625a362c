"""Views held on the navigation stack."""

from dataclasses import dataclass

from ..errors import GopherError
from ..protocol import Directory


@dataclass(frozen=True)
class ListingView:
    """A parsed directory listing."""

    location: str
    directory: Directory
    scroll: int = 0


@dataclass(frozen=True)
class TextView:
    """A resource shown as plain text."""

    location: str
    body: str
    scroll: int = 0


@dataclass(frozen=True)
class MessageView:
    """A transient notice such as "No such item"."""

    text: str


@dataclass(frozen=True)
class FailureView:
    """A fetch that failed."""

    error: GopherError


View = ListingView | TextView | MessageView | FailureView

SCROLLABLE_VIEWS = (ListingView, TextView)
