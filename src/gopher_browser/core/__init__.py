"""Core components for the Gopher client."""

from .key_parser import KeyParser, Command, ActivateCommand, BackCommand, ScrollCommand, QuitCommand, InvalidCommand, MENU_KEYS
from .resource_loader import format_location, read_directory, read_directory_or_resource
from .session import Session, NO_SUCH_ITEM, NOT_IN_DIRECTORY
from .view import View, ListingView, TextView, MessageView, FailureView
from .view_renderer import ViewRenderer

__all__ = [
    "KeyParser",
    "Command",
    "ActivateCommand",
    "BackCommand",
    "ScrollCommand",
    "QuitCommand",
    "InvalidCommand",
    "MENU_KEYS",
    "format_location",
    "read_directory",
    "read_directory_or_resource",
    "Session",
    "NO_SUCH_ITEM",
    "NOT_IN_DIRECTORY",
    "View",
    "ListingView",
    "TextView",
    "MessageView",
    "FailureView",
    "ViewRenderer",
]
