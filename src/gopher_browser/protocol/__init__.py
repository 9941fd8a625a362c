"""Gopher directory wire format."""

from .item_type import ItemType, UnknownType
from .directory import (
    DEFAULT_PORT,
    Directory,
    DirectoryItem,
    format_directory,
    format_item,
    is_navigable,
    parse_directory,
    parse_item,
    split_lines,
)

__all__ = [
    "DEFAULT_PORT",
    "Directory",
    "DirectoryItem",
    "ItemType",
    "UnknownType",
    "format_directory",
    "format_item",
    "is_navigable",
    "parse_directory",
    "parse_item",
    "split_lines",
]
