"""Helpers for fetching a resource and deciding how to show it."""

import logging

from ..errors import ParseError
from ..interfaces import ResourceFetcher
from ..protocol import Directory, parse_directory

logger = logging.getLogger(__name__)


def format_location(host: str, port: int, selector: str) -> str:
    """Format a resource address for the status line."""
    return f"{host}:{port} {selector}".rstrip()


def read_directory(fetcher: ResourceFetcher, host: str, port: int, selector: str) -> Directory:
    """
    Fetch a selector and parse it as a directory listing.

    Raises:
        FetchError: If the fetch fails.
        DirectoryParseError: If the response is not a listing.
    """
    body = fetcher.fetch(host, port, selector)
    return parse_directory(body)


def read_directory_or_resource(
    fetcher: ResourceFetcher, host: str, port: int, selector: str
) -> Directory | str:
    """
    Fetch a selector, returning a Directory if it parses as one.

    A server doesn't say whether a selector is a listing or a document,
    so anything that fails to parse is returned as the raw text.

    Raises:
        FetchError: If the fetch fails.
    """
    body = fetcher.fetch(host, port, selector)
    try:
        directory = parse_directory(body)
    except ParseError as e:
        logger.debug(f"Not a directory ({e}), showing as text")
        return body

    logger.debug(f"Parsed directory with {len(directory)} items")
    return directory
