"""Abstract interface for fetching Gopher resources."""

from abc import ABC, abstractmethod


class ResourceFetcher(ABC):
    """Abstract interface for the request/response transport."""

    @abstractmethod
    def fetch(self, host: str, port: int, selector: str) -> str:
        """Request a selector and return the whole response as text.

        Args:
            host: Server hostname.
            port: Server port.
            selector: The selector to request (may be empty).

        Raises:
            FetchError: On any connect, timeout, read or write failure.
        """
        pass
