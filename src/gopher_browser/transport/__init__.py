"""Network transports for the Gopher client."""

from .socket_fetcher import SocketFetcher

__all__ = ["SocketFetcher"]
