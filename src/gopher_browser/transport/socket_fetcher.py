"""TCP transport for fetching Gopher resources."""

import logging
import socket

from ..errors import FetchError
from ..interfaces import ResourceFetcher

logger = logging.getLogger(__name__)

RECV_SIZE = 4096


class SocketFetcher(ResourceFetcher):
    """Fetches resources over a plain TCP connection.

    One connection per request: the selector is sent followed by a
    newline and the response is read until the server closes.
    """

    def __init__(self, timeout: float = 5.0, encoding: str = "utf-8"):
        """
        Initialize the fetcher.

        Args:
            timeout: Seconds allowed for connecting and for each read or write.
            encoding: Text encoding of responses. Undecodable bytes are replaced.
        """
        self.timeout = timeout
        self.encoding = encoding

    def fetch(self, host: str, port: int, selector: str) -> str:
        """
        Request a selector and return the response text.

        Raises:
            FetchError: On any socket error or timeout.
        """
        logger.debug(f"Connecting to {host}:{port}")
        try:
            with socket.create_connection((host, port), timeout=self.timeout) as sock:
                sock.sendall(f"{selector}\n".encode(self.encoding, errors="replace"))
                chunks = []
                while True:
                    data = sock.recv(RECV_SIZE)
                    if not data:
                        break
                    chunks.append(data)
        except (OSError, ValueError, OverflowError) as e:
            # Bad hosts or ports from a listing (e.g. over-long IDNA labels) fail here too
            raise FetchError(host, port, selector, str(e) or type(e).__name__) from e

        raw = b"".join(chunks)
        logger.info(f"Fetched {len(raw)} bytes from {host}:{port} {selector!r}")
        return raw.decode(self.encoding, errors="replace")
