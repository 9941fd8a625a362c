"""Tests for the SocketFetcher module."""

import socket
import pytest
from unittest.mock import MagicMock, patch
from gopher_browser.errors import FetchError
from gopher_browser.transport.socket_fetcher import SocketFetcher


def make_socket(chunks):
    """Create a mock socket returning chunks then EOF."""
    sock = MagicMock()
    sock.__enter__.return_value = sock
    sock.recv.side_effect = list(chunks) + [b""]
    return sock


class TestSocketFetcher:
    """Tests for SocketFetcher."""

    def test_defaults(self):
        """Default timeout is five seconds."""
        fetcher = SocketFetcher()
        assert fetcher.timeout == 5.0
        assert fetcher.encoding == "utf-8"

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_sends_selector_and_reads_until_close(self, mock_connect):
        """The selector is sent with a newline and all data is read."""
        sock = make_socket([b"0A\t/a\thost\t70\n", b".\n"])
        mock_connect.return_value = sock

        result = SocketFetcher(timeout=2.5).fetch("gopher.example.net", 70, "/docs")

        mock_connect.assert_called_once_with(("gopher.example.net", 70), timeout=2.5)
        sock.sendall.assert_called_once_with(b"/docs\n")
        assert result == "0A\t/a\thost\t70\n.\n"

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_empty_selector(self, mock_connect):
        """An empty selector sends just a newline."""
        sock = make_socket([b"hello"])
        mock_connect.return_value = sock

        SocketFetcher().fetch("host", 70, "")

        sock.sendall.assert_called_once_with(b"\n")

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_invalid_bytes_replaced(self, mock_connect):
        """Undecodable bytes don't fail the fetch."""
        mock_connect.return_value = make_socket([b"caf\xe9"])

        result = SocketFetcher().fetch("host", 70, "")

        assert result == "caf�"

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_custom_encoding(self, mock_connect):
        """Responses are decoded with the configured encoding."""
        mock_connect.return_value = make_socket([b"caf\xe9"])

        result = SocketFetcher(encoding="latin-1").fetch("host", 70, "")

        assert result == "café"

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_connect_error_wrapped(self, mock_connect):
        """Connection errors become FetchError."""
        mock_connect.side_effect = ConnectionRefusedError("Connection refused")

        with pytest.raises(FetchError) as exc_info:
            SocketFetcher().fetch("host", 70, "/x")

        error = exc_info.value
        assert error.host == "host"
        assert error.port == 70
        assert error.selector == "/x"
        assert "Connection refused" in str(error)
        assert isinstance(error.__cause__, ConnectionRefusedError)

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_timeout_wrapped(self, mock_connect):
        """Read timeouts become FetchError."""
        sock = MagicMock()
        sock.__enter__.return_value = sock
        sock.recv.side_effect = socket.timeout("timed out")
        mock_connect.return_value = sock

        with pytest.raises(FetchError) as exc_info:
            SocketFetcher().fetch("host", 70, "")

        assert "timed out" in exc_info.value.reason

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_socket_closed(self, mock_connect):
        """The socket is closed through the context manager."""
        sock = make_socket([b"data"])
        mock_connect.return_value = sock

        SocketFetcher().fetch("host", 70, "")

        sock.__exit__.assert_called_once()

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_bad_hostname_wrapped(self, mock_connect):
        """Hostnames the IDNA codec rejects become FetchError."""
        mock_connect.side_effect = UnicodeError("label empty or too long")

        with pytest.raises(FetchError) as exc_info:
            SocketFetcher().fetch("a" * 70 + ".example", 70, "/")

        assert "label empty or too long" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, UnicodeError)

    @patch("gopher_browser.transport.socket_fetcher.socket.create_connection")
    def test_port_out_of_range_wrapped(self, mock_connect):
        """Ports socket can't represent become FetchError."""
        mock_connect.side_effect = OverflowError("getsockaddrarg: port must be 0-65535.")

        with pytest.raises(FetchError):
            SocketFetcher().fetch("host", 99999, "")
