"""Exception types raised by the Gopher client."""


class GopherError(Exception):
    """Base class for all Gopher client errors."""

    pass


class FetchError(GopherError):
    """A resource could not be fetched (connect, timeout, read or write failure)."""

    def __init__(self, host: str, port: int, selector: str, reason: str):
        self.host = host
        self.port = port
        self.selector = selector
        self.reason = reason
        super().__init__(f"Could not fetch {host}:{port} {selector!r}: {reason}")


class ParseError(GopherError):
    """Response text does not follow the directory wire format."""

    def __init__(self, line: str, message: str):
        self.line = line
        super().__init__(f"{message}: {line!r}")


class ItemParseError(ParseError):
    """A single directory line is malformed."""

    def __init__(self, line: str):
        super().__init__(line, "Invalid directory item")


class DirectoryParseError(ParseError):
    """A listing contains a malformed line."""

    def __init__(self, line: str):
        super().__init__(line, "Invalid directory listing")
