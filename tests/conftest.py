"""Pytest configuration and fixtures."""

import pytest

from gopher_browser.errors import FetchError
from gopher_browser.interfaces import ResourceFetcher


SAMPLE_LISTING = (
    "0About internet Gopher\tStuff:About us\trawBits.micro.umn.edu\t70\n"
    "1Around University of Minnesota\tZ,5692,AUM\tunderdog.micro.umn.edu\t70\n"
    "1Microcomputer News & Prices\tPrices/\tpserver.bookstore.umn.edu\t70\n"
    "1Courses, Schedules, Calendars\t\tevents.ais.umn.edu\t9120\n"
    "1Student-Staff Directories\t\tuinfo.ais.umn.edu\t70\n"
    "1Departmental Publications\tStuff:DP:\trawBits.micro.umn.edu\t70\n"
    "."
)

MIXED_LISTING = (
    "iWelcome to the test server\tfake\t(NULL)\t0\n"
    "1Documents\t/docs\tgopher.example.net\t70\n"
    "i\tfake\t(NULL)\t0\n"
    "0Readme\t/readme.txt\tgopher.example.net\t70\n"
    "7Search\t/search\tgopher.example.net\t70\n"
    ".\n"
)


class FakeFetcher(ResourceFetcher):
    """Fetcher serving canned responses, recording every request."""

    def __init__(self):
        self.responses = {}
        self.requests = []

    def add(self, host: str, port: int, selector: str, body: str) -> None:
        self.responses[(host, port, selector)] = body

    def fetch(self, host: str, port: int, selector: str) -> str:
        self.requests.append((host, port, selector))
        body = self.responses.get((host, port, selector))
        if body is None:
            raise FetchError(host, port, selector, "Connection refused")
        return body


@pytest.fixture
def sample_listing():
    """The six item listing from RFC 1436."""
    return SAMPLE_LISTING


@pytest.fixture
def mixed_listing():
    """A listing with informational lines between links."""
    return MIXED_LISTING


@pytest.fixture
def fake_fetcher():
    """A fetcher serving a small gopher site."""
    fetcher = FakeFetcher()
    fetcher.add("gopher.example.net", 70, "", MIXED_LISTING)
    fetcher.add("gopher.example.net", 70, "/docs", SAMPLE_LISTING)
    fetcher.add("gopher.example.net", 70, "/readme.txt", "Line one\nLine two\nLine three\n")
    return fetcher
