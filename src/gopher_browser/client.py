"""GopherClient - Main control loop of the interactive Gopher client."""

import logging

from .interfaces import ResourceFetcher, Terminal
from .core import (
    KeyParser,
    ActivateCommand,
    BackCommand,
    ScrollCommand,
    QuitCommand,
    InvalidCommand,
    Session,
    ViewRenderer,
)
from .config import Config

logger = logging.getLogger(__name__)


class GopherClient:
    """Interactive client orchestrating all components.

    Draws the current view, reads one key, and applies the matching
    navigation command, until the user quits.
    Uses dependency injection for the fetcher and terminal.
    """

    def __init__(
        self,
        fetcher: ResourceFetcher,
        terminal: Terminal,
        config: Config | None = None,
    ):
        """
        Initialize the Gopher client.

        Args:
            fetcher: Transport for fetching resources.
            terminal: Front end for drawing and key input.
            config: Client configuration (uses defaults if None).
        """
        self.fetcher = fetcher
        self.terminal = terminal
        self.config = config or Config()

        # Initialize components
        self.parser = KeyParser(page_size=self.config.page_size)
        self.renderer = ViewRenderer()
        self.session: Session | None = None

    def open(self, host: str, port: int, selector: str) -> Session:
        """
        Start a new session at the given address.

        Args:
            host: Server hostname.
            port: Server port.
            selector: Selector of the first resource.

        Returns:
            The new session.
        """
        self.session = Session.open(self.fetcher, host, port, selector)
        return self.session

    def run(self) -> None:
        """Run the control loop until the user quits."""
        if self.session is None:
            self.open(self.config.host, self.config.port, self.config.selector)

        logger.info("Client running")
        while True:
            self.redraw()
            key = self.terminal.read_key()
            if not self.handle_key(key):
                break
        logger.info("Client stopped")

    def redraw(self) -> None:
        """Draw the current view."""
        frame = self.renderer.render(self._require_session().current_view(), self.terminal.height())
        self.terminal.draw(frame)

    def handle_key(self, key: str) -> bool:
        """
        Handle a single key press.

        Args:
            key: Key name as returned by Terminal.read_key().

        Returns:
            False if the key asked to quit, True otherwise.
        """
        session = self._require_session()
        command = self.parser.parse(key)
        logger.debug(f"Key {key!r}: {command.__class__.__name__}")

        if isinstance(command, QuitCommand):
            return False

        if isinstance(command, BackCommand):
            session.go_back()
        elif isinstance(command, ScrollCommand):
            session.scroll(command.amount)
        elif isinstance(command, ActivateCommand):
            session.activate(command.index)
        elif isinstance(command, InvalidCommand):
            logger.debug(f"Ignoring key {command.key!r}: {command.reason}")

        return True

    def _require_session(self) -> Session:
        if self.session is None:
            raise RuntimeError("No session. Call open() first.")
        return self.session
