"""Command-line interface for the Gopher client."""

import argparse
import curses
import logging
import sys
from dataclasses import replace

from .config import Config, load_config
from .core import FailureView, ViewRenderer
from .core.session import load_view
from .interfaces import ResourceFetcher
from .terminal import CursesTerminal
from .transport import SocketFetcher
from .client import GopherClient


def setup_logging(verbose: bool = False, log_file: str | None = None, interactive: bool = False) -> None:
    """Configure logging.

    The curses screen owns the terminal, so an interactive session
    without a log file discards log records.
    """
    level = logging.DEBUG if verbose else logging.INFO
    options = {}
    if log_file:
        options["filename"] = log_file
    elif interactive:
        options["handlers"] = [logging.NullHandler()]

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        **options,
    )


def parse_address(value: str) -> tuple[str, int | None]:
    """
    Split a "host[:port]" argument.

    Returns:
        (host, port), port is None when not given.

    Raises:
        ValueError: If the port is not a number in 1-65535 or host is empty.
    """
    host, sep, port_text = value.rpartition(":")
    if not sep:
        host, port_text = value, ""
    if not host:
        raise ValueError(f"Missing host in {value!r}")
    if not port_text:
        return host, None

    port = int(port_text)
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return host, port


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gopher Browser - Browse Gopherspace from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Open the default server
  %(prog)s gopher.floodgap.com              # Open a server's root menu
  %(prog)s gopher.quux.org:70 /Software     # Open a selector
  %(prog)s --dump gopher.quux.org /Software # Print a resource and exit

Keys:
  0-9 a-z A-Z ...  open the item labelled with that key
  Up/Down          scroll one line
  PgUp/PgDn        scroll one page
  Esc/Tab          back
  Ctrl+C/Ctrl+Q    quit
""",
    )

    parser.add_argument(
        "address",
        nargs="?",
        type=parse_address,
        metavar="HOST[:PORT]",
        help="Server to open (default: from config, gopher.quux.org:70)",
    )

    parser.add_argument(
        "selector",
        nargs="?",
        help="Selector to request (default: empty, the root menu)",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--log-file",
        metavar="FILE",
        help="Write logs to FILE",
    )

    parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        help="Network timeout per fetch (default: 5)",
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the resource to stdout instead of browsing it",
    )

    return parser.parse_args()


def apply_args(config: Config, args: argparse.Namespace) -> Config:
    """Override config values with command line arguments."""
    if args.address is not None:
        host, port = args.address
        config = replace(config, host=host)
        if port is not None:
            config = replace(config, port=port)

    if args.selector is not None:
        config = replace(config, selector=args.selector)

    if args.timeout is not None:
        config = replace(config, timeout_seconds=args.timeout)

    if args.log_file:
        config = replace(config, log_file=args.log_file)

    return config


def dump(fetcher: ResourceFetcher, config: Config) -> int:
    """Fetch one resource and print it."""
    logger = logging.getLogger(__name__)

    view = load_view(fetcher, config.host, config.port, config.selector)
    if isinstance(view, FailureView):
        logger.error(f"{view.error}")
        return 1

    print(ViewRenderer().dump(view))
    return 0


def _browse(screen, fetcher: ResourceFetcher, config: Config) -> None:
    terminal = CursesTerminal(screen)
    client = GopherClient(fetcher, terminal, config)
    client.run()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            setup_logging(args.verbose)
            logging.getLogger(__name__).error(f"Config file not found: {args.config}")
            return 1
    else:
        config = Config()

    config = apply_args(config, args)

    log_path = config.get_log_path()
    setup_logging(args.verbose, str(log_path) if log_path else None, interactive=not args.dump)
    logger = logging.getLogger(__name__)

    fetcher = SocketFetcher(timeout=config.timeout_seconds, encoding=config.encoding)

    if args.dump:
        return dump(fetcher, config)

    logger.info(f"Starting Gopher client at {config.host}:{config.port} {config.selector!r}")

    try:
        curses.wrapper(_browse, fetcher, config)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Client error: {e}")
        print(f"Client error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
