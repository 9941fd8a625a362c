"""Configuration handling for the Gopher client."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for the Gopher client.

    Attributes:
        host: Server to open on start.
        port: Port of the start server.
        selector: Selector to request on start.
        timeout_seconds: Connect, read and write timeout for each fetch.
        encoding: Text encoding of server responses.
        page_size: Rows scrolled by page up / page down.
        log_file: File to write logs to (None for no log file).
    """

    host: str = "gopher.quux.org"
    port: int = 70
    selector: str = ""
    timeout_seconds: float = 5.0
    encoding: str = "utf-8"
    page_size: int = 10
    log_file: str | None = None

    def get_log_path(self) -> Path | None:
        """Get log file as expanded Path object, if set."""
        if self.log_file is None:
            return None
        return Path(self.log_file).expanduser()


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    server = data.get("server", {})
    network = data.get("network", {})
    display = data.get("display", {})
    logging_section = data.get("logging", {})

    return Config(
        host=server.get("host", Config.host),
        port=server.get("port", Config.port),
        selector=server.get("selector", Config.selector),
        timeout_seconds=network.get("timeout_seconds", Config.timeout_seconds),
        encoding=network.get("encoding", Config.encoding),
        page_size=display.get("page_size", Config.page_size),
        log_file=logging_section.get("file", Config.log_file),
    )
