"""Tests for the configuration module."""

import pytest
import tempfile
from pathlib import Path
from gopher_browser.config import Config, load_config


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        """Config has sensible defaults."""
        config = Config()
        assert config.host == "gopher.quux.org"
        assert config.port == 70
        assert config.selector == ""
        assert config.timeout_seconds == 5.0
        assert config.encoding == "utf-8"
        assert config.page_size == 10
        assert config.log_file is None

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(
            host="gopher.floodgap.com",
            port=7070,
            selector="/world",
            timeout_seconds=10.0,
            page_size=20,
        )
        assert config.host == "gopher.floodgap.com"
        assert config.port == 7070
        assert config.selector == "/world"
        assert config.page_size == 20


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_from_yaml_file(self):
        """Load config from YAML file."""
        yaml_content = """
server:
  host: gopher.floodgap.com
  port: 7070
  selector: /world

network:
  timeout_seconds: 12.5
  encoding: latin-1

display:
  page_size: 25

logging:
  file: /tmp/gopher.log
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.host == "gopher.floodgap.com"
            assert config.port == 7070
            assert config.selector == "/world"
            assert config.timeout_seconds == 12.5
            assert config.encoding == "latin-1"
            assert config.page_size == 25
            assert config.log_file == "/tmp/gopher.log"

    def test_load_partial_config(self):
        """Load config with partial values (rest use defaults)."""
        yaml_content = """
server:
  host: gopher.example.net
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.host == "gopher.example.net"
            # Rest should be defaults
            assert config.port == 70
            assert config.timeout_seconds == 5.0

    def test_load_empty_file(self):
        """Load config from empty file uses defaults."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = load_config(f.name)

            assert config.host == "gopher.quux.org"
            assert config.page_size == 10

    def test_load_nonexistent_file_raises(self):
        """Loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_expand_log_path(self):
        """Home directory is expanded in log_file."""
        config = Config(log_file="~/gopher.log")
        expanded = config.get_log_path()

        assert isinstance(expanded, Path)
        assert "~" not in str(expanded)
        assert expanded.name == "gopher.log"

    def test_no_log_path(self):
        """get_log_path returns None without a log file."""
        assert Config().get_log_path() is None
