"""
Tests for the Config classes.
"""

import os
from unittest.mock import patch

from ansi_cut.config.config import Config, DemoConfig, LogConfig


class TestLogConfig:
    """Tests for the LogConfig class."""

    def test_default_values(self):
        """Test that the default values are set correctly."""
        config = LogConfig()
        assert config.level == "INFO"
        assert config.format == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        assert config.file is None

    def test_from_env(self):
        """Test creating a LogConfig from environment variables."""
        with patch.dict(
            os.environ,
            {"LOG_LEVEL": "DEBUG", "LOG_FORMAT": "%(message)s", "LOG_FILE": "cut.log"},
        ):
            config = LogConfig.from_env()

            assert config.level == "DEBUG"
            assert config.format == "%(message)s"
            assert config.file == "cut.log"

    def test_from_env_disabled_file(self):
        """Test that "none" and "false" disable the log file."""
        for value in ("none", "False", ""):
            with patch.dict(os.environ, {"LOG_FILE": value}):
                assert LogConfig.from_env().file is None

    def test_from_dict(self):
        """Test creating a LogConfig from a dictionary."""
        config = LogConfig.from_dict({"level": "WARNING"})
        assert config.level == "WARNING"
        assert config.file is None


class TestDemoConfig:
    """Tests for the DemoConfig class."""

    def test_default_values(self):
        """Test that the default values are set correctly."""
        config = DemoConfig()
        assert config.width == 4
        assert config.start == 4
        assert config.end == 8

    def test_from_env(self):
        """Test creating a DemoConfig from environment variables."""
        with patch.dict(
            os.environ,
            {"ANSI_CUT_WIDTH": "7", "ANSI_CUT_START": "2", "ANSI_CUT_END": "5"},
        ):
            config = DemoConfig.from_env()

            assert config.width == 7
            assert config.start == 2
            assert config.end == 5

    def test_from_env_open_end(self):
        """Test that an end of "none" means open-ended."""
        with patch.dict(os.environ, {"ANSI_CUT_END": "none"}):
            assert DemoConfig.from_env().end is None

    def test_from_env_empty(self):
        """Test creating a DemoConfig without environment variables."""
        with patch.dict(os.environ, {}, clear=True):
            assert DemoConfig.from_env() == DemoConfig()

    def test_from_dict(self):
        """Test creating a DemoConfig from a dictionary."""
        config = DemoConfig.from_dict({"width": 2, "end": None})
        assert config.width == 2
        assert config.start == 4
        assert config.end is None


class TestConfig:
    """Tests for the Config class."""

    def test_load(self):
        """Test loading the configuration from the environment."""
        with patch.dict(os.environ, {"ANSI_CUT_WIDTH": "3"}):
            config = Config.load()

        assert isinstance(config.log, LogConfig)
        assert config.demo.width == 3

    def test_from_dict(self):
        """Test creating a Config from a dictionary."""
        config = Config.from_dict({"demo": {"width": 9}, "log": {"level": "ERROR"}})
        assert config.demo.width == 9
        assert config.log.level == "ERROR"

    def test_from_dict_defaults(self):
        """Test that missing sections fall back to defaults."""
        config = Config.from_dict({})
        assert config.demo == DemoConfig()
        assert config.log == LogConfig()


class TestDisabledValues:
    """Tests for values that switch an option off."""

    def test_demo_end_false(self):
        """Test that "false" also means open-ended."""
        with patch.dict(os.environ, {"ANSI_CUT_END": "false"}):
            assert DemoConfig.from_env().end is None

    def test_log_file_kept_verbatim(self):
        """Test that a real path is returned unchanged."""
        with patch.dict(os.environ, {"LOG_FILE": " logs/cut.log"}):
            assert LogConfig.from_env().file == " logs/cut.log"
