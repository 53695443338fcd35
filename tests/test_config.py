"""
Tests for configuration and logging setup.
"""

import json
import logging
import os
import tempfile

import pytest

from cl3.utils.config import Config, configure_logging, load_config, save_config


@pytest.fixture
def restore_cl3_logger():
    """Reset the package logger level after a test changes it."""
    package_logger = logging.getLogger("cl3")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


class TestConfig:
    """Tests for the Config dataclass."""

    def test_defaults(self):
        """Default display, sampling and logging settings."""
        config = Config()
        assert config.display_precision is None
        assert config.display_zero_terms is True
        assert config.random_magnitude == (0.0, 1.0)
        assert config.seed is None
        assert config.log_level == "WARNING"
        assert config.extra == {}

    def test_magnitude_normalized_to_floats(self):
        """random_magnitude becomes a tuple of floats."""
        config = Config(random_magnitude=[1, 2])
        assert config.random_magnitude == (1.0, 2.0)

    def test_invalid_values_rejected(self):
        """Bad settings raise ValueError."""
        with pytest.raises(ValueError):
            Config(random_magnitude=(1.0,))
        with pytest.raises(ValueError):
            Config(log_level="LOUD")
        with pytest.raises(ValueError):
            Config(display_precision="3")

    def test_dict_roundtrip(self):
        """to_dict and from_dict are inverses."""
        config = Config(display_precision=4, seed=11, random_magnitude=(0.5, 2.0))
        restored = Config.from_dict(config.to_dict())
        assert restored == config

    def test_unknown_keys_go_to_extra(self, caplog):
        """Unknown keys are kept in extra with a warning."""
        with caplog.at_level(logging.WARNING, logger="cl3.utils.config"):
            config = Config.from_dict({"seed": 1, "colour": "blue"})
        assert config.seed == 1
        assert config.extra == {"colour": "blue"}
        assert "colour" in caplog.text

    def test_update_returns_new_config(self):
        """update leaves the original untouched."""
        config = Config()
        updated = config.update(seed=5)
        assert updated.seed == 5
        assert config.seed is None

    def test_save_load(self):
        """Configs survive a JSON round trip."""
        config = Config(display_precision=6, display_zero_terms=False, seed=42)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "config.json")
            save_config(config, path)
            with open(path) as f:
                assert json.load(f)["seed"] == 42
            assert load_config(path) == config


class TestLogging:
    """Tests for configure_logging."""

    def test_sets_package_level(self, restore_cl3_logger):
        """The cl3 logger takes the configured level."""
        package_logger = configure_logging(Config(log_level="debug"))
        assert package_logger is restore_cl3_logger
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger("cl3.algebra.spectral").getEffectiveLevel() == logging.DEBUG

    def test_installs_no_handlers(self, restore_cl3_logger):
        """Output routing is left to the application."""
        before = list(restore_cl3_logger.handlers)
        configure_logging(Config(log_level="INFO"))
        assert restore_cl3_logger.handlers == before
