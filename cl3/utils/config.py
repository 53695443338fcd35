"""
Configuration management for cl3.

Provides the configuration dataclass shared by display, sampling and
logging helpers, with JSON load/save.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, Tuple
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Configuration for cl3 helpers.

    The numeric tolerance is not part of the configuration: classification
    and reduction always use ``cl3.core.constants.TOL``.

    Attributes:
        # Display
        display_precision: Significant digits in format_cliffor (None uses repr)
        display_zero_terms: Whether format_cliffor prints zero coefficients

        # Sampling
        random_magnitude: (lo, hi) magnitude range used by random_from_config
        seed: Seed for make_generator (None draws a nondeterministic seed)

        # Logging
        log_level: Level applied to the ``cl3`` logger by configure_logging
    """

    # Display
    display_precision: Optional[int] = None
    display_zero_terms: bool = True

    # Sampling
    random_magnitude: Tuple[float, float] = (0.0, 1.0)
    seed: Optional[int] = None

    # Logging
    log_level: str = 'WARNING'

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.display_precision is not None and not isinstance(self.display_precision, int):
            raise ValueError(f"display_precision must be an int or None, got {self.display_precision!r}")
        if len(self.random_magnitude) != 2:
            raise ValueError(f"random_magnitude must be a (lo, hi) pair, got {self.random_magnitude!r}")
        self.random_magnitude = (float(self.random_magnitude[0]), float(self.random_magnitude[1]))
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        config_dict = asdict(self)
        config_dict['random_magnitude'] = list(self.random_magnitude)
        return config_dict

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        extra_kwargs = dict(config_dict.get('extra', {}))
        unknown = {k: v for k, v in config_dict.items() if k not in known_fields}
        if unknown:
            logger.warning(f"Unknown config keys kept in extra: {sorted(unknown)}")
        extra_kwargs.update(unknown)

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved config to {filepath}")


def configure_logging(config: Config) -> logging.Logger:
    """
    Apply ``config.log_level`` to the ``cl3`` logger hierarchy.

    No handlers are installed; output goes wherever the application's
    logging configuration sends it.

    Returns:
        The ``cl3`` package logger
    """
    package_logger = logging.getLogger('cl3')
    package_logger.setLevel(str(config.log_level).upper())
    return package_logger
