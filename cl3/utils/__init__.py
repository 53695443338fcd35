"""
Utility functions for cl3.

Includes configuration management, display formatting, binary storage and
random generation.
"""

from .config import Config, load_config, save_config, configure_logging
from .display import show_octave, format_cliffor
from .storage import (
    to_bytes,
    from_bytes,
    to_array,
    from_array,
    to_tensor,
    from_tensor,
    save,
    load,
)
from .sampling import (
    make_generator,
    random_cliffor,
    rand_unit_v3,
    rand_projector,
    rand_nilpotent,
)

__all__ = [
    # Config
    "Config",
    "load_config",
    "save_config",
    "configure_logging",
    # Display
    "show_octave",
    "format_cliffor",
    # Storage
    "to_bytes",
    "from_bytes",
    "to_array",
    "from_array",
    "to_tensor",
    "from_tensor",
    "save",
    "load",
    # Sampling
    "make_generator",
    "random_cliffor",
    "rand_unit_v3",
    "rand_projector",
    "rand_nilpotent",
]
