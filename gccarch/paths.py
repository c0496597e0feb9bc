"""
gccarch Paths.

Standard locations for gccarch's per-user files.

Default base directory: ~/.gccarch/
    config.json     # Main configuration
    gccarch.log     # Rotating log file (only when file logging is enabled)
"""

import os
from pathlib import Path


# Environment variable to override base directory
GCCARCH_HOME_ENV = "GCCARCH_HOME"


def get_base_dir() -> Path:
    """
    Get the gccarch base directory.

    Priority:
    1. GCCARCH_HOME environment variable
    2. ~/.gccarch/ (default)
    """
    env_home = os.environ.get(GCCARCH_HOME_ENV)
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".gccarch"


def get_config_file() -> Path:
    """Main configuration file."""
    return get_base_dir() / "config.json"


def get_log_file() -> Path:
    """Rotating log file."""
    return get_base_dir() / "gccarch.log"


def ensure_base_dir() -> Path:
    """Create the base directory if needed and return it."""
    base = get_base_dir()
    base.mkdir(parents=True, exist_ok=True)
    return base
