# gccarch/config.py
import json
from pathlib import Path
from typing import Any, Optional, Union

from gccarch.paths import ensure_base_dir, get_config_file

DEFAULT_LOG_LEVEL = "WARNING"


class GccArchConfigError(Exception):
    """Custom exception for gccarch configuration errors."""
    exit_code = 1


class GccArchConfig:
    def __init__(self, log_level: str = DEFAULT_LOG_LEVEL, table_file: Optional[str] = None, **kwargs):
        self._data = {
            "log_level": log_level,
            "table_file": table_file,
            "log_to_file": kwargs.get("log_to_file", False),
            "use_color": kwargs.get("use_color", True),
        }
        # Keep unknown keys so save() round-trips a hand-edited file.
        for key, value in kwargs.items():
            self._data.setdefault(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __getattr__(self, name: str) -> Any:
        if name in self._data:
            return self._data[name]
        raise AttributeError(f"'GccArchConfig' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_data":
            super().__setattr__(name, value)
        else:
            self._data[name] = value

    def to_dict(self) -> dict:
        return dict(self._data)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "GccArchConfig":
        """Load config from path (default ~/.gccarch/config.json); defaults if missing."""
        config_path = Path(path).expanduser() if path else get_config_file()
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise GccArchConfigError(f"Failed to load config from {config_path}: {e}")
        if not isinstance(data, dict):
            raise GccArchConfigError(f"Failed to load config from {config_path}: expected a JSON object")
        return cls(**data)

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        if path:
            config_path = Path(path).expanduser()
        else:
            ensure_base_dir()
            config_path = get_config_file()
        try:
            with open(config_path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except OSError as e:
            raise GccArchConfigError(f"Failed to save gccarch config: {e}")
        return config_path
