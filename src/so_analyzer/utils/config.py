"""Configuration management for the shared-library analyzer."""

import copy
from pathlib import Path
from typing import Any, Optional

import yaml


class Config:
    """Configuration with YAML overrides on top of built-in defaults."""

    DEFAULT_CONFIG = {
        "scan": {
            "library_suffix": ".so",
            "on_extraction_error": "abort"
        },
        "extractor": {
            "readelf_path": "readelf",
            "timeout": None
        },
        "logging": {
            "level": "INFO",
            "file": None
        }
    }

    ERROR_MODES = ("abort", "skip")

    def __init__(self, values: Optional[dict] = None):
        self._config: dict = copy.deepcopy(values) if values else {}

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value using dot notation (e.g., 'scan.library_suffix')."""
        keys = key.split(".")

        for source in (self._config, self.DEFAULT_CONFIG):
            value = source
            for k in keys:
                if isinstance(value, dict) and k in value:
                    value = value[k]
                else:
                    break
            else:
                return value

        return default

    def set(self, key: str, value: Any) -> None:
        """Set a config value using dot notation."""
        keys = key.split(".")
        target = self._config
        for k in keys[:-1]:
            target = target.setdefault(k, {})
        target[keys[-1]] = value

    @property
    def library_suffix(self) -> str:
        """File name suffix identifying shared libraries."""
        return self.get("scan.library_suffix", ".so")

    @property
    def skip_invalid(self) -> bool:
        """Whether files the extractor rejects are skipped instead of aborting."""
        mode = self.get("scan.on_extraction_error", "abort")
        if mode not in self.ERROR_MODES:
            raise ValueError(
                f"scan.on_extraction_error must be one of {', '.join(self.ERROR_MODES)}, got {mode!r}"
            )
        return mode == "skip"

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[Path]:
        value = self.get("logging.file")
        return Path(value) if value else None
