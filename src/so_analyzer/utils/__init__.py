"""Configuration and logging helpers."""

from .config import Config
from .logger import setup_from_config, setup_logger

__all__ = ["Config", "setup_from_config", "setup_logger"]
