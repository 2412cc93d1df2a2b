"""Shared-library dependency analyzer."""

__version__ = "0.1.0"
