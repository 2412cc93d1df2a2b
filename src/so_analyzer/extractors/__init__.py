"""Extractors that read declared dependencies out of shared libraries."""

from .base_extractor import BaseExtractor
from .readelf_extractor import ReadelfExtractor

__all__ = ["BaseExtractor", "ReadelfExtractor"]
