"""Base extractor class for reading declared library dependencies."""

from abc import ABC, abstractmethod
from pathlib import Path


class BaseExtractor(ABC):
    """Base class for all dependency extractors.

    An extractor answers one question: which libraries does this binary
    declare as runtime dependencies? Implementations raise
    ``ExtractionError`` when a file cannot be inspected.
    """

    @abstractmethod
    def extract_dependencies(self, file_path: Path) -> list[str]:
        """Return the declared dependency names of a binary, in declaration order."""
        pass
