"""Exception classes raised while scanning libraries and extracting dependencies."""

from pathlib import Path
from typing import Optional, Union


class SoAnalyzerError(Exception):
    """Base class for all analyzer errors.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ScanError(SoAnalyzerError):
    """Raised when the search path cannot be walked.

    Covers a missing root, a root that is not a directory, and directories
    that cannot be listed during the walk.

    Attributes:
        message: Error message.
        path: Path that could not be read.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        self.path = str(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class ExtractionError(SoAnalyzerError):
    """Raised when the declared dependencies of a binary cannot be read.

    Attributes:
        message: Error message.
        path: Binary that failed to be inspected.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        self.path = str(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message
