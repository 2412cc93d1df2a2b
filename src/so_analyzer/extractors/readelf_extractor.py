"""Extractor that reads NEEDED entries from ``readelf -d`` output."""

import os
import re
import subprocess
from pathlib import Path
from typing import Optional

from .base_extractor import BaseExtractor
from ..exceptions import ExtractionError


# Example line:
#  0x0000000000000001 (NEEDED)             Shared library: [libc.so.6]
# The label between the tag and the name is translated by binutils.
NEEDED_PATTERN = re.compile(r"\(NEEDED\)\s+.*?\[(.+?)\]")


class ReadelfExtractor(BaseExtractor):
    """Runs ``readelf -d`` on a binary and parses its dynamic section."""

    def __init__(
        self,
        readelf_path: str = "readelf",
        timeout: Optional[float] = None
    ):
        """Initialize the extractor.

        Args:
            readelf_path: Name or path of the readelf executable
            timeout: Seconds to wait for readelf, None waits forever
        """
        self.readelf_path = readelf_path
        self.timeout = timeout

    def extract_dependencies(self, file_path: Path) -> list[str]:
        """Run readelf and return the NEEDED entries of the file.

        Raises:
            ExtractionError: readelf is missing, times out, or rejects the file
        """
        try:
            result = subprocess.run(
                [self.readelf_path, "-d", str(file_path)],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env={**os.environ, "LC_ALL": "C"},
            )
        except FileNotFoundError as e:
            raise ExtractionError(f"{self.readelf_path} not found", file_path) from e
        except subprocess.TimeoutExpired as e:
            raise ExtractionError(f"{self.readelf_path} timed out after {self.timeout}s", file_path) from e
        except OSError as e:
            raise ExtractionError(str(e), file_path) from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise ExtractionError(detail, file_path)

        return self.parse_output(result.stdout)

    @staticmethod
    def parse_output(output: str) -> list[str]:
        """Parse the NEEDED library names out of ``readelf -d`` text."""
        needed = []
        for line in output.splitlines():
            match = NEEDED_PATTERN.search(line)
            if match:
                needed.append(match.group(1))
        return needed
