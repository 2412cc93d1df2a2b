"""Graph builder for constructing the shared-library dependency graph."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .dependency_graph import DependencyGraph
from ..exceptions import ExtractionError, ScanError
from ..extractors.base_extractor import BaseExtractor
from ..extractors.readelf_extractor import ReadelfExtractor
from ..utils.config import Config
from ..utils.logger import get_logger


@dataclass
class GraphStatistics:
    """Statistics about the dependency graph."""
    total_files: int = 0
    total_libraries: int = 0
    total_edges: int = 0

    dangling_references: list[str] = field(default_factory=list)
    duplicate_names: list[str] = field(default_factory=list)
    skipped_files: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "files": {
                "total": self.total_files,
                "skipped": len(self.skipped_files)
            },
            "graph": {
                "libraries": self.total_libraries,
                "edges": self.total_edges,
                "dangling_references": len(self.dangling_references),
                "duplicate_names": len(self.duplicate_names)
            }
        }

    def __str__(self) -> str:
        """Human-readable summary."""
        lines = [
            "=== Graph Statistics ===",
            f"Files: {self.total_files} scanned, {len(self.skipped_files)} skipped",
            f"Libraries: {self.total_libraries}",
            f"Dependency edges: {self.total_edges}",
            f"Unscanned dependencies: {len(self.dangling_references)}"
        ]

        if self.duplicate_names:
            lines.append(f"Duplicate library names: {', '.join(self.duplicate_names)}")

        if self.skipped_files:
            lines.extend(["", "Skipped files:"])
            for path in self.skipped_files:
                lines.append(f"  {path}")

        return "\n".join(lines)


class GraphBuilder:
    """Walks a search path and builds the dependency graph of its libraries."""

    def __init__(
        self,
        search_path: Path,
        extractor: Optional[BaseExtractor] = None,
        config: Optional[Config] = None
    ):
        """Initialize the graph builder.

        Args:
            search_path: Root directory to scan for shared libraries
            extractor: Dependency extractor, defaults to a readelf extractor
            config: Optional configuration
        """
        self.search_path = Path(search_path)
        self.config = config or Config()
        self.logger = get_logger("graph_builder")

        self.library_suffix = self.config.library_suffix
        self.skip_invalid = self.config.skip_invalid

        if extractor is None:
            extractor = ReadelfExtractor(
                readelf_path=self.config.get("extractor.readelf_path", "readelf"),
                timeout=self.config.get("extractor.timeout")
            )
        self.extractor = extractor

        self.graph = DependencyGraph()

    def scan_files(self) -> list[Path]:
        """Walk the search path for shared-library files.

        Symlinked directories are not descended into; symlinked files are
        returned like regular files.

        Returns:
            Candidate files, in walk order with names sorted per directory

        Raises:
            ScanError: The search path is missing or a directory can't be read
        """
        if not self.search_path.exists():
            raise ScanError("Search path does not exist", self.search_path)
        if not self.search_path.is_dir():
            raise ScanError("Search path is not a directory", self.search_path)

        def _raise(error: OSError) -> None:
            raise ScanError(error.strerror or str(error), error.filename) from error

        files = []
        for dirpath, dirnames, filenames in os.walk(self.search_path, onerror=_raise):
            dirnames.sort()
            for filename in sorted(filenames):
                if filename.endswith(self.library_suffix):
                    files.append(Path(dirpath) / filename)

        return files

    def build_graph(self, files: Optional[list[Path]] = None) -> GraphStatistics:
        """Build the dependency graph from library files.

        Args:
            files: Optional list of files to inspect. If None, scans the search path.

        Returns:
            Statistics about the built graph

        Raises:
            ScanError: The search path can't be walked
            ExtractionError: A file can't be inspected and skipping is disabled
        """
        if files is None:
            files = self.scan_files()

        self.graph = DependencyGraph()
        stats = GraphStatistics()
        stats.total_files = len(files)

        self.logger.info(f"Building graph from {len(files)} files under {self.search_path}...")

        for file_path in map(Path, files):
            try:
                dependencies = self.extractor.extract_dependencies(file_path)
            except ExtractionError as e:
                if not self.skip_invalid:
                    raise
                self.logger.warning(f"Skipping {file_path}: {e.message}")
                stats.skipped_files.append(str(file_path))
                continue

            name = file_path.name
            previous = self.graph.file_path_of(name)
            if previous is not None:
                self.logger.warning(f"{name} found at {previous} and {file_path}, keeping {file_path}")
                stats.duplicate_names.append(name)

            self.logger.debug(f"{name}: {', '.join(dependencies) or '(no dependencies)'}")
            self.graph.add_library(name, dependencies, str(file_path))

        self.graph.freeze()

        stats.total_libraries = len(self.graph)
        stats.total_edges = self.graph.edge_count
        stats.dangling_references = self.graph.dangling_references()

        self.logger.info(f"Graph built: {stats.total_libraries} libraries, {stats.total_edges} edges")

        return stats
