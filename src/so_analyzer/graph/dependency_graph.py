"""Dependency graph model: library name to its declared dependencies."""

from typing import Iterator, Optional

import networkx as nx


class DependencyGraph:
    """Directed graph where an edge A -> B means "A declares B as NEEDED".

    Nodes for scanned libraries carry ``scanned=True`` and the path of the
    file they were read from. Dependencies that were never scanned appear as
    bare nodes (dangling references) and have no outgoing edges.

    Successor order in a ``networkx.DiGraph`` follows insertion order, so
    ``dependencies_of`` returns names in the order the binary declared them.
    """

    def __init__(self, graph: Optional[nx.DiGraph] = None):
        self.graph = graph if graph is not None else nx.DiGraph()

    def add_library(self, name: str, dependencies: list[str], file_path: str = "") -> None:
        """Record a scanned library, replacing any previous entry of the same name."""
        if name in self.graph:
            previous = list(self.graph.successors(name))
            self.graph.remove_edges_from([(name, dep) for dep in previous])
            # Drop dangling nodes that only the replaced entry referenced
            for dep in previous:
                if not self.graph.nodes[dep].get("scanned") and self.graph.in_degree(dep) == 0:
                    self.graph.remove_node(dep)

        self.graph.add_node(name, scanned=True, file_path=file_path)
        for dependency in dependencies:
            if not self.graph.has_edge(name, dependency):
                self.graph.add_edge(name, dependency)

    def dependencies_of(self, name: str) -> list[str]:
        """Declared dependencies of a library; empty for unknown or dangling names."""
        if name not in self.graph:
            return []
        return list(self.graph.successors(name))

    def file_path_of(self, name: str) -> Optional[str]:
        """Path of the file a library was read from, None if it was never scanned."""
        if name not in self:
            return None
        return self.graph.nodes[name].get("file_path")

    @property
    def libraries(self) -> list[str]:
        """Names of all scanned libraries."""
        return [n for n, scanned in self.graph.nodes(data="scanned") if scanned]

    def dangling_references(self) -> list[str]:
        """Declared dependency names that do not match any scanned library."""
        return sorted(n for n, scanned in self.graph.nodes(data="scanned") if not scanned)

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def freeze(self) -> "DependencyGraph":
        """Make the graph read-only; later mutation raises ``NetworkXError``."""
        nx.freeze(self.graph)
        return self

    @property
    def is_frozen(self) -> bool:
        return nx.is_frozen(self.graph)

    def to_dict(self) -> dict[str, list[str]]:
        """Plain mapping of scanned library name to its dependency list."""
        return {name: self.dependencies_of(name) for name in self.libraries}

    def __contains__(self, name: object) -> bool:
        return name in self.graph and bool(self.graph.nodes[name].get("scanned"))

    def __iter__(self) -> Iterator[str]:
        return iter(self.libraries)

    def __len__(self) -> int:
        return len(self.libraries)

    def __repr__(self) -> str:
        return f"DependencyGraph(libraries={len(self)}, edges={self.edge_count})"
