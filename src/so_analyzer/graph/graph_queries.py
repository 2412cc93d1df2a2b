"""Graph query system for dependency paths and dependency trees."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .dependency_graph import DependencyGraph


PATH_SEPARATOR = " -> "
INDENT = "  "
CYCLE_MARKER = " (cycle)"
TRUNCATED_MARKER = " ..."


@dataclass
class PathResult:
    """Result of a path query."""
    source: str
    target: str
    found: bool = False
    path: list[str] = field(default_factory=list)

    @property
    def hops(self) -> int:
        """Number of dependency edges on the path."""
        return max(len(self.path) - 1, 0)

    def format(self) -> str:
        """Format path result for display."""
        if not self.found:
            return f"No dependency path found from {self.source} to {self.target}"
        return PATH_SEPARATOR.join(self.path)


@dataclass
class TreeNode:
    """A library in a dependency tree."""
    name: str
    depth: int
    children: list["TreeNode"] = field(default_factory=list)
    cycle: bool = False
    truncated: bool = False

    def walk(self) -> Iterator["TreeNode"]:
        """Iterate the tree in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass
class TreeResult:
    """Result of a dependency tree query."""
    root: TreeNode

    @property
    def cycles(self) -> list[str]:
        """Names where a dependency cycle was cut off."""
        return [node.name for node in self.root.walk() if node.cycle]

    def lines(self) -> list[str]:
        """One line per node, indented two spaces per level."""
        return [
            f"{INDENT * node.depth}{node.name}{self._marker(node)}"
            for node in self.root.walk()
        ]

    @staticmethod
    def _marker(node: TreeNode) -> str:
        if node.cycle:
            return CYCLE_MARKER
        if node.truncated:
            return TRUNCATED_MARKER
        return ""

    def format(self) -> str:
        """Format tree result for display."""
        return "\n".join(self.lines())


class GraphQueries:
    """Query engine for the dependency graph."""

    def __init__(self, graph: DependencyGraph):
        self.graph = graph

    def find_path(self, source: str, target: str) -> PathResult:
        """Find a dependency path from one library to another.

        Depth-first, dependencies visited in declaration order. The first
        path found is returned, which is not necessarily the shortest.

        Args:
            source: Library the path starts at (the depender)
            target: Library the path ends at (the dependee)

        Returns:
            PathResult, with the path from source to target when one exists
        """
        result = PathResult(source=source, target=target)

        path = self._search(source, target)
        if path is not None:
            result.found = True
            result.path = path

        return result

    def _search(self, source: str, target: str) -> Optional[list[str]]:
        if source == target:
            return [source]

        visited = {source}
        path = [source]
        # One iterator of pending dependencies per library on the path
        pending = [iter(self.graph.dependencies_of(source))]

        while pending:
            for dependency in pending[-1]:
                if dependency in visited:
                    continue
                if dependency == target:
                    return path + [target]
                visited.add(dependency)
                path.append(dependency)
                pending.append(iter(self.graph.dependencies_of(dependency)))
                break
            else:
                pending.pop()
                path.pop()

        return None

    def dependency_tree(self, root: str, max_depth: Optional[int] = None) -> TreeResult:
        """Enumerate every transitive dependency of a library.

        A library already on the current branch is reported as a cycle and
        not expanded again. Libraries shared by separate branches are
        expanded under each of them.

        Args:
            root: Library to start from
            max_depth: Deepest level that is expanded, None for no limit

        Returns:
            TreeResult rooted at the library
        """
        root_node = TreeNode(name=root, depth=0)
        branch: set[str] = set()
        pending: list[tuple[TreeNode, Iterator[str]]] = []
        self._open(root_node, branch, pending, max_depth)

        while pending:
            parent, dependencies = pending[-1]
            dependency = next(dependencies, None)
            if dependency is None:
                pending.pop()
                branch.discard(parent.name)
                continue

            child = TreeNode(name=dependency, depth=parent.depth + 1)
            parent.children.append(child)
            self._open(child, branch, pending, max_depth)

        return TreeResult(root=root_node)

    def _open(
        self,
        node: TreeNode,
        branch: set[str],
        pending: list[tuple[TreeNode, Iterator[str]]],
        max_depth: Optional[int]
    ) -> None:
        """Queue the dependencies of a node unless it closes a cycle or is too deep."""
        if node.name in branch:
            node.cycle = True
            return

        dependencies = self.graph.dependencies_of(node.name)
        if max_depth is not None and node.depth >= max_depth:
            node.truncated = bool(dependencies)
            return

        branch.add(node.name)
        pending.append((node, iter(dependencies)))
