"""Dependency graph model, builder and queries."""

from .dependency_graph import DependencyGraph
from .graph_builder import GraphBuilder, GraphStatistics
from .graph_queries import GraphQueries, PathResult, TreeNode, TreeResult

__all__ = [
    "DependencyGraph",
    "GraphBuilder",
    "GraphStatistics",
    "GraphQueries",
    "PathResult",
    "TreeNode",
    "TreeResult"
]
