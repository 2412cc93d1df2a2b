"""Shared fixtures: fake library trees and a stand-in for readelf."""

import subprocess
from pathlib import Path

import pytest

from so_analyzer.graph.dependency_graph import DependencyGraph


READELF_HEADER = """
Dynamic section at offset 0x2dd8 contains 26 entries:
  Tag        Type                         Name/Value
"""

CORRUPT = "CORRUPT"


def readelf_output(dependencies: list[str]) -> str:
    """Render dependencies the way ``readelf -d`` prints them."""
    lines = [READELF_HEADER]
    for dep in dependencies:
        lines.append(f" 0x0000000000000001 (NEEDED)             Shared library: [{dep}]")
    lines.append(" 0x000000000000000e (SONAME)             Library soname: [libself.so]")
    lines.append(" 0x000000000000000c (INIT)               0x1000")
    return "\n".join(lines) + "\n"


@pytest.fixture
def library_tree(tmp_path):
    """Factory writing fake libraries whose content lists their dependencies.

    ``library_tree({"a.so": ["b.so"], "sub/b.so": []})`` creates the files
    and returns the root directory. A value of ``CORRUPT`` makes the fake
    readelf reject the file.
    """
    def _make(layout: dict) -> Path:
        root = tmp_path / "libs"
        root.mkdir(exist_ok=True)
        for rel_path, deps in layout.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if deps == CORRUPT:
                path.write_text(CORRUPT)
            else:
                path.write_text("\n".join(deps))
        return root

    return _make


@pytest.fixture
def fake_readelf(monkeypatch):
    """Replace ``subprocess.run`` so readelf reads the fake library files."""
    calls = []

    def _run(cmd, capture_output=False, text=False, timeout=None, env=None):
        calls.append(cmd)
        path = Path(cmd[-1])
        content = path.read_text()
        if content == CORRUPT:
            return subprocess.CompletedProcess(
                cmd, 1, stdout="", stderr="readelf: Error: Not an ELF file - it has the wrong magic bytes at the start\n"
            )
        deps = [line for line in content.splitlines() if line]
        return subprocess.CompletedProcess(cmd, 0, stdout=readelf_output(deps), stderr="")

    monkeypatch.setattr("so_analyzer.extractors.readelf_extractor.subprocess.run", _run)
    return calls


def make_graph(mapping: dict) -> DependencyGraph:
    """Build a frozen graph straight from a name -> dependencies mapping."""
    graph = DependencyGraph()
    for name, deps in mapping.items():
        graph.add_library(name, deps, f"/libs/{name}")
    return graph.freeze()


@pytest.fixture
def graph_from():
    """Expose ``make_graph`` to tests."""
    return make_graph
