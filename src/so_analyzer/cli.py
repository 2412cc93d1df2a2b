"""Shared-library dependency analyzer - Command Line Interface.

Scans a directory of shared libraries and either prints a dependency path
between two libraries or the full dependency tree of one library.
"""

import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .exceptions import SoAnalyzerError
from .graph.graph_builder import GraphBuilder, GraphStatistics
from .graph.graph_queries import GraphQueries
from .utils.config import Config
from .utils.logger import setup_from_config


# Library names are printed as-is, so no :emoji: codes
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


def _load_config(config_path: Optional[Path], suffix: Optional[str], skip_invalid: bool) -> Config:
    """Load the optional config file and apply command-line overrides."""
    cfg = Config.from_file(config_path) if config_path else Config()

    if suffix:
        cfg.set("scan.library_suffix", suffix)
    if skip_invalid:
        cfg.set("scan.on_extraction_error", "skip")

    return cfg


def _display_statistics(stats: GraphStatistics) -> None:
    """Display graph statistics in a table."""
    table = Table(title="Graph Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Files scanned", str(stats.total_files))
    table.add_row("Files skipped", str(len(stats.skipped_files)))
    table.add_row("Libraries", str(stats.total_libraries))
    table.add_row("Dependency edges", str(stats.total_edges))
    table.add_row("Unscanned dependencies", str(len(stats.dangling_references)))
    table.add_row("Duplicate library names", str(len(stats.duplicate_names)))

    err_console.print(table)


def _emit(text: str) -> None:
    """Print query output verbatim."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--search-path",
    required=True,
    type=click.Path(path_type=Path),
    help="Directory to scan for shared libraries"
)
@click.option("--depender", help="Library the dependency path starts at")
@click.option("--dependee", help="Library the dependency path ends at")
@click.option(
    "--show-dependence-of",
    "show_dependence_of",
    help="Print the dependency tree of this library"
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Stop expanding the dependency tree below this depth"
)
@click.option(
    "--skip-invalid",
    is_flag=True,
    help="Skip files that cannot be inspected instead of aborting"
)
@click.option("--suffix", default=None, help="Shared library file suffix (default: .so)")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file"
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, search_path, depender, dependee, show_dependence_of, max_depth,
        skip_invalid, suffix, config_path, verbose):
    """Analyze dependencies between shared libraries.

    Example:
        so-deps --search-path /opt/app/lib --depender libapp.so --dependee libz.so
        so-deps --search-path /opt/app/lib --show-dependence-of libapp.so
    """
    if not show_dependence_of and not (depender and dependee):
        raise click.UsageError(
            "Specify --depender and --dependee, or --show-dependence-of", ctx=ctx
        )

    try:
        cfg = _load_config(config_path, suffix, skip_invalid)
        setup_from_config(cfg, verbose)

        builder = GraphBuilder(search_path, config=cfg)
        with err_console.status("[bold blue]Building graph...[/bold blue]"):
            stats = builder.build_graph()
    except (SoAnalyzerError, ValueError, OSError, yaml.YAMLError) as e:
        console.print(f"[red]Error collecting dependencies:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    if verbose:
        _display_statistics(stats)

    queries = GraphQueries(builder.graph)

    if show_dependence_of:
        result = queries.dependency_tree(show_dependence_of, max_depth=max_depth)
    else:
        result = queries.find_path(depender, dependee)

    _emit(result.format())


if __name__ == "__main__":
    cli()
