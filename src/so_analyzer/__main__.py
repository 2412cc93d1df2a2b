"""Allow running the analyzer with ``python -m so_analyzer``."""

from .cli import cli

if __name__ == "__main__":
    cli()
