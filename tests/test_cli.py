"""Tests for the command-line interface (end-to-end with a fake readelf)."""

import pytest
from click.testing import CliRunner

from so_analyzer.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def chain_tree(library_tree, fake_readelf):
    """a.so -> b.so -> c.so, plus an unrelated d.so."""
    return library_tree({
        "a.so": ["b.so"],
        "lib/b.so": ["c.so"],
        "lib/c.so": ["libc.so.6"],
        "d.so": [],
        "README": []
    })


class TestCLI:
    """Test CLI functionality."""

    def test_path_found(self, runner, chain_tree):
        result = runner.invoke(cli, [
            "--search-path", str(chain_tree), "--depender", "a.so", "--dependee", "c.so"
        ])

        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "a.so -> b.so -> c.so"

    def test_path_not_found_is_not_an_error(self, runner, chain_tree):
        result = runner.invoke(cli, [
            "--search-path", str(chain_tree), "--depender", "a.so", "--dependee", "d.so"
        ])

        assert result.exit_code == 0
        assert result.stdout.strip() == "No dependency path found from a.so to d.so"

    def test_show_tree(self, runner, chain_tree):
        result = runner.invoke(cli, ["--search-path", str(chain_tree), "--show-dependence-of", "a.so"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["a.so", "  b.so", "    c.so", "      libc.so.6"]

    def test_show_tree_wins_over_path_query(self, runner, chain_tree):
        result = runner.invoke(cli, [
            "--search-path", str(chain_tree),
            "--depender", "a.so", "--dependee", "c.so",
            "--show-dependence-of", "b.so"
        ])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["b.so", "  c.so", "    libc.so.6"]

    def test_show_tree_max_depth(self, runner, chain_tree):
        result = runner.invoke(cli, [
            "--search-path", str(chain_tree), "--show-dependence-of", "a.so", "--max-depth", "1"
        ])

        assert result.stdout.splitlines() == ["a.so", "  b.so ..."]

    def test_cyclic_tree_terminates(self, runner, library_tree, fake_readelf):
        root = library_tree({"a.so": ["b.so"], "b.so": ["a.so"]})

        result = runner.invoke(cli, ["--search-path", str(root), "--show-dependence-of", "a.so"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["a.so", "  b.so", "    a.so (cycle)"]

    def test_missing_search_path_option(self, runner):
        result = runner.invoke(cli, ["--show-dependence-of", "a.so"])

        assert result.exit_code != 0
        assert "--search-path" in result.output

    def test_no_query_mode(self, runner, chain_tree, fake_readelf):
        result = runner.invoke(cli, ["--search-path", str(chain_tree)])

        assert result.exit_code == 2
        assert "Usage:" in result.output
        assert fake_readelf == []

    def test_depender_without_dependee(self, runner, chain_tree, fake_readelf):
        result = runner.invoke(cli, ["--search-path", str(chain_tree), "--depender", "a.so"])

        assert result.exit_code == 2
        assert fake_readelf == []

    def test_nonexistent_search_path(self, runner, tmp_path):
        result = runner.invoke(cli, [
            "--search-path", str(tmp_path / "missing"), "--show-dependence-of", "a.so"
        ])

        assert result.exit_code == 1
        assert "Search path does not exist" in result.stdout

    def test_invalid_binary_aborts(self, runner, library_tree, fake_readelf):
        root = library_tree({"a.so": ["b.so"], "b.so": "CORRUPT"})

        result = runner.invoke(cli, ["--search-path", str(root), "--show-dependence-of", "a.so"])

        assert result.exit_code == 1
        assert "Error collecting dependencies" in result.stdout
        assert "a.so\n" not in result.stdout

    def test_skip_invalid(self, runner, library_tree, fake_readelf):
        root = library_tree({"a.so": ["b.so"], "b.so": "CORRUPT"})

        result = runner.invoke(cli, [
            "--search-path", str(root), "--show-dependence-of", "a.so", "--skip-invalid"
        ])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["a.so", "  b.so"]

    def test_config_file(self, runner, library_tree, fake_readelf, tmp_path):
        root = library_tree({"a.so": ["b.so"], "b.so": "CORRUPT"})
        config_file = tmp_path / "config.yaml"
        config_file.write_text("scan:\n  on_extraction_error: skip\n")

        result = runner.invoke(cli, [
            "--search-path", str(root), "--show-dependence-of", "a.so", "--config", str(config_file)
        ])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["a.so", "  b.so"]

    def test_suffix_option(self, runner, library_tree, fake_readelf):
        root = library_tree({"liba.dylib": ["libb.dylib"], "libb.dylib": ["libz.dylib"]})

        result = runner.invoke(cli, [
            "--search-path", str(root), "--suffix", ".dylib",
            "--depender", "liba.dylib", "--dependee", "libz.dylib"
        ])

        assert result.stdout.strip() == "liba.dylib -> libb.dylib -> libz.dylib"

    def test_verbose_keeps_stdout_clean(self, runner, chain_tree):
        result = runner.invoke(cli, [
            "--search-path", str(chain_tree), "--depender", "a.so", "--dependee", "c.so", "-v"
        ])

        assert result.exit_code == 0
        assert result.stdout.strip() == "a.so -> b.so -> c.so"
        assert "Graph Statistics" in result.stderr

    def test_names_with_emoji_codes_printed_verbatim(self, runner, library_tree, fake_readelf):
        root = library_tree({"a.so": ["lib:smile:.so"], "lib:smile:.so": ["lib:+1:.so"]})

        tree = runner.invoke(cli, ["--search-path", str(root), "--show-dependence-of", "a.so"])
        path = runner.invoke(cli, [
            "--search-path", str(root), "--depender", "a.so", "--dependee", "lib:+1:.so"
        ])

        assert tree.stdout.splitlines() == ["a.so", "  lib:smile:.so", "    lib:+1:.so"]
        assert path.stdout.strip() == "a.so -> lib:smile:.so -> lib:+1:.so"

    def test_error_message_printed_verbatim(self, runner, tmp_path):
        missing = tmp_path / ":smile:"

        result = runner.invoke(cli, ["--search-path", str(missing), "--show-dependence-of", "a.so"])

        assert result.exit_code == 1
        assert str(missing) in result.stdout

    def test_verbose_reports_duplicate_names(self, runner, library_tree, fake_readelf):
        root = library_tree({"one/a.so": ["b.so"], "two/a.so": ["c.so"]})

        result = runner.invoke(cli, [
            "--search-path", str(root), "--show-dependence-of", "a.so", "-v"
        ])

        assert result.stdout.splitlines() == ["a.so", "  c.so"]
        assert "Duplicate library names" in result.stderr
