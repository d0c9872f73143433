"""
Tests for the command-line entry point
"""

import os
import sys

import pytest

import main as launcher
from cli import main, UsageError
from cli import cli_entry

from .conftest import all_paths


class TestUsage:
    """Missing or invalid arguments"""

    @pytest.mark.parametrize("argv", [[], ["./somewhere"]])
    def test_missing_arguments(self, argv, capsys):
        assert main(argv) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "usage: style-rename" in captured.err
        assert "Styles: title_underscore, snake, kebab, camel, pascal, upper, lower" in captured.err

    def test_unknown_style(self, mixed_tree, capsys):
        before = all_paths(mixed_tree)
        assert main([str(mixed_tree), "shouting"]) == 1

        assert "Unknown style: shouting" in capsys.readouterr().err
        assert all_paths(mixed_tree) == before

    def test_validate_args_raises_usage_error(self):
        args = cli_entry.create_parser().parse_args(["./somewhere"])
        with pytest.raises(UsageError):
            cli_entry.validate_args(args)


class TestRename:
    """Dry run and real run output"""

    @pytest.mark.parametrize("flag", ["--dry", "-n"])
    def test_dry_run(self, mixed_tree, flag, capsys):
        before = all_paths(mixed_tree)
        assert main([str(mixed_tree), "kebab", flag]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Dry run - would rename 5 items:"
        assert len(lines) == 6
        assert all(line.startswith("  ") and " → " in line for line in lines[1:])
        assert all_paths(mixed_tree) == before

    def test_real_run(self, mixed_tree, capsys):
        assert main([str(mixed_tree), "kebab"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Renamed 5 items:\n")
        assert f"  {mixed_tree / 'File One.txt'} → {mixed_tree / 'file-one.txt'}" in out
        assert (mixed_tree / "nested-dir" / "deep-directory" / "inner-file.md").exists()

    def test_nothing_to_rename(self, tmp_path, capsys):
        assert main([str(tmp_path), "snake"]) == 0
        assert capsys.readouterr().out == "Renamed 0 items:\n"

    def test_ignore_and_skip_hidden(self, tmp_path, capsys):
        (tmp_path / "node_modules" / "Some Package").mkdir(parents=True)
        (tmp_path / ".Hidden File.txt").write_text("x")
        (tmp_path / "Plain File.txt").write_text("x")

        assert main([str(tmp_path), "snake", "--ignore", "node_modules", "--skip-hidden"]) == 0

        assert capsys.readouterr().out.startswith("Renamed 1 items:")
        assert (tmp_path / "node_modules" / "Some Package").exists()
        assert (tmp_path / ".Hidden File.txt").exists()
        assert (tmp_path / "plain_file.txt").exists()


class TestErrors:
    """Filesystem errors at the CLI boundary"""

    def test_missing_root(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing"), "kebab"]) == 1

        captured = capsys.readouterr()
        assert captured.err.startswith("Error: ")
        assert captured.out == ""

    def test_unexpected_error(self, mixed_tree, monkeypatch, capsys):
        def explode(*args, **kwargs):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(cli_entry, "rename_recursive", explode)

        assert main([str(mixed_tree), "kebab"]) == 1
        assert capsys.readouterr().err == "Error: maximum recursion depth exceeded\n"

    @pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="needs a filesystem accepting non-UTF-8 names")
    def test_undecodable_name_is_reported(self, tmp_path, capsys):
        try:
            with open(os.path.join(os.fsencode(tmp_path), b"Bad\xffName.txt"), "w") as f:
                f.write("x")
        except (OSError, UnicodeError):
            pytest.skip("filesystem rejects non-UTF-8 names")

        assert main([str(tmp_path), "kebab"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Renamed 1 items:\n")
        assert "Bad\ufffdName.txt → " in out
        assert os.listdir(tmp_path) == ["bad-name.txt"]


class TestInteractiveFlag:
    """--interactive starts the session"""

    def test_interactive(self, monkeypatch):
        monkeypatch.setattr(cli_entry, "interactive_mode", lambda: 0)
        assert main(["--interactive"]) == 0


class TestLauncher:
    """main.py forwards --cli / -c to the command line"""

    @pytest.mark.parametrize("flag", ["--cli", "-c"])
    def test_cli_flag_forwards_arguments(self, mixed_tree, flag, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", flag, str(mixed_tree), "kebab", "--dry"])

        assert launcher.main() == 0
        assert capsys.readouterr().out.startswith("Dry run - would rename 5 items:")

    def test_cli_flag_usage_error(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "-c"])

        assert launcher.main() == 1
        assert "usage: style-rename" in capsys.readouterr().err

    def test_gui_unavailable(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py"])
        monkeypatch.setitem(sys.modules, "gui", None)

        assert launcher.main() == 1
        assert "pip install PySide6" in capsys.readouterr().err
