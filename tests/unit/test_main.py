"""Tests for the __main__ entry point."""

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest


class TestGetVersion:
    """Tests for the get_version() function."""

    def test_get_version_returns_string(self) -> None:
        """Test that get_version returns a non-empty string."""
        from ttyper.__main__ import get_version

        version = get_version()
        assert isinstance(version, str)
        assert len(version) > 0

    def test_get_version_handles_error(self) -> None:
        """Test that get_version returns 'unknown' on error."""
        with patch("ttyper.__main__.version", side_effect=Exception("Test error")):
            from ttyper.__main__ import get_version

            assert get_version() == "unknown"


class TestParseArgs:
    """Tests for the parse_args() function."""

    def test_defaults(self) -> None:
        """Test that no arguments give the default options."""
        from ttyper.__main__ import parse_args

        args = parse_args([])
        assert isinstance(args, argparse.Namespace)
        assert args.config_file is None
        assert args.verbose is False

    def test_config_file(self) -> None:
        """Test that --config-file is parsed as a path."""
        from ttyper.__main__ import parse_args

        args = parse_args(["--config-file", "/tmp/ttyper.toml"])
        assert args.config_file == Path("/tmp/ttyper.toml")

    def test_short_flags(self) -> None:
        """Test that -c and -v are accepted."""
        from ttyper.__main__ import parse_args

        args = parse_args(["-c", "custom.toml", "-v"])
        assert args.config_file == Path("custom.toml")
        assert args.verbose is True


class TestMain:
    """Tests for the main() function."""

    def test_prints_defaults_when_file_missing(self, config_dir: Path, capsys) -> None:
        """Test that defaults are printed when no config file exists."""
        from ttyper.__main__ import main

        assert main([]) == 0
        out = capsys.readouterr().out
        assert "extended-grapheme-clusters" in out
        assert "max_misalignment=8" in out

    def test_prints_loaded_values(self, write_config, capsys) -> None:
        """Test that values from the config file are printed."""
        from ttyper.__main__ import main

        path = write_config("max_misalignment = 3\n")
        assert main(["--config-file", str(path)]) == 0
        assert "max_misalignment=3" in capsys.readouterr().out

    def test_broken_file_returns_error(self, write_config, capsys) -> None:
        """Test that a broken config file prints an error and returns 1."""
        from ttyper.__main__ import main

        path = write_config("max_misalignment = \n")
        assert main(["-c", str(path)]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_verbose_enables_stderr_logging(self, config_dir: Path) -> None:
        """Test that --verbose turns on stderr logging."""
        with patch("ttyper.__main__.enable_stderr_logging") as mock_enable:
            from ttyper.__main__ import main

            main(["--verbose"])
            mock_enable.assert_called_once()


class TestRunFunction:
    """Tests for the run() function."""

    def test_run_exits_with_main_code(self) -> None:
        """Test that run() exits with the code returned by main()."""
        with patch("ttyper.__main__.main", return_value=0) as mock_main:
            from ttyper.__main__ import run

            with pytest.raises(SystemExit) as exc_info:
                run()
            mock_main.assert_called_once()
            assert exc_info.value.code == 0

    def test_run_handles_exception(self) -> None:
        """Test that run() prints a traceback and exits with code 1."""
        with (
            patch("ttyper.__main__.main", side_effect=RuntimeError("Test error")),
            patch("ttyper.__main__.traceback.print_exc") as mock_traceback,
        ):
            from ttyper.__main__ import run

            with pytest.raises(SystemExit) as exc_info:
                run()
            mock_traceback.assert_called_once()
            assert exc_info.value.code == 1
