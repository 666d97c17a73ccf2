"""Entry point for ttyper."""

import argparse
import sys
import traceback
from importlib.metadata import version
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty

from ttyper.config import default_config_file_path, load_config
from ttyper.errors import ConfigError
from ttyper.logger import enable_stderr_logging, get_logger

logger = get_logger(__name__)


def get_version() -> str:
    """Get the installed package version.

    Returns:
        Version string, or "unknown" if it cannot be determined.
    """
    try:
        return version("ttyper")
    except Exception:
        return "unknown"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse, defaults to sys.argv[1:].

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="ttyper",
        description="Load the ttyper configuration and show the resolved values.",
    )
    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        default=None,
        help="Path to the config file (default: platform config dir / config.toml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load the configuration and print it.

    Args:
        argv: Command line arguments.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)
    if args.verbose:
        enable_stderr_logging()

    try:
        config_file = args.config_file or default_config_file_path()
        logger.debug(f"Using config file {config_file}")
        config = load_config(config_file)
    except ConfigError as exc:
        logger.error(str(exc))
        Console(stderr=True).print(f"[bold red]Error loading config:[/bold red] {escape(str(exc))}", highlight=False)
        return 1

    Console().print(Pretty(config))
    return 0


def run() -> None:
    """Run the app with standard Python tracebacks."""
    try:
        code = main()
    except Exception:
        traceback.print_exc()
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    run()
