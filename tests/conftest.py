"""Shared test fixtures for ttyper."""

import os
import subprocess
import sys
from pathlib import Path

import pytest


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temporary path.

    Returns:
        Path to the temporary config directory.
    """
    monkeypatch.setenv("TTYPER_CONFIG_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_config(config_dir: Path):
    """Write text to config.toml in the temporary config directory.

    Returns:
        Function taking the file contents and returning the file path.
    """

    def _write(text: str) -> Path:
        path = config_dir / "config.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def captured_logs():
    """Capture log messages emitted through loguru.

    Returns:
        List that receives each formatted message.
    """
    from loguru import logger

    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(sink_id)


NO_HOME_PRELUDE = """
import pathlib


def _no_home(cls):
    raise RuntimeError("Could not determine home directory.")


pathlib.Path.home = classmethod(_no_home)
"""


@pytest.fixture
def run_without_home():
    """Run Python code in a fresh interpreter where Path.home() fails.

    The package is imported from scratch, so module-level code runs without
    a home directory too.

    Returns:
        Function taking the code and extra environment variables and
        returning the completed process.
    """
    project_root = Path(__file__).resolve().parents[1]

    def _run(code: str, **env: str) -> subprocess.CompletedProcess[str]:
        child_env = {
            key: value
            for key, value in os.environ.items()
            if key not in ("TTYPER_CONFIG_DIR", "TTYPER_LOG_DIR", "XDG_CONFIG_HOME")
        }
        child_env.update(env)
        return subprocess.run(
            [sys.executable, "-c", NO_HOME_PRELUDE + code],
            cwd=project_root,
            env=child_env,
            capture_output=True,
            text=True,
            check=False,
        )

    return _run
