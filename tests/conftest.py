import logging
import os
import sys
import pytest


@pytest.fixture(autouse=True)
def clean_env_and_modules(monkeypatch, tmp_path):
    """
    Ensure tests don't leak env, logger state, or log files into the repo.
    """

    for k in list(os.environ):
        if k.startswith("SESSIONLOG_"):
            monkeypatch.delenv(k, raising=False)

    # Relative ./log defaults land in the test's tmp dir
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger("sessionlog")
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    # Force re-import of env + logger modules
    for mod in [
        "env",
        "env.env",
        "bootstrap",
        "logger",
        "logger.state",
        "logger.levels",
        "logger.formatting",
        "logger.file",
        "logger.console",
        "logger.retention",
        "sessionlog",
        "cli",
        "cli.common",
        "cli.cli_env",
        "cli.cli_logs",
    ]:
        sys.modules.pop(mod, None)

    yield

    # .env loading writes straight into os.environ
    for k in list(os.environ):
        if k.startswith("SESSIONLOG_"):
            os.environ.pop(k, None)

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()


@pytest.fixture
def write_logs():
    def _write(directory, *names):
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_text("x", encoding="utf-8")

    return _write
