import logging
import re
from datetime import datetime, timezone

SESSION_NOW = datetime(2024, 5, 6, 7, 8, 9, 123000, tzinfo=timezone.utc)
SESSION_FILE = "2024-05-06T07-08-09.123Z.log"

LINE = re.compile(
    r"^\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z - (ERROR|WARN|INFO|DEBUG):\s+(.*)$"
)


def _read(path):
    return path.read_text(encoding="utf-8")


def test_logger_creates_session_files(tmp_path):
    from logger import build_logger

    log = build_logger(False, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)
    log.info("hello")

    assert log.session_file == SESSION_FILE
    for path in [
        tmp_path / "latest.log",
        tmp_path / SESSION_FILE,
        tmp_path / "debug" / "latest.log",
        tmp_path / "debug" / SESSION_FILE,
    ]:
        assert path in log.log_files
        assert "hello" in _read(path)


def test_production_skips_debug_destinations(tmp_path):
    from logger import build_logger

    log = build_logger(True, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)
    log.info("hello")

    assert not (tmp_path / "debug").exists()
    assert len(log.log_files) == 2
    assert "hello" in _read(tmp_path / "latest.log")


def test_debug_messages_only_reach_debug_files(tmp_path):
    from logger import build_logger

    log = build_logger(False, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)
    log.debug("internal detail")

    assert "internal detail" not in _read(tmp_path / "latest.log")
    assert "internal detail" not in _read(tmp_path / SESSION_FILE)
    assert "internal detail" in _read(tmp_path / "debug" / "latest.log")
    assert "internal detail" in _read(tmp_path / "debug" / SESSION_FILE)


def test_line_format(tmp_path):
    from logger import build_logger

    log = build_logger(True, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)
    log.error("boom")
    log.warn("careful")
    log.info("fine")

    lines = _read(tmp_path / "latest.log").splitlines()
    assert [LINE.match(line).groups() for line in lines] == [
        ("ERROR", "boom"),
        ("WARN", "careful"),
        ("INFO", "fine"),
    ]
    # Messages line up regardless of label width
    assert lines[0].index("boom") == lines[1].index("careful") == lines[2].index("fine")
    assert lines[0].endswith("ERROR:    boom")
    assert lines[2].endswith("INFO:     fine")


def test_startup_reports_deleted_count(tmp_path, write_logs):
    from logger import build_logger

    write_logs(
        tmp_path,
        "latest.log",
        "2023-01-01T00-00-00.000Z.log",
        "2023-01-02T00-00-00.000Z.log",
        "2023-01-03T00-00-00.000Z.log",
    )

    log = build_logger(
        False, logs_dir=tmp_path, max_saved_logs=2, quiet=True, now=SESSION_NOW
    )

    assert log.deleted == 2
    assert "Deleted 2 logs as part of cleanup" in _read(tmp_path / "debug" / "latest.log")
    assert "2023-01-03T00-00-00.000Z.log" in {p.name for p in tmp_path.iterdir()}
    assert "Deleted" not in _read(tmp_path / "latest.log")


def test_latest_log_is_rewritten_each_session(tmp_path):
    from logger import build_logger, shutdown_logging

    log = build_logger(True, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)
    log.info("first session")
    shutdown_logging()

    later = datetime(2024, 5, 7, tzinfo=timezone.utc)
    log = build_logger(True, logs_dir=tmp_path, quiet=True, now=later)
    log.info("second session")

    latest = _read(tmp_path / "latest.log")
    assert "first session" not in latest
    assert "second session" in latest
    assert "first session" in _read(tmp_path / SESSION_FILE)


def test_rebuild_replaces_handlers(tmp_path):
    from logger import build_logger

    build_logger(False, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)
    log = build_logger(False, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)

    assert len(log.logger.handlers) == 4
    assert log.logger.propagate is False


def test_console_output(capsys, tmp_path):
    from logger import build_logger

    log = build_logger(False, logs_dir=tmp_path, now=SESSION_NOW)
    log.info("hello console")
    log.debug("debug console")

    out = capsys.readouterr().out
    assert "hello console" in out
    assert "debug console" in out
    assert "INFO" in out


def test_production_console_hides_debug(capsys, tmp_path):
    from logger import build_logger

    log = build_logger(True, logs_dir=tmp_path, now=SESSION_NOW)
    log.info("visible")
    log.debug("hidden")

    out = capsys.readouterr().out
    assert "visible" in out
    assert "hidden" not in out


def test_console_does_not_interpret_markup(capsys, tmp_path):
    from logger import build_logger

    log = build_logger(True, logs_dir=tmp_path, now=SESSION_NOW)
    log.info("[bold]literal[/bold]")

    assert "[bold]literal[/bold]" in capsys.readouterr().out
    assert "[bold]literal[/bold]" in _read(tmp_path / "latest.log")


def test_root_logger_is_untouched(tmp_path):
    from logger import build_logger

    before = list(logging.getLogger().handlers)
    build_logger(False, logs_dir=tmp_path, quiet=True, now=SESSION_NOW)

    assert logging.getLogger().handlers == before


def test_console_keeps_long_messages_on_one_line(capsys, tmp_path):
    from logger import build_logger

    message = "a fairly long message that clearly exceeds the leftover width of eighty columns"

    log = build_logger(True, logs_dir=tmp_path, now=SESSION_NOW)
    log.info(message)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(message)
