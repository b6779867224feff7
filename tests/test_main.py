# tests/test_main.py

from __future__ import annotations

import io
import logging
import re
from pathlib import Path

import pytest

from task_tracker.cli import main as cli_main
from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


def test_main_runs_menu_over_stdin(monkeypatch: pytest.MonkeyPatch, capsys, settings) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kw: calls.append(kw))
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nWrite report\n2\n5\n"))

    cli_main.main()

    out = capsys.readouterr().out
    assert "Task added." in out
    assert re.search(r"\d+ \| ○ Write report$", out, re.MULTILINE)
    assert out.rstrip().endswith("Goodbye!")
    assert calls == [{"console_level": logging.WARNING, "log_file": None}]


def test_main_exits_on_closed_stdin(monkeypatch: pytest.MonkeyPatch, capsys, settings) -> None:
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kw: None)
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    cli_main.main()

    assert capsys.readouterr().out.rstrip().endswith("Goodbye!")


def test_create_initial_state_uses_fresh_store(settings) -> None:
    a = create_initial_state(settings=settings)
    b = create_initial_state(settings=settings)

    a.task_store.add("only in a")

    assert a.settings is settings
    assert len(a.task_store) == 1
    assert len(b.task_store) == 0


def test_console_filter_keeps_app_logs_and_hides_library_noise() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("task_tracker.tasks.task_store", logging.DEBUG))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
    assert not f.filter(rec("py.warnings", logging.WARNING))


def test_setup_logging_writes_optional_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    log_file = tmp_path / "logs" / "tasks.log"
    try:
        setup_logging(console_level=logging.ERROR, log_file=log_file)
        logging.getLogger("task_tracker.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)
