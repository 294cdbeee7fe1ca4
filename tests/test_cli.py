"""
Tests for the ticker demo CLI.
"""

import pytest

from eventbus.cli import TICK_EVENT, main, run_ticker
from eventbus.events import Event, EventBus


def test_run_ticker_prints_ticks(capsys):
    ticker = run_ticker(EventBus(), count=3, interval=0)

    assert ticker.ticks == 4
    out = capsys.readouterr().out.splitlines()
    assert out == ["Tock!, 32", "Tock!, 0", "Tock!, 1", "Tock!, 2"]


def test_ticker_rejects_non_int_payload():
    bus = EventBus()
    run_ticker(bus, count=0, interval=0)
    with pytest.raises(TypeError):
        bus.post(Event(TICK_EVENT, "late"))


def test_main(capsys, monkeypatch):
    monkeypatch.delenv("EVENTBUS_LOG_JSON", raising=False)
    exit_code = main(["--count", "2", "--interval", "0"])

    assert exit_code == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["Tock!, 32", "Tock!, 0", "Tock!, 1"]
    assert "ticker_finished" in captured.err


def test_main_json_logs(capsys):
    assert main(["--count", "0", "--interval", "0", "--json-logs"]) == 0
    assert capsys.readouterr().out == "Tock!, 32\n"


def test_main_handler_failure(capsys, monkeypatch):
    def boom(self, event):
        raise RuntimeError("broken ticker")

    monkeypatch.setattr("eventbus.cli.Ticker.call", boom)
    assert main(["--count", "1", "--interval", "0"]) == 1
    assert "Error when posting event: TickEvent" in capsys.readouterr().err


def test_main_rejects_negative_count():
    with pytest.raises(SystemExit) as exc:
        main(["--count", "-1"])
    assert exc.value.code == 2


def test_main_reports_malformed_env(capsys, monkeypatch):
    monkeypatch.setenv("EVENTBUS_TICK_COUNT", "ten")

    assert main(["--count", "0", "--interval", "0"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "EVENTBUS_TICK_COUNT must be int, got 'ten'" in captured.err
