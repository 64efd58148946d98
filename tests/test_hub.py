import io

import pytest

from treasurehunt.hub import MONITOR_MESSAGE, Hub, Monitor, main


def test_list_without_monitor():
    out = io.StringIO()
    hub = Hub(stdout=out)
    hub.handle("list_treasures")
    assert out.getvalue() == "No monitor started yet!\n"


def test_start_and_list():
    out, monitor_out = io.StringIO(), io.StringIO()
    hub = Hub(stdout=out, monitor=Monitor(monitor_out))
    try:
        hub.handle("start_monitor")
        hub.handle("list_treasures")
        hub.handle("list_treasures")
    finally:
        hub.monitor.stop()
    assert out.getvalue() == "Monitor successfully started!\n"
    assert monitor_out.getvalue() == MONITOR_MESSAGE * 2


def test_second_start_is_refused():
    out = io.StringIO()
    hub = Hub(stdout=out, monitor=Monitor(io.StringIO()))
    try:
        hub.handle("start_monitor")
        hub.handle("start_monitor")
    finally:
        hub.monitor.stop()
    assert out.getvalue().endswith("There's a monitor opened already!")


def test_unknown_command_prints_nothing():
    out = io.StringIO()
    Hub(stdout=out).handle("dance")
    assert out.getvalue() == ""


def test_monitor_lifecycle():
    monitor = Monitor(io.StringIO())
    assert monitor.running is False
    monitor.start()
    assert monitor.running is True
    with pytest.raises(RuntimeError):
        monitor.start()
    monitor.stop()
    assert monitor.running is False
    with pytest.raises(RuntimeError):
        monitor.list_treasures()


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin",
        io.StringIO("list_treasures start_monitor\nlist_treasures start_monitor\n"),
    )
    assert main([]) == 255
    out = capsys.readouterr().out
    assert out.count("Enter comand: ") == 5
    assert "No monitor started yet!\n" in out
    assert "Monitor successfully started!\n" in out
    assert MONITOR_MESSAGE in out
    assert "There's a monitor opened already!" in out