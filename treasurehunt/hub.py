"""Interactive hub that runs a background treasure monitor."""

from __future__ import annotations

import queue
import sys
import threading
from typing import Iterator, List, Optional, TextIO

MONITOR_MESSAGE = "\nChild: Received signal to list treasures!\n"
_LIST = "list"
_STOP = "stop"
_TOKEN_LIMIT = 99


class Monitor:
    """A background worker that reacts to list requests."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self._output = output
        self._requests: "queue.Queue[str]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        while True:
            request = self._requests.get()
            try:
                if request == _STOP:
                    return
                out = self._output or sys.stdout
                out.write(MONITOR_MESSAGE)
                out.flush()
            finally:
                self._requests.task_done()

    def start(self) -> None:
        """Start the monitor; it must not already be running."""
        if self.running:
            raise RuntimeError("monitor already running")
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def list_treasures(self) -> None:
        """Ask the running monitor to list treasures and wait until it has."""
        if not self.running:
            raise RuntimeError("no monitor started")
        self._requests.put(_LIST)
        self._requests.join()

    def stop(self) -> None:
        """Stop the monitor if it is running."""
        if not self.running:
            return
        self._requests.put(_STOP)
        assert self._thread is not None
        self._thread.join()
        self._thread = None


class Hub:
    """Dispatches hub commands to a monitor."""

    def __init__(self, stdout: Optional[TextIO] = None, monitor: Optional[Monitor] = None) -> None:
        self._stdout = stdout
        self.monitor = monitor or Monitor()

    def _write(self, text: str) -> None:
        out = self._stdout or sys.stdout
        out.write(text)
        out.flush()

    def handle(self, command: str) -> None:
        """Carry out one command; unknown commands are ignored."""
        if command == "start_monitor":
            if self.monitor.running:
                self._write("There's a monitor opened already!")
                return
            self.monitor.start()
            self._write("Monitor successfully started!\n")
        elif command == "list_treasures":
            if self.monitor.running:
                self.monitor.list_treasures()
            else:
                self._write("No monitor started yet!\n")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        for word in line.split():
            chunks: List[str] = [
                word[start:start + _TOKEN_LIMIT] for start in range(0, len(word), _TOKEN_LIMIT)
            ]
            yield from chunks


def main(argv: Optional[List[str]] = None) -> int:
    """Read commands until input ends; end of input is a failure exit."""
    hub = Hub()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            sys.stdout.write("Enter comand: ")
            sys.stdout.flush()
            command = next(tokens, None)
            if command is None:
                return 255
            hub.handle(command)
    finally:
        hub.monitor.stop()