"""Operations on hunts: directories of treasures with an internal log."""

from __future__ import annotations

import os
import re
import shutil
import sys
import time
from typing import List, Optional, TextIO

from treasurehunt.records import (
    Treasure,
    format_treasure,
    iter_treasures,
    pack_treasure,
)

LOG_NAME = "logged_hunt.bin"
TREASURES_NAME = "treasures.bin"
TEMP_NAME = "temp.bin"
_SEPARATOR = "\n" + "-" * 94 + "\n"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class HuntError(Exception):
    """Raised when a hunt operation cannot be carried out."""


def _path(hunt_id: str, name: str) -> str:
    return os.path.join(hunt_id, name)


def symbolic_log_name(hunt_id: str) -> str:
    """Name of the link to a hunt's log kept in the working directory."""
    return f"logged_hunt_{hunt_id}.bin"


def is_directory(path: str) -> bool:
    """True if the path exists and is a directory."""
    return os.path.isdir(path)


def _require_directory(hunt_id: str) -> None:
    if not is_directory(hunt_id):
        raise HuntError(f"Couldn't open directory {hunt_id!r}")


def write_log(hunt_id: str, message: str) -> None:
    """Append a timestamped message to the hunt's internal log, which must exist."""
    stamp = time.strftime("[%Y-%m-%d %H:%M:%S]", time.localtime())
    try:
        fd = os.open(_path(hunt_id, LOG_NAME), os.O_WRONLY | os.O_APPEND)
    except OSError as exc:
        raise HuntError(f"couldn't open internal log file: {exc}") from exc
    with os.fdopen(fd, "a", encoding="utf-8") as log:
        log.write(stamp + message)


def _read_line(stdin: TextIO) -> Optional[str]:
    line = stdin.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def _read_coordinates(stdin: TextIO) -> Optional[tuple]:
    parts = stdin.readline().split()
    if len(parts) < 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def _read_int(stdin: TextIO) -> Optional[int]:
    match = _INT_PREFIX.match(stdin.readline())
    return int(match.group(1)) if match else None


def read_treasures(
    hunt_id: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> List[Treasure]:
    """Prompt for treasures until the user declines, logging each one added."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    treasures: List[Treasure] = []
    while True:
        stdout.write("Want to continue to add a treasure? yes/no ")
        stdout.flush()
        answer = stdin.readline()
        if not answer or answer.lower() != "yes\n":
            break
        stdout.write("Treasure id(string): ")
        treasure_id = _read_line(stdin)
        if treasure_id is None:
            break
        stdout.write("Username(string): ")
        name = _read_line(stdin)
        if name is None:
            break
        stdout.write("Gps coordinates(double double): ")
        coords = _read_coordinates(stdin)
        if coords is None:
            break
        stdout.write("Clue(string): ")
        clue = _read_line(stdin)
        if clue is None:
            break
        stdout.write("Treasure value(integer): ")
        value = _read_int(stdin)
        if value is None:
            break
        lat, lng = coords
        try:
            treasure = Treasure(treasure_id, name, lat, lng, clue, value)
        except ValueError as exc:
            raise HuntError(str(exc)) from exc
        treasures.append(treasure)
        write_log(
            hunt_id,
            f"--add {hunt_id} ({treasure_id},{name},{lat:.2f},{lng:.2f},{clue},{value})\n",
        )
    return treasures


def _create_hunt(hunt_id: str) -> None:
    log_path = _path(hunt_id, LOG_NAME)
    try:
        os.mkdir(hunt_id)
    except OSError as exc:
        raise HuntError(f"Couldn't create directory: {exc}") from exc
    try:
        with open(log_path, "a", encoding="utf-8"):
            pass
    except OSError as exc:
        raise HuntError(f"Couldn't create log file: {exc}") from exc
    try:
        os.symlink(log_path, symbolic_log_name(hunt_id))
    except OSError as exc:
        raise HuntError(f"couldn't create symlink: {exc}") from exc


def add_hunt(
    hunt_id: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> List[Treasure]:
    """Create the hunt if needed, then read treasures and append them to it."""
    if not is_directory(hunt_id):
        _create_hunt(hunt_id)
    treasures = read_treasures(hunt_id, stdin, stdout)
    try:
        with open(_path(hunt_id, TREASURES_NAME), "ab") as store:
            for treasure in treasures:
                store.write(pack_treasure(treasure))
    except OSError as exc:
        raise HuntError(f"Couldn't write in file: {exc}") from exc
    return treasures


def print_treasures(hunt_id: str, file_name: str, stdout: Optional[TextIO] = None) -> None:
    """Print a hunt's file details followed by every treasure in it."""
    stdout = stdout or sys.stdout
    stdout.write(_SEPARATOR)
    path = _path(hunt_id, file_name)
    try:
        info = os.stat(path)
    except OSError as exc:
        raise HuntError(f"Couldn't read file properties: {exc}") from exc
    stdout.write(f"Hunt id:{hunt_id}\n")
    stdout.write(f"File size:{info.st_size}\nLast modified:{time.ctime(info.st_mtime)}\n\n")
    try:
        with open(path, "rb") as store:
            for treasure in iter_treasures(store):
                stdout.write(format_treasure(treasure))
    except OSError as exc:
        raise HuntError(f"Couldn't open the treasures file: {exc}") from exc


def list_hunt(hunt_id: str, stdout: Optional[TextIO] = None) -> None:
    """Print all treasures of a hunt and log the listing."""
    _require_directory(hunt_id)
    if TREASURES_NAME not in os.listdir(hunt_id):
        raise HuntError("Couldn't find the treasures file in the directory!")
    print_treasures(hunt_id, TREASURES_NAME, stdout)
    write_log(hunt_id, f"--list {hunt_id}\n")


def view_treasure(hunt_id: str, treasure_id: str, stdout: Optional[TextIO] = None) -> Treasure:
    """Print the first treasure with the given id and log the view."""
    stdout = stdout or sys.stdout
    _require_directory(hunt_id)
    try:
        with open(_path(hunt_id, TREASURES_NAME), "rb") as store:
            found = next((t for t in iter_treasures(store) if t.id == treasure_id), None)
    except OSError as exc:
        raise HuntError(f"Couldn't open file: {exc}") from exc
    if found is None:
        raise HuntError("There is no treasure with that id!")
    stdout.write(format_treasure(found))
    write_log(hunt_id, f"--view {hunt_id} {treasure_id}\n")
    return found


def remove_treasure(hunt_id: str, treasure_id: str) -> int:
    """Drop every treasure with the given id; return how many were removed."""
    _require_directory(hunt_id)
    path = _path(hunt_id, TREASURES_NAME)
    temp_path = _path(hunt_id, TEMP_NAME)
    removed = 0
    try:
        with open(path, "rb") as store, open(temp_path, "wb") as temp:
            for treasure in iter_treasures(store):
                if treasure.id == treasure_id:
                    removed += 1
                else:
                    temp.write(pack_treasure(treasure))
        os.replace(temp_path, path)
    except OSError as exc:
        raise HuntError(f"Couldn't open file: {exc}") from exc
    write_log(hunt_id, f"--remove_treasure {hunt_id} {treasure_id}\n")
    return removed


def remove_hunt(path: str) -> None:
    """Delete a hunt directory and everything in it."""
    _require_directory(path)
    shutil.rmtree(path, ignore_errors=True)


def remove_symbolic_log(hunt_id: str) -> None:
    """Delete the hunt's log link from the working directory, if present."""
    try:
        os.unlink(symbolic_log_name(hunt_id))
    except FileNotFoundError:
        pass