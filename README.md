# treasurehunt

Keep treasure hunts on disk and browse them from the command line.

Each hunt is a directory named by its hunt id. Inside it:

- `treasures.bin` holds the treasures as fixed-size binary records. Each
  record has an id, a user name, a latitude, a longitude, a clue and a value.
- `logged_hunt.bin` is a timestamped log of the operations on the hunt.

When a hunt is created, a symbolic link `logged_hunt_<hunt id>.bin` to the
hunt's log is made in the working directory.

## Installation

```
pip install .
```

## The `treasure-hunt` command

```
treasure-hunt --add <hunt id>
treasure-hunt --list <hunt id>
treasure-hunt --view <hunt id> <treasure id>
treasure-hunt --remove_treasure <hunt id> <treasure id>
treasure-hunt --remove_hunt <hunt id>
```

- `--add` creates the hunt if it does not exist yet. It then asks for
  treasures one at a time. Answer `yes`, in any letter case, to add another.
  Any other answer, or the end of input, stops the prompt. For each treasure
  it asks for the id, the user name, the GPS coordinates (two numbers on one
  line), the clue and an integer value. If an answer cannot be read, the
  prompt stops too. Each treasure that is read gets a line in the hunt's log.
  All the treasures are appended to `treasures.bin` once the prompt stops.
- `--list` prints the hunt id, the size and modification time of
  `treasures.bin`, and then every treasure in it. It logs the listing.
- `--view` prints the first treasure with the given id and logs the view.
- `--remove_treasure` deletes every treasure with the given id and logs the
  removal.
- `--remove_hunt` deletes the hunt directory and its log link.

If fewer than two arguments are given, the command prints
`Not enough arguments!` and exits with status 255. If an operation fails,
for example because the hunt or the treasure does not exist, the command
writes the reason to standard error and exits with status 255. An unknown
option, or a known option with the wrong number of arguments, does nothing
and the command exits with status 0.

## The `treasure-hub` command

`treasure-hub` is an interactive prompt. It reads whitespace-separated
commands one at a time:

- `start_monitor` starts a background monitor. Only one monitor can run at a
  time. A second `start_monitor` prints `There's a monitor opened already!`.
- `list_treasures` sends a request to the monitor. The monitor answers by
  printing that it received the request to list treasures. With no monitor
  running, the hub prints `No monitor started yet!`.

Any other input is ignored. When its input ends, the hub stops the monitor
and exits with status 255.

## Using it from Python

```python
import sys
from treasurehunt.hunt import HuntError, list_hunt, view_treasure

try:
    list_hunt("hunt1", sys.stdout)
    treasure = view_treasure("hunt1", "gold", sys.stdout)
    print(treasure.value if hasattr(treasure, "value") else treasure.val)
except HuntError as exc:
    print(exc)
```

`treasurehunt.hunt` provides `add_hunt`, `read_treasures`, `list_hunt`,
`print_treasures`, `view_treasure`, `remove_treasure`, `remove_hunt`,
`remove_symbolic_log`, `write_log` and `is_directory`. Every failure is
raised as `HuntError`. `add_hunt` returns the treasures it added,
`view_treasure` returns the treasure it found and `remove_treasure` returns
how many treasures it removed. The functions that prompt or print take
`stdin` and `stdout` streams. These default to the process's own streams.

`treasurehunt.records` holds the `Treasure` dataclass and the record format.
It provides `pack_treasure`, `unpack_treasure`, `iter_treasures` and
`format_treasure`. A record is `RECORD_SIZE` (3024) bytes, little-endian.
The id, name and clue are NUL-padded fields. Each of them must encode to at
most 999 bytes of UTF-8 and may not contain NUL. The value must fit in a
signed 32-bit integer. `Treasure` raises `ValueError` when these limits are
broken. `iter_treasures` ignores a trailing partial record.

`treasurehunt.hub` provides `Hub`, whose `handle` method runs one command,
and `Monitor`, with `start`, `list_treasures`, `stop` and a `running`
property.

## What it does not do

The monitor runs as a thread inside the hub. It does not run as a separate
process. When asked to list treasures, it only reports that it got the
request. It does not read or print any hunt's treasures.

## Running the tests

```
pip install .[test]
pytest
```