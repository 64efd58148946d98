"""Command line front end for managing hunts."""

from __future__ import annotations

import sys
from typing import List, Optional

from treasurehunt.hunt import (
    HuntError,
    add_hunt,
    list_hunt,
    remove_hunt,
    remove_symbolic_log,
    remove_treasure,
    view_treasure,
)

FAILURE = 255


def _run(args: List[str]) -> None:
    op = args[0]
    if len(args) == 2:
        hunt_id = args[1]
        if op == "--add":
            add_hunt(hunt_id, sys.stdin, sys.stdout)
        elif op == "--list":
            list_hunt(hunt_id, sys.stdout)
        elif op == "--remove_hunt":
            remove_hunt(hunt_id)
            remove_symbolic_log(hunt_id)
    elif len(args) == 3:
        hunt_id, treasure_id = args[1], args[2]
        if op == "--view":
            view_treasure(hunt_id, treasure_id, sys.stdout)
        elif op == "--remove_treasure":
            remove_treasure(hunt_id, treasure_id)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one hunt command; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        sys.stdout.write("Not enough arguments!")
        return FAILURE
    try:
        _run(args)
    except HuntError as exc:
        sys.stderr.write(f"{exc}\n")
        return FAILURE
    return 0