"""Treasure hunts stored as directories of binary treasure records, with a command line tool and an interactive hub."""

__version__ = "0.1.0"