"""Locating commands on the search path and starting them."""

from __future__ import annotations

import errno
import os
import subprocess
from collections.abc import Iterator, Mapping
from typing import IO, Union

from pipex.text import split

StreamLike = Union[int, IO[bytes], None]


class CommandNotFoundError(FileNotFoundError):
    """No executable for a command could be found or started."""

    def __init__(self, command: str) -> None:
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), command)
        self.command = command


def extract_path(environ: Mapping[str, str]) -> list[str]:
    """The directories listed in ``PATH``, each ending in a slash.

    Empty entries are dropped; without a ``PATH`` the list is empty.
    """
    value = environ.get("PATH")
    if value is None:
        return []
    return [directory + "/" for directory in split(value, ":")]


def make_args(command: str) -> list[str]:
    """Split a command line on spaces into its words, dropping empty ones."""
    return split(command, " ")


def _candidates(args: list[str], environ: Mapping[str, str]) -> Iterator[str]:
    """Executable paths for ``args[0]``: every PATH entry, then the name itself."""
    if not args or not args[0]:
        return
    for prefix in [*extract_path(environ), ""]:
        candidate = prefix + args[0]
        if os.access(candidate, os.X_OK):
            yield candidate


def resolve_command(command: str, environ: Mapping[str, str]) -> str:
    """The path of the program that ``command`` would run."""
    for candidate in _candidates(make_args(command), environ):
        if os.path.isfile(candidate):
            return candidate
    raise CommandNotFoundError(command)


def execute(
    command: str,
    environ: Mapping[str, str],
    stdin: StreamLike = None,
    stdout: StreamLike = None,
) -> subprocess.Popen:
    """Start ``command`` with the given streams and environment.

    Each executable candidate is tried in search order; the first that
    starts is returned as a running process.
    """
    args = make_args(command)
    env = dict(environ)
    for candidate in _candidates(args, environ):
        try:
            return subprocess.Popen(
                [candidate, *args[1:]],
                stdin=stdin,
                stdout=stdout,
                env=env,
            )
        except OSError:
            continue
    raise CommandNotFoundError(command)