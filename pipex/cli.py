"""Run two commands joined by a pipe, from an input file to an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.command import CommandNotFoundError, execute


class PipelineError(OSError):
    """The pipeline could not be set up or its last command not started."""


def _not_found(target: str) -> PipelineError:
    return PipelineError(errno.ENOENT, os.strerror(errno.ENOENT), target)


def _report(code: int) -> None:
    print(f"Error: {os.strerror(code)}", file=sys.stderr)


def _finish(proc: subprocess.Popen | None) -> None:
    if proc is None:
        return
    if proc.stdout is not None:
        proc.stdout.close()
    proc.wait()


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run ``first_command < infile | second_command > outfile``.

    Returns the exit status of the second command. A first command that
    cannot be found is reported on stderr and the second one reads an empty
    input; a missing input file, an unopenable output file or a second
    command that cannot be found raise :class:`PipelineError`.
    """
    env = os.environ if environ is None else environ
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise _not_found(infile) from exc

    with source:
        try:
            first = execute(first_command, env, source, subprocess.PIPE)
        except CommandNotFoundError:
            _report(errno.ENOENT)
            first = None

    try:
        try:
            fd = os.open(outfile, os.O_WRONLY | os.O_TRUNC | os.O_CREAT, 0o644)
        except OSError as exc:
            raise _not_found(outfile) from exc
        with open(fd, "wb") as sink:
            upstream = first.stdout if first is not None else subprocess.DEVNULL
            try:
                second = execute(second_command, env, upstream, sink)
            except CommandNotFoundError as exc:
                raise _not_found(second_command) from exc
            finally:
                if first is not None and first.stdout is not None:
                    first.stdout.close()
            status = second.wait()
    finally:
        _finish(first)
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report(errno.EINVAL)
        return 0
    try:
        return run_pipeline(*args)
    except PipelineError as exc:
        _report(exc.errno)
        return 0


if __name__ == "__main__":
    sys.exit(main())