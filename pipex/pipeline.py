"""Run a chain of commands from an input file into an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import ExitStack

from pipex.paths import (
    ERR_CMD,
    ERR_EXEC,
    ERR_FILE,
    ERR_INPUT,
    PipexError,
    find_cmd_path,
    find_path,
)
from pipex.strutil import split

__all__ = ["run_pipeline", "main"]


def _open(path: str, flags: int, mode: int = 0o777) -> int | None:
    try:
        return os.open(path, flags, mode)
    except OSError:
        return None


def _spawn(
    command: str,
    root_paths: list[str],
    stdin_fd: int,
    stdout_fd: int,
    env: dict[str, str],
) -> subprocess.Popen | int:
    """Start one stage; return the process, or the exit status if it failed."""
    try:
        argv = split(command, " ")
        if not argv:
            raise PipexError(ERR_CMD, 127)
        path = find_cmd_path(root_paths, argv[0])
        try:
            return subprocess.Popen(
                argv, executable=path, stdin=stdin_fd, stdout=stdout_fd, env=env
            )
        except OSError as exc:
            raise PipexError(ERR_EXEC, 1) from exc
    except PipexError as err:
        print(err.message, file=sys.stderr)
        return err.status


def _exit_status(stage: subprocess.Popen | int) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A stage killed by a signal does not report an exit status.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str,
    commands: Sequence[str],
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed *infile* through *commands* into *outfile*.

    Returns the exit status of the last command. A stage whose command
    cannot be found reports it on stderr and ends with status 127; the
    stages after it still run, reading an empty input.
    """
    if not commands:
        raise PipexError(ERR_INPUT, 1)
    env_map = dict(os.environ if env is None else env)

    with ExitStack() as stack:
        in_fd = _open(infile, os.O_RDONLY)
        out_fd = _open(outfile, os.O_CREAT | os.O_RDWR | os.O_TRUNC, 0o644)
        for fd in (in_fd, out_fd):
            if fd is not None:
                stack.callback(os.close, fd)
        if in_fd is None or out_fd is None:
            raise PipexError(ERR_FILE, 1)

        root_paths = find_path(env_map)
        stages: list[subprocess.Popen | int] = []
        stdin_fd = in_fd
        last_index = len(commands) - 1
        for index, command in enumerate(commands):
            is_last = index == last_index
            if is_last:
                read_fd, write_fd = None, out_fd
            else:
                read_fd, write_fd = os.pipe()
            try:
                stages.append(_spawn(command, root_paths, stdin_fd, write_fd, env_map))
            finally:
                if not is_last:
                    os.close(write_fd)
                if stdin_fd != in_fd:
                    os.close(stdin_fd)
            stdin_fd = read_fd

        statuses = [_exit_status(stage) for stage in stages]
    return statuses[-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``infile cmd1 cmd2 [...] outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(ERR_INPUT, file=sys.stderr)
        return 1
    try:
        return run_pipeline(args[0], args[1:-1], args[-1], os.environ)
    except PipexError as err:
        print(err.message, file=sys.stderr)
        return err.status


if __name__ == "__main__":
    sys.exit(main())