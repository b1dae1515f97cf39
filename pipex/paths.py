"""Locating the search path and the executables of commands."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.strutil import split, strnstr

__all__ = [
    "PipexError",
    "find_path",
    "find_cmd_path",
    "ERR_FILE",
    "ERR_FORK",
    "ERR_INPUT",
    "ERR_PIPE",
    "ERR_CMD",
    "ERR_DUP",
    "ERR_EXEC",
    "ERR_PATH",
]

ERR_FILE = "Infile or outfile error"
ERR_FORK = "Fork error"
ERR_INPUT = "Invalid number of arguments"
ERR_PIPE = "Pipe error"
ERR_CMD = "command not found"
ERR_DUP = "Dup2 error"
ERR_EXEC = "Execve error"
ERR_PATH = "Path error"

_PATH_KEY = "PATH="


class PipexError(Exception):
    """A failure that ends a pipeline stage with a message and exit status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def _entries(env: Mapping[str, str] | Iterable[str]) -> Iterable[str]:
    if isinstance(env, Mapping):
        return (f"{key}={value}" for key, value in env.items())
    return env


def find_path(env: Mapping[str, str] | Iterable[str]) -> list[str]:
    """Return the directories of the first entry containing ``PATH=``.

    *env* is either a mapping or a sequence of ``KEY=VALUE`` strings.
    """
    for entry in _entries(env):
        index = strnstr(entry, _PATH_KEY, len(entry))
        if index is not None:
            return split(entry[index + len(_PATH_KEY):], ":")
    raise PipexError(ERR_PATH, 1)


def find_cmd_path(root_paths: Iterable[str], cmd: str) -> str:
    """Return *cmd* if it exists as given, else the first ``root/cmd`` that does."""
    if os.access(cmd, os.F_OK):
        return cmd
    for root in root_paths:
        candidate = f"{root}/{cmd}"
        if os.access(candidate, os.F_OK):
            return candidate
    raise PipexError(ERR_CMD, 127)