"""Spawn external programs and wait for them."""

from __future__ import annotations

import subprocess
from typing import Sequence

from .logger import StatusReporter, get_default_reporter
from .styles import Style


def split_command(command_line: str) -> list[str]:
    """Split on whitespace. Quotes are not interpreted."""

    return command_line.split()


def spawn_and_wait(args: Sequence[str]) -> int:
    """Run ``args`` with inherited stdio and return its exit code.

    Raises ``OSError`` (usually ``FileNotFoundError``) if the program cannot
    be started.
    """
    completed = subprocess.run(list(args), check=False)
    return completed.returncode


def run_command(command_line: str, *, reporter: StatusReporter | None = None) -> None:
    """Run a command line and wait for it; the exit status is not checked."""

    reporter = reporter or get_default_reporter()
    args = split_command(command_line)
    if not args:
        raise ValueError("command_line is empty")

    reporter.report(Style.DIM, title="RUNNING", main_message=command_line)
    spawn_and_wait(args)
    reporter.report(Style.DIM, title="FINISHED", main_message=command_line)
