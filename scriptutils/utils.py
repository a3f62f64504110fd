"""Errors and small helpers shared across script-utils."""

from __future__ import annotations

import os
import shutil
from datetime import timedelta
from pathlib import Path


class ToolkitError(Exception):
    """Base exception for script-utils errors."""


class SpawnFailure(ToolkitError):
    """Raised when an external converter cannot be launched."""


class FallbackFailure(ToolkitError):
    """Raised when both the converter and the in-process fallback failed.

    This is fatal for the caller's input; only the top-level entry point
    decides whether to end the process.
    """

    def __init__(self, document_path: str | Path, cause: BaseException | None = None) -> None:
        self.document_path = str(document_path)
        self.cause = cause
        message = f"Could not convert {self.document_path} to a text file"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class ConversionIncomplete(ToolkitError):
    """Raised when the text file is still missing after all attempts."""

    MESSAGE = "Text file was not created"

    def __init__(self, text_path: str | Path | None = None) -> None:
        self.text_path = None if text_path is None else str(text_path)
        super().__init__(self.MESSAGE)


def check_binary_exists(binary_name: str) -> bool:
    """Return True if a binary is available on PATH."""

    return shutil.which(binary_name) is not None


def time_diff(start_ms: int | float, end_ms: int | float) -> str:
    """Format the interval between two epoch-millisecond timestamps as HH:MM:SS."""

    if end_ms < start_ms:
        raise ValueError("end_ms must not be earlier than start_ms")
    total = int(timedelta(milliseconds=end_ms - start_ms).total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def text_path_for(document_path: str | Path, suffix: str = ".txt") -> str:
    """Return the plain-text sibling of ``document_path`` (``doc.pdf`` -> ``doc.txt``).

    Only the final suffix is replaced; the rest of the path is kept verbatim.
    """
    root, _ext = os.path.splitext(os.fspath(document_path))
    return root + suffix
