"""Line list normalization."""

from __future__ import annotations

import logging

from .logger import StatusReporter, get_default_reporter
from .styles import Style

DUPLICATE_MESSAGE = "appears more than once in the list"
DUPLICATE_SUB_MESSAGE = "every further occurrence will be reported"


def normalize_lines(raw_text: str, *, reporter: StatusReporter | None = None) -> list[str]:
    """Return the unique, trimmed, upper-cased non-empty lines of ``raw_text``.

    Order of first appearance is kept. Every repeated line (compared
    case-insensitively) is dropped and reported as a warning.
    """
    seen: dict[str, None] = {}
    for line in raw_text.split("\n"):
        # U+FEFF is not whitespace to str.strip
        token = line.strip().strip("\ufeff").strip().upper()
        if not token:
            continue
        if token in seen:
            (reporter or get_default_reporter()).report(
                Style.RED,
                title=token,
                main_message=DUPLICATE_MESSAGE,
                sub_message=DUPLICATE_SUB_MESSAGE,
                level=logging.WARNING,
            )
            continue
        seen[token] = None
    return list(seen)
