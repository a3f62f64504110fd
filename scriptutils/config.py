"""Centralized configuration for script-utils.

All env-driven settings live here so there is a single source of truth.
Import from ``scriptutils.config`` in extract.py, logger.py, etc.
"""

from __future__ import annotations

import os
import sys

from .utils import check_binary_exists


def _env_int(name: str, default: int, lo: int = 1, hi: int = 65_535) -> int:
    try:
        return max(lo, min(hi, int(os.environ.get(name, str(default)))))
    except (TypeError, ValueError):
        return default


# ---------------------------------------------------------------------------
# Text extraction
# ---------------------------------------------------------------------------
CONVERTER_BINARY: str = os.environ.get("SCRIPTUTILS_CONVERTER", "pdftotext").strip() or "pdftotext"
TEXT_SUFFIX: str = ".txt"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_FILE_PATH: str | None = os.environ.get("SCRIPTUTILS_LOG_FILE") or None
# https://no-color.org: any non-empty value disables styling
NO_COLOR: bool = bool(os.environ.get("NO_COLOR"))

# ---------------------------------------------------------------------------
# App startup
# ---------------------------------------------------------------------------
DEFAULT_HOST: str = os.environ.get("SCRIPTUTILS_HOST", "localhost")
DEFAULT_PORT: int = _env_int("SCRIPTUTILS_PORT", default=8080)


def log_startup_config() -> None:
    """Print one startup line summarising active configuration."""
    msg = (
        f"script-utils config: CONVERTER_BINARY={CONVERTER_BINARY} "
        f"converter_on_path={check_binary_exists(CONVERTER_BINARY)} "
        f"LOG_FILE_PATH={LOG_FILE_PATH} NO_COLOR={NO_COLOR} "
        f"DEFAULT_HOST={DEFAULT_HOST} DEFAULT_PORT={DEFAULT_PORT}"
    )
    sys.stderr.write(msg + "\n")
    sys.stderr.flush()
