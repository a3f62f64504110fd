"""Status reporting and log sink setup for scripts.

The host application builds a logger once with ``build_logger`` and hands it
to a ``StatusReporter``; library functions take the reporter as an argument
and fall back to ``get_default_reporter()`` when none is given.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import IO, Iterable, Sequence

from .config import LOG_FILE_PATH, NO_COLOR
from .styles import Style, StyleRenderer, strip_styles, to_style

DEFAULT_LOGGER_NAME = "scriptutils"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class StyledConsoleFormatter(logging.Formatter):
    """Render the record message with the styles passed in ``extra={"styles": ...}``."""

    def __init__(self, renderer: StyleRenderer) -> None:
        super().__init__("%(message)s")
        self.renderer = renderer

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        styles = getattr(record, "styles", None) or ()
        return self.renderer.apply(message, *styles)


class PlainFileFormatter(logging.Formatter):
    """``{timestamp} {level} {message}`` with ANSI styling removed."""

    def __init__(self) -> None:
        super().__init__(FILE_LOG_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        # one record per line; the blank line before reports is console-only
        record.message = strip_styles(record.message).lstrip("\n")
        return super().formatMessage(record)


def build_logger(
    log_file_path: str | None = None,
    *,
    name: str = DEFAULT_LOGGER_NAME,
    renderer: StyleRenderer | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Configure and return a logger with a console sink and an optional file sink.

    The console sink receives every record from DEBUG up. When
    ``log_file_path`` is given, records at WARNING and above are also appended
    to that file. Calling this again for the same ``name`` replaces the
    previous handlers.
    """
    renderer = renderer or StyleRenderer(enabled=not NO_COLOR)
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setLevel(logging.DEBUG)
    console.setFormatter(StyledConsoleFormatter(renderer))
    logger.addHandler(console)

    if log_file_path:
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(PlainFileFormatter())
        logger.addHandler(file_handler)

    return logger


class StatusReporter:
    """Titled, styled status messages plus leveled logging on one logger."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        renderer: StyleRenderer | None = None,
    ) -> None:
        self.renderer = renderer or StyleRenderer(enabled=not NO_COLOR)
        self.logger = logger or package_logger(renderer=self.renderer)

    def report(
        self,
        style: Style | str = Style.WHITE,
        title: str = "",
        main_message: str = "",
        sub_style: Style | str = Style.DIM,
        sub_message: str = "",
        sub_prefix: str = " > ",
        level: int = logging.INFO,
    ) -> None:
        """Emit ``"\\n{title}: {main_message}"`` in bold ``style``, then the sub-message if any."""

        self.logger.log(level, self.renderer.apply(f"\n{title}: {main_message}", style, Style.BOLD))
        if sub_message:
            self.logger.log(level, self.renderer.apply(f"{sub_prefix}{sub_message}", sub_style))

    def report_many(self, messages: Iterable[tuple[str, Style | str]]) -> None:
        """Emit each ``(text, style)`` pair on its own line, bold, in order."""

        for text, style in messages:
            self.logger.info(self.renderer.apply(text, style, Style.BOLD))

    def log(self, level: int, msg: str, *styles: Style | str) -> None:
        resolved = tuple(to_style(s) for s in _as_tuple(styles))
        self.logger.log(level, msg, extra={"styles": resolved})

    def debug(self, msg: str, *styles: Style | str) -> None:
        self.log(logging.DEBUG, msg, *styles)

    def info(self, msg: str, *styles: Style | str) -> None:
        self.log(logging.INFO, msg, *styles)

    def warning(self, msg: str, *styles: Style | str) -> None:
        self.log(logging.WARNING, msg, *styles)

    def error(self, msg: str, *styles: Style | str) -> None:
        self.log(logging.ERROR, msg, *styles)

    def critical(self, msg: str, *styles: Style | str) -> None:
        self.log(logging.CRITICAL, msg, *styles)


def _as_tuple(styles: Sequence[Style | str]) -> tuple[Style | str, ...]:
    # allow both info(msg, RED, BOLD) and info(msg, [RED, BOLD])
    if len(styles) == 1 and isinstance(styles[0], (list, tuple)):
        return tuple(styles[0])
    return tuple(styles)


def package_logger(renderer: StyleRenderer | None = None) -> logging.Logger:
    """Return the ``scriptutils`` logger, configuring it only if nobody has yet.

    A logger the host already set up with ``build_logger`` is reused as is.
    """
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if logger.handlers:
        return logger
    return build_logger(LOG_FILE_PATH, renderer=renderer)


@lru_cache(maxsize=None)
def get_default_reporter() -> StatusReporter:
    """Reporter on the package logger (plus ``SCRIPTUTILS_LOG_FILE`` sink, if set) built on first use."""

    renderer = StyleRenderer(enabled=not NO_COLOR)
    return StatusReporter(package_logger(renderer), renderer)
