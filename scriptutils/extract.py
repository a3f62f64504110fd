"""Document to plain-text extraction.

The external converter is tried first; if it cannot be started, PyMuPDF is
used in-process. Success is judged only by whether the text file exists
afterwards, never by the converter's exit status.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from .commands import spawn_and_wait
from .config import CONVERTER_BINARY, TEXT_SUFFIX
from .logger import StatusReporter, get_default_reporter
from .pdf_text import pdf_to_txt
from .schema import ConversionOutcome, ExtractionResult
from .styles import Style
from .utils import ConversionIncomplete, FallbackFailure, SpawnFailure, text_path_for

Fallback = Callable[[str], object]


def _run_converter(converter: str, document_path: str, text_path: str) -> None:
    try:
        spawn_and_wait([converter, document_path, text_path])
    except OSError as exc:
        raise SpawnFailure(f"Could not start {converter}: {exc}") from exc


def _run_fallback(
    fallback: Fallback,
    document_path: str,
    reporter: StatusReporter,
) -> None:
    try:
        fallback(document_path)
    except Exception as exc:
        failure = FallbackFailure(document_path, exc)
        reporter.report(
            Style.RED,
            title="BŁĄD / ERROR",
            main_message=str(failure),
            sub_style=Style.RED,
            sub_message=f"{type(exc).__name__}: {exc}",
            level=logging.ERROR,
        )
        raise failure from exc


def extract_text_with_outcome(
    document_path: str | Path,
    *,
    reporter: StatusReporter | None = None,
    silent: bool = False,
    converter: str | None = None,
    fallback: Fallback | None = None,
) -> ExtractionResult:
    """Convert ``document_path`` to its ``.txt`` sibling and describe what happened.

    Raises:
        FallbackFailure: the converter could not be started and the fallback
            raised. Callers at the top level usually end the process.
        ConversionIncomplete: no text file exists after the attempts.
    """
    reporter = reporter or get_default_reporter()
    converter = converter or CONVERTER_BINARY
    fallback = fallback or pdf_to_txt

    document_path = str(document_path)
    text_path = text_path_for(document_path, TEXT_SUFFIX)
    outcome = ConversionOutcome.ALREADY_EXISTS
    used_fallback = False

    if not os.path.exists(text_path):
        outcome = ConversionOutcome.CREATED
        try:
            _run_converter(converter, document_path, text_path)
        except SpawnFailure as exc:
            reporter.debug(f"{exc}; falling back to PyMuPDF", Style.DIM)
            used_fallback = True
            _run_fallback(fallback, document_path, reporter)

    if not os.path.exists(text_path):
        raise ConversionIncomplete(text_path)

    if not silent:
        reporter.info(f"{outcome.heading}: {text_path}", Style.WHITE, Style.ITALIC)

    return ExtractionResult(
        document_path=document_path,
        text_path=text_path,
        outcome=outcome,
        used_fallback=used_fallback,
    )


def extract_text(
    document_path: str | Path,
    *,
    reporter: StatusReporter | None = None,
    silent: bool = False,
    converter: str | None = None,
    fallback: Fallback | None = None,
) -> str:
    """Convert ``document_path`` to plain text and return the text file path."""

    result = extract_text_with_outcome(
        document_path,
        reporter=reporter,
        silent=silent,
        converter=converter,
        fallback=fallback,
    )
    return result.text_path
