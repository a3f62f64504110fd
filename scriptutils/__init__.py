"""Helper toolkit for command-line and automation scripts."""

from .commands import run_command, spawn_and_wait, split_command
from .extract import extract_text, extract_text_with_outcome
from .logger import StatusReporter, build_logger, get_default_reporter, package_logger
from .normalize import normalize_lines
from .schema import AppOptions, ConversionOutcome, ExtractionResult
from .serve import AsgiServer, ServableApp, WsgiServer, start_app, start_asgi_app, start_wsgi_app
from .styles import Style, StyleRenderer, strip_styles
from .utils import (
    ConversionIncomplete,
    FallbackFailure,
    SpawnFailure,
    ToolkitError,
    text_path_for,
    time_diff,
)

__all__ = [
    "AppOptions",
    "AsgiServer",
    "ConversionIncomplete",
    "ConversionOutcome",
    "ExtractionResult",
    "FallbackFailure",
    "ServableApp",
    "SpawnFailure",
    "StatusReporter",
    "Style",
    "StyleRenderer",
    "ToolkitError",
    "WsgiServer",
    "build_logger",
    "extract_text",
    "extract_text_with_outcome",
    "get_default_reporter",
    "normalize_lines",
    "package_logger",
    "run_command",
    "spawn_and_wait",
    "split_command",
    "start_app",
    "start_asgi_app",
    "start_wsgi_app",
    "strip_styles",
    "text_path_for",
    "time_diff",
]
