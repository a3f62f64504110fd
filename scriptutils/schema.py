"""Pydantic models for toolkit results and options."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_HOST, DEFAULT_PORT


class ConversionOutcome(str, Enum):
    """How an extraction call ended."""

    ALREADY_EXISTS = "already_exists"
    CREATED = "created"
    FAILED = "failed"

    @property
    def heading(self) -> str:
        return self.value.replace("_", " ").upper()


class ExtractionResult(BaseModel):
    """Result of one extraction attempt chain."""

    model_config = ConfigDict(frozen=True)

    document_path: str
    text_path: str
    outcome: ConversionOutcome
    used_fallback: bool = False


class AppOptions(BaseModel):
    """Options for ``serve.start_app``."""

    name: str = "App"
    user: str = "unknown"
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    open: bool = True

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"
