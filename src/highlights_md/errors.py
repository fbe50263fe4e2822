"""Errors raised while reading, configuring or rendering highlights."""
from __future__ import annotations

from typing import Optional

EX_GENERAL = 1
EX_DATAERR = 65
EX_IOERR = 74
EX_CONFIG = 78


class HighlightError(Exception):
    """Base error; also used for conditions that fit no other category."""

    exit_code = EX_GENERAL

    def __init__(self, message: str = "unknown error", cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}\n\t{self.cause}"


class HighlightIOError(HighlightError):
    """Raised when an input or output stream cannot be read or written."""

    exit_code = EX_IOERR


class InvalidFormatError(HighlightError):
    """Raised when input data does not match the expected export schema."""

    exit_code = EX_DATAERR


class ConfigError(HighlightError):
    """Raised for unusable configuration values."""

    exit_code = EX_CONFIG
