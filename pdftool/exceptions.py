"""
Custom exceptions for pdftool.

Every error raised by the library derives from :class:`PdfToolError`.
Argument errors remember the name of the offending parameter so callers can
tell a bad page number from a bad rotation angle.
"""

from __future__ import annotations


class PdfToolError(Exception):
    """Base exception for all pdftool errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown pdftool error occurred."


class DocumentNotFoundError(PdfToolError, FileNotFoundError):
    """Raised when the source document does not exist."""

    @property
    def default_message(self) -> str:
        return "Source document not found."


class InvalidFormatError(PdfToolError):
    """Raised when the document bytes cannot be parsed as a PDF."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class ArgumentError(PdfToolError, ValueError):
    """Raised when a call is structurally invalid, e.g. an empty selection."""

    def __init__(self, message: str = "", parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter

    @property
    def default_message(self) -> str:
        return "Invalid argument."

    def __str__(self) -> str:
        if self.parameter:
            return f"{self.message} (parameter '{self.parameter}')"
        return self.message


class OutOfRangeError(ArgumentError):
    """Raised when a page number or angle falls outside its allowed values."""

    @property
    def default_message(self) -> str:
        return "Argument is out of range."


__all__ = [
    "PdfToolError",
    "DocumentNotFoundError",
    "InvalidFormatError",
    "ArgumentError",
    "OutOfRangeError",
]
