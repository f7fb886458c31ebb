"""Errors surfaced to callers of the SWOT core."""

from __future__ import annotations


class SwotError(Exception):
    """Base class for recoverable SWOT errors."""


class InvalidItemError(SwotError, ValueError):
    """An add or edit carried no usable text."""


class MalformedImportError(SwotError):
    """Imported file contents are not valid JSON."""


class ExportError(SwotError):
    """Building an export artifact failed."""
