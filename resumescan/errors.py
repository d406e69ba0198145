"""
Exception hierarchy for ResumeScan.

Every failure that can end a submission derives from
:class:`ResumeScanError` so the form can render it as a single error
message.  The split mirrors what a user can act on: the request never
got a usable answer (:class:`TransportError`), the answer could not be
understood (:class:`ParseError`) or an uploaded PDF could not be read
(:class:`PdfExtractionError`).
"""

from __future__ import annotations

from typing import Optional


class ResumeScanError(Exception):
    """Base class for errors raised while handling a submission."""


class TransportError(ResumeScanError):
    """The request raised or the endpoint answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(ResumeScanError):
    """The response body or its embedded payload could not be decoded."""


class PdfExtractionError(ResumeScanError):
    """A PDF upload could not be opened or its text could not be read."""
