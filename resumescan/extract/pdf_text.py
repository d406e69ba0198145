"""
PDF text extractor.

Wraps pdfplumber to turn an uploaded PDF into a single string.  Pages
are read in order and joined with single spaces; pages without a text
layer contribute an empty string.
"""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Union

import pdfplumber  # type: ignore

from ..errors import PdfExtractionError

logger = logging.getLogger(__name__)

PdfSource = Union[str, "os.PathLike[str]", bytes, BinaryIO]


def _describe(source: PdfSource) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    if isinstance(source, bytes):
        return f"<{len(source)} bytes>"
    return getattr(source, "name", "<upload>")


def extract_pdf_text(source: PdfSource) -> str:
    """Extract the text of every page of a PDF.

    Args:
        source: Path to the PDF, its raw bytes or an open binary file.

    Returns:
        The page texts in page order, joined by single spaces.

    Raises:
        PdfExtractionError: If the file is missing, corrupt or not a PDF.
    """
    name = _describe(source)
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    try:
        with pdfplumber.open(source) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:  # noqa: BLE001
        logger.warning("Could not extract text from %s: %s", name, exc)
        raise PdfExtractionError(f"Could not extract text from {name}: {exc}") from exc
    logger.debug("Extracted %d pages from %s", len(pages), name)
    return " ".join(pages)
