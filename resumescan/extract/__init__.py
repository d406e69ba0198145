"""
Document text extraction for ResumeScan.

Only PDF uploads are supported.  Layout is ignored: the text of every
page is joined into one string that is sent to the analysis endpoint.
"""

from .pdf_text import extract_pdf_text  # noqa: F401
