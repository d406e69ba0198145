"""
HTML rendering for analysis results and errors.
"""

from .html import render_error, render_page, render_raw, render_result  # noqa: F401
