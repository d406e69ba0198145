"""
Form model for ResumeScan.

This module stands in for the browser page: two paired inputs (a text
area plus an optional PDF upload each), a loading indicator and a
result area.  :class:`FormClient` drives a submission through the
states ``idle -> submitting -> success | failure`` and back to
``idle`` when the results are cleared.

Attaching a file to a field disables and clears its text area so that
exactly one source supplies the field when the form is submitted.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .errors import ResumeScanError
from .extract.pdf_text import PdfSource, extract_pdf_text
from .render.html import render_error, render_raw, render_result
from .submit.client import AnalysisClient
from .submit.schema import AnalysisResult, SubmissionInput
from .submit.unwrap import raw_result

logger = logging.getLogger(__name__)

Extractor = Callable[[PdfSource], str]


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class FieldInput:
    """A text area paired with an optional PDF upload."""

    name: str
    text: str = ""
    file: Optional[PdfSource] = None
    disabled: bool = False

    def set_text(self, text: str) -> None:
        if self.disabled:
            logger.debug("Ignoring text for %s while a file is attached", self.name)
            return
        self.text = text

    def attach_file(self, file: PdfSource) -> None:
        self.file = file
        self.text = ""
        self.disabled = True

    def clear_file(self) -> None:
        self.file = None
        self.disabled = False

    def resolve(self, extractor: Extractor) -> str:
        """Return the field's value, preferring the attached file."""
        if self.file is not None:
            logger.debug("Extracting %s from attached PDF", self.name)
            return extractor(self.file)
        return self.text


@dataclass
class ResultView:
    """The result container and the loading indicator next to it."""

    html: str = ""
    loading: bool = False


class FormClient:
    """Collects the two inputs, submits them and renders the outcome.

    Args:
        client: Client used to reach the analysis endpoint.
        extractor: Callable turning an attached PDF into text; defaults
            to :func:`~resumescan.extract.pdf_text.extract_pdf_text`.
        raw_output: Render the decoded ``result`` as pretty-printed JSON
            instead of the keyword table.
    """

    def __init__(
        self,
        client: AnalysisClient,
        extractor: Optional[Extractor] = None,
        raw_output: bool = False,
    ) -> None:
        self.client = client
        self.extractor = extractor or extract_pdf_text
        self.raw_output = raw_output
        self.job_description = FieldInput("job_description")
        self.resume = FieldInput("resume")
        self.view = ResultView()
        self.state = FormState.IDLE
        self.last_result: Optional[AnalysisResult] = None
        self.last_error: Optional[ResumeScanError] = None
        self._in_flight = threading.Lock()

    def build_submission(self) -> SubmissionInput:
        return SubmissionInput(
            job_description=self.job_description.resolve(self.extractor),
            resume=self.resume.resolve(self.extractor),
        )

    def _render_success(self, submission: SubmissionInput) -> None:
        if self.raw_output:
            self.view.html = render_raw(raw_result(self.client.post(submission)))
            return
        result = self.client.analyze(submission)
        self.last_result = result
        self.view.html = render_result(result)

    def submit(self) -> FormState:
        """Submit the form once and render the result or the error.

        A call made while another submission is outstanding is ignored.

        Returns:
            The state after the submission finished.
        """
        if not self._in_flight.acquire(blocking=False):
            logger.warning("A submission is already in progress; ignoring")
            return self.state
        try:
            self.state = FormState.SUBMITTING
            self.view.html = ""
            self.view.loading = True
            self.last_result = None
            self.last_error = None
            try:
                submission = self.build_submission()
                self._render_success(submission)
                self.state = FormState.SUCCESS
            except ResumeScanError as exc:
                logger.warning("Submission failed: %s", exc)
                self.last_error = exc
                self.view.html = render_error(str(exc))
                self.state = FormState.FAILURE
            finally:
                self.view.loading = False
                if self.state is FormState.SUBMITTING:
                    self.state = FormState.FAILURE
        finally:
            self._in_flight.release()
        return self.state

    def clear_results(self) -> None:
        self.view.html = ""
        self.last_result = None
        self.last_error = None
        self.state = FormState.IDLE
