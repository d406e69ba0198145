"""
HTTP client for the analysis endpoint.

Sends exactly one ``POST`` per call with a JSON body and turns every
failure into a :class:`~resumescan.errors.TransportError` or
:class:`~resumescan.errors.ParseError`.  No retries are attempted.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from ..config import ClientConfig
from ..errors import ParseError, TransportError
from .schema import AnalysisResult, SubmissionInput
from .unwrap import parse_response_body

logger = logging.getLogger(__name__)

NOT_OK_MESSAGE = "Network response was not ok."


class AnalysisClient:
    """Client for the job description / resume analysis endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: ClientConfig, session: Optional[requests.Session] = None) -> "AnalysisClient":
        return cls(config.endpoint, timeout=config.timeout, session=session)

    def post(self, submission: SubmissionInput) -> Dict[str, object]:
        """Send the submission and return the decoded JSON body.

        Raises:
            TransportError: If the request fails or the status is not 2xx.
            ParseError: If the body is not JSON.
        """
        logger.info(
            "Submitting job description (%d chars) and resume (%d chars) to %s",
            len(submission.job_description),
            len(submission.resume),
            self.endpoint,
        )
        try:
            response = self.session.post(
                self.endpoint,
                json=submission.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except (requests.RequestException, ValueError) as exc:
            # urllib3 rejects non-positive timeouts with a plain ValueError.
            logger.warning("Request to %s failed: %s", self.endpoint, exc)
            raise TransportError(str(exc)) from exc
        if not response.ok:
            logger.warning("Endpoint %s answered with status %s", self.endpoint, response.status_code)
            raise TransportError(NOT_OK_MESSAGE, status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"Could not decode response JSON: {exc}") from exc

    def analyze(self, submission: SubmissionInput) -> AnalysisResult:
        """Send the submission and parse the keyword/summary result."""
        result = parse_response_body(self.post(submission))
        logger.debug("Received %d keywords", len(result.keywords))
        return result
