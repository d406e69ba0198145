"""
Submission and analysis schema.

Defines the two records that flow through a submission: the text
inputs sent to the analysis endpoint and the keyword/summary result
that comes back.  Field names on the wire (``job_description``,
``Keywords``, ``Present`` ...) are mapped here and nowhere else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class SubmissionInput:
    """Resolved text for the two form fields."""

    job_description: str
    resume: str

    def to_payload(self) -> Dict[str, str]:
        return {"job_description": self.job_description, "resume": self.resume}


@dataclass
class KeywordPresence:
    """One row of the keyword presence table."""

    keyword: str
    present: bool


@dataclass
class AnalysisResult:
    """Keywords extracted from the job description and a fit summary."""

    keywords: List[KeywordPresence] = field(default_factory=list)
    summary: str = ""
