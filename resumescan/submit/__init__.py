"""
Submission subsystem for ResumeScan.

The `submit` package owns everything between the resolved form inputs
and a decoded analysis:

* `schema` – Dataclasses for the request input and the parsed result.
* `unwrap` – Strips the optional markdown fence from the endpoint's
  `result` string and decodes it into an `AnalysisResult`.
* `client` – Issues the single JSON `POST` to the analysis endpoint.
"""

from .schema import AnalysisResult, KeywordPresence, SubmissionInput  # noqa: F401
from .unwrap import decode_result, parse_response_body, unwrap_payload  # noqa: F401
from .client import AnalysisClient  # noqa: F401
