"""
Response payload unwrapping.

The analysis endpoint answers with ``{"result": <string>}`` where the
string is the model's JSON output, sometimes wrapped in a markdown code
fence (three backticks, optionally tagged ``json``) and padded with
whitespace.  Older deployments returned the object itself instead of a
string.  :func:`unwrap_payload` is the only place that knows about the
fence; swap it out if the upstream format changes again.
"""

from __future__ import annotations

import json
import logging
import re
from typing import List

from ..errors import ParseError
from .schema import AnalysisResult, KeywordPresence

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[\w+-]*[ \t]*\n?(?P<body>.*?)\n?\s*```$", re.DOTALL)


def unwrap_payload(text: str) -> str:
    """Strip surrounding whitespace and an optional markdown fence.

    Text without a fence is returned trimmed but otherwise unchanged.
    """
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match:
        return match.group("body").strip()
    return stripped


def _build_result(data: object) -> AnalysisResult:
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object in result, got {type(data).__name__}")
    if "Keywords" not in data:
        raise ParseError("Missing 'Keywords' in analysis result")
    if "Summary" not in data:
        raise ParseError("Missing 'Summary' in analysis result")
    raw_keywords = data["Keywords"]
    if not isinstance(raw_keywords, list):
        raise ParseError("'Keywords' must be a list")
    keywords: List[KeywordPresence] = []
    for index, item in enumerate(raw_keywords):
        if not isinstance(item, dict) or "Keyword" not in item or "Present" not in item:
            raise ParseError(f"Keyword entry {index} must have 'Keyword' and 'Present'")
        keyword = item["Keyword"]
        if not isinstance(keyword, str):
            raise ParseError(f"Keyword entry {index} has a non-string 'Keyword': {keyword!r}")
        present = item["Present"]
        if not isinstance(present, bool):
            raise ParseError(f"Keyword entry {index} has a non-boolean 'Present': {present!r}")
        keywords.append(KeywordPresence(keyword=keyword, present=present))
    summary = data["Summary"]
    return AnalysisResult(keywords=keywords, summary="" if summary is None else str(summary))


def decode_result(text: str) -> AnalysisResult:
    """Unwrap a ``result`` string and decode it into an :class:`AnalysisResult`.

    Raises:
        ParseError: If the unwrapped text is not JSON or lacks the
            expected fields.
    """
    payload = unwrap_payload(text)
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        logger.debug("Undecodable result payload: %s", payload[:200])
        raise ParseError(f"Could not decode analysis result: {exc}") from exc
    return _build_result(data)


def parse_response_body(body: object) -> AnalysisResult:
    """Extract the analysis from a decoded response body.

    Args:
        body: The response JSON, expected to be ``{"result": ...}``.

    Returns:
        The parsed :class:`AnalysisResult`.

    Raises:
        ParseError: If ``result`` is absent or cannot be decoded.
    """
    if not isinstance(body, dict) or "result" not in body:
        raise ParseError("Response JSON has no 'result' field")
    result = body["result"]
    if isinstance(result, str):
        return decode_result(result)
    # Older deployments returned the object itself.
    return _build_result(result)


def raw_result(body: object) -> object:
    """Return the decoded ``result`` value without building the schema.

    Used for the raw JSON view; fenced strings are unwrapped and decoded
    when possible, anything else is returned as-is.
    """
    result = body.get("result", body) if isinstance(body, dict) else body
    if isinstance(result, str):
        try:
            return json.loads(unwrap_payload(result))
        except json.JSONDecodeError:
            return result
    return result
