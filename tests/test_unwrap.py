"""Tests for unwrapping and decoding the endpoint's ``result`` payload."""

from __future__ import annotations

import json

import pytest  # type: ignore

from resumescan.errors import ParseError
from resumescan.submit.schema import AnalysisResult, KeywordPresence
from resumescan.submit.unwrap import decode_result, parse_response_body, raw_result, unwrap_payload


def test_unwrap_strips_json_fence() -> None:
    assert unwrap_payload('```json\n{"a": 1}\n```') == '{"a": 1}'


def test_unwrap_strips_untagged_fence_and_whitespace() -> None:
    assert unwrap_payload('  \n```\n{"a": 1}\n```\n  ') == '{"a": 1}'


def test_unwrap_single_line_fence() -> None:
    assert unwrap_payload('```json{"a": 1}```') == '{"a": 1}'


def test_unwrap_leaves_unfenced_text() -> None:
    assert unwrap_payload('  {"a": 1} ') == '{"a": 1}'


def test_decode_fenced_result(fenced_result: str) -> None:
    result = decode_result(fenced_result)
    assert result == AnalysisResult(keywords=[KeywordPresence("SQL", True)], summary="Good fit")


def test_decode_unfenced_result() -> None:
    result = decode_result('{"Keywords":[],"Summary":"No match"}')
    assert result.keywords == []
    assert result.summary == "No match"


def test_decode_keeps_keyword_order() -> None:
    payload = json.dumps(
        {
            "Keywords": [
                {"Keyword": "Python", "Present": True},
                {"Keyword": "Kubernetes", "Present": False},
                {"Keyword": "SQL", "Present": True},
            ],
            "Summary": "Partial fit",
        }
    )
    result = decode_result(payload)
    assert [k.keyword for k in result.keywords] == ["Python", "Kubernetes", "SQL"]
    assert [k.present for k in result.keywords] == [True, False, True]


def test_decode_malformed_payload_raises_parse_error() -> None:
    with pytest.raises(ParseError, match="Could not decode analysis result"):
        decode_result("```json\n{not json\n```")


@pytest.mark.parametrize(
    "payload, message",
    [
        ('{"Summary": "x"}', "Keywords"),
        ('{"Keywords": []}', "Summary"),
        ('{"Keywords": {}, "Summary": "x"}', "must be a list"),
        ('{"Keywords": [{"Keyword": "SQL"}], "Summary": "x"}', "Present"),
        ('{"Keywords": [{"Keyword": "SQL", "Present": "yes"}], "Summary": "x"}', "non-boolean"),
        ('{"Keywords": [{"Keyword": null, "Present": true}], "Summary": "x"}', "non-string"),
        ('{"Keywords": [{"Keyword": 3, "Present": true}], "Summary": "x"}', "non-string"),
        ("[1, 2]", "JSON object"),
    ],
)
def test_decode_rejects_missing_fields(payload: str, message: str) -> None:
    with pytest.raises(ParseError, match=message):
        decode_result(payload)


def test_parse_response_body_requires_result_field() -> None:
    with pytest.raises(ParseError, match="no 'result' field"):
        parse_response_body({"message": "Internal server error"})


def test_parse_response_body_accepts_plain_object() -> None:
    body = {"result": {"Keywords": [{"Keyword": "Go", "Present": False}], "Summary": "Weak"}}
    result = parse_response_body(body)
    assert result.keywords == [KeywordPresence("Go", False)]
    assert result.summary == "Weak"


def test_raw_result_decodes_fenced_string(fenced_result: str) -> None:
    assert raw_result({"result": fenced_result})["Summary"] == "Good fit"


def test_raw_result_keeps_undecodable_string() -> None:
    assert raw_result({"result": "plain text"}) == "plain text"
