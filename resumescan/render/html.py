"""
HTML fragments for the result area.

All user and endpoint supplied text is escaped before it is placed in
markup.  Booleans are written as ``true``/``false`` to match the JSON
the endpoint returns.
"""

from __future__ import annotations

import json
from html import escape
from typing import List

from ..submit.schema import AnalysisResult


def render_result(result: AnalysisResult) -> str:
    """Render the keyword presence table followed by the summary."""
    lines: List[str] = [
        "<h2>Result:</h2>",
        '<table class="keywords">',
        "  <thead>",
        "    <tr><th>Keyword</th><th>Present</th></tr>",
        "  </thead>",
        "  <tbody>",
    ]
    for item in result.keywords:
        status = "present" if item.present else "missing"
        flag = "true" if item.present else "false"
        lines.append(f'    <tr class="{status}"><td>{escape(item.keyword)}</td><td>{flag}</td></tr>')
    lines.extend(
        [
            "  </tbody>",
            "</table>",
            "<h3>Summary</h3>",
            f'<p class="summary">{escape(result.summary)}</p>',
        ]
    )
    return "\n".join(lines)


def render_error(message: str) -> str:
    return f'<p class="error" style="color: red;">Error: {escape(message)}</p>'


def render_raw(data: object) -> str:
    """Render decoded JSON pretty-printed inside a ``<pre>`` block."""
    return f"<h2>Result:</h2><pre>{escape(json.dumps(data, indent=2))}</pre>"


def render_page(fragment: str, title: str = "ResumeScan") -> str:
    """Wrap a result fragment into a standalone HTML document."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>{escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f'<div id="result">\n{fragment}\n</div>\n'
        "</body>\n"
        "</html>\n"
    )
