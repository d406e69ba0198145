"""
ResumeScan: job description / resume keyword analysis client.

The package submits a job description and a resume to a remote
text-analysis endpoint and renders the keyword presence table and
summary it returns as HTML.  The pieces are:

1. **extract** – Turn an uploaded PDF into plain text (pdfplumber),
   pages joined by single spaces.
2. **submit** – Build the JSON request, send it and unwrap the
   endpoint's fenced JSON `result` into an `AnalysisResult`.
3. **render** – Produce the HTML table, summary and error messages.
4. **form** – The form model tying the two inputs, the loading
   indicator and the result area together.
5. **cli** – Command line entry point wiring the above together.
"""

from importlib import metadata

try:
    __version__ = metadata.version("resumescan")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0"
