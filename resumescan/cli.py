"""
Command line interface for ResumeScan.

``resumescan submit`` fills the form from its arguments (pasted text or
a PDF path for each field), sends it to the analysis endpoint and
writes the rendered HTML either to stdout or, with ``--out``, as a
standalone page.  The exit status is 1 when an error was rendered.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .config import ClientConfig, load_config
from .form import FieldInput, FormClient, FormState
from .render.html import render_page
from .submit.client import AnalysisClient

logger = logging.getLogger("resumescan.cli")


def _fill_field(field: FieldInput, text: str | None, pdf: str | None) -> None:
    if text is not None:
        field.set_text(text)
    if pdf:
        field.attach_file(pdf)


def cmd_submit(args: argparse.Namespace, config: ClientConfig) -> int:
    """Submit one job description / resume pair and write the result."""
    if args.endpoint:
        config.endpoint = args.endpoint
    if args.timeout is not None:
        config.timeout = args.timeout
    form = FormClient(AnalysisClient.from_config(config), raw_output=args.format == "json")
    _fill_field(form.job_description, args.job_description, args.job_description_pdf)
    _fill_field(form.resume, args.resume, args.resume_pdf)
    state = form.submit()
    if args.out:
        Path(args.out).write_text(render_page(form.view.html), encoding="utf-8")
        logger.info("Wrote result page to %s", args.out)
    else:
        print(form.view.html)
    return 0 if state is FormState.SUCCESS else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resumescan", description="Job description / resume keyword analysis client")
    subparsers = parser.add_subparsers(dest="command", required=True)

    submit_cmd = subparsers.add_parser("submit", help="Submit a job description and a resume for analysis")
    jd_group = submit_cmd.add_mutually_exclusive_group(required=True)
    jd_group.add_argument("--job-description", dest="job_description", help="Job description text")
    jd_group.add_argument("--job-description-pdf", dest="job_description_pdf", help="Path to a job description PDF")
    resume_group = submit_cmd.add_mutually_exclusive_group(required=True)
    resume_group.add_argument("--resume", help="Resume text")
    resume_group.add_argument("--resume-pdf", dest="resume_pdf", help="Path to a resume PDF")
    submit_cmd.add_argument("--config", help="YAML config file")
    submit_cmd.add_argument("--endpoint", help="Analysis endpoint URL (overrides config)")
    submit_cmd.add_argument("--timeout", type=float, help="Request timeout in seconds")
    submit_cmd.add_argument(
        "--format",
        choices=["html", "json"],
        default="html",
        help="Render the keyword table (html) or the raw decoded result (json)",
    )
    submit_cmd.add_argument("--out", help="Write a standalone HTML page to this path")
    submit_cmd.set_defaults(func=cmd_submit)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    logging.basicConfig(level=config.log_level, format="[%(levelname)s] %(message)s")
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
