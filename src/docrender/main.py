"""CLI for rendering the sample document in each format."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_APPROACH, DEFAULT_FORMAT, SAMPLE_TITLE
from .document import Document, sample_document
from .formats import FORMAT_RENDERERS, available_formats
from .rendering import APPROACHES, render_document, render_document_pdf
from .sinks import StreamSink


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a document through the template renderers.")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=available_formats(),
        default=DEFAULT_FORMAT,
        help="Output format.",
    )
    parser.add_argument(
        "--approach",
        choices=APPROACHES,
        default=DEFAULT_APPROACH,
        help="Rendering approach. Only 'template' uses the shared step sequence.",
    )
    parser.add_argument("--title", default=None, help=f"Document title. Default: {SAMPLE_TITLE!r}")
    parser.add_argument(
        "--line",
        action="append",
        default=[],
        help="Body line (repeatable). Default: the sample body.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the rendered lines to this PDF instead of stdout.",
    )
    return parser


def _build_formats_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect available output formats.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List available formats.")
    return parser


def _run_formats_cli(argv: list[str]) -> int:
    parser = _build_formats_arg_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        for name in available_formats():
            print(f"{name}\t{FORMAT_RENDERERS[name].description}")
        return 0

    parser.exit(status=2, message=f"error: unknown formats command '{args.command}'\n")
    return 2


def _resolve_document(title: str | None, lines: list[str]) -> Document:
    sample = sample_document()
    return Document(
        title=sample.title if title is None else title,
        body=tuple(lines) if lines else sample.body,
    )


def main(argv: list[str] | None = None) -> int:
    argv_list = list(sys.argv[1:] if argv is None else argv)
    if argv_list and argv_list[0] == "formats":
        return _run_formats_cli(argv_list[1:])

    parser = _build_arg_parser()
    args = parser.parse_args(argv_list)

    try:
        document = _resolve_document(args.title, args.line)
        if args.output is not None:
            destination = render_document_pdf(
                document,
                args.output,
                fmt=args.fmt,
                approach=args.approach,
            )
        else:
            sink = StreamSink(sys.stdout)
            render_document(document, fmt=args.fmt, approach=args.approach, sink=sink)
            sink.close()
            return 0
    except (TypeError, ValueError) as exc:
        parser.exit(status=2, message=f"error: {exc}\n")

    print(f"Generated document at: {destination}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
