"""Shared entry point tying documents, approaches and sinks together."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .config import DEFAULT_APPROACH, DEFAULT_FORMAT, DEFAULT_PDF_FILENAME_TEMPLATE, Theme
from .document import Document
from .formats import get_renderer_class
from .naive import SWITCH_FORMATS, MonolithicDocument, SwitchDocument
from .sinks import OutputSink, create_reportlab_sink

APPROACHES = ("template", "switch", "monolithic")

RenderFn = Callable[[Document | None, OutputSink | None], None]


def _resolve_renderer(fmt: str, approach: str) -> RenderFn:
    """Validate the format/approach pair and return a render callable."""
    if approach == "template":
        renderer_cls = get_renderer_class(fmt)
        return lambda document, sink: renderer_cls(document, sink).render()
    if approach == "switch":
        if fmt not in SWITCH_FORMATS:
            msg = f"unknown format '{fmt}'. Valid formats: {', '.join(SWITCH_FORMATS)}."
            raise ValueError(msg)
        return lambda document, sink: SwitchDocument(document, sink).render(fmt)
    if approach == "monolithic":
        if fmt != "xml":
            msg = f"the monolithic approach only renders 'xml', not '{fmt}'."
            raise ValueError(msg)
        return lambda document, sink: MonolithicDocument(document, sink).render()
    msg = f"unknown approach '{approach}'. Valid approaches: {', '.join(APPROACHES)}."
    raise ValueError(msg)


def render_document(
    document: Document | None = None,
    *,
    fmt: str = DEFAULT_FORMAT,
    approach: str = DEFAULT_APPROACH,
    sink: OutputSink | None = None,
) -> None:
    """Render one document with the chosen format and approach."""
    _resolve_renderer(fmt, approach)(document, sink)


def render_document_pdf(
    document: Document | None = None,
    output_path: str | Path | None = None,
    *,
    fmt: str = DEFAULT_FORMAT,
    approach: str = DEFAULT_APPROACH,
    theme: type = Theme,
) -> Path:
    """Render a document's lines into a PDF and return the output path."""
    render = _resolve_renderer(fmt, approach)
    destination = Path(output_path or DEFAULT_PDF_FILENAME_TEMPLATE.format(format=fmt))
    sink = create_reportlab_sink(destination, title=f"Document ({fmt})", theme=theme)
    try:
        render(document, sink)
    finally:
        sink.close()
    return destination
