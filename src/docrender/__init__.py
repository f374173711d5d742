"""Template Method document renderers."""

from .document import Document, sample_document
from .formats import (
    FORMAT_RENDERERS,
    HtmlRenderer,
    PlainTextRenderer,
    XmlRenderer,
    available_formats,
    get_renderer_class,
)
from .naive import MonolithicDocument, SwitchDocument
from .rendering import render_document, render_document_pdf
from .sinks import ListSink, OutputSink, ReportLabSink, StreamSink, create_reportlab_sink
from .template_engine import STEP_ORDER, CallbackRenderer, DocumentRenderer, StepHooks

__all__ = [
    "FORMAT_RENDERERS",
    "STEP_ORDER",
    "CallbackRenderer",
    "Document",
    "DocumentRenderer",
    "HtmlRenderer",
    "ListSink",
    "MonolithicDocument",
    "OutputSink",
    "PlainTextRenderer",
    "ReportLabSink",
    "StepHooks",
    "StreamSink",
    "SwitchDocument",
    "XmlRenderer",
    "available_formats",
    "create_reportlab_sink",
    "get_renderer_class",
    "render_document",
    "render_document_pdf",
    "sample_document",
]
