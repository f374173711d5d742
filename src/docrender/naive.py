"""Rendering without the template, kept for contrast.

``MonolithicDocument`` hard-codes a single format. ``SwitchDocument`` branches
on the requested format inside one method, so every new format grows ``render``
and repeats the whole step sequence. Both produce the same lines as the
matching renderer in ``docrender.formats``.
"""

from __future__ import annotations

import sys
from html import escape as html_escape
from xml.sax.saxutils import escape as xml_escape

from .document import Document, sample_document
from .sinks import OutputSink, StreamSink

SWITCH_FORMATS = ("xml", "html", "plain")


class _NaiveDocument:
    def __init__(
        self,
        document: Document | None = None,
        sink: OutputSink | None = None,
    ) -> None:
        self.document = document if document is not None else sample_document()
        self.sink = sink if sink is not None else StreamSink(sys.stdout)


class MonolithicDocument(_NaiveDocument):
    """Single hard-coded XML rendering."""

    def render(self) -> None:
        write = self.sink.write_line
        write("<document>")
        write(f"<title>{xml_escape(self.document.title)}</title>")
        write("<text>")
        for line in self.document.body:
            write(xml_escape(line))
        write("</text>")
        write("</document>")


class SwitchDocument(_NaiveDocument):
    """One render method switching on the requested format."""

    def render(self, fmt: str) -> None:
        write = self.sink.write_line
        title = self.document.title
        body = self.document.body
        if fmt == "xml":
            write("<document>")
            write(f"<title>{xml_escape(title)}</title>")
            write("<text>")
            for line in body:
                write(xml_escape(line))
            write("</text>")
            write("</document>")
        elif fmt == "html":
            write("<html>")
            write(f"<head><title>{html_escape(title)}</title></head>")
            write("<body>")
            for line in body:
                write(f"<p>{html_escape(line)}</p>")
            write("</body>")
            write("</html>")
        elif fmt == "plain":
            write(title)
            for line in body:
                write(line)
        else:
            msg = f"unknown format '{fmt}'. Valid formats: {', '.join(SWITCH_FORMATS)}."
            raise ValueError(msg)
