"""Concrete output formats built on the rendering template."""

from __future__ import annotations

from html import escape as html_escape
from xml.sax.saxutils import escape as xml_escape

from .template_engine import DocumentRenderer


class XmlRenderer(DocumentRenderer):
    """XML-like document wrapper with escaped title and body lines."""

    description = "XML-like markup with <document>/<title>/<text> elements."

    def emit_start(self) -> None:
        self.write("<document>")

    def emit_head(self) -> None:
        self.write(f"<title>{xml_escape(self.title)}</title>")

    def emit_body_start(self) -> None:
        self.write("<text>")

    def emit_line(self, line: str) -> None:
        self.write(xml_escape(line))

    def emit_body_end(self) -> None:
        self.write("</text>")

    def emit_end(self) -> None:
        self.write("</document>")


class HtmlRenderer(DocumentRenderer):
    """HTML page with one paragraph per body line."""

    description = "HTML page with one <p> per body line."

    def emit_start(self) -> None:
        self.write("<html>")

    def emit_head(self) -> None:
        self.write(f"<head><title>{html_escape(self.title)}</title></head>")

    def emit_body_start(self) -> None:
        self.write("<body>")

    def emit_line(self, line: str) -> None:
        self.write(f"<p>{html_escape(line)}</p>")

    def emit_body_end(self) -> None:
        self.write("</body>")

    def emit_end(self) -> None:
        self.write("</html>")


class PlainTextRenderer(DocumentRenderer):
    """Bare title followed by the body lines."""

    description = "Plain text: bare title followed by the body lines."

    def emit_head(self) -> None:
        self.write(self.title)


FORMAT_RENDERERS: dict[str, type[DocumentRenderer]] = {
    "xml": XmlRenderer,
    "html": HtmlRenderer,
    "plain": PlainTextRenderer,
}


def available_formats() -> tuple[str, ...]:
    """Return known format names."""
    return tuple(sorted(FORMAT_RENDERERS))


def get_renderer_class(fmt: str) -> type[DocumentRenderer]:
    """Return the renderer class for one format name."""
    try:
        return FORMAT_RENDERERS[fmt]
    except KeyError:
        valid = ", ".join(available_formats())
        msg = f"unknown format '{fmt}'. Valid formats: {valid}."
        raise ValueError(msg) from None
