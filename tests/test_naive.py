"""Tests for the non-template rendering approaches."""

from __future__ import annotations

import unittest

from docrender.document import Document
from docrender.formats import FORMAT_RENDERERS, XmlRenderer
from docrender.naive import MonolithicDocument, SwitchDocument
from docrender.sinks import ListSink

DOCUMENT = Document(title="Notes & more", body=("first", "<second>"))


def _template_lines(fmt: str) -> list[str]:
    sink = ListSink()
    FORMAT_RENDERERS[fmt](DOCUMENT, sink).render()
    return sink.lines


class MonolithicDocumentTests(unittest.TestCase):
    def test_matches_xml_renderer(self) -> None:
        naive = ListSink()
        MonolithicDocument(DOCUMENT, naive).render()
        template = ListSink()
        XmlRenderer(DOCUMENT, template).render()
        self.assertEqual(naive.lines, template.lines)


class SwitchDocumentTests(unittest.TestCase):
    def test_each_branch_matches_template_renderer(self) -> None:
        for fmt in FORMAT_RENDERERS:
            with self.subTest(format=fmt):
                sink = ListSink()
                SwitchDocument(DOCUMENT, sink).render(fmt)
                self.assertEqual(sink.lines, _template_lines(fmt))

    def test_unknown_format_raises(self) -> None:
        sink = ListSink()
        with self.assertRaisesRegex(ValueError, "unknown format 'rtf'"):
            SwitchDocument(DOCUMENT, sink).render("rtf")
        self.assertEqual(sink.lines, [])

    def test_xml_branch_escapes_body_lines(self) -> None:
        sink = ListSink()
        SwitchDocument(DOCUMENT, sink).render("xml")
        self.assertIn("&lt;second&gt;", sink.lines)
        self.assertNotIn("<second>", sink.lines)
