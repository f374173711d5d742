"""Tests for output sinks."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from docrender.config import Theme
from docrender.sinks import ListSink, StreamSink, create_reportlab_sink


class StreamSinkTests(unittest.TestCase):
    def test_writes_newline_terminated_lines(self) -> None:
        stream = io.StringIO()
        sink = StreamSink(stream)
        sink.write_line("a")
        sink.write_line("b")
        sink.close()
        self.assertEqual(stream.getvalue(), "a\nb\n")
        self.assertFalse(stream.closed)


class ListSinkTests(unittest.TestCase):
    def test_collects_lines(self) -> None:
        sink = ListSink()
        sink.write_line("x")
        sink.close()
        self.assertEqual(sink.lines, ["x"])


class ReportLabSinkTests(unittest.TestCase):
    def test_writes_pdf_in_nested_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_path = Path(tmp_dir) / "nested" / "doc.pdf"
            sink = create_reportlab_sink(output_path, title="Test")
            sink.write_line("<document>")
            sink.close()
            self.assertTrue(output_path.exists())
            self.assertTrue(output_path.read_bytes().startswith(b"%PDF"))
            self.assertEqual(sink.page_count, 1)

    def test_starts_new_page_when_full(self) -> None:
        page_height = 2 * Theme.MARGIN + 3 * Theme.LINE_HEIGHT
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_path = Path(tmp_dir) / "long.pdf"
            sink = create_reportlab_sink(output_path, pagesize=(400, page_height))
            for idx in range(10):
                sink.write_line(f"line {idx}")
            sink.close()
            self.assertGreater(sink.page_count, 1)
            self.assertTrue(output_path.exists())

    def test_long_line_wraps_within_margins(self) -> None:
        page_width = 2 * Theme.MARGIN + 60
        page_height = 2 * Theme.MARGIN + 3 * Theme.LINE_HEIGHT
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_path = Path(tmp_dir) / "wide.pdf"
            sink = create_reportlab_sink(output_path, pagesize=(page_width, page_height))
            sink.write_line("x" * 100)
            sink.close()
            self.assertGreater(sink.rows_written, 1)
            self.assertGreater(sink.page_count, 1)

    def test_short_and_empty_lines_use_one_row(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            sink = create_reportlab_sink(Path(tmp_dir) / "short.pdf")
            sink.write_line("short")
            sink.write_line("")
            sink.close()
            self.assertEqual(sink.rows_written, 2)
