"""Output sinks and backend adapters."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO

from reportlab.pdfgen import canvas

from .config import DEFAULT_PAGESIZE, Theme


class OutputSink(Protocol):
    """Line-oriented destination used by renderers."""

    def write_line(self, text: str) -> None: ...
    def close(self) -> None: ...


class StreamSink:
    """Write lines to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write_line(self, text: str) -> None:
        self._stream.write(f"{text}\n")

    def close(self) -> None:
        # The stream is owned by the caller.
        self._stream.flush()


class ListSink:
    """Collect lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def close(self) -> None:
        pass


class ReportLabSink:
    """ReportLab-backed sink laying lines out top-down on PDF pages.

    Lines wider than the space between the margins wrap onto extra rows.
    """

    def __init__(
        self,
        target: canvas.Canvas,
        *,
        pagesize: tuple[float, float],
        theme: type = Theme,
    ) -> None:
        self._target = target
        self._theme = theme
        page_width, self._page_height = pagesize
        self._max_width = page_width - 2 * theme.MARGIN
        self._cursor_y = 0.0
        self.page_count = 0
        self.rows_written = 0
        self._start_page()

    def _start_page(self) -> None:
        self.page_count += 1
        self._target.setFillColor(self._theme.TEXT_PRIMARY)
        self._target.setFont(self._theme.FONT_REGULAR, self._theme.FONT_SIZE)
        self._cursor_y = self._page_height - self._theme.MARGIN

    def _fits(self, text: str) -> bool:
        width = self._target.stringWidth(text, self._theme.FONT_REGULAR, self._theme.FONT_SIZE)
        return width <= self._max_width

    def _wrap(self, text: str) -> list[str]:
        rows: list[str] = []
        current = ""
        for char in text:
            # A row always keeps at least one character.
            if current and not self._fits(current + char):
                rows.append(current)
                current = char
            else:
                current += char
        rows.append(current)
        return rows

    def write_line(self, text: str) -> None:
        for row in self._wrap(text):
            if self._cursor_y < self._theme.MARGIN:
                self._target.showPage()
                self._start_page()
            self._target.drawString(self._theme.MARGIN, self._cursor_y, row)
            self._cursor_y -= self._theme.LINE_HEIGHT
            self.rows_written += 1

    def close(self) -> None:
        self._target.save()


def create_reportlab_sink(
    output_path: str | Path,
    *,
    pagesize: tuple[float, float] = DEFAULT_PAGESIZE,
    title: str | None = None,
    theme: type = Theme,
) -> ReportLabSink:
    """Create a PDF sink, making parent directories as needed."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    target = canvas.Canvas(str(destination), pagesize=pagesize)
    if title is not None:
        target.setTitle(title)
    return ReportLabSink(target, pagesize=pagesize, theme=theme)
