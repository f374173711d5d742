"""Base rendering template and its callback-driven counterpart."""

from __future__ import annotations

import sys

from docrender.document import Document, sample_document
from docrender.sinks import OutputSink, StreamSink

from .contracts import StepHook, StepHooks


class DocumentRenderer:
    """Render a document through a fixed six-step sequence.

    Subclasses customise output by overriding the ``emit_*`` steps they need.
    Every step except ``emit_body`` defaults to a no-op (``emit_line`` writes
    the line unchanged), so a variant overrides only what differs for its
    format. ``render`` itself is never overridden.
    """

    def __init__(
        self,
        document: Document | None = None,
        sink: OutputSink | None = None,
    ) -> None:
        self.document = document if document is not None else sample_document()
        self.sink = sink if sink is not None else StreamSink(sys.stdout)

    @property
    def title(self) -> str:
        return self.document.title

    @property
    def body(self) -> tuple[str, ...]:
        return self.document.body

    def render(self) -> None:
        """Run the template steps in order."""
        self.emit_start()
        self.emit_head()
        self.emit_body_start()
        self.emit_body()
        self.emit_body_end()
        self.emit_end()

    def emit_body(self) -> None:
        """Emit every body line in its original order."""
        for line in self.body:
            self.emit_line(line)

    def emit_start(self) -> None:
        pass

    def emit_head(self) -> None:
        pass

    def emit_body_start(self) -> None:
        pass

    def emit_line(self, line: str) -> None:
        self.write(line)

    def emit_body_end(self) -> None:
        pass

    def emit_end(self) -> None:
        pass

    def write(self, text: str) -> None:
        self.sink.write_line(text)


class CallbackRenderer(DocumentRenderer):
    """Template whose steps come from a ``StepHooks`` bundle instead of subclassing."""

    def __init__(
        self,
        hooks: StepHooks,
        document: Document | None = None,
        sink: OutputSink | None = None,
    ) -> None:
        super().__init__(document, sink)
        self.hooks = hooks

    def _call(self, hook: StepHook | None) -> None:
        if hook is not None:
            hook(self.document, self.sink)

    def emit_start(self) -> None:
        self._call(self.hooks.start)

    def emit_head(self) -> None:
        self._call(self.hooks.head)

    def emit_body_start(self) -> None:
        self._call(self.hooks.body_start)

    def emit_line(self, line: str) -> None:
        if self.hooks.line is None:
            super().emit_line(line)
            return
        self.hooks.line(line, self.sink)

    def emit_body_end(self) -> None:
        self._call(self.hooks.body_end)

    def emit_end(self) -> None:
        self._call(self.hooks.end)
