"""Core contracts for the rendering template."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from docrender.document import Document
from docrender.sinks import OutputSink

# Invariant step sequence shared by every renderer.
STEP_ORDER = ("start", "head", "body_start", "body", "body_end", "end")

StepHook = Callable[[Document, OutputSink], None]
LineHook = Callable[[str, OutputSink], None]


@dataclass(frozen=True)
class StepHooks:
    """Optional per-step callbacks; a missing hook keeps the base default."""

    start: StepHook | None = None
    head: StepHook | None = None
    body_start: StepHook | None = None
    line: LineHook | None = None
    body_end: StepHook | None = None
    end: StepHook | None = None
