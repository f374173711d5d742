"""Template engine package."""

from .base import CallbackRenderer, DocumentRenderer
from .contracts import STEP_ORDER, LineHook, StepHook, StepHooks

__all__ = [
    "STEP_ORDER",
    "CallbackRenderer",
    "DocumentRenderer",
    "LineHook",
    "StepHook",
    "StepHooks",
]
