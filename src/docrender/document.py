"""Document value rendered by the template renderers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .config import SAMPLE_BODY, SAMPLE_TITLE


@dataclass(frozen=True)
class Document:
    """A title plus an ordered sequence of body lines."""

    title: str
    body: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            msg = "title must be a string."
            raise TypeError(msg)
        if isinstance(self.body, str) or not isinstance(self.body, Sequence):
            msg = "body must be a sequence of strings."
            raise TypeError(msg)
        if any(not isinstance(line, str) for line in self.body):
            msg = "body lines must be strings."
            raise TypeError(msg)
        object.__setattr__(self, "body", tuple(self.body))


def sample_document() -> Document:
    """Return the fixed sample document."""
    return Document(title=SAMPLE_TITLE, body=SAMPLE_BODY)
