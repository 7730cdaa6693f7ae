"""Operator annotations embedded in event descriptions."""

from __future__ import annotations

import re

from .models import Annotation, AnnotationKind

NOTE_PREFIXES = ("note:", "advisory:")
CANCEL_WORDS = ("cancelled", "canceled")
CANCELLED_MESSAGE = "This session has been cancelled."

_LINE_SPLIT = re.compile(r"\r?\n")


def _lines(description: str | None) -> list[str]:
    lines = (line.strip() for line in _LINE_SPLIT.split(description or ""))
    return [line for line in lines if line]


def _find_note(description: str | None) -> str | None:
    for line in _lines(description):
        lower = line.lower()
        for prefix in NOTE_PREFIXES:
            if lower.startswith(prefix):
                return line[len(prefix):].strip()
    return None


def extract_note(description: str | None) -> str:
    """Return the text of the first ``Note:``/``Advisory:`` line, or ""."""
    return _find_note(description) or ""


def is_cancelled(title: str | None, description: str | None) -> bool:
    haystack = f"{title or ''}\n{description or ''}".lower()
    return any(word in haystack for word in CANCEL_WORDS)


def extract_annotation(title: str | None, description: str | None) -> Annotation:
    """Derive the single inline annotation for an event.

    Cancellation wins over a note line. A cancelled event still carries the
    note text when one exists, otherwise a generic cancellation message.
    """
    note = _find_note(description)
    if is_cancelled(title, description):
        return Annotation(AnnotationKind.CANCELLED, note or CANCELLED_MESSAGE)
    if note is not None:
        return Annotation(AnnotationKind.NOTE, note)
    return Annotation()
