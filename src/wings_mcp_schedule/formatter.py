"""Escaped markup fragments for tooltips, badges and the advisory banner."""

from __future__ import annotations

import html
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Iterable, Protocol, runtime_checkable

from .classifier import css_class
from .models import Annotation, AnnotationKind, CalendarEvent, CategoryTag, ManualAdvisory, ProgramMeta

ANNOTATION_CLASSES = {
    AnnotationKind.NOTE: "wa-adv-note",
    AnnotationKind.CANCELLED: "wa-adv-cancelled",
}


def escape_html(text: object) -> str:
    """Escape ``& < > " '`` for interpolation into markup."""
    if text is None:
        return ""
    return html.escape(str(text), quote=True)


@runtime_checkable
class DateFormatter(Protocol):
    """Locale-aware date/time formatting owned by the rendering layer."""

    def format_date(self, value: datetime) -> str: ...

    def format_time(self, value: datetime) -> str: ...

    def format_range(self, start: datetime, end: datetime) -> str: ...


class StrftimeFormatter:
    """English 12-hour formatting in a fixed time zone.

    Naive datetimes are taken to already be wall-clock times in that zone.
    """

    def __init__(self, tz: tzinfo | None = None):
        self._tz = tz

    def _local(self, value: datetime) -> datetime:
        if self._tz is not None and value.tzinfo is not None:
            return value.astimezone(self._tz)
        return value

    def format_date(self, value: datetime) -> str:
        v = self._local(value)
        return f"{v:%a} {v:%b} {v.day} {v.year}"

    def format_time(self, value: datetime) -> str:
        v = self._local(value)
        hour = v.hour % 12 or 12
        return f"{hour}:{v.minute:02d} {'AM' if v.hour < 12 else 'PM'}"

    def format_range(self, start: datetime, end: datetime) -> str:
        return f"{self.format_time(start)} - {self.format_time(end)}"


@dataclass(frozen=True)
class Tooltip:
    """Escaped tooltip fields, in display order. Empty strings are omitted."""

    title: str
    date: str
    time: str
    pill: str = ""
    annotation_class: str = ""
    annotation_text: str = ""
    pricing: str = ""
    equipment: str = ""
    paragraphs: tuple[str, ...] = ()
    rsvp_url: str = ""


def format_tooltip(
    event: CalendarEvent,
    meta: ProgramMeta,
    annotation: Annotation,
    formatter: DateFormatter,
) -> Tooltip:
    date_str = formatter.format_date(event.start) if event.start else ""
    if event.start and event.end:
        time_str = formatter.format_range(event.start, event.end)
    elif event.start:
        time_str = formatter.format_time(event.start)
    else:
        time_str = ""

    return Tooltip(
        title=escape_html(event.title or ""),
        date=escape_html(date_str),
        time=escape_html(time_str),
        pill=escape_html(annotation.pill),
        annotation_class=ANNOTATION_CLASSES.get(annotation.kind, ""),
        annotation_text=escape_html(annotation.text),
        pricing=escape_html(meta.pricing),
        equipment=escape_html(meta.equipment),
        paragraphs=tuple(escape_html(p) for p in meta.paragraphs),
        rsvp_url=escape_html(meta.rsvp_url),
    )


def _row(label: str, value: str, extra_class: str = "") -> str:
    cls = f"wa-tipRow {extra_class}".strip()
    return (
        f'<div class="{cls}">'
        f'<span class="wa-tipLabel">{label}</span>'
        f'<span class="wa-tipValue">{value}</span>'
        f"</div>"
    )


def render_tooltip(tip: Tooltip) -> str:
    """Assemble tooltip markup from already-escaped fields."""
    parts = [
        f'<div class="wa-tipTitle">{tip.title}</div>',
        _row("Date", tip.date),
        _row("Time", tip.time),
    ]
    if tip.pill:
        pill = (
            f'<span class="wa-adv-pill {tip.annotation_class}">{tip.pill}</span>'
            f'<span class="wa-tipAdvText">{tip.annotation_text}</span>'
        )
        parts.append(_row(tip.pill.title(), pill, "wa-tipAdvisory"))
    if tip.pricing:
        parts.append(_row("Pricing", tip.pricing))
    if tip.equipment:
        parts.append(_row("Equipment", tip.equipment))
    if tip.paragraphs:
        body = "".join(f"<p>{p}</p>" for p in tip.paragraphs)
        parts.append(f'<div class="wa-tipDesc">{body}</div>')
    if tip.rsvp_url:
        parts.append(
            f'<div class="wa-register-wrap"><a class="wa-register-link" href="{tip.rsvp_url}" '
            f'target="_blank" rel="noopener noreferrer">RSVP</a></div>'
        )
    return "".join(parts)


def render_banner(advisories: Iterable[ManualAdvisory]) -> str:
    items = [
        f'<div class="wa-adv-item" data-advisory-id="{escape_html(a.id)}">'
        f'<span class="wa-adv-pill">{escape_html(a.pill_label)}</span>'
        f'<span class="wa-adv-message">{escape_html(a.message)}</span>'
        f"</div>"
        for a in advisories
    ]
    if not items:
        return ""
    return f'<div class="wa-adv-banner">{"".join(items)}</div>'


def event_class_names(tag: CategoryTag, annotation: Annotation) -> tuple[str, ...]:
    """CSS classes for an event badge: category plus any annotation marker."""
    names = [css_class(tag)]
    extra = ANNOTATION_CLASSES.get(annotation.kind)
    if extra:
        names.append(extra)
    return tuple(names)
