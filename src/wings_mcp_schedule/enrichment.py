"""Per-event view-models combining classification, metadata and annotations."""

from __future__ import annotations

from typing import Iterable

from .annotations import extract_annotation
from .classifier import classify
from .formatter import DateFormatter, event_class_names, format_tooltip, render_tooltip
from .models import CalendarEvent, EventView
from .programs import resolve_meta


def enrich_event(event: CalendarEvent) -> EventView:
    tag = classify(event.title)
    annotation = extract_annotation(event.title, event.description)
    return EventView(
        event=event,
        tag=tag,
        meta=resolve_meta(event.title),
        annotation=annotation,
        class_names=event_class_names(tag, annotation),
    )


def enrich_events(events: Iterable[CalendarEvent]) -> list[EventView]:
    return [enrich_event(e) for e in events]


def tooltip_html(view: EventView, formatter: DateFormatter) -> str:
    """Render the hover tooltip for an enriched event."""
    return render_tooltip(format_tooltip(view.event, view.meta, view.annotation, formatter))
