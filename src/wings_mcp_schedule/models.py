"""Data types shared by the enrichment pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class CategoryTag(str, Enum):
    """Closed set of event categories, derived from the title."""

    STICK_AND_PUCK = "stick-and-puck"
    PUBLIC_SKATE = "public-skate"
    COSMIC_SKATE = "cosmic-skate"
    FREESTYLE = "freestyle"
    LUNCHTIME_DROPIN_HOCKEY = "lunchtime-dropin-hockey"
    OPEN_HOCKEY = "open-hockey"
    DEFAULT = "default"


class AnnotationKind(str, Enum):
    NOTE = "note"
    CANCELLED = "cancelled"
    NONE = "none"


@dataclass
class CalendarEvent:
    """Raw event as handed over by the calendar-rendering layer."""

    title: str
    start: datetime
    end: datetime | None = None
    description: str = ""
    id: str = ""


@dataclass(frozen=True)
class ProgramMeta:
    """Descriptive content shown in the event detail popup."""

    label: str
    pricing: str = ""
    equipment: str = ""
    description: str = ""
    rsvp_url: str = ""

    @property
    def paragraphs(self) -> list[str]:
        """Description split on blank lines."""
        chunks = [p.strip() for p in self.description.split("\n\n")]
        return [p for p in chunks if p]


@dataclass(frozen=True)
class Annotation:
    kind: AnnotationKind = AnnotationKind.NONE
    text: str = ""

    @property
    def pill(self) -> str:
        """Short uppercase label for the inline pill ("" when unannotated)."""
        if self.kind is AnnotationKind.NONE:
            return ""
        return self.kind.value.upper()


@dataclass(frozen=True)
class ManualAdvisory:
    """Operator-authored advisory for a date range.

    ``start_date`` and ``end_date`` are the raw ``YYYY-MM-DD`` literals from
    configuration; ``end_date`` is exclusive.
    """

    id: str
    start_date: str
    end_date: str
    pill_label: str = ""
    message: str = ""


@dataclass(frozen=True)
class VisibleWindow:
    """Date range currently displayed by the calendar view (half-open)."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class EventView:
    """Immutable per-event view-model for the rendering layer."""

    event: CalendarEvent
    tag: CategoryTag
    meta: ProgramMeta
    annotation: Annotation
    class_names: tuple[str, ...] = field(default_factory=tuple)
