#!/usr/bin/env python3
"""
wings-mcp-schedule: ice rink schedule enrichment MCP server.

Classifies calendar sessions, resolves program details, extracts operator
annotations and matches manual advisories against the visible week.

Environment variables:
    ADVISORIES_CONFIG: Path to advisories.yaml (default: /config/advisories.yaml)
    SCHEDULE_TZ: Display time zone (default: America/New_York)
    GCAL_ID, GCAL_API_KEY: Calendar feed identity, passed through to the renderer
    SLOT_MIN_TIME, SLOT_MAX_TIME, SCROLL_TIME: Visible time-of-day bounds
"""

import logging
import sys
from datetime import datetime, timedelta
from typing import Any

from mcp.server.fastmcp import FastMCP

from .advisories import active_advisories as match_advisories
from .advisories import load_advisories
from .annotations import extract_annotation
from .classifier import classify, css_class
from .config import ScheduleSettings, load_settings
from .enrichment import enrich_event, tooltip_html
from .formatter import StrftimeFormatter, render_banner
from .models import CalendarEvent, EventView, ManualAdvisory, VisibleWindow
from .programs import resolve_meta

# MCP stdio servers must NEVER write to stdout, log to stderr only.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("wings-mcp-schedule")


# ---------------------------------------------------------------------------
# Module-level state
# ---------------------------------------------------------------------------

_settings: ScheduleSettings = ScheduleSettings()
_advisories: list[ManualAdvisory] = []


def _parse_datetime(value: str) -> datetime:
    """Parse ISO 8601 datetime string. Supports date-only and datetime."""
    from dateutil.parser import parse as parse_dt
    return parse_dt(value)


def _advisory_to_dict(advisory: ManualAdvisory) -> dict[str, Any]:
    return {
        "id": advisory.id,
        "start": advisory.start_date,
        "end": advisory.end_date,
        "pill": advisory.pill_label,
        "message": advisory.message,
    }


def _view_to_dict(view: EventView) -> dict[str, Any]:
    """Convert an enriched event to a JSON-friendly dict."""
    event = view.event
    return {
        "id": event.id,
        "title": event.title,
        "start": event.start.isoformat(),
        "end": event.end.isoformat() if event.end else None,
        "tag": view.tag.value,
        "class_names": list(view.class_names),
        "meta": {
            "label": view.meta.label,
            "pricing": view.meta.pricing,
            "equipment": view.meta.equipment,
            "description": view.meta.description,
            "rsvp_url": view.meta.rsvp_url,
        },
        "annotation": {"kind": view.annotation.kind.value, "text": view.annotation.text},
    }


def _formatter() -> StrftimeFormatter:
    return StrftimeFormatter(_settings.tzinfo)


# ---------------------------------------------------------------------------
# MCP Server + Tools
# ---------------------------------------------------------------------------

mcp = FastMCP("wings-schedule")


@mcp.tool()
async def classify_event(title: str = "") -> dict:
    """Classify a session by its title.

    Returns the category tag and the CSS class used to style it.
    """
    tag = classify(title)
    return {"tag": tag.value, "css_class": css_class(tag)}


@mcp.tool()
async def program_details(title: str = "") -> dict:
    """Program label, pricing, equipment and description for a session title."""
    meta = resolve_meta(title)
    return {
        "label": meta.label,
        "pricing": meta.pricing,
        "equipment": meta.equipment,
        "description": meta.description,
        "rsvp_url": meta.rsvp_url,
    }


@mcp.tool()
async def event_annotation(title: str = "", description: str = "") -> dict:
    """Extract the cancellation status or operator note from an event.

    Args:
        title: Event title
        description: Event description as delivered by the calendar feed
    """
    annotation = extract_annotation(title, description)
    return {"kind": annotation.kind.value, "text": annotation.text}


@mcp.tool()
async def enrich_events(events: list[dict[str, Any]]) -> dict:
    """Enrich a batch of calendar events for rendering.

    Each event is a dict with "title", "start" (ISO 8601) and optional "end",
    "description" and "id". Events with an unparsable start are reported in
    "errors" and left out of "events".
    """
    views: list[dict[str, Any]] = []
    errors: list[str] = []

    for raw in events:
        title = raw.get("title") or ""
        try:
            start = _parse_datetime(raw.get("start") or "")
        except Exception:
            errors.append(f"Invalid start for '{title}': {raw.get('start')}")
            continue
        end = None
        if raw.get("end"):
            try:
                end = _parse_datetime(raw["end"])
            except Exception:
                logger.warning("Ignoring unparsable end for '%s': %s", title, raw["end"])

        event = CalendarEvent(
            id=str(raw.get("id") or ""),
            title=title,
            start=start,
            end=end,
            description=raw.get("description") or "",
        )
        views.append(_view_to_dict(enrich_event(event)))

    result: dict[str, Any] = {"count": len(views), "events": views}
    if errors:
        result["errors"] = errors
    return result


@mcp.tool()
async def event_tooltip(
    title: str,
    start: str,
    end: str = "",
    description: str = "",
) -> dict:
    """Render escaped tooltip markup for a single event.

    Args:
        title: Event title
        start: Start date/time (ISO 8601)
        end: End date/time (ISO 8601). Empty = point-in-time event.
        description: Event description
    """
    try:
        dt_start = _parse_datetime(start)
    except Exception:
        return {"error": f"Invalid start date: {start}"}

    dt_end = None
    if end:
        try:
            dt_end = _parse_datetime(end)
        except Exception:
            return {"error": f"Invalid end date: {end}"}

    event = CalendarEvent(title=title, start=dt_start, end=dt_end, description=description)
    return {"html": tooltip_html(enrich_event(event), _formatter())}


@mcp.tool()
async def active_advisories(start: str = "", end: str = "") -> dict:
    """List manual advisories overlapping the visible date range.

    Args:
        start: Window start (ISO 8601). Default: today 00:00.
        end: Window end, exclusive (ISO 8601). Default: start + 7 days.
    """
    tz = _settings.tzinfo
    if start:
        try:
            dt_start = _parse_datetime(start)
        except Exception:
            return {"error": f"Invalid start date: {start}"}
    else:
        dt_start = datetime.now(tz).replace(hour=0, minute=0, second=0, microsecond=0)

    if end:
        try:
            dt_end = _parse_datetime(end)
        except Exception:
            return {"error": f"Invalid end date: {end}"}
    else:
        dt_end = dt_start + timedelta(days=7)

    active = match_advisories(_advisories, VisibleWindow(dt_start, dt_end), tz)
    return {
        "start": dt_start.isoformat(),
        "end": dt_end.isoformat(),
        "count": len(active),
        "advisories": [_advisory_to_dict(a) for a in active],
        "banner_html": render_banner(active),
    }


@mcp.tool()
async def display_settings() -> dict:
    """Display parameters for the calendar renderer."""
    return {
        "time_zone": _settings.time_zone,
        "calendar_id": _settings.calendar_id,
        "feed_configured": _settings.feed_configured,
        "slot_min_time": _settings.slot_min_time,
        "slot_max_time": _settings.slot_max_time,
        "scroll_time": _settings.scroll_time,
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    """Entry point for console script and python -m."""
    global _settings, _advisories

    _settings = load_settings()
    _advisories = load_advisories()
    logger.info(
        "Loaded %d advisory(ies), time zone %s",
        len(_advisories),
        _settings.time_zone,
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
