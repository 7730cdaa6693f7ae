"""Manual advisories: YAML loading and visible-window matching."""

from __future__ import annotations

import logging
import os
import re
from datetime import date, datetime, time, tzinfo
from typing import Iterable

import yaml

from .models import ManualAdvisory, VisibleWindow

logger = logging.getLogger("wings-mcp-schedule")

ADVISORIES_PATH = os.environ.get("ADVISORIES_CONFIG", "/config/advisories.yaml")

_DATE_LITERAL = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class _AdvisoryLoader(yaml.SafeLoader):
    """SafeLoader that leaves date literals as strings."""


_AdvisoryLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_advisories(path: str | None = None) -> list[ManualAdvisory]:
    """Load the operator-maintained advisory list from YAML.

    Date literals are kept verbatim; malformed ones are skipped at match time
    so a single bad entry never hides the others.
    """
    path = path or ADVISORIES_PATH
    if not os.path.isfile(path):
        logger.warning("Advisory file not found: %s", path)
        return []

    with open(path, "r") as f:
        raw = yaml.load(f, Loader=_AdvisoryLoader)

    if not raw or "advisories" not in raw:
        logger.warning("No 'advisories' key in advisory file")
        return []

    advisories: list[ManualAdvisory] = []
    seen_ids: set[str] = set()

    for entry in raw["advisories"] or []:
        raw_id = entry.get("id")
        adv_id = str(raw_id).strip() if raw_id is not None else ""
        if not adv_id:
            raise ValueError("Advisory missing 'id' field")
        if adv_id in seen_ids:
            raise ValueError(f"Duplicate advisory id: '{adv_id}'")
        seen_ids.add(adv_id)

        advisories.append(ManualAdvisory(
            id=adv_id,
            start_date=str(entry.get("start") or "").strip(),
            end_date=str(entry.get("end") or "").strip(),
            pill_label=str(entry.get("pill", "") or ""),
            message=str(entry.get("message", "") or ""),
        ))

    return advisories


def parse_date_literal(value: str) -> date | None:
    """Parse a ``YYYY-MM-DD`` literal; None when malformed."""
    if not isinstance(value, str) or not _DATE_LITERAL.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def _at_midnight(day: date, tz: tzinfo | None) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def _align(value: datetime, tz: tzinfo | None) -> datetime:
    """Bring a window bound into the advisory's frame of reference."""
    if tz is None:
        return value.replace(tzinfo=None) if value.tzinfo else value
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def is_active(advisory: ManualAdvisory, window: VisibleWindow, tz: tzinfo | None = None) -> bool:
    """Half-open overlap of ``[start_date, end_date)`` with the window."""
    start_day = parse_date_literal(advisory.start_date)
    end_day = parse_date_literal(advisory.end_date)
    if start_day is None or end_day is None:
        logger.debug("Skipping advisory '%s': malformed date range", advisory.id)
        return False

    adv_start = _at_midnight(start_day, tz)
    adv_end = _at_midnight(end_day, tz)
    win_start = _align(window.start, tz)
    win_end = _align(window.end, tz)
    return adv_start < win_end and win_start < adv_end


def active_advisories(
    advisories: Iterable[ManualAdvisory],
    window: VisibleWindow,
    tz: tzinfo | None = None,
) -> list[ManualAdvisory]:
    """Return the advisories overlapping ``window``, in configured order.

    Advisory dates are midnight in ``tz``. Naive window bounds are read as
    wall-clock times in ``tz``; with no ``tz`` everything is compared naive.
    """
    return [a for a in advisories if is_active(a, window, tz)]
