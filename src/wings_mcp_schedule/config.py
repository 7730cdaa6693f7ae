"""Display and feed settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger("wings-mcp-schedule")

DEFAULT_TZ = "America/New_York"
DEFAULT_SLOT_MIN_TIME = "05:00:00"
DEFAULT_SLOT_MAX_TIME = "23:00:00"


@dataclass
class ScheduleSettings:
    """Values passed through to the calendar-rendering layer."""

    time_zone: str = DEFAULT_TZ
    calendar_id: str = ""
    api_key: str = ""
    slot_min_time: str = DEFAULT_SLOT_MIN_TIME
    slot_max_time: str = DEFAULT_SLOT_MAX_TIME
    scroll_time: str = DEFAULT_SLOT_MIN_TIME

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)

    @property
    def feed_configured(self) -> bool:
        return bool(self.calendar_id and self.api_key)


def _env(name: str, default: str = "") -> str:
    """Environment value, with unset or blank falling back to ``default``."""
    value = (os.environ.get(name) or "").strip()
    return value or default


def load_settings() -> ScheduleSettings:
    """Build settings from environment variables.

    Missing feed credentials are reported but not fatal: the schedule renders
    empty without them while classification keeps working.
    """
    time_zone = _env("SCHEDULE_TZ", DEFAULT_TZ)
    try:
        ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown time zone '%s', using %s", time_zone, DEFAULT_TZ)
        time_zone = DEFAULT_TZ

    slot_min_time = _env("SLOT_MIN_TIME", DEFAULT_SLOT_MIN_TIME)
    settings = ScheduleSettings(
        time_zone=time_zone,
        calendar_id=_env("GCAL_ID"),
        api_key=_env("GCAL_API_KEY"),
        slot_min_time=slot_min_time,
        slot_max_time=_env("SLOT_MAX_TIME", DEFAULT_SLOT_MAX_TIME),
        scroll_time=_env("SCROLL_TIME", slot_min_time),
    )

    if not settings.feed_configured:
        logger.warning(
            "Missing calendar feed config: api_key_present=%s calendar_id_present=%s",
            bool(settings.api_key),
            bool(settings.calendar_id),
        )
    return settings
