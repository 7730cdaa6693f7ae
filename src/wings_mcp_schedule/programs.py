"""Program metadata (pricing, equipment, copy) per session type."""

from __future__ import annotations

from .classifier import match_rule
from .models import CategoryTag, ProgramMeta

LUNCHTIME_RSVP_URL = "https://www.wingsarena.com/lunchtime-hockey"

DEFAULT_META = ProgramMeta(label="Session")

PROGRAMS: dict[CategoryTag, ProgramMeta] = {
    CategoryTag.PUBLIC_SKATE: ProgramMeta(
        label="Public Skate",
        pricing="Admission - $14, Skate Rentals - $6",
        description=(
            "An open skate for all ages and abilities. Whether you're practicing "
            "your skills or just skating for fun!"
        ),
    ),
    CategoryTag.COSMIC_SKATE: ProgramMeta(
        label="Cosmic Skate",
        pricing="Admission - 13 & Older - $20, 12 & Under $15, Skate Rentals - INCLUDED",
        description=(
            "Join us for Cosmic Skate — an atmosphere that turns skating into a party "
            "on ice. A unique twist on a classic skate, perfect for friends, families, "
            "and anyone looking for a fun night on ice full of music and lights."
        ),
    ),
    CategoryTag.STICK_AND_PUCK: ProgramMeta(
        label="Stick & Puck",
        pricing="Admission - $20",
        equipment="Helmet, Skates, Gloves, Stick",
        description=(
            "Stick & Puck is open ice time for individual skill development. Players "
            "can work on shooting, passing, stickhandling, and skating at their own "
            "pace—no organized games or scrimmages."
        ),
    ),
    CategoryTag.LUNCHTIME_DROPIN_HOCKEY: ProgramMeta(
        label="Lunchtime Adult Drop-In Hockey",
        pricing="$25",
        equipment="Full Equipment Required",
        description=(
            "Lunchtime Adult Drop-In Hockey is a fast, fun midday skate built for adults "
            "who want to get on the ice without committing to a full league season. "
            "Expect a balanced pickup-style game (or organized shinny depending on "
            "turnout), a great workout, and a welcoming locker-room vibe for players "
            "of all levels."
        ),
        rsvp_url=LUNCHTIME_RSVP_URL,
    ),
    CategoryTag.OPEN_HOCKEY: ProgramMeta(
        label="Open Hockey",
        pricing="Admission - $25",
        equipment="Full Equipment Required",
        description=(
            "Open Hockey is a casual, non-league skate where players within a "
            "designated age group can sign-up, show up, and play in a fun, low-pressure "
            "game with a variety of other players of all skill levels. Just bring your "
            "gear and hit the ice!"
        ),
    ),
    CategoryTag.FREESTYLE: ProgramMeta(
        label="Freestyle",
        pricing="Admission: $25 (Skaters) | $10 (Coaches)",
        description=(
            "Designated ice time for figure skaters only, providing a focused "
            "environment for individual practice and private lessons. These sessions "
            "are open to all levels—unless otherwise noted—and are ideal for skaters "
            "looking to improve jumps, spins, and moves in the field.\n\n"
            "Skaters must be familiar with standard ice patterns and etiquette to "
            "ensure a safe and productive experience for everyone. If your skater is "
            "new to Freestyle and unsure about the proper ice patterns, please ask a "
            "coach for a quick overview."
        ),
    ),
}


def resolve_meta(title: str | None) -> ProgramMeta:
    """Look up the program record for an event title.

    The rule table is evaluated again here rather than taking a tag from the
    caller, so the result depends on ``title`` alone.
    """
    rule = match_rule(title)
    if rule is None:
        return DEFAULT_META
    return PROGRAMS[rule.tag]
