"""Title classification via an ordered keyword rule table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .models import CategoryTag


@dataclass(frozen=True)
class Rule:
    """A keyword predicate over a lower-cased title and the tag it selects."""

    tag: CategoryTag
    matches: Callable[[str], bool]


def _all_of(*words: str) -> Callable[[str], bool]:
    return lambda t: all(w in t for w in words)


def _freestyle(t: str) -> bool:
    return "freestyle" in t or ("figure" in t and "skating" in t)


# Evaluated top to bottom, first match wins. Lunchtime drop-in must stay above
# the generic open hockey rule.
RULES: tuple[Rule, ...] = (
    Rule(CategoryTag.STICK_AND_PUCK, _all_of("stick", "puck")),
    Rule(CategoryTag.PUBLIC_SKATE, _all_of("public", "skate")),
    Rule(CategoryTag.COSMIC_SKATE, _all_of("cosmic", "skate")),
    Rule(CategoryTag.FREESTYLE, _freestyle),
    Rule(CategoryTag.LUNCHTIME_DROPIN_HOCKEY, _all_of("lunchtime", "adult", "drop", "in", "hockey")),
    Rule(CategoryTag.OPEN_HOCKEY, _all_of("open", "hockey")),
)

CSS_CLASSES: dict[CategoryTag, str] = {
    CategoryTag.STICK_AND_PUCK: "evt-stickpuck",
    CategoryTag.PUBLIC_SKATE: "evt-publicskate",
    CategoryTag.COSMIC_SKATE: "evt-cosmic",
    CategoryTag.FREESTYLE: "evt-freestyle",
    CategoryTag.LUNCHTIME_DROPIN_HOCKEY: "evt-lunchtime-dropin",
    CategoryTag.OPEN_HOCKEY: "evt-openhockey",
    CategoryTag.DEFAULT: "evt-default",
}


def match_rule(title: str | None) -> Rule | None:
    """Return the first rule matching ``title``, or None."""
    t = (title or "").lower()
    for rule in RULES:
        if rule.matches(t):
            return rule
    return None


def classify(title: str | None) -> CategoryTag:
    """Map an event title to its category tag."""
    rule = match_rule(title)
    return rule.tag if rule else CategoryTag.DEFAULT


def css_class(tag: CategoryTag) -> str:
    return CSS_CLASSES[tag]
