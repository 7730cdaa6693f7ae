"""Tests for title classification and program metadata."""

import pytest

from wings_mcp_schedule.classifier import RULES, classify, css_class
from wings_mcp_schedule.models import CategoryTag
from wings_mcp_schedule.programs import DEFAULT_META, LUNCHTIME_RSVP_URL, PROGRAMS, resolve_meta


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

class TestClassify:
    @pytest.mark.parametrize("title, expected", [
        ("Stick & Puck", CategoryTag.STICK_AND_PUCK),
        ("Public Skate", CategoryTag.PUBLIC_SKATE),
        ("Cosmic Skate Night", CategoryTag.COSMIC_SKATE),
        ("Freestyle Session", CategoryTag.FREESTYLE),
        ("Figure Skating Practice", CategoryTag.FREESTYLE),
        ("Lunchtime Adult Drop-In Hockey", CategoryTag.LUNCHTIME_DROPIN_HOCKEY),
        ("Open Hockey 18+", CategoryTag.OPEN_HOCKEY),
        ("Zamboni Maintenance", CategoryTag.DEFAULT),
    ])
    def test_known_titles(self, title, expected):
        assert classify(title) == expected

    def test_case_and_spacing_insensitive(self):
        assert classify("PUCK  and   STICK") == CategoryTag.STICK_AND_PUCK
        assert classify("sKaTe PuBlIc") == CategoryTag.PUBLIC_SKATE

    def test_stick_and_puck_beats_lower_rules(self):
        assert classify("Public Skate + Stick and Puck") == CategoryTag.STICK_AND_PUCK
        assert classify("Open Hockey Stick n Puck") == CategoryTag.STICK_AND_PUCK

    def test_lunchtime_beats_open_hockey(self):
        title = "Lunchtime Adult Drop In Open Hockey"
        assert classify(title) == CategoryTag.LUNCHTIME_DROPIN_HOCKEY

    def test_lunchtime_needs_every_keyword(self):
        # no "adult": falls through to the generic rule
        assert classify("Lunchtime Drop-In Open Hockey") == CategoryTag.OPEN_HOCKEY

    def test_figure_without_skating_is_default(self):
        assert classify("Figure Eight Drills") == CategoryTag.DEFAULT

    def test_empty_and_none(self):
        assert classify("") == CategoryTag.DEFAULT
        assert classify(None) == CategoryTag.DEFAULT

    def test_rule_order(self):
        assert [r.tag for r in RULES] == [
            CategoryTag.STICK_AND_PUCK,
            CategoryTag.PUBLIC_SKATE,
            CategoryTag.COSMIC_SKATE,
            CategoryTag.FREESTYLE,
            CategoryTag.LUNCHTIME_DROPIN_HOCKEY,
            CategoryTag.OPEN_HOCKEY,
        ]

    def test_css_class(self):
        assert css_class(CategoryTag.STICK_AND_PUCK) == "evt-stickpuck"
        assert css_class(CategoryTag.LUNCHTIME_DROPIN_HOCKEY) == "evt-lunchtime-dropin"
        assert css_class(CategoryTag.DEFAULT) == "evt-default"


# ---------------------------------------------------------------------------
# resolve_meta
# ---------------------------------------------------------------------------

class TestResolveMeta:
    def test_stick_and_puck(self):
        meta = resolve_meta("Stick & Puck")
        assert meta.label == "Stick & Puck"
        assert meta.pricing == "Admission - $20"
        assert meta.equipment == "Helmet, Skates, Gloves, Stick"

    def test_public_skate_has_no_equipment(self):
        meta = resolve_meta("Public Skate")
        assert meta.label == "Public Skate"
        assert meta.equipment == ""
        assert "$14" in meta.pricing

    def test_freestyle_has_two_paragraphs(self):
        meta = resolve_meta("Freestyle")
        assert len(meta.paragraphs) == 2
        assert meta.paragraphs[1].startswith("Skaters must be familiar")

    def test_lunchtime_rsvp(self):
        assert resolve_meta("Lunchtime Adult Drop-In Hockey").rsvp_url == LUNCHTIME_RSVP_URL
        assert resolve_meta("Open Hockey").rsvp_url == ""

    def test_unknown_title_gets_default(self):
        meta = resolve_meta("Birthday Party")
        assert meta == DEFAULT_META
        assert meta.label == "Session"
        assert meta.pricing == meta.equipment == meta.description == ""
        assert meta.paragraphs == []

    def test_empty_title(self):
        assert resolve_meta("") == DEFAULT_META
        assert resolve_meta(None) == DEFAULT_META

    @pytest.mark.parametrize("title", [
        "Stick & Puck",
        "Public Stick and Puck Skate",
        "Public Skate",
        "Cosmic Skate",
        "Figure Skating Freestyle",
        "Lunchtime Adult Drop In Open Hockey",
        "Open Hockey",
    ])
    def test_agrees_with_classify(self, title):
        tag = classify(title)
        assert tag != CategoryTag.DEFAULT
        meta = resolve_meta(title)
        assert meta.label
        assert meta is PROGRAMS[tag]

    def test_every_tag_has_a_record(self):
        assert set(PROGRAMS) == {r.tag for r in RULES}

    def test_program_copy_keeps_operator_wording(self):
        assert "Cosmic Skate — an atmosphere" in resolve_meta("Cosmic Skate").description
        assert "own pace—no organized games" in resolve_meta("Stick & Puck").description
        assert "all levels—unless otherwise noted—and" in resolve_meta("Freestyle").description
