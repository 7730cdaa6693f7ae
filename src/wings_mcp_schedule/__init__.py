"""Ice rink schedule enrichment: classification, program details and advisories."""

from .advisories import active_advisories, load_advisories
from .annotations import extract_annotation
from .classifier import classify
from .formatter import escape_html
from .programs import resolve_meta

__all__ = [
    "active_advisories",
    "classify",
    "escape_html",
    "extract_annotation",
    "load_advisories",
    "resolve_meta",
]
