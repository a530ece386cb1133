"""Markup scanner for .html files."""

import re

from ..models import Advisory
from .common import Rule, run_rules


MARKUP_RULES: list[Rule] = [
    Rule(
        name="media_element",
        message=(
            "Media elements → Kindle can't play them; "
            "remove or provide text-only fallback."
        ),
        patterns=(re.compile(r"<video|<audio"),),
    ),
    # Both strings anywhere in the document, not necessarily the same tag
    Rule(
        name="viewport_meta",
        message=(
            "Viewport meta may not behave correctly on Kindle → "
            "Expect weird zoom behavior."
        ),
        patterns=(re.compile(r"viewport"), re.compile(r"initial-scale")),
    ),
]


def scan_markup(text: str) -> list[Advisory]:
    return run_rules(MARKUP_RULES, text)
