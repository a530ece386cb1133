"""Stylesheet scanner for .css files."""

import re

from ..models import Advisory
from .common import Rule, run_rules


STYLESHEET_RULES: list[Rule] = [
    # Plain substring: also hits identifiers such as .flexible or grid-area
    Rule(
        name="modern_layout",
        message=(
            "Modern layout (flex/grid) → Kindle's browser barely supports them; "
            "consider floats or table layouts."
        ),
        patterns=(re.compile(r"flex|grid"),),
    ),
    Rule(
        name="css_variables",
        message="CSS variables → Unsupported; replace with static values.",
        patterns=(re.compile(r"var\(--"),),
    ),
]


def scan_stylesheet(text: str) -> list[Advisory]:
    """Scan CSS source text."""
    return run_rules(STYLESHEET_RULES, text)
