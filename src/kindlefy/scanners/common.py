"""Shared rule plumbing for the compatibility scanners."""

import re
from typing import NamedTuple

from ..models import Advisory


class Rule(NamedTuple):
    """A lexical rule and the advisory it emits.

    The rule fires when every regex in ``patterns`` matches somewhere in the
    text. The matches need not be near each other.
    """

    name: str
    message: str
    patterns: tuple[re.Pattern, ...]


def run_rules(rules: list[Rule], text: str) -> list[Advisory]:
    """Evaluate rules in order, emitting at most one advisory per rule."""
    advisories = []
    for rule in rules:
        if all(pattern.search(text) for pattern in rule.patterns):
            advisories.append(Advisory(rule=rule.name, message=rule.message))
    return advisories
