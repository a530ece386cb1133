"""Script scanner for .js and .ts files.

Flags ES2015+ constructs that the old WebKit builds on Kindle devices either
reject at parse time or do not implement:
- async functions and await
- arrow functions
- the fetch() API
"""

import re

from ..models import Advisory
from .common import Rule, run_rules


SCRIPT_RULES: list[Rule] = [
    Rule(
        name="async_await",
        message=(
            "Uses async/await → Kindle WebBrowser JS engine is old; "
            "consider callbacks or Promises without async keywords."
        ),
        patterns=(re.compile(r"async\s+function|await"),),
    ),
    Rule(
        name="arrow_function",
        message=(
            "Arrow functions detected → Older WebKit on Kindle may choke; "
            "rewrite as function(){}"
        ),
        patterns=(re.compile(r"=>"),),
    ),
    Rule(
        name="fetch_api",
        message="fetch() used → Kindle may not support fetch; consider XHR fallback.",
        patterns=(re.compile(r"fetch\("),),
    ),
]


def scan_script(text: str) -> list[Advisory]:
    """Scan JavaScript or TypeScript source text."""
    return run_rules(SCRIPT_RULES, text)
