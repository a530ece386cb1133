"""Tests for the script, markup and stylesheet rule scanners."""

import re

import pytest

from kindlefy.scanners import scan_markup, scan_script, scan_stylesheet
from kindlefy.scanners.common import Rule, run_rules
from kindlefy.scanners.markup import MARKUP_RULES
from kindlefy.scanners.script import SCRIPT_RULES
from kindlefy.scanners.stylesheet import STYLESHEET_RULES


def rule_names(advisories):
    return [a.rule for a in advisories]


class TestScriptScanner:
    """Test JavaScript/TypeScript rules."""

    def test_all_three_rules_in_order(self):
        """One line can trigger async, arrow and fetch advisories together."""
        advisories = scan_script("const f = async () => { await fetch('/x'); }")
        assert rule_names(advisories) == ["async_await", "arrow_function", "fetch_api"]

    def test_await_reported_once_per_call(self):
        """Many occurrences still yield a single advisory."""
        text = "await a();\nawait b();\nawait c();\n"
        advisories = scan_script(text)
        assert rule_names(advisories) == ["async_await"]

    def test_async_function_declaration(self):
        advisories = scan_script("async   function load() { return 1; }")
        assert rule_names(advisories) == ["async_await"]

    def test_async_without_function_keyword_not_flagged(self):
        """A bare `async` identifier does not match on its own."""
        advisories = scan_script("var async = require('async');")
        assert advisories == []

    def test_arrow_function_only(self):
        advisories = scan_script("items.map(x => x * 2);")
        assert rule_names(advisories) == ["arrow_function"]

    def test_fetch_requires_call_paren(self):
        assert scan_script("var prefetch = true;") == []
        assert rule_names(scan_script("fetch('/api')")) == ["fetch_api"]

    def test_matches_inside_comments(self):
        """Detection is lexical, so comments and strings count."""
        advisories = scan_script("// TODO: replace fetch( with XHR\nvar s = '=>';")
        assert rule_names(advisories) == ["arrow_function", "fetch_api"]

    def test_clean_es5_script(self):
        text = "function add(a, b) {\n  return a + b;\n}\nvar xhr = new XMLHttpRequest();\n"
        assert scan_script(text) == []

    def test_messages_are_not_empty(self):
        for advisory in scan_script("async function f() { await fetch(x => x); }"):
            assert advisory.message.strip()


class TestMarkupScanner:
    """Test HTML rules."""

    def test_video_without_viewport(self):
        advisories = scan_markup('<body><video src="intro.mp4"></video></body>')
        assert rule_names(advisories) == ["media_element"]

    def test_audio_element(self):
        advisories = scan_markup("<audio controls></audio>")
        assert rule_names(advisories) == ["media_element"]

    def test_viewport_with_initial_scale(self):
        html = '<meta name="viewport" content="width=device-width, initial-scale=1">'
        assert rule_names(scan_markup(html)) == ["viewport_meta"]

    def test_viewport_needs_both_substrings(self):
        assert scan_markup('<meta name="viewport" content="width=device-width">') == []
        assert scan_markup("<p>initial-scale is a setting</p>") == []

    def test_viewport_substrings_need_not_share_a_tag(self):
        html = "<!-- viewport -->\n<p>initial-scale</p>"
        assert rule_names(scan_markup(html)) == ["viewport_meta"]

    def test_media_and_viewport_order(self):
        html = (
            '<meta name="viewport" content="initial-scale=1">\n'
            "<video></video>\n"
        )
        assert rule_names(scan_markup(html)) == ["media_element", "viewport_meta"]

    def test_plain_document(self):
        assert scan_markup("<html><body><p>Hello</p></body></html>") == []


class TestStylesheetScanner:
    """Test CSS rules."""

    def test_flex_only(self):
        advisories = scan_stylesheet(".box{display:flex}")
        assert rule_names(advisories) == ["modern_layout"]

    def test_flex_and_grid_reported_once(self):
        css = ".a{display:flex}\n.b{display:grid}\n"
        assert rule_names(scan_stylesheet(css)) == ["modern_layout"]

    def test_layout_and_variables(self):
        css = ":root{--gap:4px}\n.a{display:grid;gap:var(--gap)}\n"
        assert rule_names(scan_stylesheet(css)) == ["modern_layout", "css_variables"]

    def test_substring_match_inside_identifier(self):
        assert rule_names(scan_stylesheet(".flexible-panel{}")) == ["modern_layout"]

    def test_custom_property_definition_alone_not_flagged(self):
        assert scan_stylesheet(":root{--brand:#333}") == []

    def test_float_layout_clean(self):
        assert scan_stylesheet(".col{float:left;width:50%}") == []


class TestRuleTables:
    """Test the rule tables and shared evaluator."""

    @pytest.mark.parametrize("rules", [SCRIPT_RULES, MARKUP_RULES, STYLESHEET_RULES])
    def test_rule_names_unique(self, rules):
        names = [rule.name for rule in rules]
        assert len(names) == len(set(names))

    def test_run_rules_requires_every_pattern(self):
        rule = Rule(
            name="both",
            message="Both present.",
            patterns=(re.compile("alpha"), re.compile("beta")),
        )
        assert run_rules([rule], "alpha only") == []
        assert rule_names(run_rules([rule], "beta then alpha")) == ["both"]

    def test_scanners_are_stateless(self):
        text = "await x;"
        assert scan_script(text) == scan_script(text)
