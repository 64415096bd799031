"""Unit tests for first-match rule evaluation."""

import re

import pytest

from pageenv.classification.matcher import MatchResult, match
from pageenv.classification.rules import OPERATING_SYSTEMS, Rule

from user_agents import ALL_USER_AGENTS, KINDLE_FIRE_UA, WINDOWS_10_UA


def _rule(label: str, pattern: str) -> Rule:
    return Rule(label, re.compile(pattern, re.IGNORECASE))


class TestMatch:
    """Tests for match()."""

    def test_returns_first_matching_label(self):
        """Test the earliest rule wins when several patterns match."""
        rules = (_rule("first", r"foo"), _rule("second", r"foo"))

        assert match(rules, "a foo b") == MatchResult(label="first", captures=())

    def test_rule_order_decides_overlapping_matches(self):
        """Test reversing the table flips the winner for a shared subject."""
        rules = (_rule("android", r"Android"), _rule("linux", r"Linux"))
        subject = "Mozilla/5.0 (Linux; Android 9)"

        assert match(rules, subject).label == "android"
        assert match(tuple(reversed(rules)), subject).label == "linux"

    def test_non_overlapping_order_is_irrelevant(self):
        """Test order only matters when more than one pattern matches."""
        rules = (_rule("a", r"alpha"), _rule("b", r"beta"))

        assert match(rules, "beta").label == "b"
        assert match(tuple(reversed(rules)), "beta").label == "b"

    def test_captures_are_returned_in_order(self):
        """Test capture groups accompany the label."""
        rules = (_rule("pair", r"(\d+)-(\d+)"),)

        result = match(rules, "range 10-20")

        assert result.captures == ("10", "20")

    def test_unmatched_groups_become_empty_strings(self):
        """Test alternation groups that did not participate are empty."""
        result = match(OPERATING_SYSTEMS, "Mozilla/4.0 (compatible; MSIE 4.01; Windows 95)")

        assert result.label == "Windows 95"
        assert result.captures == ("Windows 95", "", "")

    def test_no_match_returns_none(self):
        """Test an exhausted table yields None rather than raising."""
        assert match((_rule("x", r"xyz"),), "abc") is None

    @pytest.mark.parametrize("subject", ["", None])
    def test_empty_subject_returns_none(self, subject):
        """Test empty and missing subjects are treated as non-matching."""
        assert match(OPERATING_SYSTEMS, subject) is None

    def test_empty_table_returns_none(self):
        """Test matching against no rules yields None."""
        assert match((), WINDOWS_10_UA) is None

    @pytest.mark.parametrize("subject", ALL_USER_AGENTS)
    def test_match_is_deterministic(self, subject):
        """Test identical inputs give identical results."""
        assert match(OPERATING_SYSTEMS, subject) == match(OPERATING_SYSTEMS, subject)

    def test_fire_os_depends_on_preceding_android(self):
        """Test Fire OS would be shadowed if Android were evaluated first."""
        reordered = tuple(sorted(OPERATING_SYSTEMS, key=lambda rule: rule.label != "Android"))

        assert match(OPERATING_SYSTEMS, KINDLE_FIRE_UA).label == "Fire OS"
        assert match(reordered, KINDLE_FIRE_UA).label == "Android"

    @pytest.mark.parametrize(
        "subject",
        ["\x00\xff�", "(((((", ")" * 50, "a" * 20000, "Android" * 1000, "\n\t "],
    )
    def test_arbitrary_input_never_raises(self, subject):
        """Test malformed subjects are handled as ordinary strings."""
        result = match(OPERATING_SYSTEMS, subject)

        assert result is None or isinstance(result, MatchResult)
