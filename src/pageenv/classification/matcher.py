"""First-match-wins evaluation of ordered rule tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .rules import Rule


@dataclass(frozen=True, slots=True)
class MatchResult:
    label: str
    captures: tuple[str, ...] = ()


def match(rules: Iterable["Rule"], subject: str | None) -> MatchResult | None:
    """Return the first rule matching ``subject`` with its capture groups.

    Groups that did not take part in the match are reported as empty
    strings. ``None`` means no rule matched; callers treat that as an
    unknown classification.
    """

    text = subject or ""
    for rule in rules:
        found = rule.pattern.search(text)
        if found is not None:
            captures = tuple(group or "" for group in found.groups())
            return MatchResult(label=rule.label, captures=captures)
    return None


__all__ = ["MatchResult", "match"]
