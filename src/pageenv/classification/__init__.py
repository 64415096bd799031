"""User-agent classification."""

from .classifier import Classifier, OSIdentity, never_ipad_os, touch_point_detector
from .matcher import MatchResult, match
from .rules import ANDROID_VERSIONS, OPERATING_SYSTEMS, Rule, slugify

__all__ = [
    "ANDROID_VERSIONS",
    "Classifier",
    "MatchResult",
    "OPERATING_SYSTEMS",
    "OSIdentity",
    "Rule",
    "match",
    "never_ipad_os",
    "slugify",
    "touch_point_detector",
]
