"""Operating-system identification and device-class predicates."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Protocol

from ..cache import CacheScope, SnapshotCache
from .matcher import match
from .rules import OPERATING_SYSTEMS, VERSION_EXTRACTORS, Rule, VersionExtractor, slugify

_LOGGER = logging.getLogger(__name__)

UNKNOWN_OS = "unknown"
DEFAULT_IPAD_TOUCH_POINTS = 5

_IOS = re.compile(r"iP(hone|od|ad)")
_IPHONE = re.compile(r"iPhone")
_ANDROID = re.compile(r"Android")
_WEB_OS = re.compile(r"webOS")
_BLACKBERRY = re.compile(r"BlackBerry|BB10", re.IGNORECASE)
_WINDOWS_MOBILE = re.compile(r"IEMobile")

TouchPointAccessor = Callable[[], int | None]


@dataclass(frozen=True, slots=True)
class OSIdentity:
    name: str
    version: str = ""


class IpadOsDetector(Protocol):
    def __call__(self, classifier: "Classifier") -> bool:
        ...


def touch_point_detector(
    touch_points: TouchPointAccessor | None,
    expected: int | None = DEFAULT_IPAD_TOUCH_POINTS,
) -> IpadOsDetector:
    """Build the iPadOS heuristic.

    iPadOS Safari reports itself as a Macintosh, so the only signal left is
    the touch-point count: a "Mac" with exactly ``expected`` touch points is
    treated as an iPad. Any Mac that starts reporting that count will be
    misclassified. A missing accessor, an unreported count, or an
    ``expected`` of ``None`` or below 1 disables the heuristic.
    """

    def detect(classifier: "Classifier") -> bool:
        if touch_points is None or expected is None or expected < 1:
            return False
        if not classifier.is_mac_os():
            return False
        return touch_points() == expected

    return detect


def never_ipad_os(classifier: "Classifier") -> bool:
    return False


class Classifier:
    """Classify a single, immutable user-agent string.

    Every predicate is memoised in the agent scope of ``cache``; the user
    agent cannot change over a session so these entries are never dropped.
    """

    def __init__(
        self,
        user_agent: str,
        *,
        cache: SnapshotCache | None = None,
        ipad_os_detector: IpadOsDetector | None = None,
        touch_points: TouchPointAccessor | None = None,
        ipad_touch_points: int | None = DEFAULT_IPAD_TOUCH_POINTS,
        rules: tuple[Rule, ...] = OPERATING_SYSTEMS,
        extractors: dict[str, VersionExtractor] | None = None,
    ) -> None:
        self.user_agent = user_agent or ""
        self.cache = cache or SnapshotCache()
        self._ipad_os_detector = ipad_os_detector or touch_point_detector(touch_points, ipad_touch_points)
        self._rules = rules
        self._extractors = VERSION_EXTRACTORS if extractors is None else extractors

    def _cached(self, key: str, compute: Callable[[], bool]) -> bool:
        return self.cache.get_or_compute(CacheScope.AGENT, key, compute)

    def _test(self, pattern: re.Pattern[str]) -> bool:
        return pattern.search(self.user_agent) is not None

    # Operating system -------------------------------------------------

    def identify_os(self) -> OSIdentity:
        return self.cache.get_or_compute(CacheScope.AGENT, "identify_os", self._identify_os)

    def _identify_os(self) -> OSIdentity:
        result = match(self._rules, self.user_agent)
        if result is None:
            _LOGGER.debug("No operating system rule matched %r", self.user_agent)
            return OSIdentity(UNKNOWN_OS, "")

        extractor = self._extractors.get(slugify(result.label))
        version = extractor(self.user_agent) if extractor else ""
        _LOGGER.debug("Identified %s %s", result.label, version or "(no version)")
        return OSIdentity(result.label, version)

    def _os_name_contains(self, fragment: str) -> bool:
        return fragment in self.identify_os().name

    # Direct user-agent signatures --------------------------------------

    def is_ios(self) -> bool:
        """iOS on iPhone, iPod or iPad (pre-iPadOS user agents)."""
        return self._cached("is_ios", lambda: self._test(_IOS))

    def is_iphone(self) -> bool:
        return self._cached("is_iphone", lambda: self._test(_IPHONE))

    def is_android(self) -> bool:
        return self._cached("is_android", lambda: self._test(_ANDROID))

    def is_web_os(self) -> bool:
        return self._cached("is_web_os", lambda: self._test(_WEB_OS))

    def is_blackberry(self) -> bool:
        return self._cached("is_blackberry", lambda: self._test(_BLACKBERRY))

    def is_windows_mobile(self) -> bool:
        return self._cached("is_windows_mobile", lambda: self._test(_WINDOWS_MOBILE))

    # Derived from the identified operating system ----------------------

    def is_kindle(self) -> bool:
        """An e-ink Kindle rather than a Fire tablet."""
        return self._cached("is_kindle", lambda: self._os_name_contains("Amazon OS"))

    def is_kindle_fire(self) -> bool:
        return self._cached("is_kindle_fire", lambda: self._os_name_contains("Fire OS"))

    def is_mac_os(self) -> bool:
        return self._cached("is_mac_os", lambda: self._os_name_contains("Mac"))

    def is_ipad_os(self) -> bool:
        return self._cached("is_ipad_os", lambda: bool(self._ipad_os_detector(self)))

    # Device class -------------------------------------------------------

    def is_mobile(self) -> bool:
        return self._cached(
            "is_mobile",
            lambda: (
                self.is_android()
                or self.is_ios()
                or self.is_ipad_os()
                or self.is_kindle_fire()
                or self.is_kindle()
                or self.is_blackberry()
                or self.is_windows_mobile()
                or self.is_web_os()
            ),
        )

    def is_desktop(self) -> bool:
        """Anything not recognised as mobile."""
        return self._cached("is_desktop", lambda: not self.is_mobile())


__all__ = [
    "Classifier",
    "IpadOsDetector",
    "OSIdentity",
    "TouchPointAccessor",
    "UNKNOWN_OS",
    "never_ipad_os",
    "touch_point_detector",
]
