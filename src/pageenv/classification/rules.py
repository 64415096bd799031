"""Ordered user-agent rule tables.

Tables are evaluated top to bottom and the first matching pattern wins, so
ordering is part of the contract: specific signatures sit above the broad
ones that would also match them. The Amazon entries precede ``Android``
because Kindle and Fire user agents also advertise Android, and ``Linux``
precedes ``Mac OS`` only because no Mac user agent mentions X11 or Linux.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from .matcher import match


@dataclass(frozen=True, slots=True)
class Rule:
    label: str
    pattern: re.Pattern[str]


def _rules(*pairs: tuple[str, str]) -> tuple[Rule, ...]:
    return tuple(Rule(label, re.compile(pattern, re.IGNORECASE)) for label, pattern in pairs)


OPERATING_SYSTEMS: tuple[Rule, ...] = _rules(
    ("iOS", r"iP(hone|od|ad)"),
    ("Fire OS", r"Kindle Fire|Silk|(?:Android|Linux).+KF[A-Z]{2,}"),
    ("Amazon OS", r"Kindle"),
    ("Android", r"Android"),
    ("BlackBerry OS", r"BlackBerry|BB10"),
    ("Windows Mobile", r"IEMobile"),
    ("Windows 3.11", r"Win16"),
    ("Windows 95", r"(Windows 95)|(Win95)|(Windows_95)"),
    ("Windows 98", r"(Windows 98)|(Win98)"),
    ("Windows 2000", r"(Windows NT 5.0)|(Windows 2000)"),
    ("Windows XP", r"(Windows NT 5.1)|(Windows XP)"),
    ("Windows Server 2003", r"(Windows NT 5.2)"),
    ("Windows Vista", r"(Windows NT 6.0)"),
    ("Windows 7", r"(Windows NT 6.1)"),
    ("Windows 8", r"(Windows NT 6.2)"),
    ("Windows 8.1", r"(Windows NT 6.3)"),
    ("Windows 10", r"(Windows NT 10.0)"),
    ("Windows ME", r"Windows ME"),
    ("Open BSD", r"OpenBSD"),
    ("Free BSD", r"FreeBSD"),
    ("Sun OS", r"SunOS"),
    ("Chrome OS", r"CrOS"),
    ("webOS", r"webOS"),
    ("Linux", r"(Linux)|(X11)"),
    ("Mac OS", r"(Mac_PowerPC)|(Macintosh)"),
)

# The character classes below are loose on purpose (``[2,3]`` also accepts a
# comma, ``4.[1|2|3]`` any separator); they mirror the release table this
# package has always shipped.
ANDROID_VERSIONS: tuple[Rule, ...] = _rules(
    ("Legacy", r"android ([2,3])"),
    ("Ice Cream Sandwich", r"android (4.0)"),
    ("Jellybean", r"android (4.[1|2|3])"),
    ("KitKat", r"android (4.4)"),
    ("Lollipop", r"android (5)"),
    ("Marshmallow", r"android (6)"),
    ("Nougat", r"android (7.[0,1])"),
    ("Oreo", r"android (8.[0,1])"),
    ("Pie", r"android (9)"),
    ("Q", r"android (10)"),
)

_IOS_VERSION = re.compile(r"CPU(?: iPhone)? OS (\d+(?:_\d+)*)")
_CHROME_OS_VERSION = re.compile(r"\(X11; CrOS (?:x86_\d+|armv7l) ([0-9\.]*)\)")
# Chrome and Safari report 10_14_4, Firefox reports 10.13.
_MAC_OS_VERSION = re.compile(r"\(Macintosh(?:.)+Mac OS X (10(?:_\d+)+|10+\.\d+)")

VersionExtractor = Callable[[str], str]


def _first_group(pattern: re.Pattern[str], user_agent: str) -> str:
    found = pattern.search(user_agent or "")
    if found is None or found.group(1) is None:
        return ""
    return found.group(1).replace("_", ".")


def android_version(user_agent: str) -> str:
    """Compose the numeric release with its marketing name, e.g. ``9 (Pie)``."""
    result = match(ANDROID_VERSIONS, user_agent)
    if result is None:
        return ""
    if len(result.captures) == 1:
        return f"{result.captures[0]} ({result.label})"
    return result.label


def ios_version(user_agent: str) -> str:
    return _first_group(_IOS_VERSION, user_agent)


def chrome_os_version(user_agent: str) -> str:
    return _first_group(_CHROME_OS_VERSION, user_agent)


def mac_os_version(user_agent: str) -> str:
    return _first_group(_MAC_OS_VERSION, user_agent)


VERSION_EXTRACTORS: dict[str, VersionExtractor] = {
    "android": android_version,
    "ios": ios_version,
    "chrome_os": chrome_os_version,
    "mac_os": mac_os_version,
}


def slugify(label: str) -> str:
    """Lower-case ``label`` and replace its first space with an underscore.

    Only the first space is replaced, so ``Windows Server 2003`` becomes
    ``windows_server 2003``. Extractor keys are written against this form.
    """
    return label.lower().replace(" ", "_", 1)


__all__ = [
    "ANDROID_VERSIONS",
    "OPERATING_SYSTEMS",
    "Rule",
    "VERSION_EXTRACTORS",
    "VersionExtractor",
    "android_version",
    "chrome_os_version",
    "ios_version",
    "mac_os_version",
    "slugify",
]
