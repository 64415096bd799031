"""Host boundary: the page-provided signals classification reads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class Host(Protocol):
    """Accessors a browsing host exposes to the classifier.

    Geometry, density and touch-point values may be ``None`` when the host
    cannot report them. ``match_media`` returns ``None`` when no media-query
    API exists. Neither case is an error: consumers fall back to the most
    conservative classification.
    """

    user_agent: str
    client_width: int | None
    client_height: int | None
    inner_width: int | None
    inner_height: int | None
    device_pixel_ratio: float | None
    max_touch_points: int | None
    href: str
    search: str
    hostname: str
    hybrid: bool

    def match_media(self, query: str) -> bool | None:
        ...


@dataclass(slots=True)
class StaticHost:
    """In-memory host with fixed (but mutable) values.

    ``matching_media`` lists the media queries that match. ``None`` models a
    host without a media-query API.
    """

    user_agent: str = ""
    client_width: int | None = None
    client_height: int | None = None
    inner_width: int | None = None
    inner_height: int | None = None
    device_pixel_ratio: float | None = None
    max_touch_points: int | None = None
    href: str = ""
    search: str = ""
    hostname: str = ""
    hybrid: bool = False
    matching_media: set[str] | None = field(default=None)

    def match_media(self, query: str) -> bool | None:
        if self.matching_media is None:
            return None
        return query in self.matching_media

    def resize(self, width: int, height: int) -> None:
        self.client_width = self.inner_width = width
        self.client_height = self.inner_height = height


def environment_name(hostname: str, preview_hostname: str = "preview.nyt.net") -> str:
    """Resolve the deployment environment a page is served from."""
    if "localhost" in (hostname or ""):
        return "development"
    if hostname == preview_hostname:
        return "preview"
    return "production"


__all__ = ["Host", "StaticHost", "environment_name"]
