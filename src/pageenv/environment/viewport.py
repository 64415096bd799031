"""Viewport measurement, orientation, size and breakpoint predicates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from ..host import Host

_LOGGER = logging.getLogger(__name__)

DEFAULT_WIDE_REFERENCE_HEIGHT = 1029


class ViewportUnavailable(ValueError):
    """Raised when the host reports a viewport without a positive height."""


@dataclass(frozen=True, slots=True)
class Viewport:
    width: int
    height: int
    aspect_ratio: float


@dataclass(frozen=True, slots=True)
class Breakpoint:
    name: str
    width: int
    active: bool


def _larger(*values: int | None) -> int:
    return max(int(value or 0) for value in values)


class ViewportTracker:
    """Hold the most recent viewport measurement for a host.

    The host is only read on :meth:`measure`; :meth:`current` serves the
    stored value so repeated predicate reads see a consistent viewport.
    """

    def __init__(self, host: Host) -> None:
        self._host = host
        self._viewport: Viewport | None = None

    def measure(self) -> Viewport:
        # The document and window report differently around scrollbars and
        # mobile browser chrome; the larger of the two is the usable area.
        width = _larger(self._host.client_width, self._host.inner_width)
        height = _larger(self._host.client_height, self._host.inner_height)
        if height <= 0:
            raise ViewportUnavailable(f"viewport height must be positive, got {height}")

        self._viewport = Viewport(width=width, height=height, aspect_ratio=width / height)
        _LOGGER.debug("Measured viewport %dx%d", width, height)
        return self._viewport

    def current(self) -> Viewport:
        if self._viewport is None:
            return self.measure()
        return self._viewport


def is_landscape(viewport: Viewport) -> bool:
    return viewport.aspect_ratio > 1


def is_portrait(viewport: Viewport) -> bool:
    """Not landscape; a square viewport counts as portrait."""
    return not is_landscape(viewport)


def is_wide_screen(
    viewport: Viewport,
    wide_width: int,
    reference_height: int = DEFAULT_WIDE_REFERENCE_HEIGHT,
) -> bool:
    return viewport.aspect_ratio > wide_width / reference_height


def is_small_screen(viewport: Viewport, threshold: int) -> bool:
    return viewport.width <= threshold


def is_large_screen(viewport: Viewport, threshold: int) -> bool:
    return viewport.width >= threshold


def breakpoints_for(viewport: Viewport, table: Mapping[str, int]) -> list[Breakpoint]:
    """Describe each named threshold and whether ``viewport`` reaches it."""
    ordered = sorted(table.items(), key=lambda item: item[1])
    return [Breakpoint(name=name, width=width, active=viewport.width >= width) for name, width in ordered]


__all__ = [
    "Breakpoint",
    "Viewport",
    "ViewportTracker",
    "ViewportUnavailable",
    "breakpoints_for",
    "is_landscape",
    "is_large_screen",
    "is_portrait",
    "is_small_screen",
    "is_wide_screen",
]
