"""Screen density predicates."""

from __future__ import annotations

import re

from ..host import Host

HIGH_DENSITY_QUERIES: tuple[str, ...] = (
    "only screen and (min-resolution: 124dpi), "
    "only screen and (min-resolution: 1.3dppx), "
    "only screen and (min-resolution: 48.8dpcm)",
    "only screen and (-webkit-min-device-pixel-ratio: 1.3), "
    "only screen and (-o-min-device-pixel-ratio: 2.6/2), "
    "only screen and (min--moz-device-pixel-ratio: 1.3), "
    "only screen and (min-device-pixel-ratio: 1.3)",
)

RETINA_QUERIES: tuple[str, ...] = (
    "only screen and (min-resolution: 192dpi), "
    "only screen and (min-resolution: 2dppx), "
    "only screen and (min-resolution: 75.6dpcm)",
    "only screen and (-webkit-min-device-pixel-ratio: 2), "
    "only screen and (-o-min-device-pixel-ratio: 2/1), "
    "only screen and (min--moz-device-pixel-ratio: 2), "
    "only screen and (min-device-pixel-ratio: 2)",
)

# Retina is reported for Apple handhelds only.
_APPLE_MOBILE = re.compile(r"(iPad|iPhone|iPod)")


def pixel_ratio(host: Host) -> float:
    return float(host.device_pixel_ratio or 1.0)


def _any_media(host: Host, queries: tuple[str, ...]) -> bool:
    return any(host.match_media(query) for query in queries)


def is_high_density(host: Host, threshold: float = 1.3) -> bool:
    return _any_media(host, HIGH_DENSITY_QUERIES) or pixel_ratio(host) > threshold


def is_retina(host: Host, user_agent: str, threshold: float = 2.0) -> bool:
    dense = _any_media(host, RETINA_QUERIES) or pixel_ratio(host) >= threshold
    return dense and _APPLE_MOBILE.search(user_agent or "") is not None


__all__ = [
    "HIGH_DENSITY_QUERIES",
    "RETINA_QUERIES",
    "is_high_density",
    "is_retina",
    "pixel_ratio",
]
