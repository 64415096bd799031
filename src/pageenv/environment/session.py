"""Environment session: one host, one user agent, one cache."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Callable

from ..cache import CacheScope, SnapshotCache
from ..classification import Classifier, OSIdentity
from ..classification.classifier import IpadOsDetector
from ..config import AppConfig
from ..host import Host, environment_name
from . import density, viewport as vp
from .viewport import Breakpoint, Viewport, ViewportTracker

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EnvironmentState:
    is_app: bool
    is_ios: bool
    is_android: bool
    is_iphone: bool
    is_mobile: bool
    is_desktop: bool
    is_landscape: bool
    is_portrait: bool
    is_wide_screen: bool
    is_small_screen: bool
    is_large_screen: bool
    is_high_density: bool
    is_retina: bool

    def as_mapping(self) -> dict[str, bool]:
        """Return the flags keyed by their camelCase predicate names."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class EnvironmentSession:
    """Classification façade for a single page lifetime.

    User-agent predicates are delegated to a :class:`Classifier` and cached
    for the whole session. Viewport and density predicates are cached until
    the next :meth:`set_viewport`, which re-measures the host.
    """

    def __init__(
        self,
        host: Host,
        config: AppConfig | None = None,
        *,
        ipad_os_detector: IpadOsDetector | None = None,
    ) -> None:
        self.host = host
        self.config = config or AppConfig()
        self.cache = SnapshotCache()
        self.classifier = Classifier(
            host.user_agent,
            cache=self.cache,
            ipad_os_detector=ipad_os_detector,
            touch_points=lambda: host.max_touch_points,
            ipad_touch_points=self.config.classifier.ipad_touch_points,
        )
        self.tracker = ViewportTracker(host)
        self._app_pattern = re.compile(self.config.app.user_agent_pattern, re.IGNORECASE)

    @property
    def user_agent(self) -> str:
        return self.classifier.user_agent

    def _viewport_cached(self, key: str, compute: Callable[[], bool]) -> bool:
        return self.cache.get_or_compute(CacheScope.VIEWPORT, key, compute)

    def _threshold(self, name: str) -> int:
        return self.config.breakpoints[name]

    # User agent ---------------------------------------------------------

    def identify_os(self) -> OSIdentity:
        return self.classifier.identify_os()

    def is_ios(self) -> bool:
        return self.classifier.is_ios()

    def is_iphone(self) -> bool:
        return self.classifier.is_iphone()

    def is_android(self) -> bool:
        return self.classifier.is_android()

    def is_web_os(self) -> bool:
        return self.classifier.is_web_os()

    def is_blackberry(self) -> bool:
        return self.classifier.is_blackberry()

    def is_windows_mobile(self) -> bool:
        return self.classifier.is_windows_mobile()

    def is_kindle(self) -> bool:
        return self.classifier.is_kindle()

    def is_kindle_fire(self) -> bool:
        return self.classifier.is_kindle_fire()

    def is_mac_os(self) -> bool:
        return self.classifier.is_mac_os()

    def is_ipad_os(self) -> bool:
        return self.classifier.is_ipad_os()

    def is_mobile(self) -> bool:
        return self.classifier.is_mobile()

    def is_desktop(self) -> bool:
        return self.classifier.is_desktop()

    def is_app(self) -> bool:
        """Page rendered inside the native news app or one of its webviews."""
        return self.cache.get_or_compute(CacheScope.AGENT, "is_app", self._is_app)

    def _is_app(self) -> bool:
        settings = self.config.app
        return bool(
            (self.host.href or "").find(settings.page_marker) > 0
            or settings.query_marker in (self.host.search or "")
            or self._app_pattern.search(self.user_agent)
            # Hybrid Android articles lose both the app user agent and query.
            or (re.search(r"android", self.user_agent, re.IGNORECASE) and self.host.hybrid)
        )

    def environment_name(self) -> str:
        return environment_name(self.host.hostname, self.config.app.preview_hostname)

    # Viewport -----------------------------------------------------------

    def set_viewport(self) -> Viewport:
        """Re-measure the host and drop viewport-derived predicates."""
        measured = self.tracker.measure()
        if self.config.classifier.refresh_viewport_predicates:
            self.cache.invalidate(CacheScope.VIEWPORT)
        else:
            _LOGGER.debug("Keeping cached viewport predicates after re-measure")
        return measured

    def get_viewport(self) -> Viewport:
        return self.tracker.current()

    def aspect_ratio(self) -> float:
        return self.get_viewport().aspect_ratio

    def is_landscape(self) -> bool:
        return self._viewport_cached("is_landscape", lambda: vp.is_landscape(self.get_viewport()))

    def is_portrait(self) -> bool:
        return self._viewport_cached("is_portrait", lambda: vp.is_portrait(self.get_viewport()))

    def is_wide_screen(self) -> bool:
        screen = self.config.screen
        return self._viewport_cached(
            "is_wide_screen",
            lambda: vp.is_wide_screen(
                self.get_viewport(),
                self._threshold(screen.wide_screen_breakpoint),
                screen.wide_reference_height,
            ),
        )

    def is_small_screen(self) -> bool:
        threshold = self._threshold(self.config.screen.small_screen_breakpoint)
        return self._viewport_cached("is_small_screen", lambda: vp.is_small_screen(self.get_viewport(), threshold))

    def is_large_screen(self) -> bool:
        threshold = self._threshold(self.config.screen.large_screen_breakpoint)
        return self._viewport_cached("is_large_screen", lambda: vp.is_large_screen(self.get_viewport(), threshold))

    def get_breakpoints(self) -> list[Breakpoint]:
        return vp.breakpoints_for(self.get_viewport(), self.config.breakpoints)

    # Density ------------------------------------------------------------

    def pixel_ratio(self) -> float:
        return density.pixel_ratio(self.host)

    def is_high_density(self) -> bool:
        ratio = self.config.density.high_density_ratio
        return self._viewport_cached("is_high_density", lambda: density.is_high_density(self.host, ratio))

    def is_retina(self) -> bool:
        ratio = self.config.density.retina_ratio
        return self._viewport_cached("is_retina", lambda: density.is_retina(self.host, self.user_agent, ratio))

    # Snapshot -----------------------------------------------------------

    def get_state(self) -> EnvironmentState:
        return EnvironmentState(
            is_app=self.is_app(),
            is_ios=self.is_ios(),
            is_android=self.is_android(),
            is_iphone=self.is_iphone(),
            is_mobile=self.is_mobile(),
            is_desktop=self.is_desktop(),
            is_landscape=self.is_landscape(),
            is_portrait=self.is_portrait(),
            is_wide_screen=self.is_wide_screen(),
            is_small_screen=self.is_small_screen(),
            is_large_screen=self.is_large_screen(),
            is_high_density=self.is_high_density(),
            is_retina=self.is_retina(),
        )


__all__ = ["EnvironmentSession", "EnvironmentState"]
