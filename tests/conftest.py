"""Shared pytest fixtures for pageenv tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pytest

from pageenv.config import AppConfig
from pageenv.environment import EnvironmentSession
from pageenv.host import StaticHost


# ============================================================================
# Host and session fixtures
# ============================================================================

def make_host(
    user_agent: str = "",
    width: int = 1024,
    height: int = 768,
    **overrides: object,
) -> StaticHost:
    host = StaticHost(user_agent=user_agent, **overrides)  # type: ignore[arg-type]
    host.resize(width, height)
    return host


@pytest.fixture
def host_factory() -> Callable[..., StaticHost]:
    """Return a factory for in-memory hosts."""
    return make_host


@pytest.fixture
def session_factory() -> Callable[..., EnvironmentSession]:
    """Return a factory building a session for a user agent and viewport."""

    def _build(
        user_agent: str = "",
        width: int = 1024,
        height: int = 768,
        config: AppConfig | None = None,
        **overrides: object,
    ) -> EnvironmentSession:
        return EnvironmentSession(make_host(user_agent, width, height, **overrides), config)

    return _build


@pytest.fixture
def minimal_config() -> AppConfig:
    """Return default configuration without touching the filesystem."""
    return AppConfig()


# ============================================================================
# Fake timer
# ============================================================================

@dataclass
class FakeTimer:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Deterministic scheduler driven by :meth:`advance`."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(due=self.now + delay, callback=callback)
        self.timers.append(timer)
        return timer

    def live(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            ready = [t for t in self.live() if t.due <= target]
            if not ready:
                break
            timer = min(ready, key=lambda t: t.due)
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = target


@pytest.fixture
def scheduler() -> FakeScheduler:
    """Return a manual-clock scheduler for debounce tests."""
    return FakeScheduler()
