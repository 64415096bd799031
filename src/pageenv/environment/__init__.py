"""Environment detection utilities."""

from .session import EnvironmentSession, EnvironmentState
from .viewport import Breakpoint, Viewport, ViewportTracker, ViewportUnavailable

__all__ = [
    "Breakpoint",
    "EnvironmentSession",
    "EnvironmentState",
    "Viewport",
    "ViewportTracker",
    "ViewportUnavailable",
]
