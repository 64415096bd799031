"""Document-root reflection of environment state."""

from .debounce import Debouncer, ThreadingScheduler
from .reflector import ClassList, EnvironmentReflector

__all__ = ["ClassList", "Debouncer", "EnvironmentReflector", "ThreadingScheduler"]
