"""Mirror environment state as CSS state classes on the document root."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from ..config import ReflectorSettings
from ..environment import EnvironmentSession
from .debounce import Debouncer, Scheduler

_LOGGER = logging.getLogger(__name__)


class ClassList:
    """Ordered set of class names, as on ``documentElement.classList``."""

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._names: dict[str, None] = dict.fromkeys(initial)

    def add(self, name: str) -> None:
        self._names[name] = None

    def remove(self, name: str) -> None:
        self._names.pop(name, None)

    def toggle(self, name: str, force: bool) -> None:
        if force:
            self.add(name)
        else:
            self.remove(name)

    def contains(self, name: str) -> bool:
        return name in self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ClassList({list(self._names)!r})"


class EnvironmentReflector:
    """Keep a class list in sync with an :class:`EnvironmentSession`.

    ``isMobile`` becomes ``g-page-ismobile`` and the ``large`` breakpoint
    becomes ``g-viewport-large``; classes are added while the predicate
    holds and removed otherwise. Classes it does not own are left alone.
    """

    def __init__(
        self,
        session: EnvironmentSession,
        class_list: ClassList | None = None,
        settings: ReflectorSettings | None = None,
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.session = session
        self.class_list = class_list if class_list is not None else ClassList()
        self.settings = settings or session.config.reflector
        self._debounced: Debouncer[None] = Debouncer(
            self.prep_environment,
            self.settings.debounce_seconds,
            scheduler=scheduler,
        )

    def environment_class(self) -> str:
        return f"{self.settings.env_prefix}-{self.session.environment_name()}"

    def prep_environment(self, debug: bool | None = None) -> None:
        """Re-measure the viewport and reconcile every state class."""
        debug = self.settings.debug if debug is None else debug

        self.session.set_viewport()

        for entry in self.session.get_breakpoints():
            self.class_list.toggle(f"{self.settings.breakpoint_prefix}-{entry.name}", entry.active)
            if debug:
                _LOGGER.info("%s %s", entry.name, entry.active)

        for name, result in self.session.get_state().as_mapping().items():
            self.class_list.toggle(f"{self.settings.env_prefix}-{name.lower()}", result)
            if debug:
                _LOGGER.info("%s %s", name, result)

    def start(self) -> None:
        self.class_list.add(self.environment_class())
        self.prep_environment()

    def on_resize(self) -> None:
        """Resize notification; bursts collapse into one trailing update."""
        self._debounced()

    def stop(self) -> None:
        self._debounced.cancel()


__all__ = ["ClassList", "EnvironmentReflector"]
