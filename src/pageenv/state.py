"""Shared session bootstrap for the CLI and embedding hosts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import AppConfig, load_config
from .environment import EnvironmentSession
from .host import Host
from .logging import configure_logging
from .reflect import ClassList, EnvironmentReflector


@dataclass(slots=True)
class AppState:
    config: AppConfig
    session: EnvironmentSession
    reflector: EnvironmentReflector


def build_state(host: Host, config_path: Optional[Path] = None, *, config: AppConfig | None = None) -> AppState:
    """Construct a classification session and its reflector for ``host``.

    Loads configuration (unless one is supplied), configures logging and
    wires the reflector to a fresh class list.
    """

    config = config or load_config(config_path)
    configure_logging(config.verbosity)  # type: ignore[arg-type]

    session = EnvironmentSession(host, config)
    reflector = EnvironmentReflector(session, ClassList(), config.reflector)
    return AppState(config=config, session=session, reflector=reflector)
