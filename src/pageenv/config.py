"""Configuration loading and modelling."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "default_config.toml"
USER_CONFIG_PATH = Path("~/.config/pageenv/config.toml").expanduser()

DEFAULT_BREAKPOINTS: dict[str, int] = {
    "xxsmall": 320,
    "xsmall": 480,
    "small": 600,
    "medium": 740,
    "large": 1024,
    "xlarge": 1150,
    "xxlarge": 1440,
}

_TRUTHY = {"1", "true", "yes", "on"}


class ScreenSettings(BaseModel):
    small_screen_breakpoint: str = "medium"
    large_screen_breakpoint: str = "xlarge"
    wide_screen_breakpoint: str = "xxlarge"
    wide_reference_height: int = Field(default=1029, gt=0)


class DensitySettings(BaseModel):
    high_density_ratio: float = 1.3
    retina_ratio: float = 2.0


class ClassifierSettings(BaseModel):
    ipad_touch_points: int | None = 5
    refresh_viewport_predicates: bool = True


class AppDetectionSettings(BaseModel):
    page_marker: str = "app.html"
    query_marker: str = "nytapp"
    user_agent_pattern: str = r"nyt[-_]?(?:ios|android)"
    preview_hostname: str = "preview.nyt.net"


class ReflectorSettings(BaseModel):
    env_prefix: str = "g-page"
    breakpoint_prefix: str = "g-viewport"
    debounce_seconds: float = Field(default=0.25, ge=0)
    debug: bool = False


class OutputSettings(BaseModel):
    format: str = "terminal"
    verbosity: str = "normal"


class AppConfig(BaseModel):
    breakpoints: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    screen: ScreenSettings = Field(default_factory=ScreenSettings)
    density: DensitySettings = Field(default_factory=DensitySettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    app: AppDetectionSettings = Field(default_factory=AppDetectionSettings)
    reflector: ReflectorSettings = Field(default_factory=ReflectorSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    raw: dict[str, Any] = Field(default_factory=dict)

    @field_validator("breakpoints")
    @classmethod
    def breakpoints_ascending(cls, v: dict[str, int]) -> dict[str, int]:
        """Reject non-positive thresholds and order the table by width."""
        for name, width in v.items():
            if width <= 0:
                raise ValueError(f"breakpoint {name!r} must be positive, got {width}")
        return dict(sorted(v.items(), key=lambda item: item[1]))

    @model_validator(mode="after")
    def screen_breakpoints_exist(self) -> "AppConfig":
        for name in (
            self.screen.small_screen_breakpoint,
            self.screen.large_screen_breakpoint,
            self.screen.wide_screen_breakpoint,
        ):
            if name not in self.breakpoints:
                raise ValueError(f"screen settings reference unknown breakpoint {name!r}")
        return self

    @property
    def verbosity(self) -> str:
        return self.output.verbosity


def _load_toml(path: Path) -> dict[str, Any]:
    import tomllib

    with path.open("rb") as fh:
        return tomllib.load(fh)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from defaults and optional user overrides."""

    load_dotenv()

    data: dict[str, Any] = {}
    if DEFAULT_CONFIG_PATH.exists():
        data = _merge(data, _load_toml(DEFAULT_CONFIG_PATH))

    resolved_path = config_path
    if resolved_path is None and USER_CONFIG_PATH.exists():
        resolved_path = USER_CONFIG_PATH

    if resolved_path and resolved_path.exists():
        override = _load_toml(resolved_path)
        # A user breakpoint table replaces the defaults rather than extending them.
        if "breakpoints" in override:
            data.pop("breakpoints", None)
        data = _merge(data, override)

    sections = {key: value for key, value in data.items() if key in AppConfig.model_fields and key != "raw"}
    config = AppConfig.model_validate({**sections, "raw": data})

    env_debug = os.getenv("PAGEENV_DEBUG")
    if env_debug is not None and env_debug.strip().lower() in _TRUTHY:
        config.reflector.debug = True

    return config
