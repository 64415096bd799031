"""Serialization helpers."""

from __future__ import annotations

import json
import re
from dataclasses import fields, is_dataclass
from typing import Any


def to_json(payload: Any, *, indent: int = 2) -> str:
    def _default(obj: Any) -> Any:
        if isinstance(obj, re.Pattern):
            return obj.pattern
        if is_dataclass(obj) and not isinstance(obj, type):
            return {f.name: getattr(obj, f.name) for f in fields(obj)}
        if hasattr(obj, "model_dump"):
            return obj.model_dump(mode="json")
        return str(obj)

    return json.dumps(payload, indent=indent, default=_default)
