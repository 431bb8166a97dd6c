"""JSON renderers: one object per line, or one indented array."""

from __future__ import annotations

import dataclasses
import enum
import json
from collections.abc import Iterable
from pathlib import PurePath
from typing import Any


def _default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(obj, PurePath):
        return str(obj)
    if isinstance(obj, enum.Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def render_jsonl(items: Iterable[Any]) -> str:
    """One compact JSON object per item, each ending in a newline."""
    return "".join(
        json.dumps(item, default=_default, separators=(",", ":"), ensure_ascii=False) + "\n"
        for item in items
    )


def render_pretty_json(items: Iterable[Any]) -> str:
    """A single JSON array indented by two spaces."""
    return json.dumps(list(items), default=_default, indent=2, ensure_ascii=False)