"""Diagnostic records and their JSON-ready shape."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any

from shresolve.span import Span

_CATEGORIES = frozenset({"unsupported-construct", "known-gap", "unresolved"})


class Severity(enum.Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class DiagnosticKind:
    """A diagnostic's category and the specific code within it.

    ``category`` is one of ``unsupported-construct``, ``known-gap`` or
    ``unresolved``.
    """

    category: str
    code: str

    def __post_init__(self) -> None:
        if self.category not in _CATEGORIES:
            raise ValueError(
                f"unknown diagnostic category `{self.category}` "
                f"(expected one of {', '.join(sorted(_CATEGORIES))})"
            )

    def to_dict(self) -> dict[str, str]:
        return {"category": self.category, "code": self.code}


@dataclass
class Diagnostic:
    """One problem found in a script, anchored at a span and line/column."""

    file: Path
    span: Span
    line: int
    column: int
    severity: Severity
    kind: DiagnosticKind
    message: str
    name: str | None = None
    hint: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.file, Path):
            self.file = Path(self.file if isinstance(self.file, (str, PathLike)) else str(self.file))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; ``name`` and ``hint`` are left out when unset."""
        out: dict[str, Any] = {
            "file": str(self.file),
            "span": {"start": self.span.start, "end": self.span.end},
            "line": self.line,
            "column": self.column,
            "severity": self.severity.value,
            "kind": self.kind.to_dict(),
            "message": self.message,
        }
        if self.name is not None:
            out["name"] = self.name
        if self.hint is not None:
            out["hint"] = self.hint
        return out


def line_col(source: str, byte_offset: int) -> tuple[int, int]:
    """1-based (line, column) of the character at ``byte_offset`` in ``source``."""
    line = 1
    col = 1
    for ch in source[: max(byte_offset, 0)]:
        if ch == "\n":
            line += 1
            col = 1
        else:
            col += 1
    return line, col