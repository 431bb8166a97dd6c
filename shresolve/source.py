"""Source files, lowered units and the map that owns them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from shresolve.command import CommandLike
from shresolve.span import Span
from shresolve.word import Word


@dataclass
class VarAssign:
    """A ``name=value`` binding; ``literal`` is set only for fixed values."""

    name: str
    literal: str | None
    span: Span
    value: Word = field(default_factory=Word)


@dataclass
class SourceFile:
    """One file's path and owned text, keyed by its id."""

    id: int
    path: Path
    text: str


@dataclass
class SourceUnit:
    """A flat list of commands recovered from one source file."""

    source_id: int
    commands: list[CommandLike] = field(default_factory=list)
    functions_defined: list[str] = field(default_factory=list)
    aliases_defined: list[tuple[str, Word]] = field(default_factory=list)
    var_assignments: list[VarAssign] = field(default_factory=list)


class SourceMap:
    """Owns every source file touched during resolution, in insertion order."""

    def __init__(self) -> None:
        self._files: list[SourceFile] = []

    def add(self, path: str | PathLike[str], text: str) -> int:
        """Register a file and return its new id."""
        source_id = len(self._files)
        self._files.append(SourceFile(source_id, Path(path), text))
        return source_id

    def get(self, source_id: int) -> SourceFile:
        """The file with ``source_id``; raises KeyError if unknown."""
        found = self.try_get(source_id)
        if found is None:
            raise KeyError(f"unknown source id {source_id}")
        return found

    def try_get(self, source_id: int) -> SourceFile | None:
        if 0 <= source_id < len(self._files):
            return self._files[source_id]
        return None

    def find_by_path(self, path: str | PathLike[str]) -> int | None:
        """Id of the first file registered under ``path``, if any."""
        wanted = Path(path)
        return next((f.id for f in self._files if f.path == wanted), None)

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)