"""Lore files: per-command verdicts on whether a command runs other commands.

Accepted rows, one per line:

* ``exec,NAME`` / ``noexec,NAME`` (comma, tab or whitespace separated;
  ``cant_exec`` and ``cannot`` are accepted for ``noexec``)
* ``can:NAME`` / ``cannot:NAME``

Blank lines and lines starting with ``#`` are ignored. A name given as a
path is indexed by its final component.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path, PurePosixPath

_SEPARATOR = re.compile(r"[,\s]")


class LoreError(Exception):
    """A lore file could not be read or understood."""


class LoreIOError(LoreError):
    def __init__(self, path: Path, source: Exception) -> None:
        self.path = path
        self.source = source
        super().__init__(f"lore file `{path}`: I/O error: {source}")


class LoreMalformedError(LoreError):
    def __init__(self, path: Path, line: int, raw: str) -> None:
        self.path = path
        self.line = line
        self.raw = raw
        super().__init__(f"lore file `{path}` line {line}: malformed row `{raw}`")


class LoreUnknownVerbError(LoreError):
    def __init__(self, path: Path, line: int, verb: str) -> None:
        self.path = path
        self.line = line
        self.verb = verb
        super().__init__(
            f"lore file `{path}` line {line}: unknown verb `{verb}` "
            "(expected `exec`/`noexec`/`can:`/`cannot:`)"
        )


@dataclass
class Lore:
    """Names marked as exec-wrappers and names explicitly excluded."""

    execers: set[str] = field(default_factory=set)
    non_execers: set[str] = field(default_factory=set)

    def merge(self, other: Lore) -> None:
        """Add every verdict of ``other`` to this set."""
        self.execers |= other.execers
        self.non_execers |= other.non_execers

    def override_for(self, name: str) -> bool | None:
        """True if marked exec, False if excluded, None if no opinion."""
        if name in self.non_execers:
            return False
        if name in self.execers:
            return True
        return None

    def _insert(self, is_execer: bool, name: str) -> None:
        trimmed = name.strip()
        if not trimmed:
            return
        base = PurePosixPath(trimmed).name
        if not base or base == "..":
            base = trimmed
        (self.execers if is_execer else self.non_execers).add(base)


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def parse(text: str, path: str | PathLike[str]) -> Lore:
    """Parse lore text; ``path`` is only used in error messages."""
    path = Path(path)
    lore = Lore()
    for line_no, raw in enumerate(text.split("\n"), start=1):
        trimmed = raw.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if trimmed.startswith("can:"):
            lore._insert(True, trimmed[len("can:"):])
            continue
        if trimmed.startswith("cannot:"):
            lore._insert(False, trimmed[len("cannot:"):])
            continue
        parts = _SEPARATOR.split(trimmed, maxsplit=1)
        if len(parts) < 2:
            raise LoreMalformedError(path, line_no, trimmed)
        verb, name = _ascii_lower(parts[0]), parts[1].strip()
        if verb == "exec":
            lore._insert(True, name)
        elif verb in ("noexec", "cant_exec", "cannot"):
            lore._insert(False, name)
        else:
            raise LoreUnknownVerbError(path, line_no, verb)
    return lore


def read_file(path: str | PathLike[str]) -> Lore:
    """Read and parse the lore file at ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoreIOError(path, exc) from exc
    return parse(text, path)