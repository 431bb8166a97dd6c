"""Shell words and the pieces they are made of."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shresolve.span import Span

if TYPE_CHECKING:
    from shresolve.source import SourceUnit


class DynamicKind(enum.Enum):
    """The kind of runtime expansion a dynamic piece stands for."""

    VAR_SUB = "VarSub"
    PARAM_EXP = "ParamExp"
    CMD_SUB = "CmdSub"
    ARITH_EXP = "ArithExp"
    PROC_SUB = "ProcSub"
    TILDE = "Tilde"
    ANSI_C = "AnsiC"
    BRACE_EXP = "BraceExp"
    GLOB = "Glob"


class WordPiece:
    """A sub-element of a :class:`Word`."""

    span: Span

    def is_static(self) -> bool:
        """True if this piece does not introduce runtime evaluation."""
        return self.static_text() is not None

    def static_text(self) -> str | None:
        """The fixed text of this piece, or None if any part is dynamic."""
        raise NotImplementedError


@dataclass
class Literal(WordPiece):
    """Bare literal text."""

    text: str
    span: Span

    def static_text(self) -> str | None:
        return self.text


@dataclass
class SingleQuoted(WordPiece):
    """A single-quoted run; the body is verbatim."""

    text: str
    span: Span

    def static_text(self) -> str | None:
        return self.text


@dataclass
class DoubleQuoted(WordPiece):
    """A double-quoted run whose inner pieces may be dynamic."""

    pieces: list[WordPiece]
    span: Span

    def is_static(self) -> bool:
        return all(piece.is_static() for piece in self.pieces)

    def static_text(self) -> str | None:
        parts = []
        for piece in self.pieces:
            text = piece.static_text()
            if text is None:
                return None
            parts.append(text)
        return "".join(parts)


@dataclass
class CommandSub(WordPiece):
    """A re-parsed ``$(...)`` whose inner unit uses outer-source offsets."""

    inner: SourceUnit
    span: Span

    def is_static(self) -> bool:
        return False

    def static_text(self) -> str | None:
        return None


@dataclass
class Dynamic(WordPiece):
    """An expansion that is not evaluated here."""

    kind: DynamicKind
    span: Span

    def is_static(self) -> bool:
        return False

    def static_text(self) -> str | None:
        return None


@dataclass
class Word:
    """A single shell word.

    ``static_value`` is set when the whole word is fixed at parse time.
    """

    span: Span = field(default_factory=Span)
    pieces: list[WordPiece] = field(default_factory=list)
    static_value: str | None = None

    def is_static(self) -> bool:
        return self.static_value is not None

    def as_static(self) -> str | None:
        return self.static_value