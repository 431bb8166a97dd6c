"""Command-shaped IR nodes: invocations, functions, sources and aliases."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shresolve.span import Span
from shresolve.word import Word

if TYPE_CHECKING:
    from shresolve.source import SourceUnit


class InvocationContext(enum.Enum):
    """The command-resolution context an invocation appears in."""

    DEFAULT = "Default"
    INSIDE_COMMAND = "InsideCommand"
    INSIDE_EXEC = "InsideExec"
    INSIDE_EVAL = "InsideEval"
    INSIDE_FUNCTION_BODY = "InsideFunctionBody"


class CommandLike:
    """Base of every resolver work item; each carries a ``span``."""

    span: Span


@dataclass
class Invocation(CommandLike):
    """A simple command such as ``git status -sb``."""

    words: list[Word] = field(default_factory=list)
    span: Span = field(default_factory=Span)
    context: InvocationContext = InvocationContext.DEFAULT

    def name(self) -> Word | None:
        """The first word, if any."""
        return self.words[0] if self.words else None

    def static_name(self) -> str | None:
        """The command name if it is known at parse time."""
        first = self.name()
        return first.as_static() if first is not None else None

    def args(self) -> list[Word]:
        """Every word after the command name."""
        return self.words[1:]


@dataclass
class FunctionDef(CommandLike):
    """A function definition whose body is its own unit."""

    name: str
    name_span: Span
    body: SourceUnit
    span: Span


@dataclass
class SourceCommand(CommandLike):
    """A ``source`` / ``.`` include of ``target``."""

    target: Word
    span: Span


@dataclass
class AliasDef(CommandLike):
    """An ``alias name=value`` definition."""

    name: str
    name_span: Span
    definition: Word
    span: Span