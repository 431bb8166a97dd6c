"""A recursive walker over the IR."""

from __future__ import annotations

from shresolve.command import AliasDef, CommandLike, FunctionDef, Invocation, SourceCommand
from shresolve.source import SourceUnit
from shresolve.word import Word


class Visitor:
    """IR walker whose default methods recurse into children."""

    def visit_unit(self, unit: SourceUnit) -> None:
        walk_unit(self, unit)

    def visit_command(self, cmd: CommandLike) -> None:
        walk_command(self, cmd)

    def visit_invocation(self, inv: Invocation) -> None:
        walk_invocation(self, inv)

    def visit_word(self, word: Word) -> None:
        """Leaf by default; override to inspect word pieces."""


def walk_unit(visitor: Visitor, unit: SourceUnit) -> None:
    for cmd in unit.commands:
        visitor.visit_command(cmd)


def walk_command(visitor: Visitor, cmd: CommandLike) -> None:
    match cmd:
        case Invocation():
            visitor.visit_invocation(cmd)
        case FunctionDef(body=body):
            visitor.visit_unit(body)
        case SourceCommand(target=target):
            visitor.visit_word(target)
        case AliasDef(definition=definition):
            visitor.visit_word(definition)
        case _:
            raise TypeError(f"unknown command node {type(cmd).__name__}")


def walk_invocation(visitor: Visitor, inv: Invocation) -> None:
    for word in inv.words:
        visitor.visit_word(word)