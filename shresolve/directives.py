"""``allow`` / ``map`` / ``skip`` directives and their parsers.

The same grammar is used by command-line flags (``--allow``, ``--map``,
``--skip``) and by inline pragmas (``# shresolve: <verb> <arg>``).
Command-line directives take precedence over inline ones.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

PRAGMA_PREFIX = "shresolve:"

_WHITESPACE = re.compile(r"\s")


class AllowScope(enum.Enum):
    """The scope a name is asserted to live in."""

    FUNCTION = "function"
    ALIAS = "alias"
    BUILTIN = "builtin"
    SPECIAL_BUILTIN = "special-builtin"
    KEYWORD = "keyword"


_SCOPES = {
    "function": AllowScope.FUNCTION,
    "alias": AllowScope.ALIAS,
    "builtin": AllowScope.BUILTIN,
    "special-builtin": AllowScope.SPECIAL_BUILTIN,
    "special_builtin": AllowScope.SPECIAL_BUILTIN,
    "keyword": AllowScope.KEYWORD,
}


@dataclass(frozen=True)
class AllowDirective:
    """Treat ``name`` as in scope (no rewrite)."""

    scope: AllowScope
    name: str


@dataclass(frozen=True)
class MapDirective:
    """Pin ``name`` to ``replacement``."""

    name: str
    replacement: str


@dataclass(frozen=True)
class SkipDirective:
    """Literal source text that is accepted unchanged."""

    pattern: str


@dataclass
class Directives:
    """A set of allow, map and skip directives."""

    allow: list[AllowDirective] = field(default_factory=list)
    map: list[MapDirective] = field(default_factory=list)
    skip: list[SkipDirective] = field(default_factory=list)

    def merge(self, over: Directives) -> Directives:
        """Combine with ``over``; its map entries replace same-named ones here.

        ``allow`` and ``skip`` entries accumulate.
        """
        overridden = {m.name for m in over.map}
        return Directives(
            allow=[*self.allow, *over.allow],
            map=[m for m in self.map if m.name not in overridden] + list(over.map),
            skip=[*self.skip, *over.skip],
        )

    def is_empty(self) -> bool:
        return not (self.allow or self.map or self.skip)


class DirectiveError(ValueError):
    """A directive could not be parsed."""


class InvalidAllowError(DirectiveError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"invalid allow directive `{raw}`: expected `<scope>=<name>` where scope "
            "is one of function|alias|builtin|special-builtin|keyword"
        )


class InvalidMapError(DirectiveError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"invalid map directive `{raw}`: expected `<name>=<replacement>`"
        )


class InvalidPragmaError(DirectiveError):
    def __init__(self, line: int, detail: str) -> None:
        self.line = line
        self.detail = detail
        super().__init__(f"invalid pragma on line {line}: {detail}")


def parse_cli_allow(raw: str) -> AllowDirective:
    """Parse ``<scope>=<name>``."""
    scope_text, sep, name = raw.partition("=")
    scope = _SCOPES.get(scope_text)
    if not sep or scope is None or not name:
        raise InvalidAllowError(raw)
    return AllowDirective(scope, name)


def parse_cli_map(raw: str) -> MapDirective:
    """Parse ``<name>=<replacement>``; the replacement may contain ``=``."""
    name, sep, replacement = raw.partition("=")
    if not sep or not name or not replacement:
        raise InvalidMapError(raw)
    return MapDirective(name, replacement)


def parse_cli_skip(raw: str) -> SkipDirective:
    return SkipDirective(raw)


def _lines(source: str):
    parts = source.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def parse_inline(source: str) -> tuple[Directives, list[DirectiveError]]:
    """Collect ``# shresolve: <verb> <arg>`` pragmas in source order.

    Every problem is reported alongside the directives that did parse.
    """
    directives = Directives()
    errors: list[DirectiveError] = []

    for line_no, line in enumerate(_lines(source), start=1):
        trimmed = line.lstrip()
        if not trimmed.startswith("#"):
            continue
        rest = trimmed[1:].lstrip()
        if not rest.startswith(PRAGMA_PREFIX):
            continue
        rest = rest[len(PRAGMA_PREFIX):].strip()

        pieces = _WHITESPACE.split(rest, maxsplit=1)
        verb = pieces[0]
        arg = pieces[1].strip() if len(pieces) > 1 else ""

        try:
            if verb == "allow":
                directives.allow.append(parse_cli_allow(arg))
            elif verb == "map":
                directives.map.append(parse_cli_map(arg))
            elif verb == "skip":
                if not arg:
                    raise InvalidPragmaError(line_no, "skip requires a pattern argument")
                directives.skip.append(parse_cli_skip(arg))
            else:
                raise InvalidPragmaError(
                    line_no, f"unknown verb `{verb}` (expected allow|map|skip)"
                )
        except InvalidPragmaError as exc:
            errors.append(exc)
        except DirectiveError as exc:
            errors.append(InvalidPragmaError(line_no, str(exc)))

    return directives, errors