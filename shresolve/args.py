"""Command-line grammar, output formats, profiles and exit codes."""

from __future__ import annotations

import argparse
import enum
import os
import sys
from collections.abc import Sequence
from pathlib import Path

_VERSION = "0.0.1"
DEFAULT_INTERPRETER = "/usr/bin/env bash"


class ExitCode(enum.IntEnum):
    """Process exit codes shared by every subcommand."""

    SUCCESS = 0
    GENERIC = 1
    USAGE = 2
    UNRESOLVED_COMMAND = 10
    UNRESOLVED_SOURCE = 11
    PARSE_ERROR = 12
    DIRECTIVE_ERROR = 13
    UNSUPPORTED_CONSTRUCT = 14


class Format(enum.Enum):
    """Diagnostic output format."""

    HUMAN = "human"
    JSON = "json"
    JSONL = "jsonl"

    def __str__(self) -> str:
        return self.value


class Profile(enum.Enum):
    """Behaviour preset bundling several flags."""

    NIXOS = "nixos"
    PORTABLE = "portable"
    STRICT = "strict"

    def __str__(self) -> str:
        return self.value

    def is_strict(self) -> bool:
        """True when this profile implies ``--strict``."""
        return self is Profile.STRICT

    def uses_wrappers(self) -> bool:
        """True when this profile prefers the NixOS wrappers directory."""
        return self is Profile.NIXOS


def _split_dirs(value: str) -> list[Path]:
    return [Path(part) for part in value.split(":") if part]


def _enum_type(kind: type[enum.Enum]):
    def convert(value: str):
        try:
            return kind(value)
        except ValueError:
            choices = ", ".join(m.value for m in kind)
            raise argparse.ArgumentTypeError(
                f"invalid value '{value}' (choose from {choices})"
            ) from None

    convert.__name__ = kind.__name__.lower()
    return convert


def _add_scripts(sub: argparse.ArgumentParser, help_text: str) -> None:
    sub.add_argument("scripts", metavar="SCRIPT", nargs="+", type=Path, help=help_text)


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for every global option and subcommand."""
    parser = argparse.ArgumentParser(
        prog="shresolve",
        description="Rewrite shell command references to absolute paths.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--inputs",
        metavar="DIR",
        action="extend",
        type=_split_dirs,
        default=None,
        help="colon-separated search directories for external commands (repeatable)",
    )
    parser.add_argument("--allow", metavar="SCOPE=NAME", action="append", default=[])
    parser.add_argument("--map", metavar="NAME=REPLACEMENT", action="append", default=[])
    parser.add_argument("--skip", metavar="PATTERN", action="append", default=[])
    parser.add_argument(
        "--format",
        type=_enum_type(Format),
        default=None,
        metavar="{human,json,jsonl}",
        help="diagnostic format (default: human)",
    )
    parser.add_argument("--allow-known-gaps", action="store_true")
    parser.add_argument("--script-dir", metavar="DIR", type=Path, default=None)

    wrappers = parser.add_mutually_exclusive_group()
    wrappers.add_argument("--wrappers-dir", metavar="DIR", type=Path, default=None)
    wrappers.add_argument("--no-wrappers", action="store_true")

    shebang = parser.add_mutually_exclusive_group()
    shebang.add_argument("--interpreter", metavar="PATH", default=None)
    shebang.add_argument("--no-shebang", action="store_true")

    parser.add_argument(
        "--profile",
        type=_enum_type(Profile),
        default=Profile.NIXOS,
        metavar="{nixos,portable,strict}",
    )
    parser.add_argument("--strict", action="store_true")
    parser.add_argument("--lore", metavar="FILE", action="append", type=Path, default=None)
    parser.add_argument("-q", "--quiet", action="store_true")

    subs = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    check = subs.add_parser("check", help="audit and resolve scripts without rewriting")
    _add_scripts(check, "scripts to audit")

    resolve = subs.add_parser("resolve", help="rewrite scripts to their resolved form")
    _add_scripts(resolve, "scripts to rewrite")
    resolve.add_argument("--in-place", action="store_true")
    resolve.add_argument("--no-write-sourced", action="store_true")

    sources = subs.add_parser("sources", help="print the source graph of each script")
    _add_scripts(sources, "scripts to analyze")

    diff = subs.add_parser("diff", help="show what resolve would write")
    _add_scripts(diff, "scripts to preview")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse ``argv`` (default: ``sys.argv[1:]``), filling defaults from the environment.

    Usage errors raise ``SystemExit`` with :attr:`ExitCode.USAGE`.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not args:
        parser.print_help(sys.stderr)
        raise SystemExit(int(ExitCode.USAGE))
    ns = parser.parse_args(args)

    if ns.inputs is None:
        ns.inputs = _split_dirs(os.environ.get("SHRESOLVE_INPUTS", ""))
    if ns.format is None:
        env_format = os.environ.get("SHRESOLVE_FORMAT")
        if env_format is None:
            ns.format = Format.HUMAN
        else:
            try:
                ns.format = Format(env_format)
            except ValueError:
                parser.error(f"invalid SHRESOLVE_FORMAT value '{env_format}'")
    if ns.wrappers_dir is None and not ns.no_wrappers:
        env_wrappers = os.environ.get("SHRESOLVE_WRAPPERS_DIR")
        if env_wrappers:
            ns.wrappers_dir = Path(env_wrappers)
    if ns.interpreter is None and not ns.no_shebang:
        ns.interpreter = os.environ.get("SHRESOLVE_INTERPRETER") or None
    if ns.lore is None:
        env_lore = os.environ.get("SHRESOLVE_LORE")
        ns.lore = [Path(env_lore)] if env_lore else []
    return ns