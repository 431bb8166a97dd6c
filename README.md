# shresolve

`shresolve` provides the building blocks of a tool that finds the commands a
shell script runs and pins them to absolute paths, the way a reproducible
build (for example a Nix derivation) needs them. It has no dependencies
beyond the standard library.

## What is in the package

- `shresolve.span`: `Span`, a half-open `[start, end)` offset range with
  `point`, `length`, `is_empty`, `merge`, `contains` and `slice`.
- `shresolve.word`: `Word` and its pieces (`Literal`, `SingleQuoted`,
  `DoubleQuoted`, `CommandSub`, `Dynamic` with a `DynamicKind`). A word is
  static when its whole text is known without running the shell.
- `shresolve.command`: `Invocation` (a simple command, with `name()`,
  `static_name()` and `args()`), `FunctionDef`, `SourceCommand`, `AliasDef`
  and `InvocationContext`.
- `shresolve.source`: `VarAssign`, `SourceFile`, `SourceUnit` and
  `SourceMap`, which registers files under integer ids (`add`, `get`,
  `try_get`, `find_by_path`, iteration and `len`).
- `shresolve.visitor`: `Visitor`, whose default methods walk units,
  commands and invocations down to words, plus the `walk_unit`,
  `walk_command` and `walk_invocation` helpers.
- `shresolve.diagnostic`: `Diagnostic`, `DiagnosticKind` (category
  `unsupported-construct`, `known-gap` or `unresolved`, plus a code),
  `Severity` and `line_col`.
- `shresolve.render`: `render_jsonl` (one compact JSON object per line) and
  `render_pretty_json` (one array indented by two spaces).
- `shresolve.suggest`: `levenshtein` and `nearest`, for "did you mean?"
  hints.
- `shresolve.lore`: `Lore`, `parse` and `read_file` for per-command verdicts
  on whether a command runs other commands.
- `shresolve.directives`: `allow`, `map` and `skip` directives, parsed from
  option values or from `# shresolve: …` comments in a script.
- `shresolve.args`: the option grammar (`build_parser`, `parse_args`),
  `Format`, `Profile` and `ExitCode`.

## Examples

Spans:

```python
from shresolve.span import Span

src = "hello world"
assert Span(0, 5).slice(src) == "hello"
assert Span(2, 5).merge(Span(4, 9)) == Span(2, 9)
```

Typo hints (the allowed distance grows with the length of the name; ties go
to the alphabetically first candidate):

```python
from shresolve.suggest import nearest

assert nearest("gerp", ["grep", "git"]) == "grep"
assert nearest("xyzzy", ["git", "grep"]) is None
```

Diagnostics as JSON (`name` and `hint` are left out when unset):

```python
from shresolve.diagnostic import Diagnostic, DiagnosticKind, Severity
from shresolve.render import render_jsonl
from shresolve.span import Span

diag = Diagnostic(
    file="x.sh",
    span=Span(0, 2),
    line=1,
    column=1,
    severity=Severity.ERROR,
    kind=DiagnosticKind("unresolved", "UnknownExternal"),
    message="unknown external command `jq`",
    name="jq",
)
print(render_jsonl([diag]), end="")
```

Lore files accept `exec,NAME` / `noexec,NAME` (comma, tab or whitespace
separated; `cant_exec` and `cannot` mean the same as `noexec`) and
`can:NAME` / `cannot:NAME`. Blank lines and `#` comments are skipped, and a
path is indexed by its last component:

```python
from shresolve.lore import parse

lore = parse("exec,my-runner\nnoexec,jq\ncan:/opt/tools/bin/cat\n", "example.lore")
assert lore.override_for("my-runner") is True
assert lore.override_for("jq") is False
assert lore.override_for("cat") is True
assert lore.override_for("git") is None
```

A malformed row raises `LoreMalformedError`, an unknown verb
`LoreUnknownVerbError`, and an unreadable file `LoreIOError`; all are
`LoreError`.

Inline directives:

```python
from shresolve.directives import parse_inline

script = """#!/usr/bin/env bash
# shresolve: allow function=helper
# shresolve: map jq=/usr/bin/jq
# shresolve: skip $RUNTIME
helper
"""
directives, errors = parse_inline(script)
assert not errors
assert directives.map[0].replacement == "/usr/bin/jq"
```

`parse_inline` collects every problem as an `InvalidPragmaError` carrying
its line number instead of stopping at the first one. `parse_cli_allow` and
`parse_cli_map` raise `InvalidAllowError` and `InvalidMapError`.
`Directives.merge(over)` returns a new set in which `over`'s map entries
replace same-named ones, while allow and skip entries accumulate.

Command-line options:

```python
from shresolve.args import Format, parse_args

options = parse_args(["--inputs", "/a:/b", "--format", "json", "check", "x.sh"])
assert options.format is Format.JSON
assert [str(p) for p in options.inputs] == ["/a", "/b"]
```

The subcommands are `check`, `resolve` (with `--in-place` and
`--no-write-sourced`), `sources` and `diff`, each taking one or more
scripts. When an option is not given, `parse_args` falls back to the
environment variables `SHRESOLVE_INPUTS`, `SHRESOLVE_FORMAT`,
`SHRESOLVE_WRAPPERS_DIR`, `SHRESOLVE_INTERPRETER` and `SHRESOLVE_LORE`.
An empty argument list prints help and exits with `ExitCode.USAGE`.

## Exit codes

`shresolve.args.ExitCode`: success (0), generic error (1), usage error (2),
unresolved command (10), unresolved source (11), parse error (12), directive
error (13) and unsupported construct (14).

## Profiles

- `nixos` (default): `uses_wrappers()` is true.
- `portable`: neither strict nor using the wrappers directory.
- `strict`: `is_strict()` is true; same meaning as `--strict`.

## What the package does not do

There is no shell parser, no command resolver, no rewriter and no safety
scan here, and so no installed command: `parse_args` only reads options, and
nothing in the package acts on them by checking or rewriting scripts. A
front end that does that work has to be built on top of these modules.