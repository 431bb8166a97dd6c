from pathlib import Path

import pytest

from shresolve.args import ExitCode, Format, Profile, parse_args

_ENV = (
    "SHRESOLVE_INPUTS",
    "SHRESOLVE_FORMAT",
    "SHRESOLVE_WRAPPERS_DIR",
    "SHRESOLVE_INTERPRETER",
    "SHRESOLVE_LORE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_check_subcommand_parses():
    ns = parse_args(["check", "script.sh"])
    assert ns.command == "check"
    assert ns.scripts == [Path("script.sh")]


def test_resolve_in_place_parses():
    ns = parse_args(["resolve", "--in-place", "script.sh"])
    assert ns.command == "resolve"
    assert ns.in_place is True
    assert ns.no_write_sourced is False


def test_inputs_split_on_colon():
    ns = parse_args(["--inputs", "/a:/b:/c", "check", "x.sh"])
    assert ns.inputs == [Path("/a"), Path("/b"), Path("/c")]


def test_inputs_accumulate_across_flags():
    ns = parse_args(["--inputs", "/a", "--inputs", "/b:/c", "check", "x.sh"])
    assert len(ns.inputs) == 3


def test_inputs_from_environment(monkeypatch):
    monkeypatch.setenv("SHRESOLVE_INPUTS", "/x:/y")
    ns = parse_args(["check", "x.sh"])
    assert ns.inputs == [Path("/x"), Path("/y")]


def test_directives_accumulate():
    ns = parse_args(
        ["--allow", "function=foo", "--map", "jq=/usr/bin/jq", "--skip", "$RUNTIME", "check", "x.sh"]
    )
    assert ns.allow == ["function=foo"]
    assert ns.map == ["jq=/usr/bin/jq"]
    assert ns.skip == ["$RUNTIME"]


def test_format_default_is_human():
    assert parse_args(["check", "x.sh"]).format == Format.HUMAN


def test_format_json_parses():
    assert parse_args(["--format", "json", "check", "x.sh"]).format == Format.JSON


def test_format_from_environment(monkeypatch):
    monkeypatch.setenv("SHRESOLVE_FORMAT", "jsonl")
    assert parse_args(["check", "x.sh"]).format == Format.JSONL


def test_invalid_format_is_usage_error():
    with pytest.raises(SystemExit) as info:
        parse_args(["--format", "xml", "check", "x.sh"])
    assert info.value.code == ExitCode.USAGE


def test_missing_script_is_usage_error():
    with pytest.raises(SystemExit) as info:
        parse_args(["check"])
    assert info.value.code == ExitCode.USAGE


def test_empty_argv_is_usage_error():
    with pytest.raises(SystemExit) as info:
        parse_args([])
    assert info.value.code == ExitCode.USAGE


def test_no_wrappers_conflicts_with_wrappers_dir():
    with pytest.raises(SystemExit) as info:
        parse_args(["--wrappers-dir", "/w", "--no-wrappers", "check", "x.sh"])
    assert info.value.code == ExitCode.USAGE


def test_no_shebang_conflicts_with_interpreter():
    with pytest.raises(SystemExit) as info:
        parse_args(["--interpreter", "/bin/bash", "--no-shebang", "check", "x.sh"])
    assert info.value.code == ExitCode.USAGE


def test_profile_and_strict_defaults():
    ns = parse_args(["check", "x.sh"])
    assert ns.profile == Profile.NIXOS
    assert ns.strict is False
    assert ns.lore == []


def test_profile_strict_parses():
    ns = parse_args(["--profile", "strict", "diff", "x.sh"])
    assert ns.profile.is_strict() is True
    assert ns.command == "diff"


def test_profile_flags():
    assert Profile.STRICT.is_strict() is True
    assert Profile.NIXOS.is_strict() is False
    assert Profile.NIXOS.uses_wrappers() is True
    assert Profile.PORTABLE.uses_wrappers() is False
    assert Profile.STRICT.uses_wrappers() is False


def test_lore_and_quiet():
    ns = parse_args(["-q", "--lore", "a.csv", "--lore", "b.csv", "sources", "x.sh", "y.sh"])
    assert ns.quiet is True
    assert ns.lore == [Path("a.csv"), Path("b.csv")]
    assert ns.scripts == [Path("x.sh"), Path("y.sh")]


def test_interpreter_from_environment(monkeypatch):
    monkeypatch.setenv("SHRESOLVE_INTERPRETER", "/opt/bash")
    assert parse_args(["check", "x.sh"]).interpreter == "/opt/bash"
    assert parse_args(["--no-shebang", "check", "x.sh"]).interpreter is None