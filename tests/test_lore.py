from pathlib import Path

import pytest

from shresolve.lore import (
    Lore,
    LoreError,
    LoreIOError,
    LoreMalformedError,
    LoreUnknownVerbError,
    parse,
    read_file,
)

P = Path("test.lore")


def test_parses_two_column_form():
    lore = parse("exec,my-runner\nnoexec,jq\n", P)
    assert "my-runner" in lore.execers
    assert "jq" in lore.non_execers


def test_parses_single_column_can_form():
    lore = parse("can:my-runner\ncannot:jq\n", P)
    assert "my-runner" in lore.execers
    assert "jq" in lore.non_execers


def test_whitespace_separator_works():
    lore = parse("exec  my-runner\nnoexec\tjq\n", P)
    assert "my-runner" in lore.execers
    assert "jq" in lore.non_execers


def test_comments_and_blanks_are_ignored():
    lore = parse("# this is a comment\n\nexec,foo\n", P)
    assert lore.execers == {"foo"}


def test_store_paths_are_indexed_by_basename():
    lore = parse("can:/nix/store/abc-coreutils/bin/cat\n", P)
    assert "cat" in lore.execers
    assert "/nix/store/abc-coreutils/bin/cat" not in lore.execers


def test_unknown_verb_is_rejected():
    with pytest.raises(LoreUnknownVerbError) as info:
        parse("maybe,foo\n", P)
    assert info.value.verb == "maybe"
    assert info.value.line == 1


def test_malformed_two_col_row_is_rejected():
    with pytest.raises(LoreMalformedError) as info:
        parse("exec\n", P)
    assert info.value.raw == "exec"


def test_errors_share_a_base_class():
    with pytest.raises(LoreError):
        parse("# ok\nmaybe,foo\n", P)


def test_override_for_returns_lore_verdict():
    lore = parse("exec,foo\nnoexec,bar\n", P)
    assert lore.override_for("foo") is True
    assert lore.override_for("bar") is False
    assert lore.override_for("baz") is None


def test_noexec_wins_over_exec():
    lore = parse("exec,foo\nnoexec,foo\n", P)
    assert lore.override_for("foo") is False


def test_merge_combines_two_sources():
    a = parse("exec,a\n", P)
    b = parse("noexec,b\n", P)
    a.merge(b)
    assert "a" in a.execers
    assert "b" in a.non_execers


def test_verb_is_case_insensitive_and_aliases_accepted():
    lore = parse("EXEC,foo\ncant_exec,bar\ncannot,baz\n", P)
    assert lore.execers == {"foo"}
    assert lore.non_execers == {"bar", "baz"}


def test_empty_lore_has_no_opinion():
    assert Lore().override_for("anything") is None


def test_read_file_round_trip(tmp_path):
    lore_file = tmp_path / "lore.csv"
    lore_file.write_text("noexec,nice\n")
    assert read_file(lore_file).non_execers == {"nice"}


def test_read_file_missing_raises_io_error(tmp_path):
    missing = tmp_path / "missing.csv"
    with pytest.raises(LoreIOError) as info:
        read_file(missing)
    assert info.value.path == missing