import pytest

from shresolve.span import Span


def test_len_and_emptiness():
    assert Span(0, 0).length() == 0
    assert Span(0, 0).is_empty()
    assert Span(3, 7).length() == 4
    assert not Span(3, 7).is_empty()


def test_merge_takes_outer_bounds():
    assert Span(2, 5).merge(Span(4, 9)) == Span(2, 9)


def test_merge_handles_disjoint():
    assert Span(0, 3).merge(Span(7, 10)) == Span(0, 10)


def test_contains_checks_full_enclosure():
    outer = Span(0, 10)
    assert outer.contains(Span(0, 10))
    assert outer.contains(Span(2, 8))
    assert not outer.contains(Span(0, 11))
    assert not outer.contains(Span(11, 12))


def test_slice_extracts_source_substring():
    src = "hello world"
    assert Span(0, 5).slice(src) == "hello"
    assert Span(6, 11).slice(src) == "world"


def test_slice_out_of_bounds_raises():
    with pytest.raises(IndexError):
        Span(0, 20).slice("short")


def test_point_is_zero_length():
    p = Span.point(42)
    assert p.start == 42
    assert p.end == 42
    assert p.is_empty()


def test_inverted_span_is_rejected():
    with pytest.raises(ValueError):
        Span(5, 2)


def test_spans_sort_by_start_then_end():
    spans = [Span(4, 6), Span(0, 3), Span(0, 1)]
    assert sorted(spans) == [Span(0, 1), Span(0, 3), Span(4, 6)]