"""Half-open character ranges into a source text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Span:
    """Half-open offset range ``[start, end)`` into a source file.

    The rewriter sorts edits by span and splices them in one pass.
    """

    start: int = 0
    end: int = 0

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise ValueError(
                f"Span: start ({self.start}) must precede end ({self.end})"
            )

    @classmethod
    def point(cls, at: int) -> Span:
        """A zero-length span at ``at``."""
        return cls(at, at)

    def length(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def merge(self, other: Span) -> Span:
        """Smallest span enclosing both spans."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def contains(self, inner: Span) -> bool:
        """True if ``inner`` lies entirely within this span."""
        return self.start <= inner.start and inner.end <= self.end

    def slice(self, source: str) -> str:
        """The text of ``source`` covered by this span."""
        if self.end > len(source):
            raise IndexError(
                f"span {self.start}..{self.end} is out of bounds for text of length {len(source)}"
            )
        return source[self.start : self.end]