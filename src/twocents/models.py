from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Document:
    """A text source identified by its URL and its ordered paragraphs."""

    url: str
    paragraphs: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class QuoteSpan:
    """Character offsets of an opening and closing quotation mark."""

    start: int
    end: int

    def contains(self, position: int) -> bool:
        return self.start < position < self.end


@dataclass(frozen=True, slots=True)
class AttributedQuote:
    """A quote-bearing sentence attributed to the URL it was found at."""

    url: str
    text: str


@dataclass(slots=True)
class Article:
    """Search result URL plus the quotes collected from its story."""

    url: str
    quotes: list[str] = field(default_factory=list)
