from __future__ import annotations

from typing import List

from .models import QuoteSpan

TERMINATORS = frozenset(".!?")
DEFAULT_QUOTE_MARKS = '"'


class InvalidText(ValueError):
    """Raised when input cannot be indexed as a sequence of characters."""


def ensure_text(value: object) -> str:
    """Return value as a str, decoding UTF-8 bytes and rejecting binary data."""
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidText(f"Input is not valid UTF-8 text: {exc}") from exc
    if not isinstance(value, str):
        raise InvalidText(f"Expected text, got {type(value).__name__}.")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        # Lone surrogates survive lossy decodes but are not characters.
        raise InvalidText(f"Input contains non-character data: {exc}") from exc
    return value


def find_quote_spans(
    text: str, quote_marks: str = DEFAULT_QUOTE_MARKS
) -> List[QuoteSpan]:
    """Pair quotation marks in order of appearance; a trailing odd mark is dropped."""
    text = ensure_text(text)
    return _pair_quotes([idx for idx, char in enumerate(text) if char in quote_marks])


def classify_boundaries(
    text: str, quote_marks: str = DEFAULT_QUOTE_MARKS
) -> List[int]:
    """
    Return the strictly increasing character positions where sentences begin
    or end, always starting at 0 and ending at len(text).

    A terminator strictly inside a quotation span is not a boundary. The span
    cursor only moves forward, so the walk is linear in the number of quotes
    and terminators.
    """
    text = ensure_text(text)
    quotes: List[int] = []
    stops: List[int] = []
    for idx, char in enumerate(text):
        if char in quote_marks:
            quotes.append(idx)
        elif char in TERMINATORS:
            stops.append(idx)

    spans = _pair_quotes(quotes)

    boundaries = [0]
    cursor = 0
    for stop in stops:
        while cursor < len(spans) and spans[cursor].end < stop:
            cursor += 1
        if cursor < len(spans) and spans[cursor].contains(stop):
            continue
        boundaries.append(stop + 1)

    if boundaries[-1] != len(text):
        boundaries.append(len(text))
    return boundaries


def segment(text: str, quote_marks: str = DEFAULT_QUOTE_MARKS) -> List[str]:
    """Split text into trimmed sentences without breaking inside quotations."""
    text = ensure_text(text)
    boundaries = classify_boundaries(text, quote_marks)
    sentences: List[str] = []
    for start, end in zip(boundaries, boundaries[1:]):
        sentence = text[start:end].strip()
        # Drops empty slices and the stray dots of an ellipsis.
        if len(sentence) > 1:
            sentences.append(sentence)
    return sentences


def is_quote_bearing(sentence: str, quote_marks: str = DEFAULT_QUOTE_MARKS) -> bool:
    """Return True when the sentence contains any quotation mark."""
    sentence = ensure_text(sentence)
    return any(char in quote_marks for char in sentence)


def _pair_quotes(positions: List[int]) -> List[QuoteSpan]:
    return [
        QuoteSpan(start=positions[idx], end=positions[idx + 1])
        for idx in range(0, len(positions) - 1, 2)
    ]
