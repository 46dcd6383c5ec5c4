from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError


class MarkupError(RuntimeError):
    """Raised when markup cannot be queried with the configured selector."""


def extract_links(markup: str, selector: str, base_url: str | None = None) -> List[str]:
    """Return unique href values of elements matching selector, in document order."""
    links: List[str] = []
    seen: set[str] = set()
    for element in _select(markup, selector):
        href = element.get("href")
        if not isinstance(href, str) or not href.strip():
            continue
        href = href.strip()
        if base_url:
            href = urljoin(base_url, href)
        if href in seen:
            continue
        seen.add(href)
        links.append(href)
    return links


def extract_paragraphs(markup: str, selector: str) -> List[str]:
    """Return the text of every element matching selector, in document order."""
    paragraphs: List[str] = []
    for element in _select(markup, selector):
        text = element.get_text()
        if text.strip():
            paragraphs.append(text)
    return paragraphs


def _select(markup: str, selector: str) -> list:
    if not selector or not selector.strip():
        raise MarkupError("A CSS selector is required.")
    soup = BeautifulSoup(markup, "html.parser")
    try:
        return soup.select(selector)
    except SelectorSyntaxError as exc:
        raise MarkupError(f"Invalid CSS selector {selector!r}: {exc}") from exc
