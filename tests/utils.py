from __future__ import annotations

from typing import Dict, List

from twocents.fetching import FetchError, Fetcher


class FakeFetcher(Fetcher):
    """Serve canned markup by URL; unknown URLs fail like a network error."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = dict(pages)
        self.requested: List[str] = []

    def fetch(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.pages:
            raise FetchError(f"Unable to fetch {url}")
        return self.pages[url]


def search_page(*hrefs: str) -> str:
    """Build a search results page in the BBC layout."""
    items = "".join(
        f'<li><div class="media-text"><a href="{href}">Story</a></div></li>'
        for href in hrefs
    )
    return f"<html><body><ul>{items}</ul></body></html>"


def story_page(*paragraphs: str) -> str:
    """Build an article page whose story paragraphs live under #page."""
    body = "".join(f"<p>{paragraph}</p>" for paragraph in paragraphs)
    return (
        "<html><body><nav><p>Menu \"item\".</p></nav>"
        f'<div id="page">{body}</div></body></html>'
    )
