from __future__ import annotations

import logging
from typing import Dict, List

from .config import SearchSettings
from .fetching import FetchError, Fetcher
from .markup import MarkupError, extract_links
from .models import Article
from .textutils import normalize_query

logger = logging.getLogger(__name__)


def build_search_url(template: str, query: str, page: int) -> str:
    """Fill the {query} and {page} placeholders of a search URL template."""
    return template.replace("{query}", normalize_query(query)).replace(
        "{page}", str(page)
    )


def search_articles(
    query: str,
    fetcher: Fetcher,
    settings: SearchSettings,
    depth: int | None = None,
) -> List[Article]:
    """Collect article links from the first `depth` pages of search results."""
    pages = settings.depth if depth is None else depth
    found: Dict[str, None] = {}
    for page in range(1, max(0, pages) + 1):
        url = build_search_url(settings.url_template, query, page)
        logger.info("Searching: %s", url)
        try:
            markup = fetcher.fetch(url)
            links = extract_links(markup, settings.link_selector, base_url=url)
        except (FetchError, MarkupError) as exc:
            logger.warning("Skipping search page %s: %s", url, exc)
            continue
        logger.debug("Found %d links on %s", len(links), url)
        for link in links:
            found.setdefault(link, None)
    return [Article(url=link) for link in found]
