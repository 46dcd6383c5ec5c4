from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List

from .config import TwoCentsConfig
from .fetching import FetchError, Fetcher
from .markup import MarkupError, extract_paragraphs
from .models import Article, AttributedQuote, Document
from .search import search_articles
from .segmentation import DEFAULT_QUOTE_MARKS, InvalidText, is_quote_bearing, segment

logger = logging.getLogger(__name__)


def fetch_document(url: str, fetcher: Fetcher, config: TwoCentsConfig) -> Document:
    """Fetch an article and return its story paragraphs as a Document."""
    markup = fetcher.fetch(url)
    paragraphs = extract_paragraphs(markup, config.search.paragraph_selector)
    return Document(url=url, paragraphs=paragraphs)


def collect_quotes(
    document: Document, quote_marks: str = DEFAULT_QUOTE_MARKS
) -> List[AttributedQuote]:
    """Segment every paragraph and keep the quote-bearing sentences."""
    quotes: List[AttributedQuote] = []
    for index, paragraph in enumerate(document.paragraphs):
        try:
            sentences = segment(paragraph, quote_marks)
        except InvalidText as exc:
            logger.warning(
                "Skipping paragraph %d of %s: %s", index, document.url, exc
            )
            continue
        quotes.extend(
            AttributedQuote(url=document.url, text=sentence)
            for sentence in sentences
            if is_quote_bearing(sentence, quote_marks)
        )
    return quotes


def process_article(
    article: Article, fetcher: Fetcher, config: TwoCentsConfig
) -> Article | None:
    """Fetch one article and return a copy carrying its quotes, or None on failure."""
    try:
        document = fetch_document(article.url, fetcher, config)
    except (FetchError, MarkupError) as exc:
        logger.warning("Skipping article %s: %s", article.url, exc)
        return None
    quotes = collect_quotes(document, config.quote_marks)
    logger.info("Collected %d quotes from %s", len(quotes), article.url)
    return Article(url=article.url, quotes=[quote.text for quote in quotes])


def process_articles(
    articles: List[Article], fetcher: Fetcher, config: TwoCentsConfig
) -> List[Article]:
    """Process articles, in parallel when configured, preserving input order."""
    workers = max(1, config.fetch.parallel_requests)
    if workers == 1 or len(articles) <= 1:
        results = [process_article(article, fetcher, config) for article in articles]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(
                pool.map(lambda item: process_article(item, fetcher, config), articles)
            )
    return [result for result in results if result is not None]


def collect_from_search(
    query: str,
    fetcher: Fetcher,
    config: TwoCentsConfig,
    depth: int | None = None,
) -> List[Article]:
    """Search for articles and collect the quotes each one contains."""
    articles = search_articles(query, fetcher, config.search, depth=depth)
    logger.info("Processing %d articles for query %r", len(articles), query)
    return process_articles(articles, fetcher, config)
