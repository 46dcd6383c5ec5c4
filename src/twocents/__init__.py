"""
twocents package exports the quote-aware segmenter and the collection pipeline.
"""

from __future__ import annotations

from .config import TwoCentsConfig, config_from_dict, config_from_yaml, load_config
from .models import Article, AttributedQuote, Document, QuoteSpan
from .pipeline import collect_from_search, collect_quotes, process_article
from .segmentation import (
    InvalidText,
    classify_boundaries,
    find_quote_spans,
    is_quote_bearing,
    segment,
)

__all__ = [
    "TwoCentsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Article",
    "AttributedQuote",
    "Document",
    "QuoteSpan",
    "InvalidText",
    "classify_boundaries",
    "find_quote_spans",
    "is_quote_bearing",
    "segment",
    "collect_quotes",
    "collect_from_search",
    "process_article",
]

__version__ = "0.1.0"
