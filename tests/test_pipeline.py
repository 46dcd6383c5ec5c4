from twocents.config import FetchSettings, SearchSettings, TwoCentsConfig
from twocents.fetching import CallableFetcher
from twocents.models import Article, AttributedQuote, Document
from twocents.pipeline import (
    collect_from_search,
    collect_quotes,
    fetch_document,
    process_article,
    process_articles,
)
from tests.utils import FakeFetcher, search_page, story_page

TEMPLATE = "https://news.test/search?page={page}&q={query}"


def _config(parallel_requests: int = 1) -> TwoCentsConfig:
    return TwoCentsConfig(
        search=SearchSettings(url_template=TEMPLATE),
        fetch=FetchSettings(parallel_requests=parallel_requests),
    )


def test_collect_quotes_keeps_quote_bearing_sentences():
    doc = Document(
        url="https://news.test/a",
        paragraphs=[
            'The minister spoke. "We will win. Trust me," he said. Nobody clapped.',
            "No quotes here.",
        ],
    )
    assert collect_quotes(doc) == [
        AttributedQuote(
            url="https://news.test/a", text='"We will win. Trust me," he said.'
        )
    ]


def test_collect_quotes_skips_invalid_paragraphs():
    doc = Document(url="u", paragraphs=["bad \udc80 \"x\".", 'Good "quote".'])
    assert [quote.text for quote in collect_quotes(doc)] == ['Good "quote".']


def test_fetch_document_reads_story_paragraphs():
    fetcher = FakeFetcher({"https://news.test/a": story_page("One.", "Two.")})
    doc = fetch_document("https://news.test/a", fetcher, _config())
    assert doc == Document(url="https://news.test/a", paragraphs=["One.", "Two."])


def test_process_article_returns_none_on_fetch_failure():
    assert process_article(Article(url="https://news.test/gone"), FakeFetcher({}), _config()) is None


def test_collect_from_search_attributes_quotes_and_skips_failures():
    pages = {
        "https://news.test/search?page=1&q=budget": search_page("/a", "/missing", "/b"),
        "https://news.test/a": story_page('She said "it is fine," and left. Later she returned.'),
        "https://news.test/b": story_page("No quotes. None at all."),
    }
    for workers in (1, 3):
        articles = collect_from_search("Budget", FakeFetcher(pages), _config(workers))
        assert articles == [
            Article(url="https://news.test/a", quotes=['She said "it is fine," and left.']),
            Article(url="https://news.test/b", quotes=[]),
        ]


def test_process_articles_survives_a_failing_callable_fetcher():
    """One source raising an arbitrary error does not abort the others."""
    pages = {"https://news.test/good": story_page('"Fine," she said.')}

    def fetch(url: str) -> str:
        if url not in pages:
            raise OSError("connection dropped")
        return pages[url]

    articles = [Article(url="https://news.test/bad"), Article(url="https://news.test/good")]
    for workers in (1, 2):
        result = process_articles(articles, CallableFetcher(fetch), _config(workers))
        assert result == [Article(url="https://news.test/good", quotes=['"Fine," she said.'])]
