from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .config import TwoCentsConfig, load_config
from .fetching import RequestsFetcher
from .models import Article
from .pipeline import collect_from_search
from .segmentation import is_quote_bearing, segment
from .textutils import split_paragraphs

app = typer.Typer(help="twocents quote collection CLI.", no_args_is_help=True)


class ArticlePayload(TypedDict):
    url: str
    quotes: List[str]


@app.callback()
def main_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress and request details."
    ),
) -> None:
    """Collect attributed quotes from news prose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("segment")
def segment_command(
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        exists=True,
        readable=True,
        dir_okay=False,
        help="Text file to segment (defaults to stdin).",
    ),
    quotes_only: bool = typer.Option(
        False, "--quotes-only", help="Only emit quote-bearing sentences."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Split text into sentences and print them as a JSON list."""
    cfg = _load_config_or_fail(config)
    raw: bytes = (
        input_path.read_bytes() if input_path is not None else sys.stdin.buffer.read()
    )
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"Input is not valid UTF-8 text: {exc}") from exc

    sentences: List[str] = []
    for paragraph in split_paragraphs(text):
        sentences.extend(
            sentence
            for sentence in segment(paragraph, cfg.quote_marks)
            if not quotes_only or is_quote_bearing(sentence, cfg.quote_marks)
        )
    typer.echo(json.dumps(sentences, indent=2, ensure_ascii=False))


@app.command()
def collect(
    query: str = typer.Argument(..., help="Search terms, e.g. 'boris johnson'."),
    depth: int | None = typer.Option(
        None, "--depth", "-d", min=1, help="Number of search result pages to crawl."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    parallel_requests: int | None = typer.Option(
        None,
        "--parallel-requests",
        min=1,
        help="Max articles fetched at once (1 = sequential).",
    ),
) -> None:
    """Search for articles and print the quotes each one contains as JSON."""
    cfg = _load_config_or_fail(config)
    if parallel_requests is not None:
        cfg.fetch.parallel_requests = parallel_requests
    fetcher = RequestsFetcher(cfg.fetch)
    try:
        articles = collect_from_search(query, fetcher, cfg, depth=depth)
    finally:
        fetcher.close()
    payload = {"articles": [_article_dict(article) for article in articles]}
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TwoCentsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config_or_fail(path: Path | None) -> TwoCentsConfig:
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Unable to load config {path}: {exc}") from exc


def _article_dict(article: Article) -> ArticlePayload:
    return {"url": article.url, "quotes": list(article.quotes)}


if __name__ == "__main__":
    main()
