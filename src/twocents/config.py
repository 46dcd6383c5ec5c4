from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .segmentation import TERMINATORS

BBC_SEARCH_URL = (
    "https://www.bbc.co.uk/search/more?page={page}&q={query}&filter=news&suggid="
)


@dataclass(slots=True)
class SearchSettings:
    """Where to look for articles and how to read them."""

    url_template: str = BBC_SEARCH_URL
    link_selector: str = ".media-text a"
    paragraph_selector: str = "#page p"
    depth: int = 1


@dataclass(slots=True)
class FetchSettings:
    """HTTP behaviour for search and article requests."""

    timeout: float = 30.0
    user_agent: str = "twocents/0.1.0"
    max_attempts: int = 3
    backoff_seconds: float = 1.0
    parallel_requests: int = 1


@dataclass(slots=True)
class TwoCentsConfig:
    """Configuration options for the quote collection pipeline."""

    quote_marks: str = '"'
    search: SearchSettings = field(default_factory=SearchSettings)
    fetch: FetchSettings = field(default_factory=FetchSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _filter_fields(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(cls)}
    return {key: data[key] for key in data if key in allowed}


def _build_block(cls: type, value: Any) -> Any:
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        return cls(**_filter_fields(cls, value))
    raise ValueError(f"Expected a mapping for {cls.__name__}, got {value!r}.")


def _validate_quote_marks(value: Any) -> None:
    if not isinstance(value, str):
        raise ValueError("quote_marks must be a string of quotation characters.")
    clashes = sorted(set(value) & set(TERMINATORS))
    if clashes:
        raise ValueError(
            f"quote_marks cannot include sentence terminators: {''.join(clashes)!r}."
        )


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    kwargs = _filter_fields(TwoCentsConfig, data)
    if "search" in kwargs:
        kwargs["search"] = _build_block(SearchSettings, kwargs["search"])
    if "fetch" in kwargs:
        kwargs["fetch"] = _build_block(FetchSettings, kwargs["fetch"])
    if "quote_marks" in kwargs:
        _validate_quote_marks(kwargs["quote_marks"])
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> TwoCentsConfig:
    """Build a TwoCentsConfig from a dictionary-like input."""
    if data is None:
        return TwoCentsConfig()
    return TwoCentsConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TwoCentsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TwoCentsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TwoCentsConfig()
    return config_from_yaml(path)
