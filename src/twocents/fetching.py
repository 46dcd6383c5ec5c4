from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable

import requests

from .config import FetchSettings

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when a page cannot be retrieved."""


class Fetcher(ABC):
    """Abstract source of raw markup for a URL."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """Return the raw markup served at url."""
        raise NotImplementedError


class CallableFetcher(Fetcher):
    """Adapt an arbitrary callable into the Fetcher interface."""

    def __init__(self, func: Callable[[str], str]) -> None:
        self._func = func

    def fetch(self, url: str) -> str:
        try:
            return self._func(url)
        except FetchError:
            raise
        except Exception as exc:  # noqa: broad-except
            raise FetchError(f"Unable to fetch {url}") from exc


class RequestsFetcher(Fetcher):
    """
    HTTP fetcher with retries. Each thread gets its own requests.Session,
    since sessions are not safe to share between worker threads.
    """

    def __init__(
        self,
        settings: FetchSettings | None = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._settings = settings or FetchSettings()
        self._session_factory = session_factory
        self._local = threading.local()
        self._sessions: list[requests.Session] = []
        self._sessions_lock = threading.Lock()
        self._max_attempts = max(1, self._settings.max_attempts)

    @property
    def settings(self) -> FetchSettings:
        return self._settings

    def fetch(self, url: str) -> str:
        session = self._thread_session()
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_attempts:
            attempt += 1
            try:
                response = session.get(url, timeout=self._settings.timeout)
                response.raise_for_status()
                logger.debug(
                    "Fetched %s (%s, %d chars)",
                    url,
                    response.status_code,
                    len(response.text),
                )
                return response.text
            except requests.RequestException as exc:
                last_error = exc
                logger.warning(
                    "Fetching %s failed (attempt %s/%s): %s",
                    url,
                    attempt,
                    self._max_attempts,
                    exc,
                )
                if attempt >= self._max_attempts:
                    break
                time.sleep(min(self._settings.backoff_seconds * 2 ** (attempt - 1), 5))
        raise FetchError(f"Unable to fetch {url}") from last_error

    def close(self) -> None:
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()

    def _thread_session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            session.headers.update({"User-Agent": self._settings.user_agent})
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session
