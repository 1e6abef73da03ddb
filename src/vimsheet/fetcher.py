"""
Per-language cheat sheet retrieval.

One GET per language, no retries: a failed request surfaces as FetchError
and the caller decides what to do with the rest of the batch.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

import requests

from vimsheet import __version__
from vimsheet.errors import FetchError
from vimsheet.models import LanguageDataset, utc_timestamp
from vimsheet.parser import MarkupParser

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://vim.rtorr.com"

# Seconds; a hung server should not stall the whole batch
DEFAULT_TIMEOUT = 30

USER_AGENT = f"vim-cheatsheet/{__version__} (+{DEFAULT_BASE_URL})"


class LanguageFetcher:
    """Resolves language codes to pages and turns them into datasets."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: requests.Session | None = None,
        parser: MarkupParser | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], datetime] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.parser = parser or MarkupParser()
        self.timeout = timeout
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def url_for(self, code: str | None) -> str:
        """Base URL for the default language, /lang/<code>/ otherwise."""
        if not code:
            return self.base_url
        return f"{self.base_url}/lang/{code}/"

    def fetch(self, code: str | None) -> str:
        """Download the page for a language and return its text."""
        url = self.url_for(code)
        logger.info(f"Scraping data from: {url}")

        try:
            response = self.session.get(
                url,
                headers={"User-Agent": USER_AGENT},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, e) from e

        return response.text

    def fetch_and_parse(self, code: str | None) -> LanguageDataset:
        """Fetch, parse and timestamp one language."""
        html = self.fetch(code)
        commands = self.parser.parse(html)
        return LanguageDataset(commands=commands, last_updated=utc_timestamp(self.clock()))

    def close(self) -> None:
        self.session.close()
