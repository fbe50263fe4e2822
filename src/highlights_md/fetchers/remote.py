"""Download Bookcision exports published over HTTP."""
from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from highlights_md.errors import HighlightIOError, InvalidFormatError
from highlights_md.models import Book
from highlights_md.parsers import FORMAT_ERROR_MESSAGE, BookcisionParser

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


class BookcisionFetcher:
    """Fetch a Bookcision JSON export from a URL and turn it into a book.

    Parameters
    ----------
    session:
        Optional ``requests.Session`` instance. Primarily intended for tests so
        that HTTP requests can be mocked.
    timeout:
        Seconds to wait for the server before giving up.
    parser:
        Parser used for the decoded document; defaults to
        :class:`BookcisionParser`.
    """

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
        parser: Optional[BookcisionParser] = None,
    ) -> None:
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.parser = parser or BookcisionParser()

    def fetch(self, url: str) -> Book:
        logger.info("Downloading highlights from %s", url)
        try:
            response = self._session.get(url, headers=self._default_headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise HighlightIOError(f"cannot download input from {url}", exc) from exc
        self._ensure_success(response, url)
        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidFormatError(FORMAT_ERROR_MESSAGE, exc) from exc
        return self.parser.from_mapping(payload)

    @property
    def _default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": "highlights-md/1.0",
            "Accept": "application/json, */*; q=0.1",
        }

    def _ensure_success(self, response: object, url: str) -> None:
        status = getattr(response, "status_code", None)
        if status is None or status >= 400:
            raise HighlightIOError(f"cannot download input from {url}: status code {status}")
