"""HTTP(S) URL handler."""

import logging
from typing import Optional

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from mdview.config import get_settings
from mdview.sources.base import MarkdownSource, NetworkError, SourceHandler, Url

logger = logging.getLogger(__name__)


class UrlHandler(SourceHandler):
    """Handler for markdown documents served over HTTP(S).

    Transport failures (connection refused, timeouts) are retried with
    exponential backoff; an HTTP error status is reported immediately.
    URLs are read-only.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
        wait: Optional[wait_base] = None,
    ) -> None:
        """Initialize the URL handler.

        Args:
            timeout: Request timeout in seconds
            max_retries: Total attempts for transport failures
            transport: Optional httpx transport (used by tests)
            wait: Optional tenacity wait strategy between attempts
        """
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.max_retries = (
            max_retries if max_retries is not None else settings.max_retries
        )
        self.transport = transport
        self.wait = wait or wait_exponential(multiplier=1, min=2, max=10)

    def read(self, source: MarkdownSource) -> str:
        """Fetch markdown text from a URL."""
        if not isinstance(source, Url):
            raise TypeError(f"UrlHandler cannot handle {source!r}")

        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.wait,
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        try:
            return retrying(self._fetch, source.url)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise NetworkError(
                f"Failed to load {source.url}: HTTP {status}",
                status_code=status,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Failed to load {source.url}: {e}") from e

    def _fetch(self, url: str) -> str:
        logger.debug("GET %s", url)
        with httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.text
