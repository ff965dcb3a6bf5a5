"""
Page fetcher for credibility analysis.

Issues a single bounded GET per analysis. There is no retry logic and
no state kept between calls.
"""

import time
import logging
import threading
from typing import Callable, Optional

import requests
from bs4 import UnicodeDammit

from ..config import DEFAULT_USER_AGENT
from ..exceptions import FetchTimeoutError, HttpStatusError, InvalidURLError, NetworkError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8 * 1024


class _Exchange:
    """State of one GET shared between the caller and the worker thread."""

    def __init__(self, url: str):
        self.url = url
        self.session: Optional[requests.Session] = None
        self.response = None
        self.html: Optional[str] = None
        self.error: Optional[Exception] = None
        self.aborted = threading.Event()

    def abort(self) -> None:
        """Close whatever is open so a blocked read returns."""
        self.aborted.set()
        for resource in (self.response, self.session):
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as e:
                logger.debug(f"Closing {self.url} after the deadline failed: {e}")


class ContentFetcher:
    """
    Fetches raw HTML for one URL with a hard upper bound on total wait.

    The request runs on a daemon worker thread. The caller waits at most
    ``timeout`` seconds for it, covering connect, headers and body alike;
    past that the connection is closed and FetchTimeoutError is raised.
    """

    def __init__(self,
                 timeout: float = 10.0,
                 user_agent: str = DEFAULT_USER_AGENT,
                 session_factory: Callable[[], requests.Session] = requests.Session,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize content fetcher.

        Args:
            timeout: Upper bound in seconds for the whole exchange
            user_agent: User-Agent string for requests
            session_factory: Creates a fresh HTTP session per fetch
            clock: Monotonic clock used for the deadline checks on the worker
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.session_factory = session_factory
        self.clock = clock

    def _headers(self):
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "pt-BR,pt;q=0.9,en;q=0.8",
        }

    def fetch_html(self, url: str) -> str:
        """
        Fetch HTML content from URL.

        Args:
            url: Absolute URL to fetch

        Returns:
            Decoded response body

        Raises:
            HttpStatusError: Non-2xx response
            FetchTimeoutError: The whole exchange exceeded ``timeout``
            NetworkError: DNS, connection or other transport failure
            InvalidURLError: The transport rejected the URL
        """
        logger.debug(f"Fetching {url} (timeout {self.timeout:g}s)")
        exchange = _Exchange(url)
        deadline = self.clock() + self.timeout

        worker = threading.Thread(
            target=self._run,
            args=(exchange, deadline),
            name="credcheck-fetch",
            daemon=True
        )
        worker.start()
        worker.join(self.timeout)

        if worker.is_alive():
            exchange.abort()
            logger.warning(f"Fetching {url} exceeded {self.timeout:g}s")
            raise FetchTimeoutError(url, self.timeout)

        if exchange.error is not None:
            raise exchange.error

        logger.debug(f"Successfully fetched {url} ({len(exchange.html)} chars)")
        return exchange.html

    def _run(self, exchange: _Exchange, deadline: float) -> None:
        # Failures are handed back to the caller thread, which re-raises them
        try:
            exchange.html = self._fetch(exchange, deadline)
        except Exception as e:
            exchange.error = e

    def _fetch(self, exchange: _Exchange, deadline: float) -> str:
        url = exchange.url
        with self.session_factory() as session:
            exchange.session = session
            try:
                response = session.get(
                    url,
                    headers=self._headers(),
                    timeout=(self.timeout, self.timeout),
                    stream=True,
                    allow_redirects=True,
                )
            except requests.exceptions.Timeout:
                logger.warning(f"Timed out connecting to {url}")
                raise FetchTimeoutError(url, self.timeout)
            except (requests.exceptions.MissingSchema,
                    requests.exceptions.InvalidSchema,
                    requests.exceptions.InvalidURL) as e:
                raise InvalidURLError(url, str(e))
            except requests.exceptions.RequestException as e:
                if exchange.aborted.is_set():
                    raise FetchTimeoutError(url, self.timeout)
                logger.warning(f"Request failed for {url}: {e}")
                raise NetworkError(url, e)

            exchange.response = response
            try:
                self._check_deadline(exchange, deadline)

                if not 200 <= response.status_code < 300:
                    logger.warning(f"HTTP {response.status_code} from {url}")
                    raise HttpStatusError(url, response.status_code)

                body = self._read_body(exchange, response, deadline)
            finally:
                response.close()

        return self._decode(response, body)

    def _check_deadline(self, exchange: _Exchange, deadline: float) -> None:
        if exchange.aborted.is_set() or self.clock() > deadline:
            logger.warning(f"Fetching {exchange.url} exceeded {self.timeout:g}s")
            raise FetchTimeoutError(exchange.url, self.timeout)

    def _read_body(self, exchange: _Exchange, response, deadline: float) -> bytes:
        """Stream the body, failing once the overall deadline passes."""
        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                self._check_deadline(exchange, deadline)
                if chunk:
                    chunks.append(chunk)
        except requests.exceptions.Timeout:
            raise FetchTimeoutError(exchange.url, self.timeout)
        except requests.exceptions.RequestException as e:
            if exchange.aborted.is_set():
                raise FetchTimeoutError(exchange.url, self.timeout)
            raise NetworkError(exchange.url, e)

        # A connection closed by abort() can end the stream without an error
        self._check_deadline(exchange, deadline)
        return b"".join(chunks)

    @staticmethod
    def _decode(response, body: bytes) -> str:
        """Decode using the declared charset, else sniff it from the markup."""
        content_type = (response.headers.get('Content-Type') or '').lower()
        if 'charset=' in content_type and response.encoding:
            try:
                return body.decode(response.encoding, errors='replace')
            except LookupError:
                logger.debug(f"Unknown encoding {response.encoding!r}, sniffing instead")

        dammit = UnicodeDammit(body, is_html=True)
        if dammit.unicode_markup is not None:
            return dammit.unicode_markup
        return body.decode('utf-8', errors='replace')
