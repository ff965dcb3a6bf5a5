"""
Wall-clock checks of the fetch deadline against a local HTTP server.
"""

import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from credcheck.content.fetcher import ContentFetcher
from credcheck.exceptions import FetchTimeoutError

# Scheduling slack on top of the configured timeout
TOLERANCE = 1.0


class SlowPageHandler(BaseHTTPRequestHandler):
    """Serves /drip, /late-empty and /ok with different pacing."""

    def do_GET(self):
        try:
            if self.path == "/drip":
                self._send_headers(content_length=100)
                for _ in range(40):
                    self.wfile.write(b"a")
                    self.wfile.flush()
                    time.sleep(0.25)
            elif self.path == "/late-empty":
                time.sleep(4)
                self._send_headers(content_length=0)
            else:
                body = "<html><body><p>Notícia rápida</p></body></html>".encode("utf-8")
                self._send_headers(content_length=len(body))
                self.wfile.write(body)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def _send_headers(self, content_length: int) -> None:
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(content_length))
        self.end_headers()
        self.wfile.flush()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def slow_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), SlowPageHandler)
    server.daemon_threads = True
    server.block_on_close = False
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


def timed_fetch(url: str, timeout: float):
    fetcher = ContentFetcher(timeout=timeout)
    started = time.monotonic()
    try:
        return fetcher.fetch_html(url), time.monotonic() - started
    except FetchTimeoutError as e:
        return e, time.monotonic() - started


def test_dripping_body_is_cut_off_at_the_deadline(slow_server):
    outcome, elapsed = timed_fetch(f"{slow_server}/drip", timeout=2)

    assert isinstance(outcome, FetchTimeoutError)
    assert elapsed < 2 + TOLERANCE


def test_late_headers_with_empty_body_time_out(slow_server):
    outcome, elapsed = timed_fetch(f"{slow_server}/late-empty", timeout=1)

    assert isinstance(outcome, FetchTimeoutError)
    assert elapsed < 1 + TOLERANCE


def test_prompt_page_is_fetched(slow_server):
    html, elapsed = timed_fetch(f"{slow_server}/ok", timeout=2)

    assert html == "<html><body><p>Notícia rápida</p></body></html>"
    assert elapsed < 2
