import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from credcheck.analysis.analyzer import CredibilityAnalyzer  # noqa: E402
from credcheck.config import reset_config  # noqa: E402
from credcheck.container import reset_container  # noqa: E402

FIXED_NOW = datetime(2024, 5, 17, 12, 30, 45, 123000, tzinfo=timezone.utc)

NEUTRAL_SENTENCE = "O conselho municipal aprovou o novo plano de mobilidade urbana nesta semana."


def build_html(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


def filler_words(count: int) -> str:
    """Neutral text with exactly ``count`` whitespace tokens."""
    return " ".join(f"palavra{i}" for i in range(count))


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
        encoding: Optional[str] = None,
        chunk_error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.headers = headers if headers is not None else {"Content-Type": "text/html; charset=utf-8"}
        self.encoding = encoding if encoding is not None else ("utf-8" if "charset=" in self.headers.get("Content-Type", "") else None)
        self.chunk_error = chunk_error
        self.closed = False

    def iter_content(self, chunk_size: int = 1):
        if self.chunk_error is not None:
            raise self.chunk_error
        for start in range(0, len(self.body), chunk_size):
            yield self.body[start:start + chunk_size]

    def close(self) -> None:
        self.closed = True


class FakeSession:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class FakeFetcher:
    def __init__(self, html: str = "", error: Optional[Exception] = None) -> None:
        self.html = html
        self.error = error
        self.urls: List[str] = []

    def fetch_html(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture(autouse=True)
def isolated_configuration(monkeypatch):
    for key in ("FETCH_TIMEOUT", "FETCH_USER_AGENT", "MAX_SENSATIONALIST_WORDS",
                "MAX_URL_LENGTH", "LOG_LEVEL", "VERBOSE_LOGGING"):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def analyzer_factory():
    def _factory(html: str = "", error: Optional[Exception] = None, **kwargs) -> CredibilityAnalyzer:
        return CredibilityAnalyzer(fetcher=FakeFetcher(html, error), clock=lambda: FIXED_NOW, **kwargs)

    return _factory


@pytest.fixture
def session_factory():
    def _factory(response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> FakeSession:
        return FakeSession(response, error)

    return _factory


@pytest.fixture
def trusted_article_html() -> str:
    """Author meta, time element, three external links, neutral text."""
    return build_html(
        head='<title>Plano de mobilidade aprovado</title><meta name="author" content="Jane Doe">',
        body=(
            '<article><time datetime="2024-01-01">1 jan</time>'
            f"<p>{NEUTRAL_SENTENCE}</p>"
            '<a href="https://ibge.gov.br/estatisticas">IBGE</a>'
            '<a href="https://www.camara.leg.br/noticias">Câmara</a>'
            '<a href="https://agenciabrasil.ebc.com.br/geral">Agência Brasil</a>'
            "</article>"
        ),
    )


@pytest.fixture
def sensational_article_html() -> str:
    """No markers, four distinct sensationalist words."""
    return build_html(
        head="<title>Veja agora</title>",
        body="<p>Chocante! Um escândalo urgente e absurdo tomou conta da cidade.</p>",
    )
