import pytest

from credcheck.exceptions import InvalidURLError
from credcheck.security import SecurityValidator


@pytest.mark.parametrize("url", [
    "https://example.com/noticia",
    "http://g1.globo.com/politica/noticia/2024/01/01/exemplo.ghtml",
    "HTTPS://EXAMPLE.COM",
    "https://example.com:8443/a?b=c#d",
])
def test_absolute_http_urls_are_accepted(url):
    assert SecurityValidator().validate_url(url) == url


def test_surrounding_whitespace_is_stripped():
    assert SecurityValidator().validate_url("  https://example.com/a \n") == "https://example.com/a"


@pytest.mark.parametrize("url,issue", [
    ("", "URL vazia"),
    ("   ", "URL vazia"),
    (None, "URL vazia"),
    ("ftp://example.com/arquivo", "esquema deve ser http ou https"),
    ("javascript:alert(1)", "esquema deve ser http ou https"),
    ("example.com/noticia", "esquema deve ser http ou https"),
    ("/noticia", "esquema deve ser http ou https"),
    ("https://", "URL sem domínio"),
    ("https:///caminho", "URL sem domínio"),
    ("https://example.com/uma noticia", "URL contém espaços"),
])
def test_invalid_urls_are_rejected(url, issue):
    with pytest.raises(InvalidURLError) as exc_info:
        SecurityValidator().validate_url(url)

    assert exc_info.value.context["issue"] == issue
    assert exc_info.value.message == f"URL inválida: {issue}"


def test_length_limit():
    validator = SecurityValidator(max_url_length=30)

    assert validator.is_valid_url("https://example.com/curta")
    with pytest.raises(InvalidURLError):
        validator.validate_url("https://example.com/" + "a" * 20)


def test_is_valid_url():
    validator = SecurityValidator()

    assert validator.is_valid_url("https://example.com") is True
    assert validator.is_valid_url("mailto:redacao@example.com") is False
