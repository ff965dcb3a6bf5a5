from credcheck.analysis.analyzer import CredibilityAnalyzer
from credcheck.config import Config
from credcheck.container import Container, get_container, reset_container
from credcheck.security import SecurityValidator


def test_config_is_loaded_once():
    calls = []

    def loader():
        calls.append(1)
        return Config()

    container = Container(config_loader=loader)

    assert container.config is container.config
    assert len(calls) == 1


def test_security_validator_is_shared_and_configured():
    config = Config()
    config.app.max_url_length = 64
    container = Container(config_loader=lambda: config)

    validator = container.security_validator

    assert isinstance(validator, SecurityValidator)
    assert validator.max_url_length == 64
    assert container.security_validator is validator


def test_each_analysis_gets_a_fresh_analyzer():
    container = Container(config_loader=Config)

    first = container.create_analyzer()
    second = container.create_analyzer()

    assert isinstance(first, CredibilityAnalyzer)
    assert first is not second


def test_analyzer_factory_can_be_replaced():
    container = Container(config_loader=Config)
    seen = []

    def factory(config):
        seen.append(config)
        return CredibilityAnalyzer(max_sensationalist_words=1)

    container.use_analyzer_factory(factory)

    assert container.create_analyzer().max_sensationalist_words == 1
    assert seen == [container.config]


def test_global_container_follows_environment(monkeypatch):
    monkeypatch.setenv("MAX_URL_LENGTH", "64")
    monkeypatch.setenv("FETCH_TIMEOUT", "4")
    monkeypatch.setenv("MAX_SENSATIONALIST_WORDS", "3")

    container = get_container()
    analyzer = container.create_analyzer()

    assert container.security_validator.max_url_length == 64
    assert analyzer.fetcher.timeout == 4.0
    assert analyzer.max_sensationalist_words == 3
    assert get_container() is container

    reset_container()
    assert get_container() is not container
