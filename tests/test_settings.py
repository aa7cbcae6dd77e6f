import logging

from quiz_taker.constants.network_constants import DEFAULT_API_BASE_URL
from quiz_taker.utils.logging_config import configure_logging
from quiz_taker.utils.settings import load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("QUIZ_TAKER_API_BASE_URL", raising=False)
    settings = load_settings(_env_file=None)
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.practice_port == 8765


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("QUIZ_TAKER_API_BASE_URL", "https://quiz.example.org/api/v1")
    monkeypatch.setenv("QUIZ_TAKER_REQUEST_TIMEOUT_SECONDS", "5")
    settings = load_settings(_env_file=None)
    assert settings.api_base_url == "https://quiz.example.org/api/v1"
    assert settings.request_timeout_seconds == 5.0


def test_configure_logging_returns_package_logger():
    logger = configure_logging("info")
    assert logger.name == "quiz_taker"
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_name_falls_back_to_info():
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    configure_logging("loud")
    assert logging.getLogger("httpx").level == logging.WARNING
