from config import DEFAULT_JOB_URL_PATTERN, Settings

ENV_VARS = [
    "SCRAPER_USER_AGENT",
    "REQUEST_TIMEOUT",
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "VERIFY_SSL",
    "JOB_URL_PATTERN",
    "OUTPUT_PATH",
    "OPENAI_MODEL",
    "COVER_LETTER_TEMPERATURE",
    "RESUME_PATH",
]


def _clear(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    settings = Settings.from_env()
    assert settings.user_agent is None
    assert settings.request_timeout == 30
    assert settings.proxy is None
    assert settings.verify_ssl is True
    assert settings.job_url_pattern == DEFAULT_JOB_URL_PATTERN
    assert settings.openai_model == "gpt-4o-mini"
    assert settings.temperature == 0.7


def test_overrides(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("REQUEST_TIMEOUT", "0")
    monkeypatch.setenv("VERIFY_SSL", "false")
    monkeypatch.setenv("HTTPS_PROXY", "http://proxy:3128")
    monkeypatch.setenv("SCRAPER_USER_AGENT", "Test/1.0")
    settings = Settings.from_env()
    assert settings.request_timeout is None
    assert settings.verify_ssl is False
    assert settings.proxy == "http://proxy:3128"
    assert settings.user_agent == "Test/1.0"
