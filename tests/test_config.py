import pytest

from stock_bot.config import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_STOCK_API_BASE,
    Config,
    mask_key,
)


def test_from_env_reads_keys_and_defaults():
    config = Config.from_env({'STOCK_API_KEY': ' abc123 ', 'GEMINI_API_KEY': 'gem'}, load_env_file=False)

    assert config.STOCK_API_KEY == 'abc123'
    assert config.GEMINI_API_KEY == 'gem'
    assert config.LLM_PROVIDER == 'gemini'
    assert config.GEMINI_MODEL == DEFAULT_GEMINI_MODEL
    assert config.STOCK_API_BASE == DEFAULT_STOCK_API_BASE
    assert config.REQUEST_TIMEOUT == 30.0
    assert config.LOG_DIR == ''
    assert config.LOG_LEVEL == 'WARNING'


def test_from_env_overrides():
    config = Config.from_env({
        'LLM_PROVIDER': ' Hybrid ',
        'STOCK_API_BASE': 'https://example.test/v3/',
        'REQUEST_TIMEOUT': '7.5',
        'LOG_DIR': '',
        'LOG_LEVEL': 'debug',
    }, load_env_file=False)

    assert config.LLM_PROVIDER == 'hybrid'
    assert config.STOCK_API_BASE == 'https://example.test/v3'
    assert config.REQUEST_TIMEOUT == 7.5
    assert config.LOG_DIR == ''
    assert config.LOG_LEVEL == 'DEBUG'


def test_from_env_rejects_bad_timeout():
    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        Config.from_env({'REQUEST_TIMEOUT': 'soon'}, load_env_file=False)


def test_from_env_loads_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("STOCK_API_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    # setenv first so teardown removes whatever load_dotenv writes
    monkeypatch.setenv('STOCK_API_KEY', 'placeholder')
    monkeypatch.delenv('STOCK_API_KEY')

    config = Config.from_env()

    assert config.STOCK_API_KEY == 'from-dotenv'


@pytest.mark.parametrize("provider, expected", [
    ('gemini', ['STOCK_API_KEY', 'GEMINI_API_KEY']),
    ('groq', ['STOCK_API_KEY', 'GROQ_API_KEY']),
    ('hybrid', ['STOCK_API_KEY', 'GEMINI_API_KEY', 'GROQ_API_KEY']),
])
def test_missing_keys(provider, expected):
    assert Config(llm_provider=provider).missing_keys() == expected


def test_mask_key():
    assert mask_key('') == '<unset>'
    assert mask_key('abc') == '***'
    assert mask_key('sk-123456789') == '********6789'
