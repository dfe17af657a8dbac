import pytest
from pydantic import ValidationError

from vault_search.config import SearchConfig, Settings, public_settings


def test_search_config_rejects_non_positive_limit():
    with pytest.raises(ValidationError):
        SearchConfig(embedding_model="nomic-embed-text", max_number_of_notes=0)
    with pytest.raises(ValidationError):
        SearchConfig(embedding_model="nomic-embed-text", max_number_of_notes=-3)


def test_empty_model_is_unconfigured():
    assert not SearchConfig().is_configured
    assert not SearchConfig(embedding_model="  ").is_configured
    assert SearchConfig(embedding_model="nomic-embed-text").is_configured


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("EMBEDDING_MODEL", "mxbai-embed-large")
    monkeypatch.setenv("MAX_NUMBER_OF_NOTES", "7")
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://gpu-box:11434")

    source = Settings()
    config = SearchConfig.from_settings(source)

    assert source.ollama_base_url == "http://gpu-box:11434"
    assert config.embedding_model == "mxbai-embed-large"
    assert config.max_number_of_notes == 7


def test_settings_reject_non_positive_limit(monkeypatch):
    monkeypatch.setenv("MAX_NUMBER_OF_NOTES", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_public_settings_hide_admin_token():
    assert "admin_token" not in public_settings()
