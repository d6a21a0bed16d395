import pytest
from pydantic import ValidationError

from domain_models.config import DigestConfig
from domain_models.constants import MAX_PAGE_SIZE


def test_config_defaults_valid() -> None:
    config = DigestConfig()
    assert config.page_size == MAX_PAGE_SIZE
    assert config.fetch_concurrency == 1
    assert config.summarization_model


def test_page_size_bounds() -> None:
    with pytest.raises(ValidationError):
        DigestConfig(page_size=0)
    with pytest.raises(ValidationError):
        DigestConfig(page_size=MAX_PAGE_SIZE + 1)
    assert DigestConfig(page_size=1).page_size == 1


def test_concurrency_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        DigestConfig(fetch_concurrency=0)


def test_llm_model_validation() -> None:
    with pytest.raises(ValidationError, match="not allowed"):
        DigestConfig(summarization_model="model; rm -rf")
    assert DigestConfig(summarization_model="gpt-4o-mini").summarization_model == "gpt-4o-mini"


def test_model_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUMMARIZATION_MODEL", "gpt-4")
    assert DigestConfig().summarization_model == "gpt-4"

    monkeypatch.setenv("SUMMARIZATION_MODEL", "   ")
    assert DigestConfig().summarization_model == "gpt-4o"


def test_retry_window_validation() -> None:
    with pytest.raises(ValidationError, match="retry_min_wait"):
        DigestConfig(retry_min_wait=20, retry_max_wait=10)


def test_config_is_frozen() -> None:
    config = DigestConfig()
    with pytest.raises(ValidationError):
        config.page_size = 10  # type: ignore[misc]


def test_extra_fields_forbidden() -> None:
    with pytest.raises(ValidationError):
        DigestConfig(unknown_field=1)  # type: ignore[call-arg]
