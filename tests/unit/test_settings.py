import pytest
from pydantic import ValidationError

from paper_planner.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_extraction_caps(self) -> None:
        s = Settings()
        assert s.extraction_max_pages == 20
        assert s.extraction_max_chars == 30000

    def test_default_prompt_text_caps(self) -> None:
        s = Settings()
        assert s.prompt_text_max_chars == 8000
        assert s.simplified_prompt_text_max_chars < s.prompt_text_max_chars

    def test_default_llm_call_parameters(self) -> None:
        s = Settings()
        assert s.llm_timeout_seconds == 180
        assert s.llm_temperature == 0.3
        assert s.llm_max_tokens == 3000

    def test_default_min_field_length(self) -> None:
        s = Settings()
        assert s.min_field_length == 10


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_llm_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_PROVIDER", "example")
        s = Settings()
        assert s.llm_provider == "example"

    def test_loads_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "30")
        s = Settings()
        assert s.llm_timeout_seconds == 30

    def test_loads_project_store_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECT_STORE_PATH", "/tmp/planner.json")
        s = Settings()
        assert s.project_store_path == "/tmp/planner.json"


class TestSettingsValidation:
    def test_invalid_max_pages_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_MAX_PAGES", "many")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings()
