from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    extraction_max_pages: int = 20
    extraction_max_chars: int = 30000

    prompt_text_max_chars: int = 8000
    simplified_prompt_text_max_chars: int = 4000
    min_field_length: int = 10

    llm_provider: str = "openai"
    llm_api_key: str = ""
    llm_model_name: str = "gpt-4o"
    llm_base_url: str = ""
    llm_timeout_seconds: int = 180
    llm_temperature: float = 0.3
    llm_max_tokens: int = 3000

    project_store_path: str = ".paper_planner/project.json"
