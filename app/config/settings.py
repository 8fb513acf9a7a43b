from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    ocr_timeout_seconds: float = Field(default=30, ge=0)
    ocr_max_concurrency: int = Field(default=2, ge=1)

    analysis_provider: str = "openai"
    analysis_temperature: float = Field(default=0.7, ge=0, le=2)
    analysis_max_tokens: int = Field(default=1000, ge=1)

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-3.5-turbo"
    analysis_openai_timeout_seconds: int = 30

    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_timeout_seconds: int = 30

    analysis_openrouter_api_key: str = ""
    analysis_openrouter_model_name: str = ""
    analysis_groq_api_key: str = ""
    analysis_groq_model_name: str = ""
    analysis_ollama_api_key: str = "ollama"
    analysis_ollama_model_name: str = ""
