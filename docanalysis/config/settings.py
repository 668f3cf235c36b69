from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    docx_engine: str = "python-docx"

    ocr_language: str = "eng"
    ocr_timeout_seconds: int = 30
    extraction_timeout_seconds: int = 60

    max_analysis_attempts: int = 3
    max_concurrent_analyses: int = 4
    job_poll_interval_seconds: int = 5
