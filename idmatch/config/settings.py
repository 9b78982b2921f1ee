from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    ocr_http_base_url: str = ""
    ocr_http_timeout_seconds: int = 30
    ocr_http_poll_interval_seconds: float = 1.0
    ocr_http_wait_seconds: float = 120.0

    max_ocr_attempts: int = 2

    name_match_threshold: float = 0.7
