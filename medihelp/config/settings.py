from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_base_url: str = "http://localhost:3000"
    request_timeout_seconds: float | None = None

    extraction_provider: str = "http"
    extraction_path: str = "/api/listgeminireport"

    chat_provider: str = "http"
    chat_path: str = "/api/resumechat"
    chat_stream_protocol: str = "data"

    image_jpeg_quality: int = 10
