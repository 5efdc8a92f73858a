from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings automatically reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    """

    # Shown in the /app1 greeting
    app_name: str = "hello-fastapi"

    # Bind address for the uvicorn server started by `hello-app`
    host: str = "127.0.0.1"
    port: int = 8080

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"  # console = colored dev output

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
