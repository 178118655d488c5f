# /settings.py
# This file defines the configuration settings for the GitHub Pages Explorer.
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore") # Create .env file in project root with GITHUB_TOKEN.

    app_name: str = "GitHub Pages Explorer"

    # GitHub
    github_token: str | None = Field(default=None, alias="GITHUB_TOKEN") # From .env, for higher rate limits.
    github_api_base: str = "https://api.github.com"
    http_timeout_s: float = 10.0
    repos_per_page: int = 100 # Single page only, the listing endpoint caps per_page at 100.

    # Presentation
    default_username: str = Field(default="octocat", alias="DEFAULT_USERNAME") # Fetched on initial load of the UI.
    description_max_chars: int = 120

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Django UI, mounted at /ui
    enable_django_ui: bool = Field(default=True, alias="ENABLE_DJANGO_UI")

    @field_validator("github_token")
    @classmethod
    def _blank_token_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


settings = Settings()
