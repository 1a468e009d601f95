from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Analysis configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    stop_words: str = "english"
    extra_stop_words: list[str] = Field(default_factory=list)

    top_n: int = Field(default=15, ge=1)

    document_field: str = "document_id"
    term_field: str = "term"

    token_file: str = "tokens.tsv"
