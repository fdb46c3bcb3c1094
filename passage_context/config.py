"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Defaults suit local development. Override via environment variables
    or a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    cors_allowed_origins: str = "*"
    sentry_dsn: str | None = None

    # Reference text
    data_dir: str = "data"
    reference_text_file: str = "heart-of-darkness.txt"
    preload_reference_text: bool = False

    # Extraction
    max_context_length: int = 25000
    passage_window: int = 1500

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ALLOWED_ORIGINS into a list."""
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


settings = Settings()
