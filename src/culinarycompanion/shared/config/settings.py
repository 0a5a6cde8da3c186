from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = Field(default="INFO", description="Application log level")
    BIND: str = Field(default="0.0.0.0:8076", description="API bind address")
    DEFAULT_LANGUAGE: str = Field(default="en", description="Language used when a request does not name one")

    # CORS
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: str = Field(default="*", description="Allowed CORS methods")
    CORS_ALLOW_HEADERS: str = Field(default="*", description="Allowed CORS headers")

    # Entity search (Qloo)
    QLOO_API_KEY: str = Field(default="", description="Qloo API key; empty disables entity probing")
    QLOO_BASE_URL: str = Field(default="https://api.qloo.com/v1", description="Qloo API base URL")
    PROBE_RESULT_LIMIT: int = Field(default=5, description="Maximum entities requested per ingredient")
    PROBE_TIMEOUT: float = Field(default=10.0, description="Entity search HTTP timeout (seconds)")
    PROBE_MAX_CONCURRENCY: int = Field(default=5, description="Maximum concurrent entity lookups")

    # Data Layer
    MONGODB_URI: str = Field(
        default="mongodb://mongo:27017/culinary",
        description="MongoDB connection URI",
        validation_alias="MONGO_URI",
    )
    MONGODB_DB: str = Field(
        default="culinary",
        description="MongoDB database name",
        validation_alias="MONGO_DB",
    )
    MONGODB_TIMEOUT_MS: int = Field(default=5000, description="MongoDB server selection timeout (ms)")

    # History
    HISTORY_LIMIT: int = Field(default=10, description="Number of request log entries returned by the history endpoint")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
