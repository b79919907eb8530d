"""Centralized configuration for redisearch-schema using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from redisearch_schema.observability.logging import configure_logging
from redisearch_schema.schema import Options


_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


class Settings(BaseSettings):
    """Default index options and logging setup loaded from environment variables.

    Every variable is prefixed with ``REDISEARCH_SCHEMA_``, e.g.
    ``REDISEARCH_SCHEMA_NO_SAVE=true`` or ``REDISEARCH_SCHEMA_STOPWORDS=a,the``.
    """

    model_config = SettingsConfigDict(
        env_prefix="REDISEARCH_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Index options
    no_save: bool = Field(default=False, description="Index documents without storing their contents")
    no_field_flags: bool = Field(default=False, description="Skip per-field bits (no filtering by field)")
    no_frequencies: bool = Field(default=False, description="Skip term frequencies (no frequency ranking)")
    no_offset_vectors: bool = Field(
        default=False, description="Skip term offsets (no exact phrase search or highlighting)"
    )
    stopwords: str | None = Field(
        default=None,
        description="Comma-separated stop-words; unset keeps the engine default list, empty means none",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    logger_levels: dict[str, str] = Field(
        default_factory=dict,
        description="JSON object of per-logger level overrides, e.g. {\"redisearch_schema.schema\": \"debug\"}",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value.lower() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}', expected one of {sorted(_LOG_LEVELS)}")
        return value.lower()

    def get_stopwords(self) -> list[str] | None:
        """Get the stop-word list.

        Returns:
            None when unset (engine default list), otherwise the parsed words
        """
        if self.stopwords is None:
            return None
        return [word.strip() for word in self.stopwords.split(",") if word.strip()]

    def to_options(self) -> Options:
        """Build index options from the configured values."""
        stopwords = self.get_stopwords()
        return Options(
            no_save=self.no_save,
            no_field_flags=self.no_field_flags,
            no_frequencies=self.no_frequencies,
            no_offset_vectors=self.no_offset_vectors,
            stopwords=tuple(stopwords) if stopwords is not None else None,
        )

    def configure_logging(self) -> None:
        """Apply the configured log level and output format."""
        configure_logging(level=self.log_level, json_output=self.log_json, logger_levels=self.logger_levels)
