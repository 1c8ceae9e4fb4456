from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from lockbox.validation.config import (
    DEFAULT_ALLOWED_FILE_EXTENSIONS,
    DEFAULT_ALLOWED_FILE_TYPES,
    DEFAULT_MAX_FILE_SIZE,
    ValidationConfig,
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "development"
    log_level: str = "INFO"

    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    min_file_size: int = Field(default=1, ge=1)
    allowed_file_types: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_FILE_TYPES)
    )
    allowed_file_extensions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_FILE_EXTENSIONS)
    )

    pdf_engine: str = "pymupdf"
    stream_chunk_size: int = Field(default=64 * 1024, gt=0)

    @field_validator("allowed_file_types", "allowed_file_extensions", mode="before")
    @classmethod
    def _split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("app_env")
    @classmethod
    def _check_app_env(cls, value: str) -> str:
        env = value.strip().lower()
        if env not in {"development", "staging", "production", "test"}:
            raise ValueError(
                "app_env must be one of development, staging, production, test"
            )
        return env

    @property
    def expose_error_details(self) -> bool:
        """Detailed error messages are suppressed in production."""
        return self.app_env != "production"

    def validation_config(self) -> ValidationConfig:
        """Build the immutable upload policy from the loaded settings."""
        extensions = frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.allowed_file_extensions
        )
        return ValidationConfig(
            max_file_size=self.max_file_size,
            min_file_size=self.min_file_size,
            allowed_file_types=frozenset(t.lower() for t in self.allowed_file_types),
            allowed_file_extensions=extensions,
        )
