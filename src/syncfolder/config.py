"""syncfolder configuration settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from syncfolder.infrastructure.config.settings_utils import env_bool, env_str
from syncfolder.infrastructure.logging_setup import configure_logging
from syncfolder.infrastructure.storage.path_canonical import PlatformFamily


class Settings(BaseSettings):
    """Application settings with env var support."""

    model_config = SettingsConfigDict(
        env_prefix="SYNCFOLDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Observability
    log_level: str = Field(default_factory=lambda: env_str("SYNCFOLDER_LOG_LEVEL", "INFO"))
    log_json: bool = Field(default_factory=lambda: env_bool("SYNCFOLDER_LOG_JSON", False))

    # Durability of marker creation
    io_fsync: bool = Field(default_factory=lambda: env_bool("SYNCFOLDER_IO_FSYNC", True))

    # Path convention used when preparing folders: auto, posix or windows
    platform: str = Field(default_factory=lambda: env_str("SYNCFOLDER_PLATFORM", "auto"))

    @model_validator(mode="after")
    def _normalize_platform(self) -> "Settings":
        raw = str(self.platform or "auto").strip().lower()
        if raw != "auto":
            raw = PlatformFamily.parse(raw).value
        self.platform = raw
        return self

    @property
    def platform_family(self) -> PlatformFamily:
        return PlatformFamily.parse(self.platform)

    def setup_logging(self) -> None:
        configure_logging(level=self.log_level, json_logs=self.log_json)


# Global settings instance
settings = Settings()
