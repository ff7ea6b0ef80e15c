"""Application settings and configuration management."""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database-specific settings."""

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "procurement_db"
    postgres_user: str = "procurement"
    postgres_password: SecretStr = SecretStr("procurement_password")

    # Connection pool settings
    db_pool_size: int = Field(default=10)
    db_max_overflow: int = Field(default=10)
    db_pool_timeout: float = Field(default=30.0)
    db_pool_recycle: int = Field(default=3600)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="allow"
    )

    @property
    def postgres_dsn(self) -> str:
        """Get PostgreSQL connection string for async."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


class MonitoringSettings(BaseSettings):
    """Monitoring and observability settings."""

    service_name: str = "rfq-comparison"
    log_level: str = "INFO"
    audit_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="allow"
    )


class ScoringSettings(BaseSettings):
    """Default scoring weights and listing limits for comparisons."""

    default_price_weight: float = Field(default=40.0, ge=0.0, le=100.0)
    default_quality_weight: float = Field(default=30.0, ge=0.0, le=100.0)
    default_delivery_weight: float = Field(default=20.0, ge=0.0, le=100.0)
    default_compliance_weight: float = Field(default=10.0, ge=0.0, le=100.0)

    # Listing
    default_page_size: int = Field(default=20, ge=1, le=100)
    max_page_size: int = Field(default=100, ge=1, le=500)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="allow"
    )


class APISettings(BaseSettings):
    """API-specific settings."""

    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000)
    api_reload: bool = Field(default=True)

    # Tenant headers
    tenant_header: str = Field(default="X-Tenant-ID")
    user_header: str = Field(default="X-User-ID")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="allow"
    )


class Settings(BaseSettings):
    """Main application settings."""

    # Application metadata
    app_name: str = "RFQ Comparison"
    app_version: str = "1.0.0"
    environment: str = "development"

    # Sub-settings
    database: DatabaseSettings = DatabaseSettings()
    monitoring: MonitoringSettings = MonitoringSettings()
    scoring: ScoringSettings = ScoringSettings()
    api: APISettings = APISettings()

    # Feature flags
    debug_mode: bool = False

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="allow"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance with all configuration loaded.
    """
    return Settings()

