from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    api_host: str = Field(default="localhost", description="API host")
    api_port: int = Field(default=7654, description="API port")
    debug: bool = Field(default=False, description="Debug mode")

    database_url: Optional[str] = Field(
        default=None,
        description="Full database URL, overrides the db_* fields",
        examples=["sqlite:///./newsdesk.db"]
    )
    db_driver: str = Field(default="postgresql+psycopg2", description="SQLAlchemy dialect+driver")
    db_host: str = Field(default="localhost", description="Database host")
    db_port: int = Field(default=5432, description="Database port")
    db_name: str = Field(default="news", description="Database name")
    db_user: str = Field(default="postgres", description="Database user")
    db_password: str = Field(default="postgres", description="Database password")

    # Connection pool
    db_max_open_conns: int = Field(default=5, description="Pool size")
    db_max_overflow: int = Field(default=10, description="Connections allowed above the pool size")
    db_max_lifetime_minutes: int = Field(default=5, description="Recycle connections older than this")

    # Pagination
    pagination_limit: int = Field(default=10, description="Default page size for /list")
    pagination_offset: int = Field(default=0, description="Default offset for /list")
    pagination_max_limit: Optional[int] = Field(
        default=None,
        description="Largest page size accepted by /list, unbounded when unset"
    )

    # JWT
    jwt_secret: str = Field(default="test_secret_key_change_in_production", description="HMAC secret for bearer tokens")
    jwt_algorithm: str = Field(default="HS256", description="HMAC algorithm for bearer tokens")
    jwt_expiry_hours: int = Field(default=24, description="Token lifetime in hours")

    allowed_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value):
        if value is None:
            return value
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @property
    def sqlalchemy_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"{self.db_driver}://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    class Config:
        env_file = [".env", ".env.local"]  # .env.local takes precedence over .env
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
