"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "files"
    secure: bool = False
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 30.0


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable metadata database connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str
    url_override: str | None = None

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full SQLAlchemy connection URL."""
        if self.url_override:
            return self.url_override
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    database: DatabaseConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "files"),
            secure=os.getenv("MINIO_SECURE", "false").lower() in ("1", "true", "yes"),
            connect_timeout_seconds=float(
                os.getenv("MINIO_CONNECT_TIMEOUT_SECONDS", "5")
            ),
            read_timeout_seconds=float(os.getenv("MINIO_READ_TIMEOUT_SECONDS", "30")),
        ),
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "file_directory"),
            url_override=os.getenv("DATABASE_URL") or None,
        ),
    )
