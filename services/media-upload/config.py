"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, computed_field
from tubely_common import ObjectStorageConfig


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full PostgreSQL connection URL."""
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class ServerConfig(BaseModel, frozen=True):
    """Public address of this service and its local storage roots."""

    host: str = "localhost"
    port: int = 8091
    assets_root: Path = Path("assets")
    scratch_root: Path = Path("scratch")

    @computed_field
    @property
    def assets_base_url(self) -> str:
        """Base URL under which files in the assets root are served."""
        return f"http://{self.host}:{self.port}/assets"


class AuthConfig(BaseModel, frozen=True):
    """Bearer token verification settings."""

    jwt_secret: str


class MediaToolsConfig(BaseModel, frozen=True):
    """External media tool binaries and invocation limits."""

    ffprobe_bin: str = "ffprobe"
    ffmpeg_bin: str = "ffmpeg"
    timeout_seconds: float | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    storage: ObjectStorageConfig
    server: ServerConfig
    auth: AuthConfig
    media_tools: MediaToolsConfig
    cdn_host: str


def _optional_float(value: str | None) -> float | None:
    return float(value) if value else None


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "tubely"),
        ),
        storage=ObjectStorageConfig(
            endpoint=os.getenv("S3_ENDPOINT", "s3.amazonaws.com"),
            access_key=os.getenv("S3_ACCESS_KEY", ""),
            secret_key=os.getenv("S3_SECRET_KEY", ""),
            bucket_name=os.getenv("S3_BUCKET", "tubely-videos"),
            region=os.getenv("S3_REGION", "us-east-1"),
            secure=os.getenv("S3_SECURE", "true").lower() == "true",
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "localhost"),
            port=int(os.getenv("PORT", "8091")),
            assets_root=Path(os.getenv("ASSETS_ROOT", "assets")),
            scratch_root=Path(os.getenv("SCRATCH_ROOT", "scratch")),
        ),
        auth=AuthConfig(
            jwt_secret=os.getenv("JWT_SECRET", ""),
        ),
        media_tools=MediaToolsConfig(
            ffprobe_bin=os.getenv("FFPROBE_BIN", "ffprobe"),
            ffmpeg_bin=os.getenv("FFMPEG_BIN", "ffmpeg"),
            timeout_seconds=_optional_float(os.getenv("MEDIA_TOOL_TIMEOUT_SECONDS")),
        ),
        cdn_host=os.getenv("CDN_HOST", "localhost"),
    )
