"""FastAPI dependency injection configuration."""

from contextlib import contextmanager
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException
from minio import Minio
from sqlmodel import Session, SQLModel, create_engine
from tubely_common.infrastructure import StorageClient
from tubely_common.logging import setup_logging

from auth import get_bearer_token, validate_jwt
from config import AppConfig, load_config
from exceptions import UnauthorizedError
from handlers import ThumbnailUploadHandler, VideoUploadHandler
from infrastructure import FFmpegMediaTool, MinioStorageClient
from interfaces import MediaTool
from repositories import VideoRepository

logger = setup_logging()

_config = load_config()

_minio_client = Minio(
    endpoint=_config.storage.endpoint,
    access_key=_config.storage.access_key,
    secret_key=_config.storage.secret_key,
    region=_config.storage.region,
    secure=_config.storage.secure,
)
_storage = MinioStorageClient(_minio_client, _config.storage)

_media_tool = FFmpegMediaTool(
    ffprobe_bin=_config.media_tools.ffprobe_bin,
    ffmpeg_bin=_config.media_tools.ffmpeg_bin,
    timeout=_config.media_tools.timeout_seconds,
)

_db_engine = create_engine(_config.database.url)


@contextmanager
def _session_factory():
    """Creates a database session context manager."""
    with Session(_db_engine) as session:
        yield session


_repository = VideoRepository(_session_factory)


def init_resources() -> None:
    """Creates local directories and database tables and ensures the bucket exists."""
    _config.server.assets_root.mkdir(parents=True, exist_ok=True)
    _config.server.scratch_root.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(_db_engine)
    _storage.ensure_bucket_exists()
    logger.info(
        "Resources initialized",
        extra={
            "assets_root": str(_config.server.assets_root),
            "scratch_root": str(_config.server.scratch_root),
            "bucket_name": _config.storage.bucket_name,
        },
    )


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_jwt_secret() -> str:
    """Returns the secret used to verify access tokens."""
    return _config.auth.jwt_secret


def get_current_user_id(
    secret: Annotated[str, Depends(get_jwt_secret)],
    authorization: Annotated[str | None, Header()] = None,
) -> UUID:
    """Resolves the caller from the bearer credential, or answers 401."""
    try:
        token = get_bearer_token(authorization)
        return validate_jwt(token, secret)
    except UnauthorizedError as e:
        logger.info("Unauthorized request", extra={"reason": e.reason})
        raise HTTPException(
            status_code=401,
            detail="Couldn't validate JWT",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_storage() -> StorageClient:
    """Returns the configured object storage client."""
    return _storage


def get_media_tool() -> MediaTool:
    """Returns the configured media tool."""
    return _media_tool


def get_video_repository() -> VideoRepository:
    """Returns the video repository."""
    return _repository


def get_video_upload_handler() -> VideoUploadHandler:
    """Returns the configured video upload handler."""
    return VideoUploadHandler(
        repository=_repository,
        storage=_storage,
        media_tool=_media_tool,
        scratch_root=_config.server.scratch_root,
        cdn_host=_config.cdn_host,
    )


def get_thumbnail_upload_handler() -> ThumbnailUploadHandler:
    """Returns the configured thumbnail upload handler."""
    return ThumbnailUploadHandler(
        repository=_repository,
        assets_root=_config.server.assets_root,
        assets_base_url=_config.server.assets_base_url,
    )
